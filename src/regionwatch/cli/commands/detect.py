"""Detect command implementation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from regionwatch.core.geo import country_name
from regionwatch.plugins import create_network_provider, create_resolver

if TYPE_CHECKING:
    from regionwatch.core.models.config import Config
    from regionwatch.core.models.detection import DetectionResult

console = Console()

COUNTRY_FIELDS = frozenset(
    {"country", "region_country", "location_country", "ip_country", "ip_country_fallback"}
)


async def run_detect_command(config: Config, as_json: bool) -> DetectionResult:
    """Resolve once and print the result."""
    network = create_network_provider(config)
    try:
        resolver = create_resolver(config, network)
        result = await resolver.resolve()
    finally:
        await network.close()

    if as_json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        console.print(build_result_table(result))

    return result


def build_result_table(result: DetectionResult) -> Table:
    table = Table(title="Country Detection")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for key, value in result.to_dict().items():
        if key == "loading":
            continue
        table.add_row(key.replace("_", " "), format_value(key, value))

    return table


def format_value(key: str, value: object) -> str:
    """Render a result field, naming ISO country codes."""
    if value is None:
        return "-"
    if key in COUNTRY_FIELDS:
        name = country_name(str(value))
        if name:
            return f"{value} ({name})"
    return str(value)
