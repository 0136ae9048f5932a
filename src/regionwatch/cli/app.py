"""Main CLI application."""

from __future__ import annotations

import asyncio
import contextlib
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console

from regionwatch import __version__
from regionwatch.core.log_config import configure_logging
from regionwatch.core.models.config import Config

# Create main app
app = typer.Typer(
    name="regionwatch",
    help="Country detection with a persistent region notification",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file path"),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]regionwatch[/bold blue] v{__version__}")
        raise typer.Exit()


def load_config(path: Path | None) -> Config:
    """Load YAML config if given, otherwise defaults plus environment."""
    try:
        config = Config.from_yaml(path) if path else Config()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}", markup=True, highlight=False)
        raise typer.Exit(code=1) from e

    configure_logging(config.logs)
    return config


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """regionwatch - detect the probable country of this device."""
    pass


@app.command()
def detect(
    config: ConfigOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON"),
    ] = False,
) -> None:
    """Run every detection strategy once and print the result."""
    from regionwatch.cli.commands.detect import run_detect_command

    asyncio.run(run_detect_command(load_config(config), as_json))


@app.command()
def notify(
    config: ConfigOption = None,
    headless: Annotated[
        bool,
        typer.Option("--headless", help="Record notifications instead of prompting"),
    ] = False,
    duration: Annotated[
        float | None,
        typer.Option("--duration", "-d", help="Unmount after this many seconds"),
    ] = None,
) -> None:
    """Show the region notification and re-open it whenever it is dismissed."""
    from regionwatch.cli.commands.notify import run_notify_command

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(run_notify_command(load_config(config), headless, duration))


@app.command(name="config")
def show_config(config: ConfigOption = None) -> None:
    """Print the effective configuration."""
    effective = load_config(config)
    console.print(
        yaml.safe_dump(effective.to_dict(), sort_keys=False, allow_unicode=True),
        markup=False,
    )


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
