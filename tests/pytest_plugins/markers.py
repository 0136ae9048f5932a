"""Custom pytest markers and CLI options."""

from __future__ import annotations

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom command-line options."""
    parser.addoption(
        "--run-real",
        action="store_true",
        default=False,
        help="Run tests against the real IP-geolocation services",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "real: marks tests requiring real network services")
    config.addinivalue_line("markers", "integration: marks tests wiring several components")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip real tests unless --run-real flag is provided."""
    if config.getoption("--run-real"):
        return

    skip_real = pytest.mark.skip(reason="Need --run-real option to run real service tests")

    for item in items:
        if "real" in item.keywords:
            item.add_marker(skip_real)
