"""Notify command implementation."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog
from rich.console import Console

from regionwatch.core.events import AsyncEventBus, LoggingHandler
from regionwatch.plugins import create_network_provider, create_notifier
from regionwatch.plugins.surfaces import ConsoleNotificationSurface, RecordingNotificationSurface

if TYPE_CHECKING:
    from regionwatch.core.models.config import Config

console = Console()
logger = structlog.get_logger(__name__)


async def run_notify_command(
    config: Config,
    headless: bool,
    duration: float | None,
) -> None:
    """Mount a notifier and keep it running until interrupted or ``duration`` elapses."""
    event_bus = AsyncEventBus()
    event_bus.subscribe(None, LoggingHandler())
    await event_bus.start()

    if headless:
        surface = RecordingNotificationSurface()
    else:
        surface = ConsoleNotificationSurface(console)

    network = create_network_provider(config)
    notifier = create_notifier(config, network, surface, event_bus)

    await notifier.mount()
    try:
        if duration is None:
            await asyncio.Event().wait()
        else:
            await asyncio.sleep(duration)
    finally:
        await notifier.unmount()
        await network.close()
        await event_bus.stop()

    if headless:
        console.print(notifier.message)
