"""Terminal notification surface rendered with rich."""

from __future__ import annotations

import asyncio
import contextlib
import threading
from typing import TYPE_CHECKING

import structlog
from rich.console import Console
from rich.panel import Panel

if TYPE_CHECKING:
    from regionwatch.core.models.notification import NotificationAction

logger = structlog.get_logger(__name__)


class ConsoleNotificationSurface:
    """Draws the notification as a panel and waits for Enter to dismiss it.

    Once stdin reaches end of file the panel is still drawn but can no longer
    be dismissed, so the notification stays up until the notifier unmounts.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._input_closed = False

    async def show(
        self,
        title: str,
        message: str,
        actions: list[NotificationAction],
    ) -> None:
        action = actions[0] if actions else None
        subtitle = f"[dim]Press Enter for {action.label}[/dim]" if action else None

        self._console.print(
            Panel(message, title=f"[bold red]{title}[/bold red]", subtitle=subtitle, expand=False)
        )
        if self._input_closed:
            return

        try:
            await self._wait_for_enter()
        except EOFError:
            self._input_closed = True
            logger.warning("Console input closed, notification can no longer be dismissed")
            return

        if action is not None:
            action.on_acknowledge()

    async def _wait_for_enter(self) -> None:
        """Block on stdin in a daemon thread until Enter is pressed.

        Raises:
            EOFError: If stdin is closed
        """
        loop = asyncio.get_running_loop()
        pressed: asyncio.Future[None] = loop.create_future()

        def deliver(error: Exception | None) -> None:
            if pressed.done():
                return
            if error is None:
                pressed.set_result(None)
            else:
                pressed.set_exception(error)

        def read() -> None:
            error = None
            try:
                self._console.input()
            except Exception as e:
                error = e
            # Loop may already be closed after unmount
            with contextlib.suppress(RuntimeError):
                loop.call_soon_threadsafe(deliver, error)

        threading.Thread(target=read, name="console-surface-input", daemon=True).start()
        await pressed
