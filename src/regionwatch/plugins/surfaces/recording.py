"""In-memory notification surface."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from regionwatch.core.models.notification import NotificationAction

logger = structlog.get_logger(__name__)


@dataclass
class DisplayedNotification:
    """One display recorded by the surface."""

    title: str
    message: str
    actions: list[NotificationAction] = field(default_factory=list)
    acknowledged: bool = False


class RecordingNotificationSurface:
    """Records displays and lets the caller dismiss them.

    ``show`` returns as soon as the notification is recorded; dismissal is a
    separate call, like a native alert whose button callback fires later.
    """

    def __init__(self, auto_dismiss_after: int = 0) -> None:
        """
        Initialize the surface.

        Args:
            auto_dismiss_after: Dismiss automatically this many times (0 disables)
        """
        self.displays: list[DisplayedNotification] = []
        self._auto_dismiss_remaining = auto_dismiss_after
        self._changed = asyncio.Condition()

    @property
    def current(self) -> DisplayedNotification | None:
        if self.displays and not self.displays[-1].acknowledged:
            return self.displays[-1]
        return None

    @property
    def display_count(self) -> int:
        return len(self.displays)

    async def show(
        self,
        title: str,
        message: str,
        actions: list[NotificationAction],
    ) -> None:
        self.displays.append(DisplayedNotification(title=title, message=message, actions=actions))
        logger.debug("Notification displayed", title=title, display=len(self.displays))

        async with self._changed:
            self._changed.notify_all()

        if self._auto_dismiss_remaining > 0:
            self._auto_dismiss_remaining -= 1
            asyncio.get_running_loop().call_soon(self.dismiss)

    def dismiss(self) -> bool:
        """Press the button of the visible notification.

        Returns:
            True if a notification was visible
        """
        current = self.current
        if current is None:
            return False

        current.acknowledged = True
        if current.actions:
            current.actions[0].on_acknowledge()
        return True

    async def wait_for_displays(self, count: int, timeout: float = 1.0) -> None:
        """Wait until at least ``count`` displays were recorded.

        Raises:
            TimeoutError: If the count is not reached in time
        """
        async with asyncio.timeout(timeout):
            async with self._changed:
                await self._changed.wait_for(lambda: len(self.displays) >= count)
