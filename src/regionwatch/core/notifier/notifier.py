"""Perpetual country notification driven by the resolver output."""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

import structlog

from regionwatch.core.events.types import EventType
from regionwatch.core.models.config import NotifierConfig
from regionwatch.core.models.detection import CapabilityStatus, DetectionResult
from regionwatch.core.models.notification import (
    NotificationAction,
    NotificationState,
    NotifierPhase,
)
from regionwatch.core.notifier.message import compose_message, has_information

if TYPE_CHECKING:
    from regionwatch.core.events.bus import AsyncEventBus
    from regionwatch.core.interfaces.notification import (
        ICapabilityProvider,
        INotificationSurface,
    )
    from regionwatch.core.resolver.resolver import CountryResolver

logger = structlog.get_logger(__name__)


class NotifierStateError(Exception):
    """Raised on an invalid mount/unmount sequence."""


class CountryNotifier:
    """
    Keeps a single-button notification on screen for as long as it is mounted.

    Phases:
        IDLE    - nothing to show yet
        ARMED   - message composed, display scheduled or pending
        SHOWING - notification visible
    Dismissal moves SHOWING back to ARMED and schedules the next display on
    the following loop tick. The first display is latched by
    ``has_shown_once``; every later one is driven by dismissals only.
    """

    def __init__(
        self,
        resolver: CountryResolver,
        capability_provider: ICapabilityProvider,
        surface: INotificationSurface,
        config: NotifierConfig | None = None,
        event_bus: AsyncEventBus | None = None,
        name: str = "notifier",
    ) -> None:
        """
        Initialize the notifier.

        Args:
            resolver: Resolver activated on mount
            capability_provider: Secondary capability probed on mount
            surface: Where notifications are displayed
            config: Notification texts
            event_bus: Optional bus receiving notifier events
            name: Source name used in events and logs
        """
        self.config = config or NotifierConfig()
        self.event_bus = event_bus
        self.name = name

        self._resolver = resolver
        self._capability_provider = capability_provider
        self._surface = surface

        self._state = NotificationState()
        self._detection = DetectionResult.pending()
        self._capability_status = CapabilityStatus.CHECKING
        self._message = compose_message(self._detection, self._capability_status, self.config)

        self._loop: asyncio.AbstractEventLoop | None = None
        self._display_queue: asyncio.Queue[None] = asyncio.Queue()
        self._display_task: asyncio.Task[None] | None = None
        self._capability_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> NotificationState:
        return self._state

    @property
    def phase(self) -> NotifierPhase:
        return self._state.phase

    @property
    def detection(self) -> DetectionResult:
        return self._detection

    @property
    def capability_status(self) -> CapabilityStatus:
        return self._capability_status

    @property
    def message(self) -> str:
        """Message the next display will use."""
        return self._message

    @property
    def is_mounted(self) -> bool:
        return self._loop is not None and not self._state.torn_down

    async def mount(self) -> None:
        """Start the capability probe, the resolver and the display loop.

        Raises:
            NotifierStateError: If already mounted or already torn down
        """
        if self._loop is not None:
            raise NotifierStateError(f"Notifier cannot be mounted twice: {self.name}")

        self._loop = asyncio.get_running_loop()
        self._display_task = asyncio.create_task(self._display_loop())
        self._capability_task = asyncio.create_task(self._probe_capability())
        self._resolver.start(self._on_detection)

        self._emit(EventType.NOTIFIER_MOUNTED)
        logger.info("Notifier mounted", notifier=self.name)

    async def unmount(self) -> None:
        """Tear down; nothing scheduled afterwards is displayed."""
        if not self.is_mounted:
            return

        self._state.torn_down = True
        self._state.phase = NotifierPhase.UNMOUNTED

        await self._resolver.stop()

        for task in (self._capability_task, self._display_task):
            if task and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

        self._emit(EventType.NOTIFIER_UNMOUNTED, self._state.to_dict())
        logger.info(
            "Notifier unmounted",
            notifier=self.name,
            displays=self._state.display_count,
            acknowledgements=self._state.acknowledge_count,
            redisplays=self._state.redisplay_count,
        )

    def _on_detection(self, result: DetectionResult) -> None:
        if self._state.torn_down:
            return

        self._detection = result
        self._refresh()

    async def _probe_capability(self) -> None:
        try:
            permission = await self._capability_provider.request_permission()
            status = CapabilityStatus.from_permission(permission)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(
                "Capability probe failed",
                capability=getattr(self._capability_provider, "name", "capability"),
                error=str(e),
            )
            status = CapabilityStatus.DENIED

        if self._state.torn_down:
            return

        self._capability_status = status
        self._emit(EventType.CAPABILITY_RESOLVED, {"status": status.value})
        self._refresh()

    def _refresh(self) -> None:
        """Recompose the message and arm the notification when possible."""
        self._message = compose_message(self._detection, self._capability_status, self.config)

        if not has_information(self._detection, self._capability_status):
            return

        if self._state.phase == NotifierPhase.IDLE:
            self._state.phase = NotifierPhase.ARMED
            self._emit(EventType.NOTIFIER_ARMED)

        if not self._state.has_shown_once:
            self._state.has_shown_once = True
            self._schedule_display()

    def _schedule_display(self, delay: float = 0.0) -> None:
        if self._state.torn_down or self._loop is None:
            return

        if delay:
            self._loop.call_later(delay, self._enqueue_display)
        else:
            self._loop.call_soon(self._enqueue_display)

    def _enqueue_display(self) -> None:
        if self._state.torn_down:
            return
        self._display_queue.put_nowait(None)

    async def _display_loop(self) -> None:
        """Show the notification each time a display is scheduled."""
        while not self._state.torn_down:
            await self._display_queue.get()
            if self._state.torn_down:
                break

            self._state.phase = NotifierPhase.SHOWING
            self._state.display_count += 1
            message = self._message
            self._emit(
                EventType.NOTIFICATION_SHOWN,
                {"display": self._state.display_count, "message": message},
            )

            action = NotificationAction(label=self.config.button_label, on_acknowledge=self._acknowledge)
            try:
                await self._surface.show(self.config.title, message, [action])
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.exception("Notification surface failed", notifier=self.name, error=str(e))
                self._state.phase = NotifierPhase.ARMED
                self._schedule_display(self.config.surface_retry_delay)

    def _acknowledge(self) -> None:
        """Dismissal handler; re-arms on the next tick."""
        if self._state.torn_down or self._state.phase != NotifierPhase.SHOWING:
            return

        self._state.acknowledge_count += 1
        self._state.phase = NotifierPhase.ARMED
        self._emit(
            EventType.NOTIFICATION_ACKNOWLEDGED,
            {"acknowledgements": self._state.acknowledge_count},
        )
        self._schedule_display()

    def _emit(self, event_type: EventType, data: dict | None = None) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event_type, data, source=self.name)
