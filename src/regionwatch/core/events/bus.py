"""In-process event bus for observing resolver and notifier activity."""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections import Counter
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

import structlog

from regionwatch.core.events.types import EventType

logger = structlog.get_logger(__name__)

EventHandler = Callable[["Event"], Coroutine[Any, Any, None]]

_STAT_KEYS = (
    "events_published",
    "events_dropped",
    "events_processed",
    "handlers_invoked",
    "handler_errors",
)


@dataclass(frozen=True)
class Event:
    """Something that happened inside a resolver or notifier."""

    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "unknown"
    timestamp: float = field(default_factory=time.time)
    id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "source": self.source,
            "timestamp": self.timestamp,
            "data": self.data,
        }


class AsyncEventBus:
    """
    Queue-backed publish/subscribe.

    ``emit`` and ``publish`` are synchronous so they can be called from loop
    callbacks; handlers run later, either from the background task started by
    ``start()`` or from an explicit ``drain()``. Handlers for one event run in
    subscription order, typed subscribers before wildcard ones.
    """

    def __init__(self, max_queue_size: int = 1000) -> None:
        """
        Initialize the bus.

        Args:
            max_queue_size: Events beyond this many pending ones are dropped
        """
        self._subscribers: dict[EventType | None, list[EventHandler]] = {}
        self._queue: asyncio.Queue[Event] = asyncio.Queue(maxsize=max_queue_size)
        self._worker: asyncio.Task[None] | None = None
        self._counters: Counter[str] = Counter()

    @property
    def is_running(self) -> bool:
        return self._worker is not None

    @property
    def queue_size(self) -> int:
        return self._queue.qsize()

    @property
    def stats(self) -> dict[str, int]:
        """Counters for published, dropped and processed events."""
        return {key: self._counters[key] for key in _STAT_KEYS}

    def subscribe(
        self,
        event_type: EventType | None,
        handler: EventHandler,
    ) -> Callable[[], None]:
        """
        Register an async handler.

        Args:
            event_type: Event type to receive, or None for every event
            handler: Coroutine function taking the Event

        Returns:
            Function that removes the subscription
        """
        self._subscribers.setdefault(event_type, []).append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def unsubscribe(self, event_type: EventType | None, handler: EventHandler) -> None:
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Event) -> None:
        """Queue an event; when the queue is full the event is dropped."""
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            self._counters["events_dropped"] += 1
            logger.warning("Event dropped, queue full", event_type=event.type.value)
            return
        self._counters["events_published"] += 1

    def emit(
        self,
        event_type: EventType,
        data: dict[str, Any] | None = None,
        source: str = "unknown",
    ) -> Event:
        """Build an event and publish it."""
        event = Event(type=event_type, data=data or {}, source=source)
        self.publish(event)
        return event

    async def start(self) -> None:
        """Dispatch queued events in the background until stopped."""
        if self._worker is None:
            self._worker = asyncio.create_task(self._run())
            logger.debug("Event bus started")

    async def stop(self) -> None:
        """Stop the background task, delivering anything still queued."""
        if self._worker is None:
            return

        worker, self._worker = self._worker, None
        worker.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await worker

        await self.drain()
        logger.debug("Event bus stopped", **self.stats)

    async def drain(self) -> None:
        """Deliver every queued event now."""
        while not self._queue.empty():
            await self._deliver(self._queue.get_nowait())

    async def _run(self) -> None:
        while True:
            event = await self._queue.get()
            await self._deliver(event)

    async def _deliver(self, event: Event) -> None:
        handlers = [*self._subscribers.get(event.type, ()), *self._subscribers.get(None, ())]
        for handler in handlers:
            self._counters["handlers_invoked"] += 1
            try:
                await handler(event)
            except Exception as e:
                self._counters["handler_errors"] += 1
                logger.exception(
                    "Event handler failed",
                    handler=getattr(handler, "__qualname__", repr(handler)),
                    event_type=event.type.value,
                    error=str(e),
                )
        self._counters["events_processed"] += 1


__all__ = ["AsyncEventBus", "Event", "EventHandler"]
