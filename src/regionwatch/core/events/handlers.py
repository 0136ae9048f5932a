"""Reusable event handlers."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from regionwatch.core.events.bus import Event
    from regionwatch.core.events.types import EventType


class LoggingHandler:
    """Handler that logs events through structlog."""

    def __init__(self, event_types: list[EventType] | None = None) -> None:
        """
        Initialize logging handler.

        Args:
            event_types: Event types to log (None for all)
        """
        self._event_types = event_types or []
        self._logger = structlog.get_logger(__name__)

    async def __call__(self, event: Event) -> None:
        if self._event_types and event.type not in self._event_types:
            return

        self._logger.info(
            "Event received",
            event_type=event.type.value,
            source=event.source,
            data=event.data,
        )


class CountingHandler:
    """Handler that counts events per type."""

    def __init__(self) -> None:
        self._counters: Counter[str] = Counter()
        self._events: list[Event] = []

    async def __call__(self, event: Event) -> None:
        self._counters[event.type.value] += 1
        self._events.append(event)

    def count(self, event_type: EventType) -> int:
        return self._counters[event_type.value]

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def get_counts(self) -> dict[str, int]:
        """Get collected counters."""
        return dict(self._counters)

    def reset(self) -> None:
        self._counters.clear()
        self._events.clear()
