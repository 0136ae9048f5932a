"""Event system for observing detection and notification activity."""

from regionwatch.core.events.bus import AsyncEventBus, Event
from regionwatch.core.events.handlers import CountingHandler, LoggingHandler
from regionwatch.core.events.types import EventType

__all__ = [
    "AsyncEventBus",
    "CountingHandler",
    "Event",
    "EventType",
    "LoggingHandler",
]
