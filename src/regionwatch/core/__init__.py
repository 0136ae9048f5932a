"""Core module - models, interfaces, resolver and notifier."""

from regionwatch.core.events import AsyncEventBus, Event, EventType
from regionwatch.core.notifier.notifier import CountryNotifier
from regionwatch.core.resolver.resolver import CountryResolver

__all__ = [
    "AsyncEventBus",
    "CountryNotifier",
    "CountryResolver",
    "Event",
    "EventType",
]
