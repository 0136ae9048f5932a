"""Re-arming country notification."""

from regionwatch.core.notifier.message import compose_message, has_information, source_parts
from regionwatch.core.notifier.notifier import CountryNotifier, NotifierStateError

__all__ = [
    "CountryNotifier",
    "NotifierStateError",
    "compose_message",
    "has_information",
    "source_parts",
]
