"""Notification surfaces."""

from regionwatch.plugins.surfaces.console import ConsoleNotificationSurface
from regionwatch.plugins.surfaces.recording import (
    DisplayedNotification,
    RecordingNotificationSurface,
)

__all__ = [
    "ConsoleNotificationSurface",
    "DisplayedNotification",
    "RecordingNotificationSurface",
]
