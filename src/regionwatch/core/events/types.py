"""Event type definitions."""

from enum import Enum


class EventType(str, Enum):
    """All event types in the system."""

    # Resolver lifecycle
    DETECTION_STARTED = "detection.started"
    DETECTION_SOURCE_RESOLVED = "detection.source_resolved"
    DETECTION_COMPLETED = "detection.completed"
    DETECTION_CANCELLED = "detection.cancelled"

    # Secondary capability
    CAPABILITY_RESOLVED = "capability.resolved"

    # Notifier lifecycle
    NOTIFIER_MOUNTED = "notifier.mounted"
    NOTIFIER_ARMED = "notifier.armed"
    NOTIFICATION_SHOWN = "notification.shown"
    NOTIFICATION_ACKNOWLEDGED = "notification.acknowledged"
    NOTIFIER_UNMOUNTED = "notifier.unmounted"
