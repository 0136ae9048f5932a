"""Data models for detection results, notification state and configuration."""

from regionwatch.core.models.config import (
    CapabilityConfig,
    Config,
    IpGeoEndpoint,
    LocaleConfig,
    LocationConfig,
    LogConfig,
    NotifierConfig,
    ResolverConfig,
)
from regionwatch.core.models.detection import (
    CapabilityStatus,
    DetectionResult,
    DetectionSource,
    PermissionStatus,
    SourceReading,
)
from regionwatch.core.models.notification import (
    NotificationAction,
    NotificationState,
    NotifierPhase,
)

__all__ = [
    "CapabilityConfig",
    "CapabilityStatus",
    "Config",
    "DetectionResult",
    "DetectionSource",
    "IpGeoEndpoint",
    "LocaleConfig",
    "LocationConfig",
    "LogConfig",
    "NotificationAction",
    "NotificationState",
    "NotifierConfig",
    "NotifierPhase",
    "PermissionStatus",
    "ResolverConfig",
    "SourceReading",
]
