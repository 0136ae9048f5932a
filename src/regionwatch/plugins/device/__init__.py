"""Device capability providers for desktop and server hosts."""

from regionwatch.plugins.device.capability_provider import (
    StaticCapabilityProvider,
    VideoDeviceCapabilityProvider,
)
from regionwatch.plugins.device.locale_provider import SystemLocaleProvider, region_from_locale
from regionwatch.plugins.device.location_provider import (
    ConfiguredLocationProvider,
    LocationUnavailableError,
)

__all__ = [
    "ConfiguredLocationProvider",
    "LocationUnavailableError",
    "StaticCapabilityProvider",
    "SystemLocaleProvider",
    "VideoDeviceCapabilityProvider",
    "region_from_locale",
]
