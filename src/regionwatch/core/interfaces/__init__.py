"""Interface definitions for capability providers."""

from regionwatch.core.interfaces.location import (
    Coordinates,
    GeocodedPlace,
    ILocaleProvider,
    ILocationProvider,
    LocationAccuracy,
)
from regionwatch.core.interfaces.network import HttpReply, INetworkProvider
from regionwatch.core.interfaces.notification import (
    ICapabilityProvider,
    INotificationSurface,
)

__all__ = [
    "Coordinates",
    "GeocodedPlace",
    "HttpReply",
    "ICapabilityProvider",
    "ILocaleProvider",
    "ILocationProvider",
    "INetworkProvider",
    "INotificationSurface",
    "LocationAccuracy",
]
