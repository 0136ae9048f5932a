"""Location and locale provider interface definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from regionwatch.core.models.detection import PermissionStatus


class LocationAccuracy(str, Enum):
    """Requested position accuracy."""

    LOWEST = "lowest"
    LOW = "low"
    BALANCED = "balanced"
    HIGH = "high"


@dataclass(frozen=True)
class Coordinates:
    """Geographic position in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeocodedPlace:
    """Reverse-geocoding result."""

    country: str | None = None
    iso_country_code: str | None = None


@runtime_checkable
class ILocationProvider(Protocol):
    """Contract for device location providers."""

    async def request_permission(self) -> PermissionStatus:
        """Ask for foreground location permission."""
        ...

    async def get_current_position(self, accuracy: LocationAccuracy) -> Coordinates:
        """
        Get the current device position.

        Raises:
            Exception: If permission is not granted or no fix is available
        """
        ...

    async def reverse_geocode(self, coordinates: Coordinates) -> GeocodedPlace | None:
        """Resolve coordinates to a place."""
        ...


@runtime_checkable
class ILocaleProvider(Protocol):
    """Contract for device locale providers."""

    def region(self) -> str | None:
        """Preferred region code of the device, e.g. 'DE'."""
        ...
