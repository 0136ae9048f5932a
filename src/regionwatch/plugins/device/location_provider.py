"""Location provider for hosts without a positioning device."""

from __future__ import annotations

import structlog

from regionwatch.core.geo.countries import country_at
from regionwatch.core.interfaces.location import Coordinates, GeocodedPlace, LocationAccuracy
from regionwatch.core.models.config import LocationConfig
from regionwatch.core.models.detection import PermissionStatus

logger = structlog.get_logger(__name__)


class LocationUnavailableError(Exception):
    """Raised when no position can be produced."""


class ConfiguredLocationProvider:
    """
    Serves a fixed position taken from configuration.

    Permission is ``granted`` when coordinates are configured, ``denied`` when
    location is disabled and ``undetermined`` otherwise. Reverse geocoding
    uses the bundled country bounds.
    """

    name = "configured"

    def __init__(self, config: LocationConfig | None = None) -> None:
        self.config = config or LocationConfig()

    async def request_permission(self) -> PermissionStatus:
        if not self.config.enabled:
            return PermissionStatus.DENIED
        if not self.config.has_coordinates:
            return PermissionStatus.UNDETERMINED
        return PermissionStatus.GRANTED

    async def get_current_position(self, accuracy: LocationAccuracy) -> Coordinates:
        if not self.config.enabled or not self.config.has_coordinates:
            raise LocationUnavailableError("No configured position")

        logger.debug("Serving configured position", accuracy=accuracy.value)
        return Coordinates(latitude=self.config.latitude, longitude=self.config.longitude)

    async def reverse_geocode(self, coordinates: Coordinates) -> GeocodedPlace | None:
        match = country_at(coordinates.latitude, coordinates.longitude)
        if match is None:
            return None
        return GeocodedPlace(country=match.country_name, iso_country_code=match.country_code)
