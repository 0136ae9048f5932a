"""Best-effort country detection from the device position and locale."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from regionwatch.core.interfaces.location import LocationAccuracy
from regionwatch.core.models.detection import PermissionStatus, SourceReading

if TYPE_CHECKING:
    from regionwatch.core.interfaces.location import ILocaleProvider, ILocationProvider

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LocationReading:
    """Country from the position branch plus the permission that gated it."""

    country: SourceReading = field(default_factory=SourceReading.absent)
    permission: PermissionStatus | None = None


class LocationProbe:
    """Permission, lowest-accuracy fix, reverse geocode.

    Every failure is folded into an absent reading. The permission status is
    kept whenever it was obtained, even if a later step failed.
    """

    def __init__(self, provider: ILocationProvider) -> None:
        self._provider = provider

    async def probe(self) -> LocationReading:
        try:
            permission = await self._provider.request_permission()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.debug("Location permission request failed", error=str(e))
            return LocationReading(country=SourceReading.absent(f"permission failed: {e}"))

        if permission != PermissionStatus.GRANTED:
            return LocationReading(
                country=SourceReading.absent(f"permission {permission.value}"),
                permission=permission,
            )

        try:
            position = await self._provider.get_current_position(LocationAccuracy.LOWEST)
            place = await self._provider.reverse_geocode(position)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.debug("Location lookup failed", error=str(e))
            return LocationReading(
                country=SourceReading.absent(f"lookup failed: {e}"),
                permission=permission,
            )

        if place is None:
            return LocationReading(
                country=SourceReading.absent("no geocode match"),
                permission=permission,
            )

        country = SourceReading.of(place.country).or_else(SourceReading.of(place.iso_country_code))
        return LocationReading(country=country, permission=permission)


def read_locale_region(provider: ILocaleProvider) -> SourceReading:
    """Read the device region, treating any failure as absent."""
    try:
        return SourceReading.of(provider.region())
    except Exception as e:
        logger.debug("Locale region unavailable", error=str(e))
        return SourceReading.absent(f"locale failed: {e}")
