"""IP-geolocation lookup with a primary and a secondary provider."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from regionwatch.core.models.config import IpGeoEndpoint
from regionwatch.core.models.detection import SourceReading

if TYPE_CHECKING:
    from regionwatch.core.interfaces.network import INetworkProvider

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class IpReadings:
    """Readings from both IP providers.

    ``fallback`` is only ever present when ``primary`` is absent.
    """

    primary: SourceReading = field(default_factory=SourceReading.absent)
    fallback: SourceReading = field(default_factory=SourceReading.absent)

    @property
    def best(self) -> SourceReading:
        return self.primary.or_else(self.fallback)


def extract_country(body: Any, fields: list[str]) -> SourceReading:
    """Pick the first non-empty country field from a JSON document.

    Args:
        body: Decoded JSON body
        fields: Candidate field names, in priority order

    Returns:
        SourceReading with the country, or absent if none matched
    """
    if not isinstance(body, dict):
        return SourceReading.absent("malformed body")

    for name in fields:
        reading = SourceReading.of(body.get(name))
        if reading.is_present:
            return reading

    return SourceReading.absent("no country field")


class IpCountryLookup:
    """Queries the primary endpoint, then the secondary one only if needed."""

    def __init__(
        self,
        network: INetworkProvider,
        primary: IpGeoEndpoint,
        secondary: IpGeoEndpoint,
    ) -> None:
        self._network = network
        self._primary = primary
        self._secondary = secondary

    async def lookup(self) -> IpReadings:
        """Run the lookup; never raises except on cancellation."""
        primary = await self.query(self._primary)
        if primary.is_present:
            return IpReadings(primary=primary)

        fallback = await self.query(self._secondary)
        return IpReadings(primary=primary, fallback=fallback)

    async def query(self, endpoint: IpGeoEndpoint) -> SourceReading:
        """Query a single endpoint and extract its country."""
        try:
            reply = await self._network.get(endpoint.url)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.debug("IP lookup failed", endpoint=endpoint.name, error=str(e))
            return SourceReading.absent(f"request failed: {e}")

        if not reply.ok:
            logger.debug("IP lookup rejected", endpoint=endpoint.name, status=reply.status)
            return SourceReading.absent(f"HTTP {reply.status}")

        reading = extract_country(reply.body, endpoint.fields)
        logger.debug(
            "IP lookup complete",
            endpoint=endpoint.name,
            country=reading.value,
            reason=reading.reason,
        )
        return reading
