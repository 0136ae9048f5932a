"""Country resolver - runs every detection strategy once and merges them."""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

import structlog

from regionwatch.core.events.types import EventType
from regionwatch.core.models.config import ResolverConfig
from regionwatch.core.resolver.ip_lookup import IpCountryLookup
from regionwatch.core.resolver.location import LocationProbe, read_locale_region
from regionwatch.core.resolver.merge import merge_readings

if TYPE_CHECKING:
    from collections.abc import Callable

    from regionwatch.core.events.bus import AsyncEventBus
    from regionwatch.core.interfaces.location import ILocaleProvider, ILocationProvider
    from regionwatch.core.interfaces.network import INetworkProvider
    from regionwatch.core.models.detection import DetectionResult, SourceReading

logger = structlog.get_logger(__name__)


class ResolverAlreadyStartedError(Exception):
    """Raised when a resolver is activated a second time."""


class CountryResolver:
    """
    Detects the user's probable country.

    One activation performs exactly one attempt per source:

    1. Device locale region (synchronous read)
    2. Location branch - permission, lowest-accuracy fix, reverse geocode
    3. IP branch - primary provider, secondary only if the primary is empty

    The location and IP branches run concurrently and are joined before the
    merge. Deactivating cancels the run task, which aborts in-flight requests,
    and no result is delivered afterwards.
    """

    def __init__(
        self,
        location_provider: ILocationProvider,
        locale_provider: ILocaleProvider,
        network: INetworkProvider,
        config: ResolverConfig | None = None,
        event_bus: AsyncEventBus | None = None,
        name: str = "resolver",
    ) -> None:
        """
        Initialize the resolver.

        Args:
            location_provider: Device location capability
            locale_provider: Device locale capability
            network: HTTP capability used for the IP providers
            config: Endpoints and messages (defaults if omitted)
            event_bus: Optional bus receiving detection events
            name: Source name used in events and logs
        """
        self.config = config or ResolverConfig()
        self.event_bus = event_bus
        self.name = name

        self._locale_provider = locale_provider
        self._location = LocationProbe(location_provider)
        self._ip = IpCountryLookup(network, self.config.primary_ip, self.config.secondary_ip)

        self._task: asyncio.Task[None] | None = None
        self._active = False
        self._result: DetectionResult | None = None

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def result(self) -> DetectionResult | None:
        """Delivered result, if the run completed while active."""
        return self._result

    async def resolve(self) -> DetectionResult:
        """Run every strategy once and merge the readings."""
        self._emit(EventType.DETECTION_STARTED)

        region = read_locale_region(self._locale_provider)
        self._emit_source("region", region)

        location, ips = await asyncio.gather(self._location.probe(), self._ip.lookup())
        self._emit_source("location", location.country)
        self._emit_source("ip", ips.primary)
        if not ips.primary.is_present:
            self._emit_source("ip_fallback", ips.fallback)

        result = merge_readings(
            location=location.country,
            region=region,
            primary_ip=ips.primary,
            fallback_ip=ips.fallback,
            location_permission=location.permission,
            error_message=self.config.error_message,
        )

        logger.info(
            "Country detection complete",
            country=result.country,
            source=result.source.value,
            error=result.error,
        )
        return result

    def start(self, on_result: Callable[[DetectionResult], None]) -> asyncio.Task[None]:
        """
        Activate the resolver.

        Args:
            on_result: Receives the final result, once, unless stopped first

        Returns:
            The task running the detection

        Raises:
            ResolverAlreadyStartedError: If this resolver was already activated
        """
        if self._task is not None:
            raise ResolverAlreadyStartedError(f"Resolver already started: {self.name}")

        self._active = True
        self._task = asyncio.create_task(self._run(on_result))
        return self._task

    async def stop(self) -> None:
        """Deactivate; a pending run is cancelled and its result discarded."""
        self._active = False

        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task

    async def _run(self, on_result: Callable[[DetectionResult], None]) -> None:
        try:
            result = await self.resolve()
        except asyncio.CancelledError:
            logger.info("Country detection cancelled", resolver=self.name)
            self._emit(EventType.DETECTION_CANCELLED)
            raise

        if not self._active:
            logger.debug("Discarding result of deactivated resolver", resolver=self.name)
            return

        self._result = result
        self._emit(EventType.DETECTION_COMPLETED, result.to_dict())

        try:
            on_result(result)
        except Exception as e:
            logger.exception("Result callback failed", resolver=self.name, error=str(e))

    def _emit_source(self, kind: str, reading: SourceReading) -> None:
        self._emit(
            EventType.DETECTION_SOURCE_RESOLVED,
            {"kind": kind, "value": reading.value, "reason": reading.reason},
        )

    def _emit(self, event_type: EventType, data: dict | None = None) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event_type, data, source=self.name)
