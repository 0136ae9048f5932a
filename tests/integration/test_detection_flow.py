"""End-to-end detection and notification with real providers."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from regionwatch.core.events import AsyncEventBus, CountingHandler, EventType
from regionwatch.core.models.config import Config
from regionwatch.core.models.detection import DetectionSource, PermissionStatus
from regionwatch.plugins import create_network_provider, create_notifier, create_resolver
from regionwatch.plugins.network import HttpxNetworkProvider
from regionwatch.plugins.surfaces import RecordingNotificationSurface


def geo_transport(primary_status: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "ipapi.co":
            if primary_status != 200:
                return httpx.Response(primary_status, json={"error": True})
            return httpx.Response(200, json={"country_name": "Germany", "country": "DE"})
        if request.url.host == "ipwho.is":
            return httpx.Response(200, json={"success": True, "country": "Spain"})
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def paris_config() -> Config:
    return Config.from_dict(
        {
            "location": {"latitude": 48.8566, "longitude": 2.3522},
            "locale": {"region_override": "IT"},
            "capability": {"provider": "static", "static_status": "granted"},
            "notifier": {"advisory": "Advisory.", "surface_retry_delay": 0.01},
        }
    )


@pytest.mark.integration
class TestDetectionFlow:
    """Resolver and notifier wired through the factories."""

    @pytest.mark.asyncio
    async def test_location_and_region_are_mixed(self, paris_config):
        """Test location and region combine while the IP answer is kept."""
        async with HttpxNetworkProvider(transport=geo_transport()) as network:
            result = await create_resolver(paris_config, network).resolve()

        assert result.country == "France"
        assert result.source == DetectionSource.MIXED
        assert result.location_country == "France"
        assert result.region_country == "IT"
        assert result.ip_country == "Germany"
        assert result.ip_country_fallback is None
        assert result.location_permission_status == PermissionStatus.GRANTED
        assert result.error is None

    @pytest.mark.asyncio
    async def test_secondary_provider_after_primary_failure(self, monkeypatch):
        """Test the secondary provider answers when the primary is rate limited."""
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))
        for variable in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(variable, raising=False)
        config = Config.from_dict({"location": {"enabled": False}})

        async with HttpxNetworkProvider(transport=geo_transport(primary_status=429)) as network:
            result = await create_resolver(config, network).resolve()

        assert result.country == "Spain"
        assert result.source == DetectionSource.IP
        assert result.ip_country is None
        assert result.ip_country_fallback == "Spain"
        assert result.location_permission_status == PermissionStatus.DENIED

    @pytest.mark.asyncio
    async def test_notifier_rearms_after_each_dismissal(self, paris_config):
        """Test the notification reopens with the final message after every OK."""
        event_bus = AsyncEventBus()
        counter = CountingHandler()
        event_bus.subscribe(None, counter)
        surface = RecordingNotificationSurface()

        async with HttpxNetworkProvider(transport=geo_transport()) as network:
            notifier = create_notifier(paris_config, network, surface, event_bus)
            await notifier.mount()
            try:
                await surface.wait_for_displays(1)
                async with asyncio.timeout(1.0):
                    while notifier.detection.loading:
                        await asyncio.sleep(0.01)
                for expected in range(2, 5):
                    assert surface.dismiss() is True
                    await surface.wait_for_displays(expected)
            finally:
                await notifier.unmount()

        await event_bus.drain()

        assert surface.display_count == 4
        assert "Detected region/country: France." in surface.displays[-1].message
        assert "Camera permission: granted." in surface.displays[-1].message
        assert notifier.state.acknowledge_count == 3
        assert counter.count(EventType.DETECTION_COMPLETED) == 1
        assert counter.count(EventType.NOTIFICATION_ACKNOWLEDGED) == 3
        assert counter.count(EventType.NOTIFIER_UNMOUNTED) == 1


@pytest.mark.real
class TestRealServices:
    """Checks against the public IP-geolocation services."""

    @pytest.mark.asyncio
    async def test_real_detection(self):
        config = Config.from_dict({"location": {"enabled": False}})
        network = create_network_provider(config)
        try:
            result = await create_resolver(config, network).resolve()
        finally:
            await network.close()

        assert result.loading is False
        assert result.has_any_country or result.error == config.resolver.error_message
