"""Tests for configuration-driven provider factories."""

from __future__ import annotations

import pytest

from regionwatch.core.models.config import CapabilityConfig, Config
from regionwatch.core.models.detection import PermissionStatus
from regionwatch.core.notifier.notifier import CountryNotifier
from regionwatch.core.resolver.resolver import CountryResolver
from regionwatch.plugins import (
    create_capability_provider,
    create_network_provider,
    create_notifier,
    create_resolver,
)
from regionwatch.plugins.device import StaticCapabilityProvider, VideoDeviceCapabilityProvider
from regionwatch.plugins.network import AiohttpNetworkProvider, HttpxNetworkProvider
from regionwatch.plugins.surfaces import RecordingNotificationSurface
from tests.pytest_plugins.fakes import FakeNetworkProvider


class TestFactories:
    """Tests for the plugin factories."""

    def test_network_provider_selection(self):
        """Test the HTTP client follows resolver.http_client."""
        assert isinstance(create_network_provider(Config()), HttpxNetworkProvider)
        config = Config.from_dict({"resolver": {"http_client": "aiohttp", "request_timeout": 2.5}})
        assert isinstance(create_network_provider(config), AiohttpNetworkProvider)

    def test_capability_provider_selection(self):
        assert isinstance(create_capability_provider(CapabilityConfig()), VideoDeviceCapabilityProvider)
        static = create_capability_provider(CapabilityConfig(provider="static"))
        assert isinstance(static, StaticCapabilityProvider)

    @pytest.mark.asyncio
    async def test_static_status_is_configured(self):
        provider = create_capability_provider(
            CapabilityConfig(provider="static", static_status="granted")
        )
        assert await provider.request_permission() == PermissionStatus.GRANTED

    def test_resolver_uses_resolver_config(self):
        config = Config.from_dict({"resolver": {"error_message": "No country."}})
        resolver = create_resolver(config, FakeNetworkProvider())

        assert isinstance(resolver, CountryResolver)
        assert resolver.config.error_message == "No country."

    def test_notifier_uses_notifier_config(self):
        config = Config.from_dict({"notifier": {"title": "Where"}})
        notifier = create_notifier(config, FakeNetworkProvider(), RecordingNotificationSurface())

        assert isinstance(notifier, CountryNotifier)
        assert notifier.config.title == "Where"
        assert notifier.is_mounted is False
