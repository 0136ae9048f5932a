"""Global test fixtures for regionwatch."""

from __future__ import annotations

import pytest

from regionwatch.core.events import AsyncEventBus, CountingHandler
from regionwatch.core.models.config import NotifierConfig
from regionwatch.core.notifier.notifier import CountryNotifier
from regionwatch.core.resolver.resolver import CountryResolver
from regionwatch.plugins.surfaces import RecordingNotificationSurface

# Import pytest plugins
from tests.pytest_plugins.fakes import (
    FakeCapabilityProvider,
    FakeLocaleProvider,
    FakeLocationProvider,
    FakeNetworkProvider,
)
from tests.pytest_plugins.markers import (
    pytest_addoption,
    pytest_collection_modifyitems,
    pytest_configure,
)

# Re-export for pytest discovery
__all__ = [
    "pytest_addoption",
    "pytest_collection_modifyitems",
    "pytest_configure",
]


@pytest.fixture
def location_provider() -> FakeLocationProvider:
    return FakeLocationProvider()


@pytest.fixture
def locale_provider() -> FakeLocaleProvider:
    return FakeLocaleProvider()


@pytest.fixture
def network() -> FakeNetworkProvider:
    return FakeNetworkProvider()


@pytest.fixture
def capability_provider() -> FakeCapabilityProvider:
    return FakeCapabilityProvider()


@pytest.fixture
def surface() -> RecordingNotificationSurface:
    return RecordingNotificationSurface()


@pytest.fixture
def event_bus() -> AsyncEventBus:
    return AsyncEventBus()


@pytest.fixture
def counting_handler(event_bus: AsyncEventBus) -> CountingHandler:
    handler = CountingHandler()
    event_bus.subscribe(None, handler)
    return handler


@pytest.fixture
def resolver(
    location_provider: FakeLocationProvider,
    locale_provider: FakeLocaleProvider,
    network: FakeNetworkProvider,
) -> CountryResolver:
    return CountryResolver(location_provider, locale_provider, network)


@pytest.fixture
def notifier_config() -> NotifierConfig:
    return NotifierConfig(advisory="Advisory.", surface_retry_delay=0.01)


@pytest.fixture
def notifier(
    resolver: CountryResolver,
    capability_provider: FakeCapabilityProvider,
    surface: RecordingNotificationSurface,
    notifier_config: NotifierConfig,
) -> CountryNotifier:
    return CountryNotifier(resolver, capability_provider, surface, notifier_config)
