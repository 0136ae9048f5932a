"""Concrete providers and factories wiring them from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from regionwatch.core.notifier.notifier import CountryNotifier
from regionwatch.core.resolver.resolver import CountryResolver
from regionwatch.plugins.device import (
    ConfiguredLocationProvider,
    StaticCapabilityProvider,
    SystemLocaleProvider,
    VideoDeviceCapabilityProvider,
)
from regionwatch.plugins.network import AiohttpNetworkProvider, HttpxNetworkProvider

if TYPE_CHECKING:
    from regionwatch.core.events.bus import AsyncEventBus
    from regionwatch.core.interfaces.network import INetworkProvider
    from regionwatch.core.interfaces.notification import (
        ICapabilityProvider,
        INotificationSurface,
    )
    from regionwatch.core.models.config import CapabilityConfig, Config


def create_network_provider(config: Config) -> INetworkProvider:
    """Build the HTTP client selected by ``resolver.http_client``."""
    resolver = config.resolver
    if resolver.http_client == "aiohttp":
        return AiohttpNetworkProvider(timeout=resolver.request_timeout, user_agent=resolver.user_agent)
    return HttpxNetworkProvider(timeout=resolver.request_timeout, user_agent=resolver.user_agent)


def create_capability_provider(config: CapabilityConfig) -> ICapabilityProvider:
    if config.provider == "static":
        return StaticCapabilityProvider(config.static_status)
    return VideoDeviceCapabilityProvider(config.device_glob)


def create_resolver(
    config: Config,
    network: INetworkProvider,
    event_bus: AsyncEventBus | None = None,
) -> CountryResolver:
    """Build a resolver from configuration."""
    return CountryResolver(
        location_provider=ConfiguredLocationProvider(config.location),
        locale_provider=SystemLocaleProvider(config.locale.region_override),
        network=network,
        config=config.resolver,
        event_bus=event_bus,
    )


def create_notifier(
    config: Config,
    network: INetworkProvider,
    surface: INotificationSurface,
    event_bus: AsyncEventBus | None = None,
) -> CountryNotifier:
    """Build a notifier and its resolver from configuration."""
    return CountryNotifier(
        resolver=create_resolver(config, network, event_bus),
        capability_provider=create_capability_provider(config.capability),
        surface=surface,
        config=config.notifier,
        event_bus=event_bus,
    )


__all__ = [
    "create_capability_provider",
    "create_network_provider",
    "create_notifier",
    "create_resolver",
]
