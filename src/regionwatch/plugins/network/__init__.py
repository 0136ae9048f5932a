"""Network providers."""

from regionwatch.plugins.network.aiohttp_provider import AiohttpNetworkProvider
from regionwatch.plugins.network.httpx_provider import HttpxNetworkProvider

__all__ = ["AiohttpNetworkProvider", "HttpxNetworkProvider"]
