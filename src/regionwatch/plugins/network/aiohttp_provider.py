"""aiohttp-based network provider."""

from __future__ import annotations

from typing import Any

import aiohttp
import structlog

from regionwatch.core.interfaces.network import HttpReply

logger = structlog.get_logger(__name__)


class AiohttpNetworkProvider:
    """Issues GET requests through a lazily created ``aiohttp.ClientSession``."""

    name = "aiohttp"

    def __init__(self, timeout: float = 10.0, user_agent: str | None = None) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {"Accept": "application/json"}
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._session: aiohttp.ClientSession | None = None

    async def get(self, url: str) -> HttpReply:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout, headers=self._headers)

        async with self._session.get(url) as response:
            body: Any = None
            try:
                body = await response.json(content_type=None)
            except ValueError:
                logger.debug("Response is not JSON", url=url, status=response.status)

            return HttpReply(ok=response.ok, status=response.status, body=body)

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> AiohttpNetworkProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
