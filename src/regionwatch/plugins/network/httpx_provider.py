"""httpx-based network provider."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from regionwatch.core.interfaces.network import HttpReply

logger = structlog.get_logger(__name__)


class HttpxNetworkProvider:
    """Issues GET requests through a shared ``httpx.AsyncClient``."""

    name = "httpx"

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            timeout: Per-request timeout in seconds
            user_agent: Optional User-Agent header
            transport: Custom transport (e.g. ``httpx.MockTransport``)
        """
        self._timeout = timeout
        self._headers = {"Accept": "application/json"}
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    async def get(self, url: str) -> HttpReply:
        response = await self._get_client().get(url)

        body: Any = None
        try:
            body = response.json()
        except ValueError:
            logger.debug("Response is not JSON", url=url, status=response.status_code)

        return HttpReply(ok=response.is_success, status=response.status_code, body=body)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxNetworkProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
