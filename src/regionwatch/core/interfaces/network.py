"""Network provider interface definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class HttpReply:
    """Outcome of a GET request.

    ``body`` is the decoded JSON document, or None when the payload was not JSON.
    """

    ok: bool
    status: int
    body: Any = None


@runtime_checkable
class INetworkProvider(Protocol):
    """Contract for network providers."""

    async def get(self, url: str) -> HttpReply:
        """
        Issue a GET request and decode the JSON body.

        Cancelling the awaiting task aborts the request.

        Raises:
            Exception: On transport failures
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
