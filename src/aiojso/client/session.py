"""Reusable async session for JSO endpoints."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from ..models.envelope import JsoResult
from .fetch import jso_fetch

logger = logging.getLogger(__name__)


class JsoClient:
    """Async client that decodes every response as a JSO envelope.

    The constructor accepts plain values; no environment variables are read.
    An injected *client* is used as-is and never closed here; otherwise an
    ``httpx.AsyncClient`` is created from *base_url*, *headers* and
    *timeout* and owned by this instance.
    """

    def __init__(
        self,
        base_url: str | httpx.URL = "",
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                base_url=base_url, headers=headers, timeout=timeout
            )
            logger.debug("Created HTTP client for %s", base_url or "<no base url>")
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> JsoClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def request(self, method: str, url: str | httpx.URL, **options: Any) -> JsoResult:
        return await jso_fetch(url, method, client=self._client, **options)

    async def get(self, url: str | httpx.URL, **options: Any) -> JsoResult:
        return await self.request("GET", url, **options)

    async def post(self, url: str | httpx.URL, **options: Any) -> JsoResult:
        return await self.request("POST", url, **options)

    async def put(self, url: str | httpx.URL, **options: Any) -> JsoResult:
        return await self.request("PUT", url, **options)

    async def patch(self, url: str | httpx.URL, **options: Any) -> JsoResult:
        return await self.request("PATCH", url, **options)

    async def delete(self, url: str | httpx.URL, **options: Any) -> JsoResult:
        return await self.request("DELETE", url, **options)
