"""Shared fixtures for aiojso tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingHandler:
    """MockTransport handler that replays one canned response and keeps it."""

    def __init__(self, status_code: int = 200, **kwargs: Any) -> None:
        self.status_code = status_code
        self.kwargs = kwargs
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = httpx.Response(self.status_code, **self.kwargs)
        self.responses.append(response)
        return response


@pytest.fixture
def respond() -> Callable[..., RecordingHandler]:
    """Build a recording handler: ``respond(200, json={...})``."""
    return RecordingHandler


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Return a factory for AsyncClients backed by a MockTransport."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="https://api.example.test",
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
async def failing_client() -> AsyncIterator[httpx.AsyncClient]:
    """AsyncClient whose transport cannot connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield client
