"""
Shared fixtures for the instagram_api test suite.

Requests never leave the process: every client is built with an
``httpx.MockTransport`` whose handler is controlled per test through the
``mock_api`` fixture. Each request the client sends is appended to
``mock_api.requests`` so tests can assert on URLs, methods and call counts.
"""

from __future__ import annotations

import json
from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from instagram_api.clients.instagram import InstagramAPI
from instagram_api.config import Settings

BASE_URL = "https://api.instagram.com/v1"
ACCESS_TOKEN = "T"


def envelope(data, code: int = 200) -> dict:
    """Build a ``{meta, data}`` response body."""
    return {"meta": {"code": code}, "data": data}


class MockAPI:
    """Programmable stand-in for the Instagram API."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=envelope({})
        )

    def respond_with(self, body, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(status_code, json=body)

    def respond_with_text(self, text: str, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(status_code, text=text)

    def raise_error(self, exc_type: type[httpx.RequestError] = httpx.ConnectError) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise exc_type("connection refused", request=request)

        self._handler = _handler

    def set_handler(self, handler) -> None:
        self._handler = handler

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._handler(request)
        if hasattr(result, "__await__"):
            result = await result
        return result

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_query(self) -> str:
        return self.last_request.url.query.decode()

    def last_json_body(self):
        return json.loads(self.last_request.content or b"null")


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        base_url=BASE_URL,
        client_id="client-id",
        client_secret="client-secret",
        access_token="",
    )


@pytest.fixture()
def mock_api() -> MockAPI:
    return MockAPI()


@pytest_asyncio.fixture()
async def api(settings: Settings, mock_api: MockAPI) -> AsyncGenerator[InstagramAPI, None]:
    """Authenticated client wired to ``mock_api``."""
    client = InstagramAPI(
        "client-id",
        "client-secret",
        ACCESS_TOKEN,
        settings=settings,
        transport=httpx.MockTransport(mock_api.handle),
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture()
async def anonymous_api(settings: Settings, mock_api: MockAPI) -> AsyncGenerator[InstagramAPI, None]:
    """Client without an access token."""
    client = InstagramAPI(
        "client-id",
        "client-secret",
        settings=settings,
        transport=httpx.MockTransport(mock_api.handle),
    )
    yield client
    await client.aclose()
