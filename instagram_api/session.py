"""Authenticated user session: credentials, token and the shared HTTP client."""

import httpx

from instagram_api.config import Settings, get_settings


def build_http_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used by a session.

    ``transport`` lets tests plug in ``httpx.MockTransport``.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.http_timeout_seconds,
            connect=settings.http_connect_timeout_seconds,
        ),
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        transport=transport,
    )


class Session:
    """One Instagram user session.

    ``client_id``/``client_secret`` are kept for the OAuth flow that obtains
    the token; requests only need ``access_token``, which may be set, cleared
    or replaced at any time. A released session answers every request with
    "no result".
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        access_token: str | None = None,
        *,
        base_url: str,
        http: httpx.AsyncClient,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.http = http
        self._released = False

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    @property
    def is_released(self) -> bool:
        return self._released or self.http.is_closed

    async def aclose(self):
        self._released = True
        await self.http.aclose()
