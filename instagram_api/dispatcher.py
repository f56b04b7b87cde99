"""
Request dispatcher: the single low-level request primitive.

Every endpoint goes through ``RequestDispatcher.send``, which builds the URL
(base + path + ``access_token`` + encoded parameters), performs the HTTP
call and unwraps the ``{"meta": {"code": ...}, "data": ...}`` envelope.
Failures are raised internally as ``InstagramAPIError`` subclasses, logged,
and returned as a ``RequestFailure``; ``dispatch`` collapses that to ``None``.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx

from instagram_api.errors import (
    ApplicationFailure,
    InstagramAPIError,
    InvalidRequestError,
    SessionReleasedError,
    TransportFailure,
    UnauthenticatedError,
)
from instagram_api.results import DispatchResult, Ok, RequestFailure
from instagram_api.session import Session
from instagram_api.utils.params import Scalar, encode_parameters

logger = logging.getLogger(__name__)

SUCCESS_CODE = 200
_BODY_EXCERPT = 500


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    path: str
    parameters: dict[str, Scalar] = field(default_factory=dict)
    method: HTTPMethod = HTTPMethod.GET


def unwrap_envelope(body: Any, *, status_code: int | None = None) -> Any:
    """Return ``data`` from a successful envelope or raise ``ApplicationFailure``."""
    if not isinstance(body, dict):
        raise ApplicationFailure(
            f"response body is a {type(body).__name__}, not an envelope object",
            status_code=status_code,
        )

    meta = body.get("meta")
    code = meta.get("code") if isinstance(meta, dict) else None
    if code != SUCCESS_CODE:
        detail = ""
        if isinstance(meta, dict) and meta.get("error_message"):
            detail = f" ({meta.get('error_type', 'error')}: {meta['error_message']})"
        raise ApplicationFailure(
            f"meta.code is {code!r}{detail}",
            meta_code=code if isinstance(code, int) else None,
            status_code=status_code,
        )

    if "data" not in body:
        raise ApplicationFailure(
            "envelope has no data field",
            meta_code=code,
            status_code=status_code,
        )
    return body["data"]


class RequestDispatcher:
    """Performs authenticated requests against one session."""

    def __init__(self, session: Session):
        self.session = session

    def build_url(self, request: RequestDescriptor, access_token: str) -> str:
        url = f"{self.session.base_url}{request.path}?access_token={quote(access_token, safe='')}"
        if request.parameters:
            url += "&" + encode_parameters(request.parameters)
        return url

    async def send(
        self,
        path: str,
        parameters: dict[str, Scalar] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
    ) -> DispatchResult[Any]:
        request = RequestDescriptor(path, dict(parameters or {}), HTTPMethod(method))
        try:
            payload = await self._perform(request)
        except InstagramAPIError as exc:
            logger.warning(
                "%s %s failed [%s]: %s",
                request.method.value,
                request.path,
                exc.kind.value,
                exc,
            )
            return RequestFailure(exc)
        return Ok(payload)

    async def dispatch(
        self,
        path: str,
        parameters: dict[str, Scalar] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
    ) -> Any | None:
        """Return the response payload, or ``None`` for any kind of failure."""
        result = await self.send(path, parameters, method)
        if isinstance(result, Ok):
            return result.value
        return None

    async def _perform(self, request: RequestDescriptor) -> Any:
        session = self.session
        # Read the token once; later changes don't affect this request
        access_token = session.access_token

        if session.is_released:
            raise SessionReleasedError("session was released before the request started")
        if not access_token:
            raise UnauthenticatedError(
                f"attempted {request.method.value} {request.path} before authentication"
            )
        if "" in request.path.split("/")[1:]:
            # An empty id would address the parent collection instead
            raise InvalidRequestError(f"path {request.path!r} has an empty segment")

        url = self.build_url(request, access_token)
        logger.debug("%s %s", request.method.value, self._redact(url, access_token))

        try:
            response = await session.http.request(request.method.value, url)
        except httpx.InvalidURL as exc:
            raise TransportFailure(f"invalid URL for {request.path}: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportFailure(f"{type(exc).__name__}: {exc}") from exc
        except RuntimeError as exc:
            # httpx refuses to send on a closed client
            if session.is_released:
                raise SessionReleasedError("session was released during the request") from exc
            raise

        if session.is_released:
            raise SessionReleasedError("session was released before the response was handled")

        if response.status_code != SUCCESS_CODE:
            logger.warning(
                "%s %s returned HTTP %d (expected 200): %s",
                request.method.value,
                request.path,
                response.status_code,
                response.text[:_BODY_EXCERPT],
            )

        try:
            body = response.json()
        except (ValueError, RecursionError) as exc:
            raise ApplicationFailure(
                f"response body is not decodable JSON: {type(exc).__name__}: {exc}",
                status_code=response.status_code,
            ) from exc

        return unwrap_envelope(body, status_code=response.status_code)

    @staticmethod
    def _redact(url: str, access_token: str) -> str:
        return url.replace(
            f"access_token={quote(access_token, safe='')}", "access_token=<redacted>", 1
        )
