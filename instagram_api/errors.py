"""
Failure taxonomy for the Instagram client.

These exceptions are raised inside the request pipeline and caught at the
public method boundary, where they are logged and collapsed into ``None``
(or ``False`` for boolean endpoints).
"""

from enum import Enum


class FailureKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    SESSION_RELEASED = "session_released"
    INVALID_REQUEST = "invalid_request"
    TRANSPORT = "transport"
    APPLICATION = "application"
    ENTITY_DECODE = "entity_decode"
    ELEMENT_DECODE = "element_decode"


class InstagramAPIError(Exception):
    """Base exception for all client errors."""

    kind: FailureKind = FailureKind.APPLICATION


class UnauthenticatedError(InstagramAPIError):
    """Raised when a request is attempted without an access token."""

    kind = FailureKind.UNAUTHENTICATED


class SessionReleasedError(InstagramAPIError):
    """Raised when the owning session was closed before the request finished."""

    kind = FailureKind.SESSION_RELEASED


class InvalidRequestError(InstagramAPIError):
    """Raised when a request path has an empty segment (e.g. an empty id)."""

    kind = FailureKind.INVALID_REQUEST


class TransportFailure(InstagramAPIError):
    """Connection error, timeout or malformed URL. No response body exists."""

    kind = FailureKind.TRANSPORT


class ApplicationFailure(InstagramAPIError):
    """The response body is not a successful ``{meta, data}`` envelope."""

    kind = FailureKind.APPLICATION

    def __init__(
        self,
        message: str,
        *,
        meta_code: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.meta_code = meta_code
        self.status_code = status_code


class EntityDecodeFailure(InstagramAPIError):
    """A single-object payload could not be decoded into its entity type."""

    kind = FailureKind.ENTITY_DECODE


class ElementDecodeFailure(InstagramAPIError):
    """One element of a collection payload could not be decoded."""

    kind = FailureKind.ELEMENT_DECODE

    def __init__(self, message: str, *, index: int) -> None:
        super().__init__(message)
        self.index = index
