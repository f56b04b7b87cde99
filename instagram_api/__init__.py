"""Async client for the Instagram v1 REST API."""

from instagram_api.clients.instagram import InstagramAPI
from instagram_api.config import Settings, get_settings
from instagram_api.dispatcher import HTTPMethod, RequestDescriptor, RequestDispatcher
from instagram_api.errors import (
    ApplicationFailure,
    ElementDecodeFailure,
    EntityDecodeFailure,
    FailureKind,
    InstagramAPIError,
    InvalidRequestError,
    SessionReleasedError,
    TransportFailure,
    UnauthenticatedError,
)
from instagram_api.logging_config import configure_logging
from instagram_api.mappers.collection import decode_many
from instagram_api.results import DecodeError, Ok, RequestFailure
from instagram_api.schemas import (
    InstagramComment,
    InstagramLike,
    InstagramLocation,
    InstagramMedia,
    InstagramModel,
    InstagramRelationship,
    InstagramTag,
    InstagramUser,
    RelationshipAction,
)
from instagram_api.session import Session
from instagram_api.tasks import submit
from instagram_api.utils.params import build_parameters, encode_parameters

__version__ = "1.0.0"

__all__ = [
    "ApplicationFailure",
    "DecodeError",
    "ElementDecodeFailure",
    "EntityDecodeFailure",
    "FailureKind",
    "HTTPMethod",
    "InstagramAPI",
    "InstagramAPIError",
    "InstagramComment",
    "InstagramLike",
    "InstagramLocation",
    "InstagramMedia",
    "InstagramModel",
    "InstagramRelationship",
    "InstagramTag",
    "InvalidRequestError",
    "InstagramUser",
    "Ok",
    "RelationshipAction",
    "RequestDescriptor",
    "RequestDispatcher",
    "RequestFailure",
    "Session",
    "Settings",
    "SessionReleasedError",
    "TransportFailure",
    "UnauthenticatedError",
    "build_parameters",
    "configure_logging",
    "decode_many",
    "encode_parameters",
    "get_settings",
    "submit",
]
