"""Instagram v1 REST API client: one coroutine per endpoint."""

import logging
from typing import Any, TypeVar

import httpx

from instagram_api.clients.base import AbstractSocialClient, parse_media_url
from instagram_api.config import Settings, get_settings
from instagram_api.dispatcher import HTTPMethod, RequestDispatcher
from instagram_api.errors import EntityDecodeFailure
from instagram_api.mappers.collection import decode_many
from instagram_api.results import DecodeError, Ok
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
from instagram_api.session import Session, build_http_client
from instagram_api.utils.params import Scalar, build_parameters, quote_path_segment

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=InstagramModel)

SELF = "self"


def _user_segment(user: str | InstagramUser | None) -> str:
    if user is None:
        return SELF
    if isinstance(user, InstagramUser):
        return quote_path_segment(user.id)
    return quote_path_segment(user)


def _media_segment(media: str | InstagramMedia) -> str:
    if isinstance(media, InstagramMedia):
        return quote_path_segment(media.id)
    return quote_path_segment(media)


def _tag_segment(tag: str | InstagramTag) -> str:
    if isinstance(tag, InstagramTag):
        return quote_path_segment(tag.name)
    return quote_path_segment(tag.lstrip("#"))


def _location_segment(location: str | InstagramLocation) -> str:
    if isinstance(location, InstagramLocation):
        return quote_path_segment(location.id)
    return quote_path_segment(location)


class InstagramAPI(AbstractSocialClient):
    """Client for the Instagram v1 REST API.

    Every endpoint is a coroutine that resolves to the decoded entity (or
    list of entities), or ``None`` when the request fails for any reason.
    Boolean endpoints resolve to ``True``/``False``. Failures are logged,
    never raised. Use ``instagram_api.tasks.submit`` for callback-style
    completion.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        access_token: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.session = Session(
            client_id,
            client_secret,
            access_token,
            base_url=self.settings.normalized_base_url,
            http=build_http_client(self.settings, transport=transport),
        )
        self.dispatcher = RequestDispatcher(self.session)
        self.strict_collections = self.settings.strict_collections

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "InstagramAPI":
        """Build a client from ``INSTAGRAM_*`` environment settings."""
        settings = settings or get_settings()
        return cls(
            settings.client_id,
            settings.client_secret,
            settings.access_token or None,
            settings=settings,
            transport=transport,
        )

    @property
    def access_token(self) -> str | None:
        return self.session.access_token

    @access_token.setter
    def access_token(self, value: str | None) -> None:
        self.session.access_token = value

    async def aclose(self):
        await self.session.aclose()

    # -- Request helpers ---------------------------------------------------

    async def _fetch_one(
        self,
        model: type[ModelT],
        path: str,
        parameters: dict[str, Scalar] | None = None,
        method: HTTPMethod = HTTPMethod.GET,
    ) -> ModelT | None:
        result = await self.dispatcher.send(path, parameters, method)
        if not isinstance(result, Ok):
            return None

        decoded = model.decode(result.value)
        if isinstance(decoded, DecodeError):
            failure = EntityDecodeFailure(f"{model.__name__} from {path}: {decoded.reason}")
            logger.warning("%s [%s]", failure, failure.kind.value)
            return None
        return decoded.value

    async def _fetch_many(
        self,
        model: type[ModelT],
        path: str,
        parameters: dict[str, Scalar] | None = None,
    ) -> list[ModelT] | None:
        result = await self.dispatcher.send(path, parameters, HTTPMethod.GET)
        if not isinstance(result, Ok):
            return None
        return decode_many(result.value, model.try_decode, strict=self.strict_collections)

    async def _perform_action(
        self,
        path: str,
        parameters: dict[str, Scalar] | None = None,
        method: HTTPMethod = HTTPMethod.POST,
    ) -> bool:
        # Success means "a payload came back"; its content is not decoded
        result = await self.dispatcher.send(path, parameters, method)
        return result.ok

    # -- Users -------------------------------------------------------------

    async def get_user(self, user: str | InstagramUser | None = None) -> InstagramUser | None:
        """Get a user's profile; the authenticated user's when ``user`` is omitted."""
        return await self._fetch_one(InstagramUser, f"/users/{_user_segment(user)}")

    async def get_user_recent_media(
        self,
        user: str | InstagramUser | None = None,
        *,
        count: int | None = None,
        min_id: str | None = None,
        max_id: str | None = None,
    ) -> list[InstagramMedia] | None:
        return await self._fetch_many(
            InstagramMedia,
            f"/users/{_user_segment(user)}/media/recent",
            build_parameters(count=count, min_id=min_id, max_id=max_id),
        )

    async def get_user_liked_media(
        self,
        *,
        count: int | None = None,
        max_like_id: str | None = None,
    ) -> list[InstagramMedia] | None:
        """Media recently liked by the authenticated user."""
        return await self._fetch_many(
            InstagramMedia,
            "/users/self/media/liked",
            build_parameters(count=count, max_like_id=max_like_id),
        )

    async def search_users(
        self, query: str, *, count: int | None = None
    ) -> list[InstagramUser] | None:
        return await self._fetch_many(
            InstagramUser,
            "/users/search",
            build_parameters(q=query, count=count),
        )

    async def search_user(self, username: str) -> InstagramUser | None:
        """Find the user whose username is exactly ``username``."""
        users = await self.search_users(username)
        if not users:
            return None
        for user in users:
            if user.username == username:
                return user
        return None

    # -- Relationships -----------------------------------------------------

    async def get_user_follows(self) -> list[InstagramUser] | None:
        return await self._fetch_many(InstagramUser, "/users/self/follows")

    async def get_user_followed_by(self) -> list[InstagramUser] | None:
        return await self._fetch_many(InstagramUser, "/users/self/followed-by")

    async def get_user_requested_by(self) -> list[InstagramUser] | None:
        """Pending follow requests. Always empty for public profiles."""
        return await self._fetch_many(InstagramUser, "/users/self/requested-by")

    async def get_user_relationship(
        self, user: str | InstagramUser
    ) -> InstagramRelationship | None:
        return await self._fetch_one(
            InstagramRelationship, f"/users/{_user_segment(user)}/relationship"
        )

    async def set_user_relationship(
        self,
        user: str | InstagramUser,
        action: str | RelationshipAction | InstagramRelationship,
    ) -> InstagramRelationship | None:
        """Modify the relationship to ``user`` (follow, unfollow, approve, ignore).

        An ``InstagramRelationship`` may be passed as ``action``; its
        ``outgoing_status`` is sent. The response is decoded either way.
        """
        if isinstance(action, InstagramRelationship):
            if not action.outgoing_status:
                logger.warning("Relationship has no outgoing_status to send as action")
                return None
            action = action.outgoing_status
        if isinstance(action, RelationshipAction):
            action = action.value

        return await self._fetch_one(
            InstagramRelationship,
            f"/users/{_user_segment(user)}/relationship",
            build_parameters(action=action),
            HTTPMethod.POST,
        )

    # -- Media -------------------------------------------------------------

    async def get_media(self, media: str | InstagramMedia) -> InstagramMedia | None:
        return await self._fetch_one(InstagramMedia, f"/media/{_media_segment(media)}")

    async def get_media_by_shortcode(self, shortcode: str) -> InstagramMedia | None:
        """Get media by shortcode; a full post URL is accepted too."""
        code = parse_media_url(shortcode)
        if code is None:
            logger.warning("Could not extract a media shortcode from %r", shortcode)
            return None
        return await self._fetch_one(
            InstagramMedia, f"/media/shortcode/{quote_path_segment(code)}"
        )

    async def search_media(
        self,
        lat: float,
        lng: float,
        *,
        distance: int | None = None,
    ) -> list[InstagramMedia] | None:
        """Media taken near a point. Default distance is 1000m, max 5000m."""
        return await self._fetch_many(
            InstagramMedia,
            "/media/search",
            build_parameters(lat=lat, lng=lng, distance=distance),
        )

    # -- Comments ----------------------------------------------------------

    async def get_media_comments(
        self, media: str | InstagramMedia
    ) -> list[InstagramComment] | None:
        return await self._fetch_many(
            InstagramComment, f"/media/{_media_segment(media)}/comments"
        )

    async def add_media_comment(
        self,
        media: str | InstagramMedia,
        comment: str | InstagramComment,
    ) -> bool:
        text = comment.text if isinstance(comment, InstagramComment) else comment
        return await self._perform_action(
            f"/media/{_media_segment(media)}/comments",
            build_parameters(text=text),
            HTTPMethod.POST,
        )

    async def remove_media_comment(
        self,
        media: str | InstagramMedia,
        comment: str | InstagramComment,
    ) -> bool:
        comment_id = comment.id if isinstance(comment, InstagramComment) else comment
        return await self._perform_action(
            f"/media/{_media_segment(media)}/comments/{quote_path_segment(comment_id)}",
            method=HTTPMethod.DELETE,
        )

    # -- Likes -------------------------------------------------------------

    async def get_media_likes(self, media: str | InstagramMedia) -> list[InstagramLike] | None:
        return await self._fetch_many(InstagramLike, f"/media/{_media_segment(media)}/likes")

    async def set_media_like(self, media: str | InstagramMedia) -> bool:
        return await self._perform_action(
            f"/media/{_media_segment(media)}/likes", method=HTTPMethod.POST
        )

    async def remove_media_like(self, media: str | InstagramMedia) -> bool:
        return await self._perform_action(
            f"/media/{_media_segment(media)}/likes", method=HTTPMethod.DELETE
        )

    # -- Tags --------------------------------------------------------------

    async def get_tag(self, tag: str | InstagramTag) -> InstagramTag | None:
        return await self._fetch_one(InstagramTag, f"/tags/{_tag_segment(tag)}")

    async def get_tag_recent_media(
        self,
        tag: str | InstagramTag,
        *,
        count: int | None = None,
        min_tag_id: str | None = None,
        max_tag_id: str | None = None,
    ) -> list[InstagramMedia] | None:
        return await self._fetch_many(
            InstagramMedia,
            f"/tags/{_tag_segment(tag)}/media/recent",
            build_parameters(count=count, min_tag_id=min_tag_id, max_tag_id=max_tag_id),
        )

    async def search_tags(self, query: str) -> list[InstagramTag] | None:
        return await self._fetch_many(
            InstagramTag, "/tags/search", build_parameters(q=query)
        )

    # -- Locations ---------------------------------------------------------

    async def get_location(self, location: str | InstagramLocation) -> InstagramLocation | None:
        return await self._fetch_one(
            InstagramLocation, f"/locations/{_location_segment(location)}"
        )

    async def get_location_recent_media(
        self,
        location: str | InstagramLocation,
        *,
        min_id: str | None = None,
        max_id: str | None = None,
    ) -> list[InstagramMedia] | None:
        return await self._fetch_many(
            InstagramMedia,
            f"/locations/{_location_segment(location)}/media/recent",
            build_parameters(min_id=min_id, max_id=max_id),
        )

    async def search_locations_by_coordinates(
        self,
        lat: float,
        lng: float,
        *,
        distance: int | None = None,
    ) -> list[InstagramLocation] | None:
        """Default distance is 1000m, max 5000m."""
        return await self._fetch_many(
            InstagramLocation,
            "/locations/search",
            build_parameters(lat=lat, lng=lng, distance=distance),
        )

    async def search_locations_by_facebook_places_id(
        self, facebook_places_id: str
    ) -> list[InstagramLocation] | None:
        return await self._search_locations(facebook_places_id=facebook_places_id)

    async def search_locations_by_foursquare_id(
        self, foursquare_id: str
    ) -> list[InstagramLocation] | None:
        return await self._search_locations(foursquare_id=foursquare_id)

    async def search_locations_by_foursquare_v2_id(
        self, foursquare_v2_id: str
    ) -> list[InstagramLocation] | None:
        return await self._search_locations(foursquare_v2_id=foursquare_v2_id)

    async def _search_locations(self, **criteria: Any) -> list[InstagramLocation] | None:
        return await self._fetch_many(
            InstagramLocation, "/locations/search", build_parameters(**criteria)
        )
