from instagram_api.schemas.base import InstagramModel
from instagram_api.schemas.comment import InstagramComment
from instagram_api.schemas.like import InstagramLike
from instagram_api.schemas.location import InstagramLocation
from instagram_api.schemas.media import (
    InstagramMedia,
    MediaCount,
    MediaImages,
    MediaResource,
    MediaVideos,
)
from instagram_api.schemas.relationship import InstagramRelationship, RelationshipAction
from instagram_api.schemas.tag import InstagramTag
from instagram_api.schemas.user import InstagramUser, UserCounts

__all__ = [
    "InstagramComment",
    "InstagramLike",
    "InstagramLocation",
    "InstagramMedia",
    "InstagramModel",
    "InstagramRelationship",
    "InstagramTag",
    "InstagramUser",
    "MediaCount",
    "MediaImages",
    "MediaResource",
    "MediaVideos",
    "RelationshipAction",
    "UserCounts",
]
