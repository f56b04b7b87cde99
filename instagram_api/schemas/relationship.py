from enum import Enum

from instagram_api.schemas.base import InstagramModel


class RelationshipAction(str, Enum):
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    APPROVE = "approve"
    IGNORE = "ignore"


class InstagramRelationship(InstagramModel):
    # outgoing: follows | requested | none
    outgoing_status: str | None = None
    # incoming: followed_by | requested_by | blocked_by_you | none
    incoming_status: str | None = None
    target_user_is_private: bool | None = None

    @property
    def is_following(self) -> bool:
        return self.outgoing_status == "follows"

    @property
    def is_followed_by(self) -> bool:
        return self.incoming_status == "followed_by"
