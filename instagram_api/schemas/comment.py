from datetime import datetime, timezone

from pydantic import Field

from instagram_api.schemas.base import InstagramModel
from instagram_api.schemas.user import InstagramUser


def parse_epoch(value: str | None) -> datetime | None:
    """Instagram sends ``created_time`` as a string of Unix seconds."""
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


class InstagramComment(InstagramModel):
    id: str
    text: str
    created_time: str | None = None
    from_: InstagramUser | None = Field(default=None, alias="from")

    @property
    def created_at(self) -> datetime | None:
        return parse_epoch(self.created_time)
