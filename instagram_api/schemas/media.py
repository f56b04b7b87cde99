from datetime import datetime

from pydantic import Field

from instagram_api.schemas.base import InstagramModel
from instagram_api.schemas.comment import InstagramComment, parse_epoch
from instagram_api.schemas.location import InstagramLocation
from instagram_api.schemas.user import InstagramUser


class MediaResource(InstagramModel):
    url: str
    width: int | None = None
    height: int | None = None


class MediaImages(InstagramModel):
    thumbnail: MediaResource | None = None
    low_resolution: MediaResource | None = None
    standard_resolution: MediaResource | None = None


class MediaVideos(InstagramModel):
    low_bandwidth: MediaResource | None = None
    low_resolution: MediaResource | None = None
    standard_resolution: MediaResource | None = None


class MediaCount(InstagramModel):
    count: int = 0


class InstagramMedia(InstagramModel):
    id: str
    type: str | None = None
    link: str | None = None
    filter: str | None = None
    created_time: str | None = None
    user: InstagramUser | None = None
    caption: InstagramComment | None = None
    images: MediaImages | None = None
    videos: MediaVideos | None = None
    likes: MediaCount | None = None
    comments: MediaCount | None = None
    tags: list[str] = Field(default_factory=list)
    location: InstagramLocation | None = None
    user_has_liked: bool | None = None

    @property
    def created_at(self) -> datetime | None:
        return parse_epoch(self.created_time)

    @property
    def is_video(self) -> bool:
        return self.type == "video"

    @property
    def caption_text(self) -> str | None:
        return self.caption.text if self.caption else None

    @property
    def shortcode(self) -> str | None:
        """Shortcode taken from ``link`` (``https://instagram.com/p/<code>/``)."""
        from instagram_api.clients.base import parse_media_url

        if not self.link:
            return None
        return parse_media_url(self.link)
