from instagram_api.schemas.base import InstagramModel


class InstagramLike(InstagramModel):
    """A user entry from ``/media/{id}/likes``."""

    username: str
    id: str | None = None
    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_picture: str | None = None
    type: str | None = None
