from instagram_api.schemas.base import InstagramModel


class InstagramTag(InstagramModel):
    name: str
    media_count: int | None = None
