from pydantic import Field

from instagram_api.schemas.base import InstagramModel


class UserCounts(InstagramModel):
    media: int | None = None
    follows: int | None = None
    followed_by: int | None = None


class InstagramUser(InstagramModel):
    id: str
    username: str
    full_name: str | None = None
    profile_picture: str | None = None
    bio: str | None = None
    website: str | None = None
    is_business: bool | None = None
    counts: UserCounts | None = Field(default=None)

    @property
    def profile_url(self) -> str:
        return f"https://www.instagram.com/{self.username}/"
