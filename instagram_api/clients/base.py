import re
from abc import ABC, abstractmethod

_SHORTCODE_RE = re.compile(r"instagr(?:\.am|am\.com)/(?:[^/?#]+/)?(?:p|reel|reels|tv)/([A-Za-z0-9_-]+)")


def parse_media_url(url: str) -> str | None:
    """
    Extract the media shortcode from an Instagram post URL.

    Supported URL formats:
    - https://www.instagram.com/p/{shortcode}/
    - https://instagram.com/{username}/p/{shortcode}
    - https://www.instagram.com/reel/{shortcode}/
    - https://www.instagram.com/tv/{shortcode}
    - https://instagr.am/p/{shortcode}
    - Bare shortcode (returned unchanged)
    """
    value = url.strip()
    if not value:
        return None

    match = _SHORTCODE_RE.search(value)
    if match:
        return match.group(1)

    # Direct shortcode; URLs never match since ":" and "/" are outside the alphabet
    if re.fullmatch(r"[A-Za-z0-9_-]+", value):
        return value
    return None


class AbstractSocialClient(ABC):
    """Base class for social media platform API clients."""

    @abstractmethod
    async def get_user(self, user=None):
        """Fetch a user profile, or the authenticated user's when no user is given."""

    @abstractmethod
    async def get_media(self, media):
        """Fetch one media item by id."""

    @abstractmethod
    async def get_media_comments(self, media):
        """Fetch the comments on a media item."""

    @abstractmethod
    async def aclose(self):
        """Release the underlying HTTP resources."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
