from instagram_api.clients.base import AbstractSocialClient, parse_media_url
from instagram_api.clients.instagram import InstagramAPI

__all__ = ["AbstractSocialClient", "InstagramAPI", "parse_media_url"]
