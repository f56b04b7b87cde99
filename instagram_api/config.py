from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INSTAGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Instagram REST API
    base_url: str = "https://api.instagram.com/v1"

    # App credentials, only consumed by the external OAuth flow
    client_id: str = ""
    client_secret: str = ""

    # Pre-obtained user token (optional, can be set on the client later)
    access_token: str = ""

    # Transport
    http_timeout_seconds: float = 30.0
    http_connect_timeout_seconds: float = 10.0
    user_agent: str = "instagram-api/1.0"

    # Decoding: fail a whole collection when one element does not decode
    strict_collections: bool = False

    # Logging
    log_level: str = "INFO"

    @property
    def normalized_base_url(self) -> str:
        """Base URL without a trailing slash so paths can be appended as-is."""
        return self.base_url.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
