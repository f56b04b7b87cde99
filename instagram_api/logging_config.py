"""Default logging setup for scripts that use the client."""

import logging

from instagram_api.config import get_settings

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic stderr handler for the ``instagram_api`` loggers.

    Libraries should not configure logging on import, so applications call
    this explicitly (or configure ``logging`` themselves).
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("instagram_api").setLevel(level)
    # httpx logs every request URL at INFO, which would leak the access token
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
