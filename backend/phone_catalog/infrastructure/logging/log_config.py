"""Logging setup for the phone catalog service.

The root logger takes ``LOG_LEVEL``; the Mongo driver, the HTTP client
libraries and uvicorn each get their own level so driver chatter can be
turned up while debugging a query without flooding the request log.
"""

import logging
import sys

from phone_catalog.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_mongo": [
        "pymongo",
        "pymongo.command",
        "pymongo.connection",
        "pymongo.serverSelection",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}


def setup_logging() -> None:
    """Apply the configured levels. Runs once from the app lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; scripts and tests may not have any
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s mongo=%s http=%s uvicorn=%s",
        settings.log_level,
        settings.log_level_mongo,
        settings.log_level_http,
        settings.log_level_uvicorn,
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
