"""
Logging setup for the A-Safe backend.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where those records go. Call ``configure_logging()`` once at
process startup (the API lifespan does this).
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"

_configured = False


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Unknown or empty values fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None, force: bool = False) -> logging.Logger:
    """
    Install a single stream handler on the root logger.

    Args:
        level: Log level name; defaults to INFO
        force: Reconfigure even if logging was already set up

    Returns:
        The application logger
    """
    global _configured

    if _configured and not force:
        return logging.getLogger("asafe")

    logging.basicConfig(
        level=_parse_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )
    # httpx logs every request at INFO, which duplicates our own relay logs
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True
    return logging.getLogger("asafe")
