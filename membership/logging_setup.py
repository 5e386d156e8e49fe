"""
Logging bootstrap.

Modules log through `logging.getLogger(__name__)`; the application calls
`configure_logging()` once at startup to pick the level from settings.
"""

from __future__ import annotations

import logging

from membership.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger (level defaults to LOG_LEVEL)."""
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("membership").setLevel(level)
