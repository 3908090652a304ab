"""
Logging setup for the Users API entry point
"""

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = logging.INFO


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its numeric level, falling back to INFO"""
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging(level_name: Optional[str] = None) -> int:
    """Configure root logging once; call before importing the application"""
    if level_name is None:
        level_name = os.getenv("LOG_LEVEL", "INFO")
    level = resolve_log_level(level_name)
    logging.basicConfig(level=level)
    if level_name and not isinstance(logging.getLevelName(level_name.strip().upper()), int):
        logging.getLogger(__name__).warning(
            f"Unknown LOG_LEVEL '{level_name}' - using {logging.getLevelName(level)}"
        )
    return level
