from __future__ import annotations

"""Public façade for lazyholder logging helpers.

The logging package wraps Loguru with package-specific defaults and a
formatter that renders holder lifecycle events.
"""

from .static import (
    DEFAULT_STATUS_COLORS,
    EVENT_COLORS,
    LOGLEVEL_MAPPING,
    REVERSE_LOGLEVEL_MAPPING,
)
from .main import (
    Logger,
    create_default_logger,
    change_logger_level,
    get_logger,
    default_logger,
    logger,
)

__all__ = [
    "DEFAULT_STATUS_COLORS",
    "EVENT_COLORS",
    "LOGLEVEL_MAPPING",
    "REVERSE_LOGLEVEL_MAPPING",
    "Logger",
    "create_default_logger",
    "change_logger_level",
    "get_logger",
    "default_logger",
    "logger",
]
