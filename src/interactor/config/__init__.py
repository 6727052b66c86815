"""Configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .logging import configure_logging
from .settings import (
    DEFAULT_FULL_MESSAGE_FORMAT,
    DEFAULT_LOG_LEVEL,
    InteractorSettings,
    get_log_level,
    get_settings,
    parse_log_level,
    reset_settings,
)

__all__ = [
    "DEFAULT_FULL_MESSAGE_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "InteractorSettings",
    "configure_logging",
    "get_log_level",
    "get_settings",
    "optional_env_var",
    "parse_log_level",
    "reset_settings",
]
