"""Runtime settings for interactor, read from the environment.

Message formatting and logging are configured independently: a bad
``INTERACTOR_LOG_LEVEL`` only fails :func:`~interactor.config.configure_logging`,
never the error messages of a call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from interactor.errors import ConfigurationError

from .env import optional_env_var

LOG_LEVEL_VAR: Final[str] = "INTERACTOR_LOG_LEVEL"
FULL_MESSAGE_FORMAT_VAR: Final[str] = "INTERACTOR_FULL_MESSAGE_FORMAT"

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING
DEFAULT_FULL_MESSAGE_FORMAT: Final[str] = "{attribute} {message}"


@dataclass(frozen=True, slots=True)
class InteractorSettings:
    """Holds process-wide message settings."""

    full_message_format: str = DEFAULT_FULL_MESSAGE_FORMAT

    def __post_init__(self) -> None:
        if "{message}" not in self.full_message_format:
            raise ConfigurationError(
                f"{FULL_MESSAGE_FORMAT_VAR} must contain '{{message}}': "
                f"{self.full_message_format!r}"
            )

    @classmethod
    def from_environment(cls) -> InteractorSettings:
        message_format = optional_env_var(FULL_MESSAGE_FORMAT_VAR)
        return cls(full_message_format=message_format or DEFAULT_FULL_MESSAGE_FORMAT)

    def format_full_message(self, attribute: str, message: str) -> str:
        return self.full_message_format.format(attribute=attribute, message=message)


def get_log_level() -> int:
    """Level from ``INTERACTOR_LOG_LEVEL``, WARNING when unset."""

    value = optional_env_var(LOG_LEVEL_VAR)
    return DEFAULT_LOG_LEVEL if value is None else parse_log_level(value)


def parse_log_level(value: str) -> int:
    """Accept either a level name (``"debug"``) or a number (``"10"``)."""

    stripped = value.strip()
    if stripped.isdigit():
        return int(stripped)
    level = logging.getLevelNamesMapping().get(stripped.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level for {LOG_LEVEL_VAR}: {value!r}")
    return level


_settings: InteractorSettings | None = None


def get_settings() -> InteractorSettings:
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = InteractorSettings.from_environment()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""

    global _settings  # noqa: PLW0603
    _settings = None
