"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    get_log_level,
    parse_log_level,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV_VAR",
    "ConfigurationError",
    "configure_logging",
    "get_log_level",
    "optional_env_var",
    "parse_log_level",
]
