from __future__ import annotations

import logging

import pytest

from partial_updater.config import (
    LOG_LEVEL_ENV_VAR,
    ConfigurationError,
    get_log_level,
    optional_env_var,
    parse_log_level,
)


def test_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    assert get_log_level() == logging.INFO


def test_log_level_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, " warning ")

    assert get_log_level() == logging.WARNING


def test_unknown_log_level_raises() -> None:
    with pytest.raises(ConfigurationError, match="Unknown log level: loud"):
        parse_log_level("loud")


def test_optional_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR", "fallback") == "fallback"
