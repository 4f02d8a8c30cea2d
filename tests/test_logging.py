# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc

import logging
import logging.config

import pytest

# noinspection PyProtectedMember
from waldiez_hashing._logging import (
    LogLevel,
    apply_log_level,
    get_log_level,
    get_logging_config,
)
from waldiez_hashing.config import ENV_PREFIX


def test_get_logging_config() -> None:
    """Test the get_logging_config function."""
    config = get_logging_config("WARNING")

    assert config["version"] == 1
    assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
    package_logger = config["loggers"]["waldiez_hashing"]
    assert package_logger["level"] == "WARNING"
    assert package_logger["handlers"] == ["default"]


def test_logging_config_is_usable() -> None:
    """Test the config dict is accepted by dictConfig."""
    logger = logging.getLogger("waldiez_hashing")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    try:
        logging.config.dictConfig(get_logging_config("DEBUG"))
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers = handlers
        logger.propagate = propagate
        logger.setLevel(level)


@pytest.mark.parametrize("level", [level.value for level in LogLevel])
def test_get_log_level_from_env(
    monkeypatch: pytest.MonkeyPatch, level: str
) -> None:
    """Test reading the log level from the environment."""
    monkeypatch.setenv(f"{ENV_PREFIX}LOG_LEVEL", level.lower())
    assert get_log_level() == level


def test_get_log_level_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the default and invalid log levels."""
    monkeypatch.delenv(f"{ENV_PREFIX}LOG_LEVEL", raising=False)
    assert get_log_level() == "INFO"
    monkeypatch.setenv(f"{ENV_PREFIX}LOG_LEVEL", "LOUD")
    assert get_log_level() == "INFO"


def test_apply_log_level_from_env(clean_env: pytest.MonkeyPatch) -> None:
    """Test the package logger follows the configured level."""
    clean_env.setenv(f"{ENV_PREFIX}LOG_LEVEL", "warning")

    assert apply_log_level() == "WARNING"
    assert logging.getLogger("waldiez_hashing").level == logging.WARNING
    assert (
        logging.getLogger("waldiez_hashing.context").getEffectiveLevel()
        == logging.WARNING
    )


def test_apply_log_level_explicit(clean_env: pytest.MonkeyPatch) -> None:
    """Test an explicit level wins and an invalid one is ignored."""
    clean_env.setenv(f"{ENV_PREFIX}LOG_LEVEL", "ERROR")

    assert apply_log_level("debug") == "DEBUG"
    assert logging.getLogger("waldiez_hashing").level == logging.DEBUG
    assert apply_log_level("LOUD") == "ERROR"


def test_logging_helpers_exported() -> None:
    """Test the logging helpers are part of the package API."""
    # pylint: disable=import-outside-toplevel
    import waldiez_hashing

    assert waldiez_hashing.apply_log_level is apply_log_level
    assert waldiez_hashing.get_log_level is get_log_level
    assert waldiez_hashing.get_logging_config is get_logging_config
