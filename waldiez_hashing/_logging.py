# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Logging configuration module.

The package only emits records and sets the level of its own logger
(``apply_log_level``, called by ``use_defaults_from_env``). Applications
that want the package's log format can pass ``get_logging_config()`` to
``logging.config.dictConfig``.
"""

import logging
import os
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, get_args

from .config import ENV_PREFIX

PACKAGE_LOGGER = "waldiez_hashing"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


# fmt: off
def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)-9s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s",  # pylint: disable=line-too-long # noqa: E501
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
        },
    }
# fmt: on


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the configured log level.

    Returns
    -------
    LogLevel
        The log level, INFO if unset or invalid
    """
    possible_log_levels: Tuple[LogLevelType, ...] = get_args(LogLevelType)
    for_env = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
    if for_env in possible_log_levels:
        return for_env  # type: ignore[return-value]
    return "INFO"


def apply_log_level(log_level: Optional[str] = None) -> LogLevelType:
    """Set the level of the package logger.

    Parameters
    ----------
    log_level : Optional[str]
        The level to use, the configured one if not given.

    Returns
    -------
    LogLevelType
        The level that was applied.
    """
    level: LogLevelType = get_log_level()
    if log_level is not None and log_level.upper() in get_args(LogLevelType):
        level = log_level.upper()  # type: ignore[assignment]
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level
