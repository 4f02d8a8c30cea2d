# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hashing configuration.

Environment variables (with prefix WALDIEZ_HASHING_)
----------------------------------------------------
DEFAULTS (str) # default: 20160922
SCHEMES (str, comma separated scheme names) # default: "" (use DEFAULTS)
LOG_LEVEL (str) # default: INFO

Nothing is read at import time. ``load_env_file`` loads the nearest
``.env`` file, searching upwards from the current working directory, and
``use_defaults_from_env`` calls it before reading the variables.
"""
# DEFAULTS=20180601
# SCHEMES=argon2,bcrypt-sha256,bcrypt
# LOG_LEVEL=INFO

import os
from typing import Callable, List, Optional, TypeVar

from dotenv import find_dotenv, load_dotenv

from .defaults import DEFAULTS_20160922

ENV_PREFIX = "WALDIEZ_HASHING_"
DEFAULT_EPOCH = DEFAULTS_20160922
T = TypeVar("T")


def load_env_file() -> bool:
    """Load the nearest ``.env`` file without overriding the environment.

    Returns
    -------
    bool
        True if a file was found and it set at least one variable.
    """
    path = find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(path, override=False)


def get_value(env_key: str, cast: Callable[[str], T], fallback: T) -> T:
    """Get a value from the environment, with type casting.

    Parameters
    ----------
    env_key : str
        The environment variable key (without the prefix)
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value

    Returns
    -------
    T
        The value
    """
    value_str: Optional[str] = os.environ.get(f"{ENV_PREFIX}{env_key}")
    if value_str is None or not value_str.strip():
        return fallback
    try:
        return cast(value_str.strip())
    except (TypeError, ValueError):
        return fallback


def split_names(value: str) -> List[str]:
    """Split a comma separated list of scheme names.

    Parameters
    ----------
    value : str
        The value to split

    Returns
    -------
    List[str]
        The non empty names
    """
    return [name.strip() for name in value.split(",") if name.strip()]


def get_defaults_identifier() -> str:
    """Get the configured defaults epoch identifier.

    Returns
    -------
    str
        The epoch identifier
    """
    return get_value("DEFAULTS", str, DEFAULT_EPOCH)


def get_scheme_names() -> List[str]:
    """Get the configured scheme names.

    Returns
    -------
    List[str]
        The scheme names, empty if not configured
    """
    return get_value("SCHEMES", split_names, [])


__all__ = [
    "ENV_PREFIX",
    "load_env_file",
    "DEFAULT_EPOCH",
    "get_value",
    "split_names",
    "get_defaults_identifier",
    "get_scheme_names",
]
