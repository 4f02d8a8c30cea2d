# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hashing with versioned defaults and opportunistic upgrades."""

from ._global import (
    get_default_context,
    hash_password,
    needs_update,
    use_default_schemes,
    use_defaults,
    use_defaults_from_env,
    verify_and_update,
    verify_password,
)
from ._logging import (
    LogLevel,
    apply_log_level,
    get_log_level,
    get_logging_config,
)
from .context import PasswordContext
from .defaults import (
    DEFAULTS_20160922,
    DEFAULTS_20180601,
    DEFAULTS_LATEST,
    Epoch,
    resolve_epoch,
    resolve_names,
)
from .exceptions import (
    EmptySchemesError,
    HashFormatError,
    HashingError,
    InternalHashError,
    InvalidEpochError,
    UnknownSchemeError,
    UnrecognizedHashError,
)
from .protocol import Scheme
from .registry import SCHEMES, lookup, lookup_all, scheme_names

__version__ = "0.1.0"

__all__ = [
    "PasswordContext",
    "Scheme",
    "Epoch",
    "SCHEMES",
    "DEFAULTS_20160922",
    "DEFAULTS_20180601",
    "DEFAULTS_LATEST",
    "lookup",
    "lookup_all",
    "scheme_names",
    "resolve_epoch",
    "resolve_names",
    "get_default_context",
    "use_defaults",
    "use_default_schemes",
    "use_defaults_from_env",
    "hash_password",
    "verify_password",
    "needs_update",
    "verify_and_update",
    "LogLevel",
    "apply_log_level",
    "get_log_level",
    "get_logging_config",
    "HashingError",
    "UnknownSchemeError",
    "InvalidEpochError",
    "EmptySchemesError",
    "UnrecognizedHashError",
    "HashFormatError",
    "InternalHashError",
]
