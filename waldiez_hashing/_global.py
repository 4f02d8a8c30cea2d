# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Process-wide password context.

Kept for applications that want module-level helpers. It starts with the
oldest defaults (20160922) and only changes through ``use_defaults``,
``use_default_schemes`` or ``use_defaults_from_env``.

Library code should create its own ``PasswordContext`` instead.
"""

import logging
from typing import Iterable, Optional, Tuple

from ._logging import apply_log_level
from .config import get_defaults_identifier, get_scheme_names, load_env_file
from .context import PasswordContext
from .defaults import DEFAULTS_20160922, resolve_epoch, resolve_names

LOG = logging.getLogger(__name__)

_default_context = PasswordContext(resolve_epoch(DEFAULTS_20160922))


def get_default_context() -> PasswordContext:
    """Get the process-wide context.

    Returns
    -------
    PasswordContext
        The process-wide context.
    """
    return _default_context


def use_defaults(identifier: str) -> None:
    """Switch the process-wide context to a versioned defaults epoch.

    Parameters
    ----------
    identifier : str
        A YYYYMMDD date, or "latest".
    """
    _default_context.replace_schemes(resolve_epoch(identifier))
    LOG.info("Using password hashing defaults %s", identifier)


def use_default_schemes(names: Iterable[str]) -> None:
    """Switch the process-wide context to the named schemes.

    Parameters
    ----------
    names : Iterable[str]
        The scheme names, most preferred first.
    """
    _default_context.replace_schemes(resolve_names(names))


def use_defaults_from_env() -> None:
    """Apply the configured schemes or defaults to the process-wide context.

    Loads the nearest ``.env`` file first (existing variables win) and
    sets the package log level from ``WALDIEZ_HASHING_LOG_LEVEL``.
    ``WALDIEZ_HASHING_SCHEMES`` takes precedence over
    ``WALDIEZ_HASHING_DEFAULTS``.
    """
    if load_env_file():
        LOG.debug("Loaded .env file")
    apply_log_level()
    names = get_scheme_names()
    if names:
        use_default_schemes(names)
        return
    use_defaults(get_defaults_identifier())


def hash_password(plain: str) -> str:
    """Hash a password with the process-wide context.

    Parameters
    ----------
    plain : str
        The plain secret to hash.

    Returns
    -------
    str
        The hashed secret.
    """
    return _default_context.hash(plain)


def verify_password(plain: str, stored: str) -> bool:
    """Verify a password with the process-wide context.

    Parameters
    ----------
    plain : str
        The plain secret to check.
    stored : str
        The stored hashed secret.

    Returns
    -------
    bool
        True if the password matches, False otherwise.
    """
    return _default_context.verify(plain, stored)


def needs_update(stored: str) -> bool:
    """Check a stored hash against the process-wide context.

    Parameters
    ----------
    stored : str
        The stored hash

    Returns
    -------
    bool
        True if the hash should be replaced.
    """
    return _default_context.needs_update(stored)


def verify_and_update(plain: str, stored: str) -> Tuple[bool, Optional[str]]:
    """Verify and upgrade a hash with the process-wide context.

    Parameters
    ----------
    plain : str
        The plain secret to check.
    stored : str
        The stored hashed secret.

    Returns
    -------
    Tuple[bool, Optional[str]]
        Whether the password matches, and the replacement hash if any.
    """
    return _default_context.verify_and_update(plain, stored)


__all__ = [
    "get_default_context",
    "use_defaults",
    "use_default_schemes",
    "use_defaults_from_env",
    "hash_password",
    "verify_password",
    "needs_update",
    "verify_and_update",
]
