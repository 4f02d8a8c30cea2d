# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Registry of the built-in password hashing schemes.

The registry is fixed at import time. Scheme names are part of the
configuration contract: callers may persist them, so they never change.
"""

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from ._argon_hasher import Argon2Hasher
from ._bcrypt_hasher import BcryptHasher
from ._bcrypt_sha256_hasher import BcryptSHA256Hasher
from ._pbkdf2_hasher import PBKDF2_SHA1, PBKDF2_SHA256, PBKDF2_SHA512
from ._scrypt_hasher import ScryptHasher
from ._sha2_crypt_hasher import SHA256_CRYPT, SHA512_CRYPT
from .exceptions import UnknownSchemeError
from .protocol import Scheme

LOG = logging.getLogger(__name__)

ARGON2: Scheme = Argon2Hasher()
SCRYPT_SHA256: Scheme = ScryptHasher()
BCRYPT: Scheme = BcryptHasher()
BCRYPT_SHA256: Scheme = BcryptSHA256Hasher()

SCHEMES: Mapping[str, Scheme] = MappingProxyType(
    {
        scheme.name: scheme
        for scheme in (
            ARGON2,
            SCRYPT_SHA256,
            SHA256_CRYPT,
            SHA512_CRYPT,
            BCRYPT,
            BCRYPT_SHA256,
            PBKDF2_SHA256,
            PBKDF2_SHA512,
            PBKDF2_SHA1,
        )
    }
)


def scheme_names() -> List[str]:
    """Get the names of all registered schemes.

    Returns
    -------
    List[str]
        The scheme names.
    """
    return list(SCHEMES)


def lookup(name: str) -> Optional[Scheme]:
    """Get a scheme by its exact name.

    Parameters
    ----------
    name : str
        The scheme name.

    Returns
    -------
    Optional[Scheme]
        The scheme, or None if there is no scheme with this name.
    """
    return SCHEMES.get(name)


def lookup_all(names: Iterable[str]) -> List[Scheme]:
    """Resolve scheme names, keeping their order.

    Parameters
    ----------
    names : Iterable[str]
        The scheme names.

    Returns
    -------
    List[Scheme]
        The schemes, in the same order as the names.

    Raises
    ------
    UnknownSchemeError
        At the first name that is not registered.
    """
    result: List[Scheme] = []
    for name in names:
        scheme = SCHEMES.get(name)
        if scheme is None:
            LOG.debug("Unknown scheme name: %r", name)
            raise UnknownSchemeError(name)
        result.append(scheme)
    return result


__all__ = [
    "ARGON2",
    "BCRYPT",
    "BCRYPT_SHA256",
    "SCRYPT_SHA256",
    "SCHEMES",
    "lookup",
    "lookup_all",
    "scheme_names",
]
