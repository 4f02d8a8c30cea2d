# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501
"""Argon2 password hasher (argon2-cffi)."""

import re
from dataclasses import dataclass, field
from typing import Optional

from argon2 import Parameters, PasswordHasher, Type, extract_parameters
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from .exceptions import HashFormatError, InternalHashError

_ARGON2_RE = re.compile(
    r"\$argon2(?:id|i|d)\$(?:v=(?:16|19)\$)?"
    r"m=[1-9][0-9]{0,9},t=[1-9][0-9]{0,9},p=[1-9][0-9]{0,7}"
    r"\$[A-Za-z0-9+/]+\$[A-Za-z0-9+/]+"
)
# limits of the reference implementation (argon2.h)
_MAX_COST = 2**32 - 1
_MAX_PARALLELISM = 2**24 - 1
_MIN_SALT_LEN = 8
_MIN_HASH_LEN = 4


def _parse(stored: str) -> Optional[Parameters]:
    if not isinstance(stored, str) or not _ARGON2_RE.fullmatch(stored):
        return None
    try:
        params = extract_parameters(stored)
    except InvalidHashError:
        return None
    if (
        params.time_cost > _MAX_COST
        or params.memory_cost > _MAX_COST
        or params.parallelism > _MAX_PARALLELISM
        or params.memory_cost < 8 * params.parallelism
        or params.salt_len < _MIN_SALT_LEN
        or params.hash_len < _MIN_HASH_LEN
    ):
        return None
    return params


@dataclass(frozen=True)
class Argon2Hasher:
    """Argon2 hasher"""

    _ph: PasswordHasher = field(init=False, repr=False, compare=False)

    name: str = "argon2"
    time_cost: int = 2
    memory_cost: int = 65536  # 64 MiB
    parallelism: int = 1
    hash_len: int = 32
    salt_len: int = 16
    type: Type = Type.ID

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_ph",
            PasswordHasher(
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.hash_len,
                salt_len=self.salt_len,
                type=self.type,
            ),
        )

    def identify(self, stored: str) -> bool:
        """Check whether the hash is an argon2 hash.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True for argon2i, argon2d and argon2id hashes.
        """
        return _parse(stored) is not None

    def hash(self, plain: str) -> str:
        """Hash password using argon2.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The hashed secret.

        Raises
        ------
        InternalHashError
            If argon2 fails to hash.
        """
        try:
            return self._ph.hash(plain)
        except HashingError as error:
            raise InternalHashError(self.name) from error

    def verify(self, plain: str, stored: str) -> bool:
        """Verify password against argon2 hash.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.

        Raises
        ------
        HashFormatError
            If the stored value is not a valid argon2 hash.
        InternalHashError
            If argon2 fails for any other reason.
        """
        if not self.identify(stored):
            raise HashFormatError(self.name)
        try:
            return self._ph.verify(stored, plain)
        except VerifyMismatchError:
            return False
        except InvalidHashError as error:
            raise HashFormatError(self.name, str(error)) from error
        except VerificationError as error:
            # any failure other than a mismatch or a malformed hash
            raise InternalHashError(self.name) from error

    def needs_update(self, stored: str) -> bool:
        """Check if the stored hash uses weaker parameters.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        params = _parse(stored)
        if params is None:
            return True
        return (
            params.type != self.type
            or params.time_cost < self.time_cost
            or params.memory_cost < self.memory_cost
            or params.parallelism < self.parallelism
            or params.hash_len < self.hash_len
            or params.salt_len < self.salt_len
        )


__all__ = ["Argon2Hasher"]
