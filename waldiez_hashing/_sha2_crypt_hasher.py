# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""SHA256-crypt and SHA512-crypt password hashers (passlib).

Hashes without a ``rounds=`` field use the implicit 5000 rounds.
passlib rejects passwords longer than 4096 bytes (``PasswordSizeError``)
or containing a NUL byte (``PasswordValueError``). Both are ``ValueError``
subclasses and surface unchanged from ``hash`` and ``verify``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from passlib.hash import sha256_crypt, sha512_crypt

from .exceptions import HashFormatError, InternalHashError

MIN_ROUNDS = 1000
MAX_ROUNDS = 999999999
MAX_SALT_SIZE = 16


@dataclass(frozen=True)
class SHA2CryptHasher:
    """SHA-crypt hasher for one digest."""

    _handler: Any = field(init=False, repr=False, compare=False)

    name: str
    handler: Any = field(repr=False)
    rounds: int
    salt_size: int = MAX_SALT_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_handler",
            self.handler.using(rounds=self.rounds, salt_size=self.salt_size),
        )

    def _parse(self, stored: str) -> Optional[Tuple[int, str]]:
        if not isinstance(stored, str):
            return None
        try:
            parsed = self.handler.from_string(stored)
        except (ValueError, TypeError):
            return None
        if parsed.checksum is None:
            return None
        if not MIN_ROUNDS <= parsed.rounds <= MAX_ROUNDS:
            return None
        # int() tolerates padding and underscores in the rounds field
        if parsed.to_string() != stored:
            return None
        return parsed.rounds, parsed.salt

    def identify(self, stored: str) -> bool:
        """Check whether the hash belongs to this SHA-crypt variant.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash has the ``$5$``/``$6$`` format of this variant.
        """
        return self._parse(stored) is not None

    def hash(self, plain: str) -> str:
        """Hash password using SHA-crypt.

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
            If no passlib backend can produce a hash.
        """
        try:
            return str(self._handler.hash(plain))
        except RuntimeError as error:
            raise InternalHashError(self.name) from error

    def verify(self, plain: str, stored: str) -> bool:
        """Verify password against SHA-crypt hash.

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
            If the stored value is not a hash of this variant.
        """
        if self._parse(stored) is None:
            raise HashFormatError(self.name)
        return bool(self.handler.verify(plain, stored))

    def needs_update(self, stored: str) -> bool:
        """Check if the stored hash uses fewer rounds or a shorter salt.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        parsed = self._parse(stored)
        if parsed is None:
            return True
        rounds, salt = parsed
        return rounds < self.rounds or len(salt) < self.salt_size


SHA256_CRYPT = SHA2CryptHasher(
    name="sha256-crypt", handler=sha256_crypt, rounds=535000
)
SHA512_CRYPT = SHA2CryptHasher(
    name="sha512-crypt", handler=sha512_crypt, rounds=656000
)

__all__ = ["SHA2CryptHasher", "SHA256_CRYPT", "SHA512_CRYPT"]
