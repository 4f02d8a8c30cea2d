# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""PBKDF2-HMAC password hashers (hashlib).

Format: ``$<ident>$<rounds>$<salt>$<checksum>`` with adapted base64
salt/checksum, where ident is ``pbkdf2`` (sha1), ``pbkdf2-sha256`` or
``pbkdf2-sha512``.
"""

import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass
from typing import Optional, Tuple

from ._encoding import ab64_decode, ab64_encode
from .exceptions import HashFormatError, InternalHashError

_PBKDF2_RE = re.compile(
    r"\$([a-z0-9-]+)\$([1-9][0-9]*)\$([./A-Za-z0-9]*)\$([./A-Za-z0-9]+)"
)
# hashlib passes the iteration count to OpenSSL as a C int
_MAX_ROUNDS = 2**31 - 1


@dataclass(frozen=True)
class PBKDF2Hasher:
    """PBKDF2 hasher for one digest."""

    name: str
    ident: str
    digest: str
    rounds: int
    salt_len: int = 16

    @property
    def checksum_len(self) -> int:
        """The derived key length (the digest size)."""
        return hashlib.new(self.digest).digest_size

    def _parse(self, stored: str) -> Optional[Tuple[int, bytes, bytes]]:
        m = _PBKDF2_RE.fullmatch(stored) if isinstance(stored, str) else None
        if not m or m.group(1) != self.ident:
            return None
        try:
            salt = ab64_decode(m.group(3))
            checksum = ab64_decode(m.group(4))
        except ValueError:
            return None
        rounds = int(m.group(2))
        if rounds > _MAX_ROUNDS or len(checksum) != self.checksum_len:
            return None
        return rounds, salt, checksum

    def _derive(self, plain: str, salt: bytes, rounds: int) -> bytes:
        return hashlib.pbkdf2_hmac(
            self.digest, plain.encode("utf-8"), salt, rounds
        )

    def identify(self, stored: str) -> bool:
        """Check whether the hash belongs to this PBKDF2 variant.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if the ident, rounds, salt and checksum are well formed.
        """
        return self._parse(stored) is not None

    def hash(self, plain: str) -> str:
        """Hash password using PBKDF2.

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
            If the key derivation fails.
        """
        salt = secrets.token_bytes(self.salt_len)
        try:
            checksum = self._derive(plain, salt, self.rounds)
        except ValueError as error:
            raise InternalHashError(self.name) from error
        return (
            f"${self.ident}${self.rounds}$"
            f"{ab64_encode(salt)}${ab64_encode(checksum)}"
        )

    def verify(self, plain: str, stored: str) -> bool:
        """Verify password against PBKDF2 hash.

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
        parsed = self._parse(stored)
        if parsed is None:
            raise HashFormatError(self.name)
        rounds, salt, checksum = parsed
        try:
            derived = self._derive(plain, salt, rounds)
        except (ValueError, OverflowError) as error:
            raise HashFormatError(self.name, str(error)) from error
        return hmac.compare_digest(derived, checksum)

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
        rounds, salt, _ = parsed
        return rounds < self.rounds or len(salt) < self.salt_len


PBKDF2_SHA1 = PBKDF2Hasher(
    name="pbkdf2-sha1", ident="pbkdf2", digest="sha1", rounds=131000
)
PBKDF2_SHA256 = PBKDF2Hasher(
    name="pbkdf2-sha256", ident="pbkdf2-sha256", digest="sha256", rounds=29000
)
PBKDF2_SHA512 = PBKDF2Hasher(
    name="pbkdf2-sha512", ident="pbkdf2-sha512", digest="sha512", rounds=25000
)

__all__ = ["PBKDF2Hasher", "PBKDF2_SHA1", "PBKDF2_SHA256", "PBKDF2_SHA512"]
