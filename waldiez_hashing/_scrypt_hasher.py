# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501

"""Scrypt password hasher (hashlib).

Format: ``$s2$<log2 n>$<r>$<p>$<salt>$<key>`` with adapted base64 salt/key.
scrypt's inner mixing uses PBKDF2-HMAC-SHA256, hence the registry name.
"""

import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass
from typing import Optional, Tuple

from ._encoding import ab64_decode, ab64_encode
from .exceptions import HashFormatError, InternalHashError

_SCRYPT_RE = re.compile(
    r"\$s2\$([1-9][0-9]?)\$([1-9][0-9]*)\$([1-9][0-9]*)\$([./A-Za-z0-9]+)\$([./A-Za-z0-9]+)"
)
_MAXMEM_LIMIT = 2**31 - 1
# bounds hashlib.scrypt accepts: n fits an unsigned 64 bit int, r * p < 2^30
_MAX_LOG_N = 63
_MAX_RP = 2**30


def _maxmem(n: int, r: int, p: int) -> int:
    # what OpenSSL needs for V and B, plus some slack, capped to a C int
    return min(128 * r * (n + p + 2) + 1024 * 1024, _MAXMEM_LIMIT)


@dataclass(frozen=True)
class ScryptHasher:
    """Scrypt password hasher."""

    name: str = "scrypt-sha256"
    log_n: int = 14  # n = 2^14
    r: int = 8
    p: int = 1
    dklen: int = 32
    salt_len: int = 16

    def _parse(self, stored: str) -> Optional[Tuple[int, int, int, bytes, bytes]]:
        m = _SCRYPT_RE.fullmatch(stored) if isinstance(stored, str) else None
        if not m:
            return None
        try:
            salt = ab64_decode(m.group(4))
            key = ab64_decode(m.group(5))
        except ValueError:
            return None
        log_n, r, p = int(m.group(1)), int(m.group(2)), int(m.group(3))
        if log_n > _MAX_LOG_N or r * p >= _MAX_RP:
            return None
        return log_n, r, p, salt, key

    @staticmethod
    def _derive(
        plain: str, salt: bytes, log_n: int, r: int, p: int, dklen: int
    ) -> bytes:
        n = 1 << log_n
        return hashlib.scrypt(
            plain.encode("utf-8"),
            salt=salt,
            n=n,
            r=r,
            p=p,
            dklen=dklen,
            maxmem=_maxmem(n, r, p),
        )

    def identify(self, stored: str) -> bool:
        """Check whether the hash is a scrypt hash.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash has the scrypt format.
        """
        return self._parse(stored) is not None

    def hash(self, plain: str) -> str:
        """Hash password using scrypt.

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
            key = self._derive(
                plain, salt, self.log_n, self.r, self.p, self.dklen
            )
        except (ValueError, MemoryError) as error:
            raise InternalHashError(self.name) from error
        return (
            f"$s2${self.log_n}${self.r}${self.p}$"
            f"{ab64_encode(salt)}${ab64_encode(key)}"
        )

    def verify(self, plain: str, stored: str) -> bool:
        """Verify password against scrypt hash.

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
            If the stored value is not a valid scrypt hash.
        """
        parsed = self._parse(stored)
        if parsed is None:
            raise HashFormatError(self.name)
        log_n, r, p, salt, stored_key = parsed
        try:
            key = self._derive(plain, salt, log_n, r, p, len(stored_key))
        except (ValueError, OverflowError) as error:
            # invalid cost parameters embedded in the hash
            raise HashFormatError(self.name, str(error)) from error
        return hmac.compare_digest(key, stored_key)

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
        parsed = self._parse(stored)
        if parsed is None:
            return True
        log_n, r, p, salt, key = parsed
        return (
            (log_n < self.log_n)
            or (r < self.r)
            or (p < self.p)
            or (len(salt) < self.salt_len)
            or (len(key) < self.dklen)
        )


__all__ = ["ScryptHasher"]
