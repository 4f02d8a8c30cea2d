# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Bcrypt with an HMAC-SHA256 prehash.

The password is first run through HMAC-SHA256 keyed with the bcrypt salt,
and the base64 of that digest is what bcrypt sees. This removes bcrypt's
72 byte limit. Format::

    $bcrypt-sha256$v=2,t=2b,r=12$<22 char salt>$<31 char digest>
"""

import base64
import hashlib
import hmac
import re
from dataclasses import dataclass
from typing import Optional

import bcrypt

from .exceptions import HashFormatError, InternalHashError

_PREFIX = "$bcrypt-sha256$"
_BCRYPT_SHA256_RE = re.compile(
    r"\$bcrypt-sha256\$v=2,t=(2[ab]),r=(0[4-9]|[12][0-9]|3[01])\$([./A-Za-z0-9]{22})\$([./A-Za-z0-9]{31})"  # noqa: E501 # pylint: disable=line-too-long
)


def _match(stored: str) -> "Optional[re.Match[str]]":
    if not isinstance(stored, str):
        return None
    return _BCRYPT_SHA256_RE.fullmatch(stored)


def _prehash(plain: str, salt: str) -> bytes:
    digest = hmac.new(
        salt.encode("ascii"), plain.encode("utf-8"), hashlib.sha256
    ).digest()
    return base64.b64encode(digest)


@dataclass(frozen=True)
class BcryptSHA256Hasher:
    """Bcrypt-SHA256 hasher."""

    name: str = "bcrypt-sha256"
    rounds: int = 12

    def identify(self, stored: str) -> bool:
        """Check whether the hash is a bcrypt-sha256 hash.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash has the bcrypt-sha256 format.
        """
        return _match(stored) is not None

    def hash(self, plain: str) -> str:
        """Hash password using bcrypt-sha256.

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
            If bcrypt fails to hash.
        """
        try:
            config = bcrypt.gensalt(rounds=self.rounds).decode("ascii")
            # config is "$2b$NN$" followed by the 22 char salt
            ident, rounds, salt = config[1:3], config[4:6], config[7:]
            hashed = bcrypt.hashpw(
                _prehash(plain, salt), config.encode("ascii")
            ).decode("ascii")
        except ValueError as error:
            raise InternalHashError(self.name) from error
        return f"{_PREFIX}v=2,t={ident},r={rounds}${salt}${hashed[-31:]}"

    def verify(self, plain: str, stored: str) -> bool:
        """Verify password against bcrypt-sha256 hash.

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
            If the stored value is not a valid bcrypt-sha256 hash.
        """
        match = _match(stored)
        if not match:
            raise HashFormatError(self.name)
        ident, rounds, salt, digest = match.groups()
        inner = f"${ident}${rounds}${salt}{digest}"
        try:
            return bcrypt.checkpw(
                _prehash(plain, salt), inner.encode("ascii")
            )
        except ValueError as error:
            raise HashFormatError(self.name, str(error)) from error

    def needs_update(self, stored: str) -> bool:
        """Check if the stored hash uses fewer rounds than ours.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        match = _match(stored)
        if not match:
            return True
        return int(match.group(2)) < self.rounds


__all__ = ["BcryptSHA256Hasher"]
