# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Bcrypt password hasher.

bcrypt only looks at the first 72 bytes of a password. Longer passwords are
explicitly truncated to 72 bytes before hashing and verifying.
"""

import re
from dataclasses import dataclass

import bcrypt

from .exceptions import HashFormatError, InternalHashError

BCRYPT_MAX_PASSWORD_BYTES = 72
# cost is log2 rounds, 04 to 31
_BCRYPT_RE = re.compile(
    r"\$2[aby]\$(0[4-9]|[12][0-9]|3[01])\$[./A-Za-z0-9]{53}"
)


def truncate_password(plain: str) -> bytes:
    """Encode and truncate a password to the bcrypt limit.

    Parameters
    ----------
    plain : str
        The plain secret.

    Returns
    -------
    bytes
        At most 72 bytes of the UTF-8 encoded secret.
    """
    # ref (src):
    #  bcrypt originally suffered from a wraparound bug:
    #  http://www.openwall.com/lists/oss-security/2012/01/02/4
    # This bug was corrected in the OpenBSD source by truncating
    # inputs to 72 bytes on the updated prefix $2b$,
    # but leaving $2a$ unchanged for compatibility.
    # However, pyca/bcrypt 2.0.0 *did* correctly truncate inputs
    # on $2a$, so we do it here to preserve compatibility with 2.0.0
    return plain.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt hasher."""

    name: str = "bcrypt"
    rounds: int = 12

    def identify(self, stored: str) -> bool:
        """Check whether the hash is a bcrypt hash.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True for $2a$, $2b$ and $2y$ hashes.
        """
        return isinstance(stored, str) and bool(_BCRYPT_RE.fullmatch(stored))

    def hash(self, plain: str) -> str:
        """Hash password using bcrypt.

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
            hashed = bcrypt.hashpw(
                truncate_password(plain), bcrypt.gensalt(rounds=self.rounds)
            )
        except ValueError as error:
            raise InternalHashError(self.name) from error
        return hashed.decode("ascii")

    def verify(self, plain: str, stored: str) -> bool:
        """Verify password against bcrypt hash.

        Parameters
        ----------
        plain : str
            The plain secret to verify.
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if verified, False if not.

        Raises
        ------
        HashFormatError
            If the stored value is not a valid bcrypt hash.
        """
        if not self.identify(stored):
            raise HashFormatError(self.name)
        try:
            return bcrypt.checkpw(
                truncate_password(plain), stored.encode("ascii")
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
        if not isinstance(stored, str):
            return True
        match = _BCRYPT_RE.fullmatch(stored)
        if not match:
            return True
        return int(match.group(1)) < self.rounds


__all__ = ["BcryptHasher", "BCRYPT_MAX_PASSWORD_BYTES", "truncate_password"]
