# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing scheme protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Scheme(Protocol):  # pragma: no cover
    """Protocol every password hashing scheme implements."""

    @property
    def name(self) -> str:
        """The stable registry name of the scheme."""
        ...

    def identify(self, stored: str) -> bool:
        """Check whether a stored hash was produced by this scheme.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if the hash has this scheme's format. Never raises.
        """
        ...

    def hash(self, plain: str) -> str:
        """Hash a plain text password.

        Parameters
        ----------
        plain : str
            The plain text password

        Returns
        -------
        str
            The self-describing hash.
        """
        ...

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a plain text password against a stored hash.

        Parameters
        ----------
        plain : str
            The plain text password
        stored : str
            The stored hash

        Returns
        -------
        bool
            True on match, False on a well formed hash that does not match.

        Raises
        ------
        HashFormatError
            If the stored hash does not belong to this scheme.
        """
        ...

    def needs_update(self, stored: str) -> bool:
        """Check if the stored hash uses weaker parameters than ours.

        Parameters
        ----------
        stored : str
            The stored hash
        """
        ...


__all__ = ["Scheme"]
