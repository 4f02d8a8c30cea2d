# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password context: hash with the preferred scheme, verify with any."""

import logging
import threading
from typing import Iterable, Optional, Tuple

from .defaults import resolve_epoch, resolve_names
from .exceptions import EmptySchemesError, UnrecognizedHashError
from .protocol import Scheme

LOG = logging.getLogger(__name__)


class PasswordContext:
    """Ordered scheme preference list used to hash and verify passwords.

    The first scheme hashes new passwords. Every scheme in the list can
    verify existing hashes. A hash from a scheme that is not in the list
    is rejected, even if the scheme is registered.

    The list is only ever replaced as a whole, so concurrent callers see
    either the old or the new list.
    """

    def __init__(self, schemes: Iterable[Scheme]) -> None:
        """Initialize the context.

        Parameters
        ----------
        schemes : Iterable[Scheme]
            The schemes, most preferred first. The iterable is copied.

        Raises
        ------
        EmptySchemesError
            If no schemes are given.
        """
        self._lock = threading.Lock()
        self._schemes = self._freeze(schemes)

    @classmethod
    def from_epoch(cls, identifier: str) -> "PasswordContext":
        """Create a context using a versioned defaults epoch.

        Parameters
        ----------
        identifier : str
            A YYYYMMDD date, or "latest".

        Returns
        -------
        PasswordContext
            The new context.
        """
        return cls(resolve_epoch(identifier))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "PasswordContext":
        """Create a context from scheme names.

        Parameters
        ----------
        names : Iterable[str]
            The scheme names, most preferred first.

        Returns
        -------
        PasswordContext
            The new context.
        """
        return cls(resolve_names(names))

    @staticmethod
    def _freeze(schemes: Iterable[Scheme]) -> Tuple[Scheme, ...]:
        frozen = tuple(schemes)
        if not frozen:
            raise EmptySchemesError()
        return frozen

    @property
    def schemes(self) -> Tuple[Scheme, ...]:
        """The current schemes, most preferred first."""
        return self._schemes

    @property
    def default_scheme(self) -> Scheme:
        """The scheme used for new hashes."""
        return self._schemes[0]

    def replace_schemes(self, schemes: Iterable[Scheme]) -> None:
        """Replace the whole scheme list.

        Parameters
        ----------
        schemes : Iterable[Scheme]
            The new schemes, most preferred first.
        """
        frozen = self._freeze(schemes)
        with self._lock:
            self._schemes = frozen
        LOG.debug(
            "Password schemes set to: %s",
            ", ".join(scheme.name for scheme in frozen),
        )

    def use_epoch(self, identifier: str) -> None:
        """Replace the scheme list with a versioned defaults epoch.

        Parameters
        ----------
        identifier : str
            A YYYYMMDD date, or "latest".
        """
        self.replace_schemes(resolve_epoch(identifier))

    def use_names(self, names: Iterable[str]) -> None:
        """Replace the scheme list with the named schemes.

        Parameters
        ----------
        names : Iterable[str]
            The scheme names, most preferred first.
        """
        self.replace_schemes(resolve_names(names))

    @staticmethod
    def _identify(
        schemes: Tuple[Scheme, ...], stored: str
    ) -> Optional[Scheme]:
        for scheme in schemes:
            if scheme.identify(stored):
                return scheme
        return None

    def identify(self, stored: str) -> Optional[Scheme]:
        """Find the scheme that produced a stored hash.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        Optional[Scheme]
            The first scheme in the list recognizing the hash, if any.
        """
        return self._identify(self._schemes, stored)

    def hash(self, plain: str) -> str:
        """Hash a password with the preferred scheme.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The hashed secret.
        """
        return self._schemes[0].hash(plain)

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a password against a stored hash.

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

        Raises
        ------
        UnrecognizedHashError
            If no scheme in the list recognizes the stored hash.
        """
        scheme = self._identify(self._schemes, stored)
        if scheme is None:
            raise UnrecognizedHashError()
        return scheme.verify(plain, stored)

    def needs_update(self, stored: str) -> bool:
        """Check whether a stored hash should be replaced.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if the hash was made with a scheme other than the preferred
            one, or with weaker parameters than the preferred scheme's.
            False for hashes no scheme recognizes.
        """
        schemes = self._schemes
        scheme = self._identify(schemes, stored)
        if scheme is None:
            return False
        if scheme.name != schemes[0].name:
            return True
        return scheme.needs_update(stored)

    def verify_and_update(
        self, plain: str, stored: str
    ) -> Tuple[bool, Optional[str]]:
        """Verify a password and rehash it if the stored hash is outdated.

        The caller is responsible for persisting the new hash.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        Tuple[bool, Optional[str]]
            Whether the password matches, and the replacement hash if the
            password matches and the stored hash needs an update.

        Raises
        ------
        UnrecognizedHashError
            If no scheme in the list recognizes the stored hash.
        """
        schemes = self._schemes
        scheme = self._identify(schemes, stored)
        if scheme is None:
            raise UnrecognizedHashError()
        if not scheme.verify(plain, stored):
            return False, None
        preferred = schemes[0]
        if scheme.name == preferred.name and not scheme.needs_update(stored):
            return True, None
        LOG.debug("Upgrading a %s hash to %s", scheme.name, preferred.name)
        return True, preferred.hash(plain)

    def __repr__(self) -> str:
        names = ", ".join(scheme.name for scheme in self._schemes)
        return f"{type(self).__name__}([{names}])"


__all__ = ["PasswordContext"]
