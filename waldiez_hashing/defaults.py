# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Versioned default scheme lists.

Each release that changes the preferred scheme order adds a new epoch
here. Existing epochs are never edited, so an application pinned to an
epoch identifier keeps the same behaviour on every future release.
Every epoch lists all schemes, so older hashes stay verifiable.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Tuple

from ._pbkdf2_hasher import PBKDF2_SHA1, PBKDF2_SHA256, PBKDF2_SHA512
from ._sha2_crypt_hasher import SHA256_CRYPT, SHA512_CRYPT
from .exceptions import InvalidEpochError
from .protocol import Scheme
from .registry import ARGON2, BCRYPT, BCRYPT_SHA256, SCRYPT_SHA256, lookup_all

LOG = logging.getLogger(__name__)

DEFAULTS_20160922 = "20160922"
"""The first set of defaults, preferring scrypt-sha256. Obsolete."""

DEFAULTS_20180601 = "20180601"
"""The current set of defaults, preferring argon2."""

DEFAULTS_LATEST = "latest"
"""Always the newest epoch. Its scheme order may change on any release."""

_DATE_RE = re.compile(r"[0-9]{8}")


@dataclass(frozen=True)
class Epoch:
    """A dated, ordered list of schemes, most preferred first."""

    identifier: str
    cutover: date
    schemes: Tuple[Scheme, ...]

    @property
    def default_scheme(self) -> Scheme:
        """The scheme new hashes are made with."""
        return self.schemes[0]


EPOCH_20160922 = Epoch(
    identifier=DEFAULTS_20160922,
    cutover=date(2016, 9, 22),
    schemes=(
        SCRYPT_SHA256,
        ARGON2,
        SHA512_CRYPT,
        SHA256_CRYPT,
        BCRYPT_SHA256,
        PBKDF2_SHA512,
        PBKDF2_SHA256,
        BCRYPT,
        PBKDF2_SHA1,
    ),
)

EPOCH_20180601 = Epoch(
    identifier=DEFAULTS_20180601,
    cutover=date(2018, 6, 1),
    schemes=(
        ARGON2,
        SCRYPT_SHA256,
        SHA512_CRYPT,
        SHA256_CRYPT,
        BCRYPT_SHA256,
        PBKDF2_SHA512,
        PBKDF2_SHA256,
        BCRYPT,
        PBKDF2_SHA1,
    ),
)

# append only, oldest first
EPOCHS: Tuple[Epoch, ...] = (EPOCH_20160922, EPOCH_20180601)


def parse_epoch_date(identifier: str) -> date:
    """Parse a YYYYMMDD identifier as a UTC calendar date.

    Parameters
    ----------
    identifier : str
        The identifier.

    Returns
    -------
    date
        The date.

    Raises
    ------
    InvalidEpochError
        If the identifier is not a valid YYYYMMDD date.
    """
    if not isinstance(identifier, str) or not _DATE_RE.fullmatch(identifier):
        raise InvalidEpochError(identifier)
    try:
        return datetime.strptime(identifier, "%Y%m%d").date()
    except ValueError as error:
        raise InvalidEpochError(identifier) from error


def get_epoch(identifier: str) -> Epoch:
    """Get the epoch an identifier resolves to.

    Parameters
    ----------
    identifier : str
        A YYYYMMDD date, or "latest".

    Returns
    -------
    Epoch
        The newest epoch with a cutover on or before the date. Dates before
        the first epoch resolve to the first epoch.

    Raises
    ------
    InvalidEpochError
        If the identifier is neither a date nor "latest".
    """
    if identifier == DEFAULTS_LATEST:
        LOG.warning(
            "Using the latest password hashing defaults; "
            "the preferred scheme may change on every release."
        )
        return EPOCHS[-1]
    when = parse_epoch_date(identifier)
    selected = EPOCHS[0]
    for epoch in EPOCHS:
        if epoch.cutover <= when:
            selected = epoch
    LOG.debug(
        "Defaults %s resolved to epoch %s", identifier, selected.identifier
    )
    return selected


def resolve_epoch(identifier: str) -> List[Scheme]:
    """Get the scheme list for a defaults identifier.

    Parameters
    ----------
    identifier : str
        A YYYYMMDD date, or "latest".

    Returns
    -------
    List[Scheme]
        The schemes, most preferred first.
    """
    return list(get_epoch(identifier).schemes)


def resolve_names(names: Iterable[str]) -> List[Scheme]:
    """Get a custom scheme list from scheme names.

    Parameters
    ----------
    names : Iterable[str]
        The scheme names, most preferred first.

    Returns
    -------
    List[Scheme]
        The schemes.
    """
    return lookup_all(names)


__all__ = [
    "DEFAULTS_20160922",
    "DEFAULTS_20180601",
    "DEFAULTS_LATEST",
    "EPOCHS",
    "Epoch",
    "get_epoch",
    "parse_epoch_date",
    "resolve_epoch",
    "resolve_names",
]
