# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised by the hashing package.

A wrong password is never an error: verification returns False for it.
"""

from typing import Optional


class HashingError(Exception):
    """Base class for all hashing errors."""


class UnknownSchemeError(HashingError, KeyError):
    """A scheme name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown scheme {name!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidEpochError(HashingError, ValueError):
    """A defaults identifier is neither a YYYYMMDD date nor "latest"."""

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(f"invalid defaults identifier: {identifier!r}")


class EmptySchemesError(HashingError, ValueError):
    """A context was given an empty scheme list."""

    def __init__(self) -> None:
        super().__init__("at least one scheme is required")


class UnrecognizedHashError(HashingError, ValueError):
    """No scheme of the active context recognizes the stored hash."""

    def __init__(self) -> None:
        super().__init__("hash format not recognized by any active scheme")


class HashFormatError(HashingError, ValueError):
    """A scheme was given a hash it does not own or cannot decode."""

    def __init__(self, scheme: str, reason: Optional[str] = None) -> None:
        self.scheme = scheme
        message = f"not a valid {scheme} hash"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InternalHashError(HashingError, RuntimeError):
    """The underlying primitive failed while hashing or verifying."""

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"internal error in the {scheme} scheme")


__all__ = [
    "HashingError",
    "UnknownSchemeError",
    "InvalidEpochError",
    "EmptySchemesError",
    "UnrecognizedHashError",
    "HashFormatError",
    "InternalHashError",
]
