# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the SHA-crypt hashers."""

import pytest

from waldiez_hashing._sha2_crypt_hasher import (
    SHA256_CRYPT,
    SHA512_CRYPT,
    SHA2CryptHasher,
)
from waldiez_hashing.exceptions import HashFormatError

# published SHA-crypt test vectors
KNOWN_HASHES = [
    (
        SHA256_CRYPT,
        "Hello world!",
        "$5$saltstring$5B8vYYiY.CVt1RlTTf8KbXBH3hsxY/GNooZF4oPZWD0",
    ),
    (
        SHA256_CRYPT,
        "Hello world!",
        "$5$rounds=10000$saltstringsaltst$"
        "3xv.VbSHBb41AL9AvLeujZkZRBAwqFMz2.opqey6IcA",
    ),
    (
        SHA512_CRYPT,
        "Hello world!",
        "$6$saltstring$svn8UoSVapNtMuq1ukKS4tPQd8iKwSMHWjl/O817G3uBnIFNjnQJu"
        "esI68u4OTLiBFdcbYEdFCoEOfaS35inz1",
    ),
    (
        SHA512_CRYPT,
        "Hello world!",
        "$6$rounds=10000$saltstringsaltst$OW1/O6BYHV6BcXZu8QVeXbDWra3Oeqh0sbH"
        "bbMCVNSnCM/UrjmM0Dp8vOuZeHBy/YTBmSK6H9qs/y3RnOaw5v.",
    ),
]


def _cheap(hasher: SHA2CryptHasher, rounds: int = 1000) -> SHA2CryptHasher:
    return SHA2CryptHasher(
        name=hasher.name,
        handler=hasher.handler,
        rounds=rounds,
    )


class TestSHA2CryptHasher:
    """Test SHA-crypt hasher implementation."""

    @pytest.mark.parametrize("hasher,password,stored", KNOWN_HASHES)
    def test_known_hashes(
        self, hasher: SHA2CryptHasher, password: str, stored: str
    ) -> None:
        """Test verification against the published test vectors."""
        assert hasher.identify(stored)
        assert hasher.verify(password, stored)
        assert not hasher.verify("Hello world", stored)

    @pytest.mark.parametrize("registered", [SHA256_CRYPT, SHA512_CRYPT])
    def test_hash_and_verify(self, registered: SHA2CryptHasher) -> None:
        """Test hashing and verifying with a low round count."""
        hasher = _cheap(registered)
        password = "test_password"  # nosemgrep # nosec
        hashed = hasher.hash(password)

        assert hashed.startswith(f"{registered.handler.ident}rounds=1000$")
        assert hasher.identify(hashed)
        assert hasher.verify(password, hashed)
        assert not hasher.verify("wrong_password", hashed)

    def test_implicit_rounds_omitted(self) -> None:
        """Test that the default 5000 rounds are not written out."""
        hasher = _cheap(SHA256_CRYPT, rounds=5000)
        hashed = hasher.hash("password")  # nosemgrep # nosec

        assert "rounds=" not in hashed
        assert hasher.verify("password", hashed)

    def test_variants_do_not_claim_each_other(self) -> None:
        """Test that $5$ and $6$ hashes are told apart."""
        sha256_hash = _cheap(SHA256_CRYPT).hash("password")  # nosemgrep # nosec
        sha512_hash = _cheap(SHA512_CRYPT).hash("password")  # nosemgrep # nosec

        assert not SHA512_CRYPT.identify(sha256_hash)
        assert not SHA256_CRYPT.identify(sha512_hash)
        with pytest.raises(HashFormatError):
            SHA512_CRYPT.verify("password", sha256_hash)

    @pytest.mark.parametrize(
        "invalid_hash",
        [
            "",
            "$5$",
            "$5$saltstring$tooshort",
            "$5$rounds=abc$saltstring$" + "a" * 43,
            "$5$saltstringsaltstring$" + "a" * 43,
            "$6$saltstring$" + "a" * 43,
        ],
    )
    def test_identify_invalid(self, invalid_hash: str) -> None:
        """Test malformed values are rejected."""
        assert not SHA256_CRYPT.identify(invalid_hash)
        with pytest.raises(HashFormatError):
            SHA256_CRYPT.verify("password", invalid_hash)

    @pytest.mark.parametrize(
        "rounds_field", ["rounds=1_0000", "rounds= 10000", "rounds=010000"]
    )
    def test_non_canonical_rounds_rejected(self, rounds_field: str) -> None:
        """Test rounds fields that int() would accept are rejected."""
        stored = KNOWN_HASHES[1][2].replace("rounds=10000", rounds_field)

        assert not SHA256_CRYPT.identify(stored)
        with pytest.raises(HashFormatError):
            SHA256_CRYPT.verify("Hello world!", stored)

    @pytest.mark.parametrize("password", ["a" * 4097, "nul\0byte"])
    def test_rejected_passwords(self, password: str) -> None:
        """Test the passlib input limits surface as ValueError."""
        hasher = _cheap(SHA256_CRYPT)
        stored = hasher.hash("password")  # nosemgrep # nosec

        with pytest.raises(ValueError):
            hasher.hash(password)
        with pytest.raises(ValueError):
            hasher.verify(password, stored)

    def test_needs_update(self) -> None:
        """Test that needs_update compares rounds and salt size."""
        stored = KNOWN_HASHES[0][2]

        assert SHA256_CRYPT.needs_update(stored)
        assert _cheap(SHA256_CRYPT).needs_update(stored)  # short salt
        hashed = _cheap(SHA256_CRYPT).hash("password")  # nosemgrep # nosec
        assert not _cheap(SHA256_CRYPT).needs_update(hashed)
        assert SHA256_CRYPT.needs_update(hashed)
        assert SHA256_CRYPT.needs_update("garbage")
