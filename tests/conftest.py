# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import logging
from collections.abc import Generator
from typing import Dict

import pytest
from passlib.hash import sha256_crypt, sha512_crypt

from waldiez_hashing import get_default_context
from waldiez_hashing._argon_hasher import Argon2Hasher
from waldiez_hashing._bcrypt_hasher import BcryptHasher
from waldiez_hashing._bcrypt_sha256_hasher import BcryptSHA256Hasher
from waldiez_hashing._pbkdf2_hasher import PBKDF2Hasher
from waldiez_hashing._scrypt_hasher import ScryptHasher
from waldiez_hashing._sha2_crypt_hasher import SHA2CryptHasher
from waldiez_hashing.config import ENV_PREFIX
from waldiez_hashing.protocol import Scheme
from waldiez_hashing.registry import SCHEMES

PASSWORD = "test_password_123"  # nosemgrep # nosec


@pytest.fixture(name="cheap_schemes", scope="session")
def cheap_schemes_fixture() -> Dict[str, Scheme]:
    """Low cost instances of every scheme, keyed by scheme name."""
    schemes: Dict[str, Scheme] = {
        "argon2": Argon2Hasher(time_cost=1, memory_cost=8192),
        "scrypt-sha256": ScryptHasher(log_n=8),
        "sha256-crypt": SHA2CryptHasher(
            name="sha256-crypt", handler=sha256_crypt, rounds=1000
        ),
        "sha512-crypt": SHA2CryptHasher(
            name="sha512-crypt", handler=sha512_crypt, rounds=1000
        ),
        "bcrypt": BcryptHasher(rounds=4),
        "bcrypt-sha256": BcryptSHA256Hasher(rounds=4),
        "pbkdf2-sha256": PBKDF2Hasher(
            name="pbkdf2-sha256",
            ident="pbkdf2-sha256",
            digest="sha256",
            rounds=1000,
        ),
        "pbkdf2-sha512": PBKDF2Hasher(
            name="pbkdf2-sha512",
            ident="pbkdf2-sha512",
            digest="sha512",
            rounds=1000,
        ),
        "pbkdf2-sha1": PBKDF2Hasher(
            name="pbkdf2-sha1", ident="pbkdf2", digest="sha1", rounds=1000
        ),
    }
    assert set(schemes) == set(SCHEMES)
    return schemes


@pytest.fixture(name="cheap_hashes", scope="session")
def cheap_hashes_fixture(cheap_schemes: Dict[str, Scheme]) -> Dict[str, str]:
    """One hash of PASSWORD per scheme, keyed by scheme name."""
    return {
        name: scheme.hash(PASSWORD) for name, scheme in cheap_schemes.items()
    }


@pytest.fixture(name="registered_hashes", scope="session")
def registered_hashes_fixture() -> Dict[str, str]:
    """One hash of PASSWORD per registered scheme, at default cost."""
    return {name: scheme.hash(PASSWORD) for name, scheme in SCHEMES.items()}


@pytest.fixture(autouse=True)
def restore_default_context() -> Generator[None, None, None]:
    """Restore the process-wide context and log level after each test."""
    context = get_default_context()
    schemes = context.schemes
    logger = logging.getLogger("waldiez_hashing")
    level = logger.level
    yield
    context.replace_schemes(schemes)
    logger.setLevel(level)


@pytest.fixture(name="clean_env")
def clean_env_fixture(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[pytest.MonkeyPatch, None, None]:
    """Remove any hashing related environment variables."""
    for key in ("DEFAULTS", "SCHEMES", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{key}", raising=False)
    yield monkeypatch
