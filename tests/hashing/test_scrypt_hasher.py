# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use

"""Tests for the scrypt hasher."""

import base64
import re
from typing import Dict

import pytest

from tenant_hasher.hashing._scrypt_hasher import ScryptHasher


class TestScryptHasher:
    """Test scrypt hasher implementation."""

    def test_hash_creates_valid_payload(self) -> None:
        """Test that hash creates a self describing scrypt payload."""
        payload = ScryptHasher(n=1024).hash(b"test_password")  # nosec

        pattern = (
            r"^scrypt\$n=1024\$r=8\$p=1\$[A-Za-z0-9+/=]+\$[A-Za-z0-9+/=]+$"
        )
        assert re.match(pattern, payload)

    def test_verify_round(self) -> None:
        """Test verifying the right and a wrong password."""
        hasher = ScryptHasher(n=1024)
        password = b"test_password_123"  # nosemgrep # nosec
        payload = hasher.hash(password)

        assert hasher.verify(password, payload) is True
        assert hasher.verify(b"wrong_password", payload) is False

    def test_verify_uses_embedded_parameters(self) -> None:
        """Test that a payload made with other parameters still verifies."""
        password = b"test"  # nosemgrep # nosec
        payload = ScryptHasher(n=2048, r=4, dklen=32).hash(password)

        assert ScryptHasher(n=1024).verify(password, payload)

    def test_hash_uniqueness(self) -> None:
        """Test hashing the same password twice uses different salts."""
        hasher = ScryptHasher(n=1024)
        payload1 = hasher.hash(b"password")
        payload2 = hasher.hash(b"password")

        assert payload1 != payload2

    def test_salt_length_in_payload(self) -> None:
        """Test that the configured salt length is used."""
        payload = ScryptHasher(n=1024, salt_len=32).hash(b"test")

        assert len(base64.b64decode(payload.split("$")[4])) == 32

    def test_verify_invalid_payloads(self) -> None:
        """Test that malformed payloads fail closed."""
        hasher = ScryptHasher(n=1024)
        assert not hasher.verify(b"password", "scrypt$invalid")
        assert not hasher.verify(b"password", "scrypt$n=abc$r=8$p=1$s$k")
        assert not hasher.verify(b"password", "scrypt$n=16384$r=8$p=1")
        assert not hasher.verify(b"password", "scrypt$n=3$r=8$p=1$c2FsdA==$a2V5")
        assert not hasher.verify(b"password", "$argon2id$v=19$m=65536$hash")

    def test_needs_rehash(self) -> None:
        """Test that parameter changes are detected."""
        payload = ScryptHasher(n=1024).hash(b"test")

        assert not ScryptHasher(n=1024).needs_rehash(payload)
        assert ScryptHasher(n=2048).needs_rehash(payload)
        assert ScryptHasher(n=1024, r=4).needs_rehash(payload)
        assert ScryptHasher(n=1024, dklen=32).needs_rehash(payload)
        assert ScryptHasher().needs_rehash("scrypt$invalid")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 1000},
        {"n": 1},
        {"r": 0},
        {"p": 0},
        {"n": 1 << 20, "r": 8, "p": 1},
        {"salt_len": 0},
    ],
)
def test_invalid_parameters(kwargs: Dict[str, int]) -> None:
    """Test that invalid or too expensive parameters are rejected."""
    with pytest.raises(ValueError):
        ScryptHasher(**kwargs)


def test_verify_rejects_expensive_payload() -> None:
    """Test that payloads beyond the memory limit are not derived."""
    payload = "scrypt$n=1048576$r=64$p=1$c2FsdA==$a2V5"
    assert ScryptHasher(n=1024).verify(b"password", payload) is False
    assert ScryptHasher(n=1024).needs_rehash(payload) is True
