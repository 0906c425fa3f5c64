# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=missing-param-doc

"""Tests for the algorithm registry."""

import pytest

from tenant_hasher.hashing import (
    ADAPTIVE_SALTED_ID,
    KEYED_KDF_ID,
    AlgorithmRegistry,
    BcryptHasher,
    DuplicateAlgorithmIdError,
    InvalidAlgorithmIdError,
    Pbkdf2Hasher,
    RegistryError,
    UnknownDefaultAlgorithmError,
    UnsupportedAlgorithmError,
)
from tenant_hasher.hashing.protocol import Algorithm


def test_get_registered(registry: AlgorithmRegistry) -> None:
    """Test looking up registered algorithms."""
    assert isinstance(registry.get(ADAPTIVE_SALTED_ID), BcryptHasher)
    assert isinstance(registry.get(KEYED_KDF_ID), Pbkdf2Hasher)
    assert isinstance(registry.get(KEYED_KDF_ID), Algorithm)


def test_default(registry: AlgorithmRegistry) -> None:
    """Test the default algorithm."""
    assert registry.default_algorithm_id == ADAPTIVE_SALTED_ID
    assert registry.default_algorithm() is registry.get(ADAPTIVE_SALTED_ID)


def test_get_unknown(registry: AlgorithmRegistry) -> None:
    """Test that unknown ids raise UnsupportedAlgorithmError."""
    with pytest.raises(UnsupportedAlgorithmError) as exc_info:
        registry.get("md5")
    assert exc_info.value.algorithm_id == "md5"
    assert isinstance(exc_info.value, LookupError)


def test_mapping_view(registry: AlgorithmRegistry) -> None:
    """Test the read only mapping view."""
    assert registry.ids == (ADAPTIVE_SALTED_ID, KEYED_KDF_ID)
    assert len(registry) == 2
    assert KEYED_KDF_ID in registry
    assert "md5" not in registry
    assert list(registry) == [ADAPTIVE_SALTED_ID, KEYED_KDF_ID]
    assert "default_id='adaptive-salted'" in repr(registry)


def test_duplicate_id() -> None:
    """Test that a repeated id is rejected."""
    with pytest.raises(DuplicateAlgorithmIdError) as exc_info:
        AlgorithmRegistry(
            [
                (ADAPTIVE_SALTED_ID, BcryptHasher(rounds=4)),
                (ADAPTIVE_SALTED_ID, BcryptHasher(rounds=5)),
            ],
            ADAPTIVE_SALTED_ID,
        )
    assert isinstance(exc_info.value, RegistryError)


def test_unknown_default() -> None:
    """Test that a default outside the registered ids is rejected."""
    with pytest.raises(UnknownDefaultAlgorithmError) as exc_info:
        AlgorithmRegistry(
            [(ADAPTIVE_SALTED_ID, BcryptHasher(rounds=4))], KEYED_KDF_ID
        )
    assert exc_info.value.algorithm_id == KEYED_KDF_ID
    assert isinstance(exc_info.value, RegistryError)


def test_empty_registry() -> None:
    """Test that a registry needs at least its default."""
    with pytest.raises(UnknownDefaultAlgorithmError):
        AlgorithmRegistry([], ADAPTIVE_SALTED_ID)


@pytest.mark.parametrize("algorithm_id", ["", "{bcrypt}", "a}b"])
def test_invalid_id(algorithm_id: str) -> None:
    """Test that ids which could not be tagged are rejected."""
    with pytest.raises(InvalidAlgorithmIdError):
        AlgorithmRegistry(
            [(algorithm_id, BcryptHasher(rounds=4))], algorithm_id
        )


def test_read_only(registry: AlgorithmRegistry) -> None:
    """Test that the registry cannot be changed."""
    with pytest.raises(AttributeError):
        registry._default_id = KEYED_KDF_ID  # pylint: disable=protected-access
    with pytest.raises(AttributeError):
        registry.extra = 1  # type: ignore[attr-defined]
    assert registry.default_algorithm_id == ADAPTIVE_SALTED_ID


def test_with_default(registry: AlgorithmRegistry) -> None:
    """Test deriving a registry with another default."""
    regulated = registry.with_default(KEYED_KDF_ID)

    assert regulated.default_algorithm_id == KEYED_KDF_ID
    assert regulated.get(KEYED_KDF_ID) is registry.get(KEYED_KDF_ID)
    assert registry.default_algorithm_id == ADAPTIVE_SALTED_ID
    with pytest.raises(UnknownDefaultAlgorithmError):
        registry.with_default("md5")
