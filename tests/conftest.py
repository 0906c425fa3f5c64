# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc
"""Shared fixtures for tests."""

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

from tenant_hasher.config import ENV_PREFIX, Settings, SettingsManager
from tenant_hasher.factory import build_encoder
from tenant_hasher.hashing import (
    ADAPTIVE_SALTED_ID,
    KEYED_KDF_ID,
    AlgorithmRegistry,
    BcryptHasher,
    DelegatingPasswordEncoder,
    Pbkdf2Hasher,
    TenantClass,
)

HERE = Path(__file__).parent
TEST_PEPPER = "test-pepper-0123456789abcdef"

# cheap work factors, the real defaults take hundreds of milliseconds
FAST_SETTINGS = {
    "bcrypt_rounds": 4,
    "kdf_iterations": 1000,
    "argon2_time_cost": 1,
    "argon2_memory_cost": 1024,
    "argon2_parallelism": 1,
}
FAST_ENV = {
    f"{ENV_PREFIX}{key.upper()}": str(value)
    for key, value in FAST_SETTINGS.items()
}


@pytest.fixture(name="anyio_backend")
def anyio_backend_fixture() -> str:
    """Return the backend to use for anyio tests."""
    return "asyncio"


@pytest.fixture(autouse=True, name="isolated_env")
def isolated_env_fixture() -> Generator[None, None, None]:
    """Start every test without our env vars, cli args or cached settings."""
    original_env = {
        key: os.environ.pop(key)
        for key in list(os.environ)
        if key.startswith(ENV_PREFIX)
    }
    original_argv = sys.argv[:]
    sys.argv = [str(HERE)]
    SettingsManager.reset_settings()
    yield
    SettingsManager.reset_settings()
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(original_env)


@pytest.fixture(autouse=True, name="isolated_logging")
def isolated_logging_fixture() -> Generator[None, None, None]:
    """Undo any logging configuration a test (e.g. the cli) applies."""
    root = logging.getLogger()
    package_logger = logging.getLogger("tenant_hasher")
    root_handlers = root.handlers[:]
    root_level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and (
            handler not in root_handlers
        ):
            root.removeHandler(handler)
    root.setLevel(root_level)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture(name="fast_env")
def fast_env_fixture(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use cheap work factors for settings loaded from the environment."""
    for key, value in FAST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Standard tenant settings with cheap work factors."""
    return Settings(
        tenant_class=TenantClass.STANDARD,
        pepper=TEST_PEPPER,  # type: ignore[arg-type]
        **FAST_SETTINGS,  # type: ignore[arg-type]
    )


@pytest.fixture(name="regulated_settings")
def regulated_settings_fixture() -> Settings:
    """Regulated tenant settings with cheap work factors."""
    return Settings(
        tenant_class=TenantClass.REGULATED,
        pepper=TEST_PEPPER,  # type: ignore[arg-type]
        **FAST_SETTINGS,  # type: ignore[arg-type]
    )


@pytest.fixture(name="encoder")
def encoder_fixture(settings: Settings) -> DelegatingPasswordEncoder:
    """Encoder for a standard tenant."""
    return build_encoder(settings)


@pytest.fixture(name="regulated_encoder")
def regulated_encoder_fixture(
    regulated_settings: Settings,
) -> DelegatingPasswordEncoder:
    """Encoder for a regulated tenant."""
    return build_encoder(regulated_settings)


@pytest.fixture(name="registry")
def registry_fixture() -> AlgorithmRegistry:
    """A registry with the two core algorithms, bcrypt by default."""
    return AlgorithmRegistry(
        [
            (ADAPTIVE_SALTED_ID, BcryptHasher(rounds=4)),
            (
                KEYED_KDF_ID,
                Pbkdf2Hasher(
                    pepper=TEST_PEPPER.encode("utf-8"), iterations=1000
                ),
            ),
        ],
        ADAPTIVE_SALTED_ID,
    )
