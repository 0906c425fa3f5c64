# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=missing-param-doc
"""Test tenant_hasher.config.settings.*."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from tenant_hasher.config import (
    ENV_PREFIX,
    MIN_PEPPER_LENGTH,
    Settings,
    SettingsManager,
)
from tenant_hasher.hashing import TenantClass


def test_default_settings() -> None:
    """Ensure default settings are loaded properly."""
    settings = Settings()
    assert settings.tenant_class is TenantClass.STANDARD
    assert settings.pepper.get_secret_value() == ""
    assert settings.bcrypt_rounds == 12
    assert settings.kdf_iterations == 310000
    assert settings.kdf_digest == "sha256"
    assert settings.log_level == "INFO"


@patch.dict(
    os.environ,
    {
        f"{ENV_PREFIX}TENANT_CLASS": "healthcare",
        f"{ENV_PREFIX}PEPPER": "p" * MIN_PEPPER_LENGTH,
        f"{ENV_PREFIX}KDF_ITERATIONS": "1000",
        f"{ENV_PREFIX}KDF_DIGEST": "SHA512",
    },
)
def test_env_override() -> None:
    """Ensure environment variables override default settings."""
    settings = Settings()
    assert settings.tenant_class is TenantClass.REGULATED
    assert settings.pepper.get_secret_value() == "p" * MIN_PEPPER_LENGTH
    assert settings.kdf_iterations == 1000
    assert settings.kdf_digest == "sha512"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("regulated", TenantClass.REGULATED),
        ("Retail", TenantClass.STANDARD),
        ("something-else", TenantClass.STANDARD),
        (TenantClass.REGULATED, TenantClass.REGULATED),
    ],
)
def test_tenant_class_validator(value: object, expected: TenantClass) -> None:
    """Test that tenant classes are resolved, unknown ones to standard."""
    settings = Settings(
        tenant_class=value,  # type: ignore[arg-type]
        pepper="p" * MIN_PEPPER_LENGTH,  # type: ignore[arg-type]
    )
    assert settings.tenant_class is expected


def test_log_level_validator() -> None:
    """Test log level is converted to uppercase."""
    settings = Settings(log_level="debug")
    assert settings.log_level == "DEBUG"


def test_pepper_is_secret() -> None:
    """Test the pepper is not shown in dumps or reprs."""
    pepper = "super-secret-pepper-value"
    settings = Settings(pepper=pepper)  # type: ignore[arg-type]
    assert pepper not in repr(settings)
    assert pepper not in settings.model_dump_json()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bcrypt_rounds": 3},
        {"bcrypt_rounds": 32},
        {"kdf_iterations": 0},
        {"kdf_iterations": 10_000_001},
        {"argon2_time_cost": 65},
        {"kdf_salt_length": 4},
        {"kdf_key_length": 8},
        {"kdf_digest": "md5"},
    ],
)
def test_invalid_values(kwargs: dict[str, object]) -> None:
    """Test that out of range tuning values are rejected."""
    with pytest.raises(ValidationError):
        Settings(**kwargs)  # type: ignore[arg-type]


def test_regulated_pepper_required_outside_tests() -> None:
    """Test that a regulated tenant needs a long enough pepper."""
    with patch(
        "tenant_hasher.config.settings.is_testing", return_value=False
    ):
        with pytest.raises(ValidationError):
            Settings(
                tenant_class=TenantClass.REGULATED,
                pepper="short",  # type: ignore[arg-type]
            )


def test_regulated_pepper_fixed_in_tests(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test that testing mode substitutes a fixed pepper."""
    first = Settings(tenant_class=TenantClass.REGULATED)
    second = Settings(tenant_class=TenantClass.REGULATED)
    pepper = first.pepper.get_secret_value()
    assert len(pepper) >= MIN_PEPPER_LENGTH
    assert pepper == second.pepper.get_secret_value()
    assert "fixed pepper" in caplog.text


def test_settings_manager() -> None:
    """Test the settings are loaded once."""
    settings = SettingsManager.get_settings()
    assert SettingsManager.get_settings() is settings
    assert SettingsManager.load_settings() is settings
    assert SettingsManager.load_settings(force_reload=True) is not settings
    SettingsManager.reset_settings()
    assert SettingsManager.get_settings() is not settings
    assert SettingsManager.is_testing() is True


def test_settings_manager_use_settings() -> None:
    """Test replacing the process settings."""
    loaded = SettingsManager.get_settings()
    custom = Settings(
        tenant_class=TenantClass.REGULATED,
        pepper="p" * MIN_PEPPER_LENGTH,  # type: ignore[arg-type]
    )
    assert SettingsManager.use_settings(custom) is custom
    assert SettingsManager.get_settings() is custom
    assert SettingsManager.get_settings() is not loaded
