# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tenant hasher settings module."""

import logging
from typing import Any, Literal

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated, Self

from ..hashing._argon_hasher import (
    MAX_ARGON2_MEMORY_COST,
    MAX_ARGON2_TIME_COST,
)
from ..hashing._pbkdf2_hasher import MAX_PBKDF2_ITERATIONS
from ..hashing.policy import TenantClass
from ._common import ENV_PREFIX, is_testing, load_dot_env, to_kebab
from ._hashing import (
    get_argon2_memory_cost,
    get_argon2_parallelism,
    get_argon2_time_cost,
    get_bcrypt_rounds,
    get_kdf_digest,
    get_kdf_iterations,
    get_kdf_key_length,
    get_kdf_salt_length,
    get_pepper,
    get_tenant_class,
)

LOG = logging.getLogger(__name__)

MIN_PEPPER_LENGTH = 16
KdfDigestType = Literal["sha1", "sha256", "sha512"]


class Settings(BaseSettings):
    """Settings class."""

    tenant_class: TenantClass = TenantClass.parse(get_tenant_class())
    pepper: SecretStr = SecretStr(get_pepper())
    # adaptive-salted (bcrypt)
    bcrypt_rounds: Annotated[int, Field(ge=4, le=31)] = get_bcrypt_rounds()
    # keyed-kdf (PBKDF2)
    kdf_iterations: Annotated[
        int, Field(ge=1, le=MAX_PBKDF2_ITERATIONS)
    ] = get_kdf_iterations()
    kdf_salt_length: Annotated[int, Field(ge=8, le=64)] = (
        get_kdf_salt_length()
    )
    kdf_key_length: Annotated[int, Field(ge=16, le=128)] = (
        get_kdf_key_length()
    )
    kdf_digest: KdfDigestType = get_kdf_digest()  # type: ignore[assignment]
    # argon2id
    argon2_time_cost: Annotated[
        int, Field(ge=1, le=MAX_ARGON2_TIME_COST)
    ] = get_argon2_time_cost()
    argon2_memory_cost: Annotated[
        int, Field(ge=8, le=MAX_ARGON2_MEMORY_COST)
    ] = get_argon2_memory_cost()
    argon2_parallelism: Annotated[int, Field(ge=1)] = (
        get_argon2_parallelism()
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        load_dot_env()
        return cls()

    @classmethod
    def is_testing(cls) -> bool:
        """Check if the settings are for testing.

        Returns
        -------
        bool
            Whether the settings are for testing
        """
        return is_testing()

    # pylint: disable=unused-argument
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        Any
            The upper-cased log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @field_validator("tenant_class", mode="before")
    @classmethod
    def validate_tenant_class(
        cls, value: Any, info: ValidationInfo
    ) -> TenantClass:
        """Resolve the tenant class, unknown labels fall back to standard.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        TenantClass
            The tenant class
        """
        return TenantClass.parse(value)

    @field_validator("kdf_digest", mode="before")
    @classmethod
    def validate_kdf_digest(cls, value: Any, info: ValidationInfo) -> Any:
        """Lower-case the digest name.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        Any
            The lower-cased digest name
        """
        if isinstance(value, str):
            return value.strip().lower()
        return value  # pragma: no cover

    @model_validator(mode="after")
    def validate_pepper(self) -> Self:
        """Require a pepper when new hashes use the keyed derivation.

        Returns
        -------
        Settings
            The settings instance after validation

        Raises
        ------
        ValueError
            If a regulated tenant has no (long enough) pepper
        """
        if self.tenant_class is not TenantClass.REGULATED:
            return self
        if len(self.pepper.get_secret_value()) >= MIN_PEPPER_LENGTH:
            return self
        if not self.is_testing():
            raise ValueError(
                "A pepper of at least "
                f"{MIN_PEPPER_LENGTH} characters is required "
                "for regulated tenants"
            )
        LOG.warning(
            "Using a fixed pepper in testing mode, set %sPEPPER if needed",
            ENV_PREFIX,
        )
        # a fixed string (for all tests) to avoid randomness
        self.pepper = SecretStr((ENV_PREFIX.lower() + "pepper") * 2)
        return self
