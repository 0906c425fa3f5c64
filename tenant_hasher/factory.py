# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Build the password encoder from the process settings."""

import logging
from typing import List, Optional, Tuple

from anyio import CapacityLimiter

from .config import Settings, SettingsManager
from .hashing import (
    ADAPTIVE_SALTED_ID,
    ARGON2_ID,
    KEYED_KDF_ID,
    SCRYPT_ID,
    Algorithm,
    AlgorithmRegistry,
    Argon2Hasher,
    BcryptHasher,
    DelegatingPasswordEncoder,
    Pbkdf2Hasher,
    ScryptHasher,
    select_default_algorithm,
)

LOG = logging.getLogger(__name__)


def build_algorithms(settings: Settings) -> List[Tuple[str, Algorithm]]:
    """Create the algorithms with their configured parameters.

    Parameters
    ----------
    settings : Settings
        The settings to use.

    Returns
    -------
    List[Tuple[str, Algorithm]]
        The ``(algorithm_id, algorithm)`` pairs.
    """
    return [
        (ADAPTIVE_SALTED_ID, BcryptHasher(rounds=settings.bcrypt_rounds)),
        (
            KEYED_KDF_ID,
            Pbkdf2Hasher(
                pepper=settings.pepper.get_secret_value().encode("utf-8"),
                salt_len=settings.kdf_salt_length,
                iterations=settings.kdf_iterations,
                digest=settings.kdf_digest,
                dklen=settings.kdf_key_length,
            ),
        ),
        (
            ARGON2_ID,
            Argon2Hasher(
                time_cost=settings.argon2_time_cost,
                memory_cost=settings.argon2_memory_cost,
                parallelism=settings.argon2_parallelism,
            ),
        ),
        (SCRYPT_ID, ScryptHasher()),
    ]


def build_registry(settings: Settings) -> AlgorithmRegistry:
    """Create the registry, with the default chosen by the tenant class.

    Parameters
    ----------
    settings : Settings
        The settings to use.

    Returns
    -------
    AlgorithmRegistry
        The registry.
    """
    default_id = select_default_algorithm(settings.tenant_class)
    LOG.info(
        "Tenant class: %s, default algorithm: %s",
        settings.tenant_class.value,
        default_id,
    )
    if not settings.pepper.get_secret_value():
        LOG.debug("No pepper configured for %s hashes", KEYED_KDF_ID)
    return AlgorithmRegistry(build_algorithms(settings), default_id)


def build_encoder(
    settings: Optional[Settings] = None,
    limiter: Optional[CapacityLimiter] = None,
) -> DelegatingPasswordEncoder:
    """Create the password encoder.

    Parameters
    ----------
    settings : Optional[Settings], optional
        The settings to use, by default the process settings.
    limiter : Optional[CapacityLimiter], optional
        Bounds the worker threads of the async variants.

    Returns
    -------
    DelegatingPasswordEncoder
        The encoder.
    """
    if settings is None:
        settings = SettingsManager.get_settings()
    return DelegatingPasswordEncoder(build_registry(settings), limiter=limiter)


__all__ = ["build_algorithms", "build_registry", "build_encoder"]
