# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hashing related configuration.

Environment variables (with prefix TENANT_HASHER_)
--------------------------------------------------
TENANT_CLASS (str) # default: standard
PEPPER (str) # default: "" (required for regulated tenants)
BCRYPT_ROUNDS (int) # default: 12
KDF_ITERATIONS (int) # default: 310000
KDF_SALT_LENGTH (int) # default: 16
KDF_KEY_LENGTH (int) # default: 32
KDF_DIGEST (str) # default: sha256
ARGON2_TIME_COST (int) # default: 2
ARGON2_MEMORY_COST (int) # default: 65536
ARGON2_PARALLELISM (int) # default: 1

Command line arguments (no prefix)
----------------------------------
--tenant-class (str)
--pepper (str)
--bcrypt-rounds (int)
--kdf-iterations (int)
--kdf-salt-length (int)
--kdf-key-length (int)
--kdf-digest (str)
--argon2-time-cost (int)
--argon2-memory-cost (int)
--argon2-parallelism (int)
"""

from ..hashing._argon_hasher import MAX_ARGON2_TIME_COST
from ..hashing._pbkdf2_hasher import MAX_PBKDF2_ITERATIONS
from ._common import bounded, get_value, one_of

KDF_DIGESTS = ("sha1", "sha256", "sha512")

DEFAULT_TENANT_CLASS = "standard"
DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_KDF_ITERATIONS = 310000
DEFAULT_KDF_SALT_LENGTH = 16
DEFAULT_KDF_KEY_LENGTH = 32
DEFAULT_KDF_DIGEST = "sha256"
DEFAULT_ARGON2_TIME_COST = 2
DEFAULT_ARGON2_MEMORY_COST = 65536
DEFAULT_ARGON2_PARALLELISM = 1


def get_tenant_class() -> str:
    """Get the tenant class label.

    Returns
    -------
    str
        The tenant class label
    """
    return get_value(
        "--tenant-class", "TENANT_CLASS", str, DEFAULT_TENANT_CLASS
    )


def get_pepper() -> str:
    """Get the pepper for keyed derivation hashes.

    Returns
    -------
    str
        The pepper
    """
    return get_value("--pepper", "PEPPER", str, "")


def get_bcrypt_rounds() -> int:
    """Get the bcrypt cost for new hashes.

    Returns
    -------
    int
        The bcrypt cost
    """
    return get_value(
        "--bcrypt-rounds",
        "BCRYPT_ROUNDS",
        bounded(4, 31),
        DEFAULT_BCRYPT_ROUNDS,
    )


def get_kdf_iterations() -> int:
    """Get the PBKDF2 iteration count for new hashes.

    Returns
    -------
    int
        The iteration count
    """
    return get_value(
        "--kdf-iterations",
        "KDF_ITERATIONS",
        bounded(1, MAX_PBKDF2_ITERATIONS),
        DEFAULT_KDF_ITERATIONS,
    )


def get_kdf_salt_length() -> int:
    """Get the PBKDF2 salt length in bytes.

    Returns
    -------
    int
        The salt length
    """
    return get_value(
        "--kdf-salt-length",
        "KDF_SALT_LENGTH",
        bounded(8, 64),
        DEFAULT_KDF_SALT_LENGTH,
    )


def get_kdf_key_length() -> int:
    """Get the PBKDF2 derived key length in bytes.

    Returns
    -------
    int
        The derived key length
    """
    return get_value(
        "--kdf-key-length",
        "KDF_KEY_LENGTH",
        bounded(16, 128),
        DEFAULT_KDF_KEY_LENGTH,
    )


def get_kdf_digest() -> str:
    """Get the PBKDF2 HMAC digest name.

    Returns
    -------
    str
        The digest name
    """
    return get_value(
        "--kdf-digest",
        "KDF_DIGEST",
        one_of(*KDF_DIGESTS),
        DEFAULT_KDF_DIGEST,
    )


def get_argon2_time_cost() -> int:
    """Get the argon2 time cost.

    Returns
    -------
    int
        The argon2 time cost
    """
    return get_value(
        "--argon2-time-cost",
        "ARGON2_TIME_COST",
        bounded(1, MAX_ARGON2_TIME_COST),
        DEFAULT_ARGON2_TIME_COST,
    )


def get_argon2_memory_cost() -> int:
    """Get the argon2 memory cost in KiB.

    Returns
    -------
    int
        The argon2 memory cost
    """
    return get_value(
        "--argon2-memory-cost",
        "ARGON2_MEMORY_COST",
        bounded(8),
        DEFAULT_ARGON2_MEMORY_COST,
    )


def get_argon2_parallelism() -> int:
    """Get the argon2 parallelism.

    Returns
    -------
    int
        The argon2 parallelism
    """
    return get_value(
        "--argon2-parallelism",
        "ARGON2_PARALLELISM",
        bounded(1),
        DEFAULT_ARGON2_PARALLELISM,
    )
