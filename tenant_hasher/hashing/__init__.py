# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tagged password hashing and verification."""

from ._argon_hasher import Argon2Hasher
from ._bcrypt_hasher import BcryptHasher
from ._pbkdf2_hasher import Pbkdf2Hasher
from ._scrypt_hasher import ScryptHasher
from .codec import decode_tagged, encode_tagged
from .dispatcher import DelegatingPasswordEncoder
from .errors import (
    DuplicateAlgorithmIdError,
    InvalidAlgorithmIdError,
    MalformedHashError,
    PasswordEncodingError,
    RegistryError,
    UnknownDefaultAlgorithmError,
    UnsupportedAlgorithmError,
)
from .policy import (
    ADAPTIVE_SALTED_ID,
    ARGON2_ID,
    KEYED_KDF_ID,
    SCRYPT_ID,
    TenantClass,
    select_default_algorithm,
)
from .protocol import Algorithm
from .registry import AlgorithmRegistry

__all__ = [
    "ADAPTIVE_SALTED_ID",
    "ARGON2_ID",
    "KEYED_KDF_ID",
    "SCRYPT_ID",
    "Algorithm",
    "AlgorithmRegistry",
    "Argon2Hasher",
    "BcryptHasher",
    "DelegatingPasswordEncoder",
    "Pbkdf2Hasher",
    "ScryptHasher",
    "TenantClass",
    "decode_tagged",
    "encode_tagged",
    "select_default_algorithm",
    "PasswordEncodingError",
    "InvalidAlgorithmIdError",
    "MalformedHashError",
    "UnsupportedAlgorithmError",
    "RegistryError",
    "DuplicateAlgorithmIdError",
    "UnknownDefaultAlgorithmError",
]
