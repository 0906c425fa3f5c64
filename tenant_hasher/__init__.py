# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Prefix tagged, tenant aware password encoding."""

from ._version import __version__
from .factory import build_encoder, build_registry
from .hashing import (
    AlgorithmRegistry,
    DelegatingPasswordEncoder,
    MalformedHashError,
    PasswordEncodingError,
    TenantClass,
    UnsupportedAlgorithmError,
)

__all__ = [
    "__version__",
    "build_encoder",
    "build_registry",
    "AlgorithmRegistry",
    "DelegatingPasswordEncoder",
    "MalformedHashError",
    "PasswordEncodingError",
    "TenantClass",
    "UnsupportedAlgorithmError",
]
