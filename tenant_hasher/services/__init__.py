# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Tenant hasher services."""

from .credential_service import (
    DEV_USERS,
    CredentialExistsError,
    CredentialService,
)
from .credential_store import CredentialStore, InMemoryCredentialStore

__all__ = [
    "DEV_USERS",
    "CredentialExistsError",
    "CredentialService",
    "CredentialStore",
    "InMemoryCredentialStore",
]
