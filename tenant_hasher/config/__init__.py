# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Configuration module for the tenant hasher."""

from ._common import ENV_PREFIX, ROOT_DIR, TRUTHY
from .settings import MIN_PEPPER_LENGTH, Settings
from .settings_manager import SettingsManager

__all__ = [
    "Settings",
    "SettingsManager",
    "ENV_PREFIX",
    "ROOT_DIR",
    "TRUTHY",
    "MIN_PEPPER_LENGTH",
]
