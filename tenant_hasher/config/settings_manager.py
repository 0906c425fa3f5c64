# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Process wide settings.

The tenant class and the work factors are resolved once, the encoder
built from them lives as long as the process.
"""

import logging
from typing import Optional

from ._common import is_testing
from .settings import Settings

LOG = logging.getLogger(__name__)


class SettingsManager:
    """Hold the settings of the running process."""

    _settings: Optional[Settings] = None

    @classmethod
    def load_settings(cls, force_reload: bool = False) -> Settings:
        """Load the settings from the cli, the environment and ``.env``.

        Parameters
        ----------
        force_reload : bool
            Load again even if already loaded

        Returns
        -------
        Settings
            The settings instance
        """
        if force_reload or cls._settings is None:
            cls._settings = Settings.load()
        return cls._settings

    @classmethod
    def use_settings(cls, settings: Settings) -> Settings:
        """Make already built settings the process settings.

        Parameters
        ----------
        settings : Settings
            The settings (e.g. with a cli override of the tenant class)

        Returns
        -------
        Settings
            The same settings
        """
        if cls._settings is not None and cls._settings is not settings:
            LOG.debug("Replacing the loaded settings")
        cls._settings = settings
        return settings

    @staticmethod
    def is_testing() -> bool:
        """Check if we are in testing mode.

        Returns
        -------
        bool
            True if we are in testing mode, False otherwise
        """
        return is_testing()

    @classmethod
    def get_settings(cls) -> Settings:
        """Get the process settings, loading them on first use.

        Returns
        -------
        Settings
            The settings instance
        """
        if cls._settings is None:
            return cls.load_settings()
        return cls._settings

    @classmethod
    def reset_settings(cls) -> None:
        """Forget the loaded settings."""
        cls._settings = None
