# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Logging configuration module."""

import logging.config
import os
import sys
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, get_args

ENV_PREFIX = "TENANT_HASHER_"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


# fmt: off
def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict (for ``logging.config.dictConfig``)
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s",  # pylint: disable=line-too-long # noqa: E501
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "handlers": ["default"],
            "level": log_level,
        },
        "loggers": {
            "tenant_hasher": {
                "level": log_level,
                "propagate": True,
            },
        },
    }
# fmt: on


def _requested_level() -> Optional[str]:
    """Get the level requested on the command line or in the environment."""
    args = sys.argv[1:]
    if "--debug" in args:
        return "DEBUG"
    for index, arg in enumerate(args):
        if arg.startswith("--log-level="):
            return arg.split("=", 1)[1]
        if arg == "--log-level" and index + 1 < len(args):
            return args[index + 1]
    return os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the default log level.

    ``--debug`` wins over ``--log-level``, which wins over the
    ``TENANT_HASHER_LOG_LEVEL`` environment variable.

    Returns
    -------
    LogLevelType
        The default log level (INFO if nothing valid is requested)
    """
    requested = (_requested_level() or "").upper()
    possible_log_levels: Tuple[LogLevelType, ...] = get_args(LogLevelType)
    if requested in possible_log_levels:
        return requested  # type: ignore[return-value]
    return "INFO"


def configure_logging(log_level: str) -> None:
    """Apply the logging configuration.

    Parameters
    ----------
    log_level : str
        The log level
    """
    logging.config.dictConfig(get_logging_config(log_level))
