# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Lookup helpers shared by the configuration modules.

A value is taken from the command line (``--flag value`` or
``--flag=value``), then from a ``TENANT_HASHER_*`` environment variable
(a root ``.env`` file is loaded without overriding the environment),
then from a fallback. Values that cannot be parsed fall back too, the
settings model reports invalid values on its own.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "TENANT_HASHER_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"
TRUTHY = ("true", "1", "yes", "y", "on")

T = TypeVar("T")


def load_dot_env() -> bool:
    """Load the root ``.env`` file if there is one.

    Returns
    -------
    bool
        Whether a file was loaded
    """
    if not DOT_ENV_PATH.exists():
        return False
    return load_dotenv(DOT_ENV_PATH, override=False)


load_dot_env()


def is_testing() -> bool:
    """Check if we are in testing mode.

    Returns
    -------
    bool
        Whether we are in testing mode
    """
    flag = os.environ.get(f"{ENV_PREFIX}TESTING", "")
    return flag.lower() in TRUTHY or "pytest" in sys.modules


def to_kebab(value: str) -> str:
    """Convert a field name to its cli form (``kdf_digest -> kdf-digest``).

    Parameters
    ----------
    value : str
        The string to convert

    Returns
    -------
    str
        The converted string
    """
    return value.replace("_", "-")


def cli_value(flag: str) -> Optional[str]:
    """Get the value given to a cli flag, if any.

    Parameters
    ----------
    flag : str
        The flag, for example ``--kdf-iterations``

    Returns
    -------
    Optional[str]
        The last value given to the flag or None
    """
    found: Optional[str] = None
    args = sys.argv[1:]
    for index, arg in enumerate(args):
        if arg.startswith(f"{flag}="):
            found = arg[len(flag) + 1 :]
        elif arg == flag and index + 1 < len(args):
            found = args[index + 1]
    return found or None


def env_value(key: str, skip_prefix: bool = False) -> Optional[str]:
    """Get a non empty environment variable.

    Parameters
    ----------
    key : str
        The variable name, without the prefix
    skip_prefix : bool, optional
        Use the name as is, by default False

    Returns
    -------
    Optional[str]
        The value or None
    """
    name = key if skip_prefix else f"{ENV_PREFIX}{key}"
    return os.environ.get(name) or None


def bounded(
    minimum: int, maximum: Optional[int] = None
) -> Callable[[str], int]:
    """Make a cast that only accepts integers in a range.

    Parameters
    ----------
    minimum : int
        The smallest accepted value
    maximum : Optional[int], optional
        The largest accepted value, by default unbounded

    Returns
    -------
    Callable[[str], int]
        The cast, raising ValueError for values out of range
    """

    def _cast(value: str) -> int:
        number = int(value)
        if number < minimum or (maximum is not None and number > maximum):
            raise ValueError(f"{number} is out of range")
        return number

    return _cast


def one_of(*choices: str) -> Callable[[str], str]:
    """Make a cast that only accepts (case insensitive) choices.

    Parameters
    ----------
    *choices : str
        The accepted lower case values

    Returns
    -------
    Callable[[str], str]
        The cast, raising ValueError for other values
    """

    def _cast(value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in choices:
            raise ValueError(f"{value!r} is not one of {choices}")
        return normalized

    return _cast


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
    skip_prefix: bool = False,
) -> T:
    """Get a value from cli args, env vars, or the fallback.

    Parameters
    ----------
    cli_key : str
        The cli flag
    env_key : str
        The environment variable key
    cast : Callable[[str], T]
        Parses the raw string, raising ValueError or TypeError if invalid
    fallback : T
        The fallback value
    skip_prefix : bool, optional
        Whether to skip the prefix for the env var, by default False

    Returns
    -------
    T
        The value
    """
    for raw in (cli_value(cli_key), env_value(env_key, skip_prefix)):
        if raw is None:
            continue
        try:
            return cast(raw)
        except (ValueError, TypeError):
            return fallback
    return fallback
