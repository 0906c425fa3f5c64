# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Encode and decode ``{algorithm-id}payload`` tagged hashes."""

from typing import Tuple

from .errors import InvalidAlgorithmIdError, MalformedHashError

PREFIX = "{"
SUFFIX = "}"


def validate_algorithm_id(algorithm_id: str) -> str:
    """Validate an algorithm id.

    Parameters
    ----------
    algorithm_id : str
        The algorithm id to check.

    Returns
    -------
    str
        The same algorithm id.

    Raises
    ------
    InvalidAlgorithmIdError
        If the id is empty or contains a brace.
    """
    if (
        not isinstance(algorithm_id, str)
        or not algorithm_id
        or PREFIX in algorithm_id
        or SUFFIX in algorithm_id
    ):
        raise InvalidAlgorithmIdError(algorithm_id)
    return algorithm_id


def encode_tagged(algorithm_id: str, payload: str) -> str:
    """Prefix a payload with its algorithm id.

    Parameters
    ----------
    algorithm_id : str
        The id of the algorithm that produced the payload.
    payload : str
        The algorithm specific payload.

    Returns
    -------
    str
        The tagged hash.

    Raises
    ------
    InvalidAlgorithmIdError
        If the id is empty or contains a brace.
    """
    validate_algorithm_id(algorithm_id)
    return f"{PREFIX}{algorithm_id}{SUFFIX}{payload}"


def decode_tagged(tagged: str) -> Tuple[str, str]:
    """Split a tagged hash into its algorithm id and payload.

    The payload is returned as-is, it is never interpreted here.

    Parameters
    ----------
    tagged : str
        The tagged hash.

    Returns
    -------
    Tuple[str, str]
        The algorithm id and the payload.

    Raises
    ------
    MalformedHashError
        If there is no well formed ``{...}`` prefix.
    """
    if not isinstance(tagged, str) or not tagged.startswith(PREFIX):
        raise MalformedHashError("Tagged hash must start with '{'")
    end = tagged.find(SUFFIX, len(PREFIX))
    if end == -1:
        raise MalformedHashError("Tagged hash has no closing '}'")
    algorithm_id = tagged[len(PREFIX) : end]
    if not algorithm_id:
        raise MalformedHashError("Tagged hash has an empty algorithm id")
    if PREFIX in algorithm_id:
        raise MalformedHashError("Tagged hash has a nested '{'")
    return algorithm_id, tagged[end + len(SUFFIX) :]


__all__ = ["encode_tagged", "decode_tagged", "validate_algorithm_id"]
