# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing algorithm protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Algorithm(Protocol):  # pragma: no cover
    """Protocol for the algorithms a registry dispatches to.

    Payloads are untagged: the algorithm id prefix is added and
    removed by the codec, never by the algorithm itself.
    """

    def hash(self, raw: bytes) -> str:
        """Hash a raw secret.

        Parameters
        ----------
        raw : bytes
            The raw secret
        """
        ...

    def verify(self, raw: bytes, payload: str) -> bool:
        """Verify a raw secret against a payload.

        Parameters
        ----------
        raw : bytes
            The raw secret
        payload : str
            The stored (untagged) payload
        """
        ...

    def needs_rehash(self, payload: str) -> bool:
        """Check if the payload was made with outdated parameters.

        Parameters
        ----------
        payload : str
            The stored (untagged) payload
        """
        ...


__all__ = ["Algorithm"]
