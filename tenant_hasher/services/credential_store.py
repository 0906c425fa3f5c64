# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Credential store protocol and an in-memory implementation."""

import threading
from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialStore(Protocol):  # pragma: no cover
    """Where tagged hashes are kept, keyed by identity."""

    def find(self, identity: str) -> Optional[str]:
        """Get the tagged hash of an identity, if any.

        Parameters
        ----------
        identity : str
            The identity (e.g. a username)
        """
        ...

    def save(self, identity: str, tagged: str) -> None:
        """Store (or replace) the tagged hash of an identity.

        Parameters
        ----------
        identity : str
            The identity
        tagged : str
            The tagged hash
        """
        ...

    def add(self, identity: str, tagged: str) -> bool:
        """Store the tagged hash of an identity that has none yet.

        Parameters
        ----------
        identity : str
            The identity
        tagged : str
            The tagged hash
        """
        ...

    def delete(self, identity: str) -> bool:
        """Remove an identity.

        Parameters
        ----------
        identity : str
            The identity
        """
        ...


class InMemoryCredentialStore:
    """Thread safe dict backed credential store."""

    def __init__(self) -> None:
        self._records: Dict[str, str] = {}
        self._lock = threading.Lock()

    def find(self, identity: str) -> Optional[str]:
        """Get the tagged hash of an identity, if any.

        Parameters
        ----------
        identity : str
            The identity

        Returns
        -------
        Optional[str]
            The tagged hash or None
        """
        with self._lock:
            return self._records.get(identity)

    def save(self, identity: str, tagged: str) -> None:
        """Store (or replace) the tagged hash of an identity.

        Parameters
        ----------
        identity : str
            The identity
        tagged : str
            The tagged hash
        """
        with self._lock:
            self._records[identity] = tagged

    def add(self, identity: str, tagged: str) -> bool:
        """Store the tagged hash of an identity that has none yet.

        Parameters
        ----------
        identity : str
            The identity
        tagged : str
            The tagged hash

        Returns
        -------
        bool
            False if the identity already had one (nothing is stored)
        """
        with self._lock:
            if identity in self._records:
                return False
            self._records[identity] = tagged
            return True

    def delete(self, identity: str) -> bool:
        """Remove an identity.

        Parameters
        ----------
        identity : str
            The identity

        Returns
        -------
        bool
            True if the identity existed
        """
        with self._lock:
            return self._records.pop(identity, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


__all__ = ["CredentialStore", "InMemoryCredentialStore"]
