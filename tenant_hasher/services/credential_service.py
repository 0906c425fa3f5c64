# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Registration and login over a credential store.

Hashes made with another algorithm than the current default are
re-encoded after a successful login. Nothing is migrated in the
background: a credential is upgraded only when its owner logs in.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from ..hashing import DelegatingPasswordEncoder
from ..hashing.dispatcher import RawSecret
from .credential_store import CredentialStore

LOG = logging.getLogger(__name__)

DEV_USERS: Mapping[str, str] = MappingProxyType(
    {
        "alice_global": "password123",
        "bob_global": "securePass456",
    }
)


class CredentialExistsError(Exception):
    """The identity already has a credential."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"Credential already exists for {identity!r}")
        self.identity = identity


class CredentialService:
    """Register, log in and change passwords."""

    def __init__(
        self,
        encoder: DelegatingPasswordEncoder,
        store: CredentialStore,
        rehash_stale: bool = False,
    ) -> None:
        """Initialize the service.

        Parameters
        ----------
        encoder : DelegatingPasswordEncoder
            The password encoder.
        store : CredentialStore
            Where the tagged hashes are kept.
        rehash_stale : bool, optional
            Also re-encode hashes of the default algorithm that were
            made with outdated parameters, by default False.
        """
        self.encoder = encoder
        self.store = store
        self.rehash_stale = rehash_stale

    def register(self, identity: str, raw: RawSecret) -> str:
        """Store a new credential.

        Parameters
        ----------
        identity : str
            The identity.
        raw : RawSecret
            The raw secret.

        Returns
        -------
        str
            The stored tagged hash.

        Raises
        ------
        CredentialExistsError
            If the identity already has a credential.
        """
        if self.store.find(identity) is not None:
            raise CredentialExistsError(identity)
        tagged = self.encoder.encode(raw)
        # a concurrent registration may have won while encoding
        if not self.store.add(identity, tagged):
            raise CredentialExistsError(identity)
        return tagged

    def login(self, identity: str, raw: RawSecret) -> bool:
        """Check a secret, upgrading the stored hash on success.

        Parameters
        ----------
        identity : str
            The identity.
        raw : RawSecret
            The raw secret.

        Returns
        -------
        bool
            Whether the secret matches the stored credential.
        """
        tagged = self.store.find(identity)
        if tagged is None:
            return False
        if not self.encoder.matches(raw, tagged):
            return False
        if self._should_reencode(tagged):
            self.store.save(identity, self.encoder.encode(raw))
            LOG.debug(
                "Upgraded credential of %r to %s",
                identity,
                self.encoder.default_algorithm_id,
            )
        return True

    def change_password(
        self, identity: str, current: RawSecret, new: RawSecret
    ) -> bool:
        """Replace a credential after checking the current secret.

        Parameters
        ----------
        identity : str
            The identity.
        current : RawSecret
            The current raw secret.
        new : RawSecret
            The new raw secret.

        Returns
        -------
        bool
            Whether the credential was replaced.
        """
        tagged = self.store.find(identity)
        if tagged is None or not self.encoder.matches(current, tagged):
            return False
        self.store.save(identity, self.encoder.encode(new))
        return True

    def seed(self, users: Mapping[str, str] = DEV_USERS) -> int:
        """Register users that do not exist yet (development only).

        Parameters
        ----------
        users : Mapping[str, str], optional
            Identities and raw secrets, by default two demo users.

        Returns
        -------
        int
            How many users were added.
        """
        added = 0
        for identity, raw in users.items():
            try:
                self.register(identity, raw)
            except CredentialExistsError:
                LOG.info("User %r already exists, skipping", identity)
                continue
            LOG.info("User %r added", identity)
            added += 1
        return added

    def _should_reencode(self, tagged: str) -> bool:
        if self.rehash_stale:
            return self.encoder.needs_rehash(tagged)
        return self.encoder.needs_upgrade(tagged)


__all__ = ["CredentialService", "CredentialExistsError", "DEV_USERS"]
