# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Adaptive salted bcrypt hasher."""

import base64
import hashlib
import hmac
import re
from dataclasses import dataclass

import bcrypt

BCRYPT_MAX_BYTES = 72
# "$2b$<cost>$" followed by the 22 character salt
_SETTING_LENGTH = 29
_BCRYPT_RE = re.compile(r"^\$(2[aby])\$(\d{2})\$[./A-Za-z0-9]{53}$")


def _prepare(raw: bytes, setting: bytes) -> bytes:
    """Reduce any input to a fixed size key bcrypt accepts.

    bcrypt only reads the first 72 bytes and rejects NUL bytes. Every
    input goes through HMAC-SHA256 keyed with the salt setting of the
    hash (as ``bcrypt_sha256`` does), so no input is truncated and an
    unsalted digest of a secret is not a substitute for the secret.
    """
    digest = hmac.new(setting, raw, hashlib.sha256).digest()
    return base64.b64encode(digest)


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt hasher.

    The cost (``rounds``) only applies to new hashes, verification
    always uses the cost and salt embedded in the payload.
    """

    rounds: int = 12
    prefix: str = "2b"

    def __post_init__(self) -> None:
        if not 4 <= self.rounds <= 31:
            raise ValueError(f"Invalid bcrypt rounds: {self.rounds}")
        if self.prefix not in ("2a", "2b"):
            raise ValueError(f"Invalid bcrypt prefix: {self.prefix}")

    def hash(self, raw: bytes) -> str:
        """Hash a raw secret using bcrypt.

        Parameters
        ----------
        raw : bytes
            The raw secret to hash.

        Returns
        -------
        str
            The bcrypt payload (``$2b$<cost>$<salt+digest>``) of the
            salted HMAC-SHA256 of the secret.
        """
        salt = bcrypt.gensalt(
            rounds=self.rounds, prefix=self.prefix.encode("ascii")
        )
        return bcrypt.hashpw(_prepare(raw, salt), salt).decode("ascii")

    def verify(self, raw: bytes, payload: str) -> bool:
        """Verify a raw secret against a bcrypt payload.

        Parameters
        ----------
        raw : bytes
            The raw secret to check.
        payload : str
            The stored bcrypt payload.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if not _BCRYPT_RE.match(payload):
            return False
        stored = payload.encode("ascii")
        try:
            return bcrypt.checkpw(
                _prepare(raw, stored[:_SETTING_LENGTH]), stored
            )
        except Exception:  # pylint: disable=broad-exception-caught
            return False

    def needs_rehash(self, payload: str) -> bool:
        """Check if the payload was made with a different cost.

        Parameters
        ----------
        payload : str
            The stored bcrypt payload

        Returns
        -------
        bool
            True if the payload needs rehash, False otherwise
        """
        m = _BCRYPT_RE.match(payload)
        if not m:
            return True
        return int(m.group(2)) != self.rounds


__all__ = ["BcryptHasher", "BCRYPT_MAX_BYTES"]
