# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Keyed (peppered) PBKDF2 password hasher."""

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ._kdf_payload import format_payload, parse_payload

PBKDF2_DIGESTS = ("sha1", "sha256", "sha512")
_SCHEME_PREFIX = "pbkdf2-"
_PARAMS = ("i",)
# payloads asking for more iterations than this are not verified
MAX_PBKDF2_ITERATIONS = 10_000_000


def _parse(payload: str) -> Optional[Tuple[str, int, bytes, bytes]]:
    """Get the digest, iterations, salt and key of a payload."""
    parsed = parse_payload(payload, _PARAMS)
    if parsed is None or not parsed.scheme.startswith(_SCHEME_PREFIX):
        return None
    digest = parsed.scheme[len(_SCHEME_PREFIX) :]
    if digest not in PBKDF2_DIGESTS:
        return None
    if not 1 <= parsed.params["i"] <= MAX_PBKDF2_ITERATIONS:
        return None
    return digest, parsed.params["i"], parsed.salt, parsed.key


@dataclass(frozen=True)
class Pbkdf2Hasher:
    """PBKDF2-HMAC hasher with a process wide pepper.

    The pepper is appended to the raw secret before derivation and is
    never part of the payload. Verification uses the digest, iteration
    count, salt and key length stored in the payload, so raising the
    iteration count never breaks older hashes.
    """

    pepper: bytes = field(default=b"", repr=False)
    salt_len: int = 16
    iterations: int = 310000
    digest: str = "sha256"
    dklen: int = 32

    def __post_init__(self) -> None:
        if self.digest not in PBKDF2_DIGESTS:
            raise ValueError(f"Unsupported PBKDF2 digest: {self.digest}")
        if not 1 <= self.iterations <= MAX_PBKDF2_ITERATIONS:
            raise ValueError(
                "PBKDF2 iterations must be between 1 and "
                f"{MAX_PBKDF2_ITERATIONS}"
            )
        if self.salt_len < 1 or self.dklen < 1:
            raise ValueError("PBKDF2 salt and key lengths must be positive")

    def _derive(
        self, raw: bytes, salt: bytes, digest: str, iterations: int, dklen: int
    ) -> bytes:
        return hashlib.pbkdf2_hmac(
            digest, raw + self.pepper, salt, iterations, dklen=dklen
        )

    def hash(self, raw: bytes) -> str:
        """Hash a raw secret using PBKDF2.

        Parameters
        ----------
        raw : bytes
            The raw secret to hash.

        Returns
        -------
        str
            The PBKDF2 payload
            (``pbkdf2-<digest>$i=<iterations>$<b64 salt>$<b64 key>``).
        """
        salt = secrets.token_bytes(self.salt_len)
        key = self._derive(raw, salt, self.digest, self.iterations, self.dklen)
        return format_payload(
            f"{_SCHEME_PREFIX}{self.digest}",
            [("i", self.iterations)],
            salt,
            key,
        )

    def verify(self, raw: bytes, payload: str) -> bool:
        """Verify a raw secret against a PBKDF2 payload.

        Parameters
        ----------
        raw : bytes
            The raw secret to check.
        payload : str
            The stored PBKDF2 payload.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        parsed = _parse(payload)
        if parsed is None:
            return False
        digest, iterations, salt, stored_key = parsed
        key = self._derive(raw, salt, digest, iterations, len(stored_key))
        return hmac.compare_digest(key, stored_key)

    def needs_rehash(self, payload: str) -> bool:
        """Check if the payload was made with different parameters.

        Parameters
        ----------
        payload : str
            The stored PBKDF2 payload

        Returns
        -------
        bool
            True if the payload needs rehash, False otherwise
        """
        parsed = _parse(payload)
        if parsed is None:
            return True
        digest, iterations, salt, key = parsed
        return (digest, iterations, len(salt), len(key)) != (
            self.digest,
            self.iterations,
            self.salt_len,
            self.dklen,
        )


__all__ = ["Pbkdf2Hasher", "PBKDF2_DIGESTS", "MAX_PBKDF2_ITERATIONS"]
