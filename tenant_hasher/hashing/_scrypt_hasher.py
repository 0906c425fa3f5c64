# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Scrypt password hasher."""

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ._kdf_payload import format_payload, parse_payload

_SCHEME = "scrypt"
_PARAMS = ("n", "r", "p")
# payloads asking for more memory than this are not verified
MAX_SCRYPT_MEMORY = 1 << 29


def _memory(n: int, r: int, p: int) -> int:
    return 128 * r * (n + p + 2)


def _valid_params(n: int, r: int, p: int) -> bool:
    return n > 1 and n & (n - 1) == 0 and r >= 1 and p >= 1


@dataclass(frozen=True)
class ScryptHasher:
    """Scrypt password hasher.

    Kept so that scrypt hashes stay verifiable, verification reads the
    cost parameters from the payload.
    """

    n: int = 16384  # 2^14
    r: int = 8
    p: int = 1
    dklen: int = 64
    salt_len: int = 16

    def __post_init__(self) -> None:
        if not _valid_params(self.n, self.r, self.p):
            raise ValueError(
                "scrypt n must be a power of two above 1, r and p positive"
            )
        if _memory(self.n, self.r, self.p) > MAX_SCRYPT_MEMORY:
            raise ValueError("scrypt parameters need too much memory")
        if self.salt_len < 1 or self.dklen < 1:
            raise ValueError("scrypt salt and key lengths must be positive")

    @staticmethod
    def _derive(
        raw: bytes, salt: bytes, params: Dict[str, int], dklen: int
    ) -> bytes:
        n, r, p = params["n"], params["r"], params["p"]
        return hashlib.scrypt(
            raw,
            salt=salt,
            n=n,
            r=r,
            p=p,
            dklen=dklen,
            maxmem=2 * _memory(n, r, p),
        )

    @staticmethod
    def _parse(payload: str) -> Optional[Tuple[Dict[str, int], bytes, bytes]]:
        parsed = parse_payload(payload, _PARAMS)
        if parsed is None or parsed.scheme != _SCHEME:
            return None
        n, r, p = (parsed.params[name] for name in _PARAMS)
        if not _valid_params(n, r, p) or _memory(n, r, p) > MAX_SCRYPT_MEMORY:
            return None
        return parsed.params, parsed.salt, parsed.key

    @property
    def _params(self) -> Dict[str, int]:
        return {"n": self.n, "r": self.r, "p": self.p}

    def hash(self, raw: bytes) -> str:
        """Hash a raw secret using scrypt.

        Parameters
        ----------
        raw : bytes
            The raw secret to hash.

        Returns
        -------
        str
            The scrypt payload (``scrypt$n=..$r=..$p=..$<salt>$<key>``).
        """
        salt = secrets.token_bytes(self.salt_len)
        key = self._derive(raw, salt, self._params, self.dklen)
        return format_payload(_SCHEME, list(self._params.items()), salt, key)

    def verify(self, raw: bytes, payload: str) -> bool:
        """Verify a raw secret against a scrypt payload.

        Parameters
        ----------
        raw : bytes
            The raw secret to check.
        payload : str
            The stored scrypt payload.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        parsed = self._parse(payload)
        if parsed is None:
            return False
        params, salt, stored_key = parsed
        try:
            key = self._derive(raw, salt, params, len(stored_key))
        except (ValueError, MemoryError):
            return False
        return hmac.compare_digest(key, stored_key)

    def needs_rehash(self, payload: str) -> bool:
        """Check if the payload was made with different parameters.

        Parameters
        ----------
        payload : str
            The stored scrypt payload

        Returns
        -------
        bool
            True if the payload needs rehash, False otherwise
        """
        parsed = self._parse(payload)
        if parsed is None:
            return True
        params, salt, key = parsed
        return (
            params != self._params
            or len(salt) != self.salt_len
            or len(key) != self.dklen
        )


__all__ = ["ScryptHasher", "MAX_SCRYPT_MEMORY"]
