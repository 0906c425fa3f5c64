# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Argon2id password hasher."""

from dataclasses import dataclass, field
from typing import Optional

from argon2 import Parameters, PasswordHasher, Type, extract_parameters
from argon2.exceptions import InvalidHashError, VerificationError

# payloads asking for more (memory in KiB) are not verified
MAX_ARGON2_MEMORY_COST = 1 << 21
MAX_ARGON2_TIME_COST = 64


def _parameters(payload: str) -> Optional[Parameters]:
    if not payload.startswith("$argon2"):
        return None
    try:
        params = extract_parameters(payload)
    except InvalidHashError:
        return None
    if params.memory_cost > MAX_ARGON2_MEMORY_COST:
        return None
    if params.time_cost > MAX_ARGON2_TIME_COST:
        return None
    return params


@dataclass(frozen=True)
class Argon2Hasher:
    """Argon2id hasher.

    The payload is the standard PHC string, so cost parameters travel
    with it and verification does not depend on the running settings.
    """

    time_cost: int = 2
    memory_cost: int = 65536  # 64 MiB
    parallelism: int = 1
    hash_len: int = 32
    salt_len: int = 16
    _ph: PasswordHasher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.memory_cost > MAX_ARGON2_MEMORY_COST:
            raise ValueError(
                f"argon2 memory cost too high: {self.memory_cost}"
            )
        if self.time_cost > MAX_ARGON2_TIME_COST:
            raise ValueError(f"argon2 time cost too high: {self.time_cost}")
        object.__setattr__(
            self,
            "_ph",
            PasswordHasher(
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.hash_len,
                salt_len=self.salt_len,
                type=Type.ID,
            ),
        )

    def hash(self, raw: bytes) -> str:
        """Hash a raw secret using argon2id.

        Parameters
        ----------
        raw : bytes
            The raw secret to hash.

        Returns
        -------
        str
            The argon2 payload.
        """
        return self._ph.hash(raw)

    def verify(self, raw: bytes, payload: str) -> bool:
        """Verify a raw secret against an argon2 payload.

        Parameters
        ----------
        raw : bytes
            The raw secret to check.
        payload : str
            The stored argon2 payload.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if _parameters(payload) is None:
            return False
        try:
            return self._ph.verify(payload, raw)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, payload: str) -> bool:
        """Check if the payload was made with different parameters.

        Parameters
        ----------
        payload : str
            The stored argon2 payload

        Returns
        -------
        bool
            True if the payload needs rehash, False otherwise
        """
        if _parameters(payload) is None:
            return True
        return self._ph.check_needs_rehash(payload)


__all__ = [
    "Argon2Hasher",
    "MAX_ARGON2_MEMORY_COST",
    "MAX_ARGON2_TIME_COST",
]
