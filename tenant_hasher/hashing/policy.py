# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tenant class to default algorithm selection."""

from enum import Enum
from typing import Any, Dict, Optional

ADAPTIVE_SALTED_ID = "adaptive-salted"
KEYED_KDF_ID = "keyed-kdf"
ARGON2_ID = "argon2id"
SCRYPT_ID = "scrypt"


class TenantClass(str, Enum):
    """The tenant classification of the running process."""

    STANDARD = "standard"
    REGULATED = "regulated"

    @classmethod
    def parse(cls, value: Any) -> "TenantClass":
        """Resolve a configured value to a tenant class.

        Unknown or missing values resolve to the standard class.

        Parameters
        ----------
        value : Any
            A tenant class, its name or value, or a legacy label.

        Returns
        -------
        TenantClass
            The tenant class.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.STANDARD
        label = value.strip().lower()
        return _LABELS.get(label, cls.STANDARD)


_LABELS: Dict[str, TenantClass] = {
    "standard": TenantClass.STANDARD,
    "retail": TenantClass.STANDARD,
    "regulated": TenantClass.REGULATED,
    "healthcare": TenantClass.REGULATED,
}

_DEFAULTS: Dict[TenantClass, str] = {
    TenantClass.REGULATED: KEYED_KDF_ID,
}
_FALLBACK_ID = ADAPTIVE_SALTED_ID


def select_default_algorithm(tenant_class: Optional[Any]) -> str:
    """Get the algorithm id to use for new hashes.

    Parameters
    ----------
    tenant_class : Optional[Any]
        The tenant class (or anything ``TenantClass.parse`` accepts).

    Returns
    -------
    str
        The default algorithm id.
    """
    return _DEFAULTS.get(TenantClass.parse(tenant_class), _FALLBACK_ID)


__all__ = [
    "ADAPTIVE_SALTED_ID",
    "KEYED_KDF_ID",
    "ARGON2_ID",
    "SCRYPT_ID",
    "TenantClass",
    "select_default_algorithm",
]
