# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""``$`` separated payloads of the stdlib key derivation hashers.

Layout: ``<scheme>$<name>=<int>$...$<b64 salt>$<b64 key>``
"""

import base64
import binascii
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

SEPARATOR = "$"


class KdfPayload(NamedTuple):
    """A parsed key derivation payload."""

    scheme: str
    params: Dict[str, int]
    salt: bytes
    key: bytes


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _unb64(text: str) -> bytes:
    return base64.b64decode(text.encode("ascii"), validate=True)


def format_payload(
    scheme: str,
    params: Sequence[Tuple[str, int]],
    salt: bytes,
    key: bytes,
) -> str:
    """Serialize a derived key with everything needed to verify it.

    Parameters
    ----------
    scheme : str
        The scheme name (e.g. ``scrypt`` or ``pbkdf2-sha256``).
    params : Sequence[Tuple[str, int]]
        The cost parameters, in order.
    salt : bytes
        The salt.
    key : bytes
        The derived key.

    Returns
    -------
    str
        The payload.
    """
    fields = [scheme]
    fields.extend(f"{name}={value}" for name, value in params)
    fields.extend((_b64(salt), _b64(key)))
    return SEPARATOR.join(fields)


def parse_payload(
    payload: str, names: Sequence[str]
) -> Optional[KdfPayload]:
    """Parse a payload, None if it does not have the expected layout.

    Parameters
    ----------
    payload : str
        The payload.
    names : Sequence[str]
        The expected parameter names, in order.

    Returns
    -------
    Optional[KdfPayload]
        The parsed payload, or None if malformed.
    """
    parts = payload.split(SEPARATOR)
    if len(parts) != len(names) + 3 or not parts[0]:
        return None
    params: Dict[str, int] = {}
    for name, part in zip(names, parts[1:-2]):
        label, _, value = part.partition("=")
        if label != name or not (value.isascii() and value.isdigit()):
            return None
        params[name] = int(value)
    try:
        salt, key = _unb64(parts[-2]), _unb64(parts[-1])
    except (binascii.Error, ValueError):
        return None
    if not salt or not key:
        return None
    return KdfPayload(parts[0], params, salt, key)


__all__ = ["KdfPayload", "format_payload", "parse_payload"]
