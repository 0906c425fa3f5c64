# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised while encoding or matching tagged password hashes."""


class PasswordEncodingError(Exception):
    """Base class for all password encoding errors."""


class InvalidAlgorithmIdError(PasswordEncodingError, ValueError):
    """The algorithm id is empty or contains a brace."""

    def __init__(self, algorithm_id: str) -> None:
        super().__init__(f"Invalid algorithm id: {algorithm_id!r}")
        self.algorithm_id = algorithm_id


class MalformedHashError(PasswordEncodingError, ValueError):
    """The stored value is not a validly tagged hash."""


class UnsupportedAlgorithmError(PasswordEncodingError, LookupError):
    """The tag names an algorithm that is not registered."""

    def __init__(self, algorithm_id: str) -> None:
        super().__init__(f"Unsupported algorithm: {algorithm_id!r}")
        self.algorithm_id = algorithm_id


class RegistryError(PasswordEncodingError):
    """The algorithm registry could not be built."""


class DuplicateAlgorithmIdError(RegistryError):
    """The same algorithm id was registered more than once."""

    def __init__(self, algorithm_id: str) -> None:
        super().__init__(f"Duplicate algorithm id: {algorithm_id!r}")
        self.algorithm_id = algorithm_id


class UnknownDefaultAlgorithmError(RegistryError):
    """The default algorithm id is not among the registered ids."""

    def __init__(self, algorithm_id: str) -> None:
        super().__init__(f"Unknown default algorithm: {algorithm_id!r}")
        self.algorithm_id = algorithm_id


__all__ = [
    "PasswordEncodingError",
    "InvalidAlgorithmIdError",
    "MalformedHashError",
    "UnsupportedAlgorithmError",
    "RegistryError",
    "DuplicateAlgorithmIdError",
    "UnknownDefaultAlgorithmError",
]
