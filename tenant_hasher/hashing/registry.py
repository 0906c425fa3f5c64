# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Immutable registry of password hashing algorithms."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple

from .codec import validate_algorithm_id
from .errors import (
    DuplicateAlgorithmIdError,
    UnknownDefaultAlgorithmError,
    UnsupportedAlgorithmError,
)
from .protocol import Algorithm


class AlgorithmRegistry:
    """Map algorithm ids to algorithms, with one default for new hashes.

    Built once, read-only afterwards. Safe to share between threads.
    """

    __slots__ = ("_algorithms", "_default_id")

    _algorithms: Mapping[str, Algorithm]
    _default_id: str

    def __init__(
        self,
        algorithms: Iterable[Tuple[str, Algorithm]],
        default_id: str,
    ) -> None:
        """Build the registry.

        Parameters
        ----------
        algorithms : Iterable[Tuple[str, Algorithm]]
            The ``(algorithm_id, algorithm)`` pairs.
        default_id : str
            The id of the algorithm to use for new hashes.

        Raises
        ------
        DuplicateAlgorithmIdError
            If an id is given more than once.
        UnknownDefaultAlgorithmError
            If the default id is not among the given ids.
        """
        entries: Dict[str, Algorithm] = {}
        for algorithm_id, algorithm in algorithms:
            validate_algorithm_id(algorithm_id)
            if algorithm_id in entries:
                raise DuplicateAlgorithmIdError(algorithm_id)
            entries[algorithm_id] = algorithm
        if default_id not in entries:
            raise UnknownDefaultAlgorithmError(default_id)
        object.__setattr__(self, "_algorithms", MappingProxyType(entries))
        object.__setattr__(self, "_default_id", default_id)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    @property
    def default_algorithm_id(self) -> str:
        """The id used for new hashes."""
        return self._default_id

    @property
    def ids(self) -> Tuple[str, ...]:
        """The registered ids."""
        return tuple(self._algorithms)

    def get(self, algorithm_id: str) -> Algorithm:
        """Get the algorithm registered under an id.

        Parameters
        ----------
        algorithm_id : str
            The algorithm id.

        Returns
        -------
        Algorithm
            The registered algorithm.

        Raises
        ------
        UnsupportedAlgorithmError
            If nothing is registered under the id.
        """
        try:
            return self._algorithms[algorithm_id]
        except KeyError as error:
            raise UnsupportedAlgorithmError(algorithm_id) from error

    def default_algorithm(self) -> Algorithm:
        """Get the algorithm used for new hashes.

        Returns
        -------
        Algorithm
            The default algorithm.
        """
        return self._algorithms[self._default_id]

    def with_default(self, default_id: str) -> "AlgorithmRegistry":
        """Get a registry with the same algorithms and another default.

        Parameters
        ----------
        default_id : str
            The new default id.

        Returns
        -------
        AlgorithmRegistry
            The new registry.
        """
        return AlgorithmRegistry(self._algorithms.items(), default_id)

    def __contains__(self, algorithm_id: object) -> bool:
        return algorithm_id in self._algorithms

    def __iter__(self) -> Iterator[str]:
        return iter(self._algorithms)

    def __len__(self) -> int:
        return len(self._algorithms)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(ids={self.ids!r}, "
            f"default_id={self._default_id!r})"
        )


__all__ = ["AlgorithmRegistry"]
