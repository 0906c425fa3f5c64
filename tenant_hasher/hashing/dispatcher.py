# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=too-many-try-statements
"""Password encoder delegating to the algorithm named in the hash tag."""

import logging
from typing import Optional, Tuple, Union

import anyio.to_thread
from anyio import CapacityLimiter

from .codec import decode_tagged, encode_tagged
from .errors import MalformedHashError, UnsupportedAlgorithmError
from .protocol import Algorithm
from .registry import AlgorithmRegistry

LOG = logging.getLogger(__name__)

RawSecret = Union[str, bytes]


def _to_bytes(raw: RawSecret) -> bytes:
    if isinstance(raw, str):
        return raw.encode("utf-8")
    return bytes(raw)


class DelegatingPasswordEncoder:
    """Encode with the default algorithm, match against any registered one.

    Every hash is stored as ``{algorithm-id}payload``.
    """

    def __init__(
        self,
        registry: AlgorithmRegistry,
        limiter: Optional[CapacityLimiter] = None,
    ) -> None:
        """Initialize the encoder.

        Parameters
        ----------
        registry : AlgorithmRegistry
            The algorithms to dispatch to.
        limiter : Optional[CapacityLimiter], optional
            Bounds the worker threads used by the async variants,
            by default anyio's shared thread limiter.
        """
        self._registry = registry
        self._limiter = limiter

    @property
    def registry(self) -> AlgorithmRegistry:
        """The algorithm registry."""
        return self._registry

    @property
    def default_algorithm_id(self) -> str:
        """The id used for new hashes."""
        return self._registry.default_algorithm_id

    def encode(self, raw: RawSecret) -> str:
        """Hash with the default algorithm.

        Parameters
        ----------
        raw : RawSecret
            The raw secret, ``str`` values are UTF-8 encoded.

        Returns
        -------
        str
            The tagged hash.
        """
        algorithm_id = self._registry.default_algorithm_id
        payload = self._registry.default_algorithm().hash(_to_bytes(raw))
        return encode_tagged(algorithm_id, payload)

    def matches(self, raw: RawSecret, tagged: str) -> bool:
        """Verify a raw secret against a tagged hash.

        Parameters
        ----------
        raw : RawSecret
            The raw secret to check.
        tagged : str
            The stored tagged hash.

        Returns
        -------
        bool
            True if the secret matches, False if it does not.

        Raises
        ------
        MalformedHashError
            If the stored value is not a tagged hash.
        UnsupportedAlgorithmError
            If the tag names an unregistered algorithm.
        """
        algorithm_id, payload = self._decode(tagged)
        algorithm = self._lookup(algorithm_id)
        return algorithm.verify(_to_bytes(raw), payload)

    def needs_upgrade(self, tagged: str) -> bool:
        """Check if a hash was made with another algorithm than the default.

        Parameters
        ----------
        tagged : str
            The stored tagged hash.

        Returns
        -------
        bool
            True if the hash should be re-encoded with the default.

        Raises
        ------
        MalformedHashError
            If the stored value is not a tagged hash.
        UnsupportedAlgorithmError
            If the tag names an unregistered algorithm.
        """
        return self.algorithm_of(tagged) != self._registry.default_algorithm_id

    def needs_rehash(self, tagged: str) -> bool:
        """Check if a hash needs an upgrade or uses outdated parameters.

        Parameters
        ----------
        tagged : str
            The stored tagged hash.

        Returns
        -------
        bool
            True if the hash should be re-encoded.

        Raises
        ------
        MalformedHashError
            If the stored value is not a tagged hash.
        UnsupportedAlgorithmError
            If the tag names an unregistered algorithm.
        """
        algorithm_id, payload = self._decode(tagged)
        algorithm = self._lookup(algorithm_id)
        if algorithm_id != self._registry.default_algorithm_id:
            return True
        return algorithm.needs_rehash(payload)

    def algorithm_of(self, tagged: str) -> str:
        """Get the (registered) algorithm id of a tagged hash.

        Parameters
        ----------
        tagged : str
            The stored tagged hash.

        Returns
        -------
        str
            The algorithm id.

        Raises
        ------
        MalformedHashError
            If the stored value is not a tagged hash.
        UnsupportedAlgorithmError
            If the tag names an unregistered algorithm.
        """
        algorithm_id, _ = self._decode(tagged)
        self._lookup(algorithm_id)
        return algorithm_id

    async def encode_async(self, raw: RawSecret) -> str:
        """Hash with the default algorithm in a worker thread.

        Parameters
        ----------
        raw : RawSecret
            The raw secret.

        Returns
        -------
        str
            The tagged hash.
        """
        return await anyio.to_thread.run_sync(
            self.encode, raw, limiter=self._limiter
        )

    async def matches_async(self, raw: RawSecret, tagged: str) -> bool:
        """Verify a raw secret against a tagged hash in a worker thread.

        Parameters
        ----------
        raw : RawSecret
            The raw secret to check.
        tagged : str
            The stored tagged hash.

        Returns
        -------
        bool
            True if the secret matches, False if it does not.
        """
        return await anyio.to_thread.run_sync(
            self.matches, raw, tagged, limiter=self._limiter
        )

    @staticmethod
    def _decode(tagged: str) -> Tuple[str, str]:
        try:
            return decode_tagged(tagged)
        except MalformedHashError:
            LOG.warning("Stored value is not a tagged hash")
            raise

    def _lookup(self, algorithm_id: str) -> Algorithm:
        try:
            return self._registry.get(algorithm_id)
        except UnsupportedAlgorithmError:
            LOG.warning(
                "Hash tagged with unsupported algorithm %r", algorithm_id
            )
            raise

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._registry!r})"


__all__ = ["DelegatingPasswordEncoder", "RawSecret"]
