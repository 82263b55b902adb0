"""Abstract base class for all random streams.

Every stimulus draw goes through a :class:`RandomStream` instance that is
passed explicitly to each sampling call. The ABC provides a default
``next_array()`` that delegates to ``next()`` and a concrete ``describe()``
method. Subclasses must implement ``name``, ``set_seed()`` and ``next()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from neurostate.exceptions import ConfigValidationError

SEED_LIMIT = 2**32


def validate_seed(seed: Any) -> int:
    """Check that *seed* is an unsigned 32-bit integer.

    Args:
        seed: Candidate seed value.

    Returns:
        The seed as a plain ``int``.

    Raises:
        ConfigValidationError: If *seed* is not an integer (booleans included)
            or lies outside ``[0, 2**32)``.
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ConfigValidationError(f"Seed must be an integer, got {seed!r}")
    seed = int(seed)
    if not 0 <= seed < SEED_LIMIT:
        raise ConfigValidationError(f"Seed must be in [0, 2**32), got {seed}")
    return seed


class RandomStream(ABC):
    """Abstract base for seeded uniform random streams.

    A stream is a single logical sequence of draws. It is not thread-safe:
    generation advances it strictly sequentially, and the draw order is part
    of the reproducibility contract.
    """

    def __init__(self, seed: int) -> None:
        self._seed = validate_seed(seed)

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered stream identifier (e.g., ``'lcg'``)."""

    @property
    def seed(self) -> int:
        """The seed most recently applied to this stream."""
        return self._seed

    @abstractmethod
    def set_seed(self, seed: int) -> None:
        """Restart the stream from *seed*.

        Raises:
            ConfigValidationError: If *seed* is invalid.
        """

    @abstractmethod
    def next(self) -> float:
        """Return the next uniform draw in ``[0, 1)``."""

    def next_array(self, n: int) -> np.ndarray:
        """Return the next *n* draws as a float64 array.

        The default implementation calls ``next()`` *n* times, so the
        stream advances exactly as if the draws had been taken one by one.

        Args:
            n: Number of draws.

        Returns:
            Array of shape ``(n,)`` with values in ``[0, 1)``.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return np.fromiter((self.next() for _ in range(n)), dtype=np.float64, count=n)

    def describe(self) -> dict[str, Any]:
        """Return a status dictionary for this stream.

        Returns:
            Dictionary with at least ``'stream'`` and ``'seed'`` keys.
        """
        return {"stream": self.name, "seed": self._seed}
