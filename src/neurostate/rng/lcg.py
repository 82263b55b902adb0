"""Linear congruential stream.

The recurrence is fixed for the lifetime of the package: changing any
constant changes every downstream stimulus sequence.
"""

from __future__ import annotations

from typing import Any

from neurostate.rng.base import SEED_LIMIT, RandomStream, validate_seed
from neurostate.rng.registry import register_stream

_MULTIPLIER = 1664525
_INCREMENT = 1013904223


@register_stream("lcg")
class LCGStream(RandomStream):
    """``state = (state * 1664525 + 1013904223) mod 2**32``.

    Each draw returns ``state / 2**32``, so outputs lie in ``[0, 1)`` and
    the sequence is bit-identical on every platform for a given seed.

    Args:
        seed: Initial state, an integer in ``[0, 2**32)``.
    """

    def __init__(self, seed: int = 12345) -> None:
        super().__init__(seed)
        self._current = self._seed

    @property
    def name(self) -> str:
        """Return ``'lcg'``."""
        return "lcg"

    @property
    def current(self) -> int:
        """Current 32-bit state."""
        return self._current

    def set_seed(self, seed: int) -> None:
        self._seed = validate_seed(seed)
        self._current = self._seed

    def next(self) -> float:
        self._current = (self._current * _MULTIPLIER + _INCREMENT) % SEED_LIMIT
        return self._current / SEED_LIMIT

    def describe(self) -> dict[str, Any]:
        info = super().describe()
        info["current"] = self._current
        return info
