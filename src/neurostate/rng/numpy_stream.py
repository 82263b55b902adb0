"""Stream backed by ``numpy.random.default_rng``.

Deterministic for a given seed and numpy bit generator (PCG64), but a
different stream from :class:`~neurostate.rng.lcg.LCGStream`: sequences
generated with it do not match LCG-seeded sessions.
"""

from __future__ import annotations

import numpy as np

from neurostate.rng.base import RandomStream, validate_seed
from neurostate.rng.registry import register_stream


@register_stream("numpy")
class NumpyStream(RandomStream):
    """PCG64 stream via ``np.random.default_rng(seed)``.

    Args:
        seed: Seed passed to ``default_rng``.
    """

    def __init__(self, seed: int = 12345) -> None:
        super().__init__(seed)
        self._rng = np.random.default_rng(self._seed)

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    def set_seed(self, seed: int) -> None:
        self._seed = validate_seed(seed)
        self._rng = np.random.default_rng(self._seed)

    def next(self) -> float:
        return float(self._rng.random())

    def next_array(self, n: int) -> np.ndarray:
        """Vectorised draw; consumes the generator like *n* scalar draws."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return self._rng.random(n)
