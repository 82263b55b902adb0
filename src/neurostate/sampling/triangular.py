"""Symmetric triangular sampling by inverse CDF.

For a uniform draw ``u`` the sample is::

    u < 0.5:  center - h + h * sqrt(2u)
    u >= 0.5: center + h - h * sqrt(2(1 - u))

which has standard deviation ``h / sqrt(6)``. Every sample is clamped to the
state line, so callers can rely on ``0 <= sample <= upper``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from neurostate.coords import STATE_RANGE

if TYPE_CHECKING:
    from neurostate.rng.base import RandomStream


def clamp_state(value: float, upper: float = STATE_RANGE) -> float:
    """Clamp *value* to ``[0, upper]``."""
    return max(0.0, min(upper, value))


def triangular_from_uniform(u: float, center: float, half_width: float) -> float:
    """Map a uniform value onto the triangular distribution (unclamped).

    *u* is first clamped to ``[0, 1]`` so the square roots stay real.
    """
    u = max(0.0, min(1.0, u))
    if u < 0.5:
        return center - half_width + half_width * math.sqrt(2.0 * u)
    return center + half_width - half_width * math.sqrt(2.0 * (1.0 - u))


def sample_triangular(
    center: float,
    half_width: float,
    rng: RandomStream,
    upper: float = STATE_RANGE,
) -> float:
    """Draw one triangular sample over ``[center - half_width, center + half_width]``.

    Consumes exactly one draw from *rng*.

    Args:
        center: Mode of the distribution.
        half_width: Distance from the mode to either edge (>= 0).
        rng: Stream supplying the uniform draw.
        upper: Upper clamp bound (the state range).

    Returns:
        The clamped sample.

    Raises:
        ValueError: If *half_width* is negative.
    """
    if half_width < 0:
        raise ValueError(f"half_width must be >= 0, got {half_width}")
    return clamp_state(triangular_from_uniform(rng.next(), center, half_width), upper)
