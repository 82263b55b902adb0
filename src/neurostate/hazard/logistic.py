"""History-dependent (HD) hazard: a logistic function of ``tau``.

Formula::

    q(tau) = 1 / (1 + exp(-slope * (tau - midpoint)))

With the defaults (midpoint 10, slope 1) a change is very unlikely right
after a change-point and almost certain once the state has been stable for
well over ten trials. ``q(midpoint)`` is exactly 0.5.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from neurostate.exceptions import ConfigValidationError
from neurostate.hazard.base import HazardModel
from neurostate.hazard.registry import HazardModelRegistry

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig


@HazardModelRegistry.register("HD")
class LogisticHazard(HazardModel):
    """Increasing hazard with a fixed midpoint and slope.

    Args:
        midpoint: ``tau`` at which the hazard is 0.5.
        slope: Steepness (> 0).

    Raises:
        ConfigValidationError: If *slope* is not positive.
    """

    def __init__(self, midpoint: float = 10.0, slope: float = 1.0) -> None:
        if slope <= 0:
            raise ConfigValidationError(f"Logistic slope must be > 0, got {slope}")
        self._midpoint = midpoint
        self._slope = slope

    @classmethod
    def from_config(cls, config: NeuroStateConfig) -> LogisticHazard:
        return cls(config.hd_hazard_midpoint, config.hd_hazard_slope)

    @property
    def condition(self) -> str:
        return "HD"

    @property
    def midpoint(self) -> float:
        return self._midpoint

    def hazard(self, tau: float) -> float:
        z = self._slope * (tau - self._midpoint)
        # Branch on sign so exp() never overflows for extreme tau.
        if z >= 0:
            return 1.0 / (1.0 + math.exp(-z))
        e = math.exp(z)
        return e / (1.0 + e)
