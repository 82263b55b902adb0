"""Linear scoring: points fall off with distance until they reach zero.

    points = max(0, max_points - floor(distance * points_per_unit))

With the defaults a perfect estimate earns 100 points and anything 50 or
more state units away earns none.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from neurostate.exceptions import ConfigValidationError
from neurostate.scoring.base import ScoringRule
from neurostate.scoring.registry import ScoringRuleRegistry

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig


@ScoringRuleRegistry.register("linear")
class LinearScoringRule(ScoringRule):
    """Integer points decreasing linearly with the error.

    Args:
        max_points: Points for a perfect estimate.
        points_per_unit: Points lost per state unit of error (> 0).
    """

    def __init__(self, max_points: float = 100.0, points_per_unit: float = 2.0) -> None:
        if points_per_unit <= 0:
            raise ConfigValidationError(f"points_per_unit must be > 0, got {points_per_unit}")
        self._max_points = max_points
        self._points_per_unit = points_per_unit

    @classmethod
    def from_config(cls, config: NeuroStateConfig) -> LinearScoringRule:
        return cls(
            max_points=config.linear_max_points,
            points_per_unit=config.linear_points_per_unit,
        )

    @property
    def name(self) -> str:
        return "linear"

    @property
    def max_points(self) -> float:
        return self._max_points

    def points_for_distance(self, distance: float) -> float:
        return max(0.0, self._max_points - math.floor(distance * self._points_per_unit))

    def describe(self) -> dict[str, Any]:
        return {
            "rule": self.name,
            "maxPoints": self._max_points,
            "pointsPerUnit": self._points_per_unit,
        }
