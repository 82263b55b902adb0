"""Tiered scoring: full credit near the target, partial credit further out.

    d <= radius       -> full_credit
    d <= 2 * radius   -> partial_credit
    otherwise         -> beyond
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from neurostate.exceptions import ConfigValidationError
from neurostate.scoring.base import ScoringRule
from neurostate.scoring.registry import ScoringRuleRegistry

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig


@ScoringRuleRegistry.register("tiered")
class TieredScoringRule(ScoringRule):
    """Three-tier reward by distance.

    Args:
        radius: Base radius for full credit (> 0).
        full_credit: Points within ``radius``.
        partial_credit: Points within ``2 * radius``.
        beyond: Points further out.

    Raises:
        ConfigValidationError: If *radius* is not positive.
    """

    def __init__(
        self,
        radius: float = 10.0,
        full_credit: float = 1.0,
        partial_credit: float = 0.25,
        beyond: float = 0.0,
    ) -> None:
        if radius <= 0:
            raise ConfigValidationError(f"Scoring radius must be > 0, got {radius}")
        self._radius = radius
        self._full_credit = full_credit
        self._partial_credit = partial_credit
        self._beyond = beyond

    @classmethod
    def from_config(cls, config: NeuroStateConfig) -> TieredScoringRule:
        return cls(
            radius=config.score_radius,
            full_credit=config.full_credit,
            partial_credit=config.partial_credit,
        )

    @property
    def name(self) -> str:
        return "tiered"

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def full_credit(self) -> float:
        return self._full_credit

    @property
    def partial_credit(self) -> float:
        return self._partial_credit

    @property
    def beyond(self) -> float:
        return self._beyond

    @property
    def max_points(self) -> float:
        return self._full_credit

    def points_for_distance(self, distance: float) -> float:
        if distance <= self._radius:
            return self._full_credit
        if distance <= 2 * self._radius:
            return self._partial_credit
        return self._beyond

    def describe(self) -> dict[str, Any]:
        return {
            "rule": self.name,
            "radius": self._radius,
            "fullCredit": self._full_credit,
            "partialCredit": self._partial_credit,
            "beyond": self._beyond,
        }
