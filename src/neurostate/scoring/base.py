"""Base class for scoring rules.

A scoring rule turns the distance between a participant's estimate and the
true hidden state into a point value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ScoringRule(ABC):
    """Abstract base class for estimate scoring."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered rule identifier."""

    @property
    @abstractmethod
    def max_points(self) -> float:
        """Points awarded for a perfect estimate."""

    @abstractmethod
    def points_for_distance(self, distance: float) -> float:
        """Return the points for an absolute error of *distance* (>= 0)."""

    def score(self, estimate: float, true_state: float) -> float:
        """Score *estimate* against *true_state*.

        Args:
            estimate: Participant's estimate, in state units.
            true_state: Hidden state of the trial.

        Returns:
            Points awarded.
        """
        return self.points_for_distance(abs(estimate - true_state))

    def describe(self) -> dict[str, Any]:
        """Return the rule's parameters for logging and export."""
        return {"rule": self.name, "maxPoints": self.max_points}
