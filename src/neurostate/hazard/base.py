"""Base class for hazard models.

A hazard model maps ``tau`` (trials since the last change-point) to the
probability that the hidden state changes on the current trial.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class HazardModel(ABC):
    """Abstract base class for per-condition hazard functions."""

    @property
    @abstractmethod
    def condition(self) -> str:
        """Condition tag this model implements (e.g., ``'HI'``)."""

    @abstractmethod
    def hazard(self, tau: float) -> float:
        """Return the change probability for *tau*, in ``[0, 1]``.

        Args:
            tau: Trials since the last change-point.
        """

    def __call__(self, tau: float) -> float:
        return self.hazard(tau)
