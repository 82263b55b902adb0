"""Targeted exploration moves on change-points.

The policy is pure configuration: which trials are eligible, how often an
eligible change-point explores, and where it goes. Disabling it leaves the
bimodal transition as the only change mechanism.

Placement by band of the current state (fractions of the state range):

    state < 0.3          -> triangular(0.7, 0.2)
    state > 0.7          -> triangular(0.3, 0.2)
    otherwise            -> triangular(0.15, 0.1) or triangular(0.85, 0.1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from neurostate.coords import STATE_RANGE
from neurostate.sampling.triangular import sample_triangular

if TYPE_CHECKING:
    from neurostate.rng.base import RandomStream


@dataclass(frozen=True, slots=True)
class ExplorationPolicy:
    """When and how a change-point jumps to an under-visited region.

    Attributes:
        enabled: Master switch. When False no trial is eligible and no
            draws are consumed.
        probability: Chance that an eligible change-point explores.
        interval: Main-sequence trials ``t > 0`` with ``t % interval == 0``
            are eligible.
        in_tutorials: Every tutorial trial is eligible.
        lower_band: States below this fraction count as "low".
        upper_band: States above this fraction count as "high".
        low_target: Centre fraction used when leaving the high band.
        high_target: Centre fraction used when leaving the low band.
        band_half_width: Half-width fraction for band-leaving moves.
        boundary_targets: Centre fractions tried from the middle band.
        boundary_half_width: Half-width fraction for boundary moves.
        upper: Upper bound of the state line.
    """

    enabled: bool = True
    probability: float = 0.3
    interval: int = 50
    in_tutorials: bool = True
    lower_band: float = 0.3
    upper_band: float = 0.7
    low_target: float = 0.3
    high_target: float = 0.7
    band_half_width: float = 0.2
    boundary_targets: tuple[float, float] = (0.15, 0.85)
    boundary_half_width: float = 0.1
    upper: float = STATE_RANGE

    @classmethod
    def from_config(cls, config: Any) -> ExplorationPolicy:
        """Build from a NeuroStateConfig (or compatible object)."""
        return cls(
            enabled=config.exploration_enabled,
            probability=config.exploration_probability,
            interval=config.exploration_interval,
        )

    def is_eligible(self, trial_index: int, is_tutorial: bool) -> bool:
        """Return True if a change on this trial may explore."""
        if not self.enabled:
            return False
        if is_tutorial and self.in_tutorials:
            return True
        return trial_index > 0 and trial_index % self.interval == 0

    def try_explore(self, current_state: float, rng: RandomStream) -> float | None:
        """Draw the exploration gate and, if it passes, the explored state.

        Args:
            current_state: State before the change.
            rng: Stream supplying the draws.

        Returns:
            The explored state, or ``None`` when the gate fails (the caller
            then applies the regular transition).
        """
        if rng.next() >= self.probability:
            return None

        span = self.upper
        if current_state < span * self.lower_band:
            return sample_triangular(
                span * self.high_target, span * self.band_half_width, rng, span
            )
        if current_state > span * self.upper_band:
            return sample_triangular(
                span * self.low_target, span * self.band_half_width, rng, span
            )

        low, high = self.boundary_targets
        target = low if rng.next() < 0.5 else high
        return sample_triangular(span * target, span * self.boundary_half_width, rng, span)
