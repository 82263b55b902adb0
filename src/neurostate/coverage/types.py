"""Data types for coverage analysis."""

from __future__ import annotations

from dataclasses import dataclass

QUARTILE_KEYS: tuple[str, str, str, str] = ("q1", "q2", "q3", "q4")


@dataclass(frozen=True, slots=True)
class RangeStats:
    """Spread of a set of values on the state line.

    Attributes:
        min: Smallest value (NaN when empty).
        max: Largest value (NaN when empty).
        mean: Arithmetic mean (NaN when empty).
        coverage: ``(max - min) / STATE_RANGE`` (0.0 when empty).
    """

    min: float
    max: float
    mean: float
    coverage: float


@dataclass(frozen=True, slots=True)
class QuartileDistribution:
    """Occupancy of the four equal bins of ``[0, STATE_RANGE]``.

    Attributes:
        counts: Values per bin, lowest bin first.
        percentages: Share of values per bin, rounded to one decimal.
    """

    counts: tuple[int, int, int, int]
    percentages: tuple[float, float, float, float]

    def as_dict(self) -> dict[str, dict[str, float]]:
        """Return ``{'counts': {'q1': ...}, 'percentages': {'q1': ...}}``."""
        return {
            "counts": dict(zip(QUARTILE_KEYS, self.counts)),
            "percentages": dict(zip(QUARTILE_KEYS, self.percentages)),
        }


@dataclass(frozen=True, slots=True)
class CoverageReport:
    """Diagnostic summary of one condition's main sequence.

    Attributes:
        condition: Condition tag.
        n_trials: Number of trials analysed.
        states: Spread of hidden states.
        observations: Spread of observations.
        quartiles: Bin occupancy of hidden states.
    """

    condition: str
    n_trials: int
    states: RangeStats
    observations: RangeStats
    quartiles: QuartileDistribution
