"""State-space coverage statistics over a generated sequence.

Pure functions: nothing here touches a random stream, and the results never
feed back into generation.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from neurostate.coords import STATE_RANGE
from neurostate.coverage.types import CoverageReport, QuartileDistribution, RangeStats

if TYPE_CHECKING:
    from collections.abc import Iterable

    from neurostate.generator.types import TrialSequence


def range_stats(values: Iterable[float], state_range: float = STATE_RANGE) -> RangeStats:
    """Compute min, max, mean and range coverage of *values*.

    Args:
        values: Values on the state line.
        state_range: Length of the state line.

    Returns:
        RangeStats; NaN statistics and zero coverage for no values.
    """
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return RangeStats(min=math.nan, max=math.nan, mean=math.nan, coverage=0.0)
    lo = float(arr.min())
    hi = float(arr.max())
    return RangeStats(min=lo, max=hi, mean=float(arr.mean()), coverage=(hi - lo) / state_range)


def quartile_distribution(
    values: Iterable[float], state_range: float = STATE_RANGE
) -> QuartileDistribution:
    """Count *values* per quarter of ``[0, state_range]``.

    Bins are half-open except the last, which includes ``state_range``:
    ``[0, r/4) [r/4, r/2) [r/2, 3r/4) [3r/4, r]``.
    """
    arr = np.asarray(list(values), dtype=np.float64)
    counts, _ = np.histogram(arr, bins=4, range=(0.0, state_range))
    total = int(arr.size)
    if total == 0:
        percentages = (0.0, 0.0, 0.0, 0.0)
    else:
        percentages = tuple(round(float(c) / total * 100.0, 1) for c in counts)
    return QuartileDistribution(
        counts=tuple(int(c) for c in counts),  # type: ignore[arg-type]
        percentages=percentages,  # type: ignore[arg-type]
    )


def analyze_sequence(
    sequence: TrialSequence,
    condition: str | None = None,
    state_range: float = STATE_RANGE,
) -> CoverageReport:
    """Summarise how much of the state line a sequence visits.

    Args:
        sequence: Generated trials (typically a main sequence).
        condition: Tag for the report; taken from the first trial when omitted.
        state_range: Length of the state line.

    Returns:
        CoverageReport for the sequence.
    """
    if condition is None:
        condition = sequence[0].condition if sequence else ""
    states = [trial.state for trial in sequence]
    observations = [trial.observation for trial in sequence]
    return CoverageReport(
        condition=condition,
        n_trials=len(sequence),
        states=range_stats(states, state_range),
        observations=range_stats(observations, state_range),
        quartiles=quartile_distribution(states, state_range),
    )
