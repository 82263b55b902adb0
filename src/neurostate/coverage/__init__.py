"""Coverage analysis for generated sequences.

Diagnostic only: reports how much of the state line a sequence visits.
"""

from neurostate.coverage.analyzer import analyze_sequence, quartile_distribution, range_stats
from neurostate.coverage.types import CoverageReport, QuartileDistribution, RangeStats

__all__ = [
    "CoverageReport",
    "QuartileDistribution",
    "RangeStats",
    "analyze_sequence",
    "quartile_distribution",
    "range_stats",
]
