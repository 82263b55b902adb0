"""Scoring subsystem for neurostate.

Maps the distance between an estimate and the true state to points.
"""

from __future__ import annotations

from neurostate.scoring.base import ScoringRule
from neurostate.scoring.linear import LinearScoringRule
from neurostate.scoring.registry import ScoringRuleRegistry
from neurostate.scoring.tiered import TieredScoringRule

_DEFAULT_RULE = TieredScoringRule()


def score(estimate: float, true_state: float, rule: ScoringRule | None = None) -> float:
    """Score an estimate with *rule* (the default tiered rule when None)."""
    if rule is None:
        rule = _DEFAULT_RULE
    return rule.score(estimate, true_state)


__all__ = [
    "LinearScoringRule",
    "ScoringRule",
    "ScoringRuleRegistry",
    "TieredScoringRule",
    "score",
]
