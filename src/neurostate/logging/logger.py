"""Diagnostic logger for answered trials.

Uses the standard ``logging`` module with the ``"neurostate"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig
    from neurostate.logging.types import TrialRecord

logger = logging.getLogger("neurostate")


class TrialLogger:
    """Per-trial diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per trial with the key metrics (state,
        click, error, points, reaction time).

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: NeuroStateConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[TrialRecord] = []

    def log_trial(self, record: TrialRecord) -> None:
        """Log a single answered trial.

        Args:
            record: Immutable record of the trial.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "pid=%s cond=%s block=%d trial=%d%s s=%.2f x=%.2f click=%.2f "
                "err=%.2f points=%g total=%g rt=%.1fms",
                record.pid,
                record.condition,
                record.block_idx,
                record.trial_idx,
                "" if record.tutorial_phase is None else f" phase={record.tutorial_phase}",
                record.s_t,
                record.x_t,
                record.click_x,
                abs(record.click_x - record.s_t),
                record.points_awarded,
                record.score_total_at_checkpoint,
                record.rt_ms,
            )
        elif self._log_level == "full":
            logger.info("trial_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[TrialRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all TrialRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        errors = [abs(r.click_x - r.s_t) for r in self._records]
        points = [r.points_awarded for r in self._records]
        positive_rts = [r.rt_ms for r in self._records if r.rt_ms > 0]
        repeated = sum(1 for r in self._records if r.repeated_click_flag)

        return {
            "total_trials": n,
            "total_points": sum(points),
            "mean_points": sum(points) / n,
            "mean_abs_error": sum(errors) / n,
            "max_abs_error": max(errors),
            "mean_rt_ms": sum(positive_rts) / len(positive_rts) if positive_rts else 0.0,
            "change_count": sum(1 for r in self._records if r.change_flag),
            "repeated_click_count": repeated,
            "repeated_click_rate": repeated / n,
        }
