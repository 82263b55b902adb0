"""Headless experiment session: the driver a presentation layer calls into.

Walks one participant through the precomputed sequences of their condition:

    tutorial phase 1 -> ... -> tutorial phase N -> main block -> finished

For every trial the display calls ``begin_trial(onset_ms)`` when the
observation appears and ``respond(click_state, click_time_ms)`` when the
participant clicks. The session scores the estimate, keeps the running
total, logs a :class:`~neurostate.logging.types.TrialRecord` and advances.
Timing is supplied by the caller; the session never reads a clock.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from neurostate.config import load_config
from neurostate.exceptions import SessionStateError
from neurostate.export import ExperimentData
from neurostate.generator.types import CONDITIONS
from neurostate.logging.logger import TrialLogger
from neurostate.logging.types import TrialRecord
from neurostate.scoring.registry import ScoringRuleRegistry

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig
    from neurostate.generator.types import SessionSequences, Trial, TrialSequence

logger = logging.getLogger("neurostate")


def generate_participant_id(rng: np.random.Generator | None = None) -> str:
    """Return a random participant id of the form ``P01234``.

    Uses its own generator so the stimulus stream is never consumed.
    """
    if rng is None:
        rng = np.random.default_rng()
    return f"P{int(rng.integers(0, 100000)):05d}"


def assign_condition(rng: np.random.Generator | None = None) -> str:
    """Pick ``'HI'`` or ``'HD'`` with equal probability."""
    if rng is None:
        rng = np.random.default_rng()
    return CONDITIONS[int(rng.integers(0, len(CONDITIONS)))]


class ExperimentSession:
    """One participant's pass through tutorial and main blocks.

    Args:
        sequences: Session sequences from
            :meth:`~neurostate.generator.assembler.StimulusGenerator.generate_all_sequences`.
        condition: ``'HI'`` or ``'HD'``; assigned at random when None.
        participant_id: Identifier; generated when None.
        config: Active configuration (scoring rule, logging, display flag).
            ``None`` loads the environment defaults.

    Raises:
        SessionStateError: If *condition* has no sequences.
    """

    def __init__(
        self,
        sequences: SessionSequences,
        *,
        condition: str | None = None,
        participant_id: str | None = None,
        config: NeuroStateConfig | None = None,
    ) -> None:
        self._config = config if config is not None else load_config()
        self._condition = condition if condition is not None else assign_condition()
        if self._condition not in sequences:
            raise SessionStateError(f"No sequences for condition {self._condition!r}")
        self._participant_id = (
            participant_id if participant_id is not None else generate_participant_id()
        )

        group = sequences[self._condition]
        # (tutorial_phase, trials); phase None marks the main block.
        self._blocks: list[tuple[int | None, TrialSequence]] = [
            (phase, seq) for phase, seq in enumerate(group.tutorials, start=1)
        ]
        self._blocks.append((None, group.main))

        self._scoring = ScoringRuleRegistry.build(self._config)
        self._trial_logger = TrialLogger(self._config)
        self._show_past_dots = self._config.show_past_dots
        self._data = ExperimentData(self._participant_id, self._condition)

        self._block_pos = 0
        self._trial_idx = 0
        self._total_score = 0.0
        self._onset_ms: float | None = None
        self._skip_empty_blocks()

        logger.info(
            "ExperimentSession started: pid=%s, condition=%s, blocks=%d, scoring=%s",
            self._participant_id,
            self._condition,
            len(self._blocks),
            self._scoring.name,
        )

    # --- State ---

    @property
    def participant_id(self) -> str:
        return self._participant_id

    @property
    def condition(self) -> str:
        return self._condition

    @property
    def is_finished(self) -> bool:
        return self._block_pos >= len(self._blocks)

    @property
    def tutorial_phase(self) -> int | None:
        """Current tutorial phase, or None in the main block or when finished."""
        if self.is_finished:
            return None
        return self._blocks[self._block_pos][0]

    @property
    def is_tutorial(self) -> bool:
        return self.tutorial_phase is not None

    @property
    def block_idx(self) -> int:
        """0-based index of the current block among all blocks."""
        return self._block_pos

    @property
    def trial_idx(self) -> int:
        return self._trial_idx

    @property
    def total_score(self) -> float:
        return self._total_score

    @property
    def show_true_state(self) -> bool:
        """Whether the display reveals the true state (tutorial phases 2 and up)."""
        phase = self.tutorial_phase
        return phase is not None and phase >= 2

    @property
    def current_trial(self) -> Trial | None:
        if self.is_finished:
            return None
        return self._blocks[self._block_pos][1][self._trial_idx]

    @property
    def progress(self) -> float:
        """Fraction of the current block already answered."""
        if self.is_finished:
            return 1.0
        return self._trial_idx / len(self._blocks[self._block_pos][1])

    @property
    def trial_logger(self) -> TrialLogger:
        return self._trial_logger

    @property
    def experiment_data(self) -> ExperimentData:
        return self._data

    # --- Driving ---

    def begin_trial(self, onset_ms: float) -> Trial:
        """Mark the current trial's observation as shown.

        Args:
            onset_ms: Display timestamp of the observation onset.

        Returns:
            The trial being presented.

        Raises:
            SessionStateError: If the session is finished.
        """
        trial = self.current_trial
        if trial is None:
            raise SessionStateError("Session is finished; no trial to begin")
        self._onset_ms = onset_ms
        return trial

    def respond(self, click_state: float, click_time_ms: float) -> TrialRecord:
        """Record the participant's estimate for the current trial and advance.

        Args:
            click_state: Estimate in state units (see
                :func:`neurostate.coords.coord_to_state`).
            click_time_ms: Timestamp of the click, on the same clock as
                the onset passed to :meth:`begin_trial`.

        Returns:
            The logged record.

        Raises:
            SessionStateError: If the session is finished or no trial was begun.
        """
        trial = self.current_trial
        if trial is None:
            raise SessionStateError("Session is finished; no trial to respond to")
        if self._onset_ms is None:
            raise SessionStateError("respond() called before begin_trial()")

        points = self._scoring.score(click_state, trial.state)
        self._total_score += points
        previous = self._data.trials[-1] if self._data.trials else None

        record = TrialRecord(
            pid=self._participant_id,
            condition=self._condition,
            block_idx=self._block_pos,
            trial_idx=self._trial_idx,
            tau_true=trial.tau,
            change_flag=trial.changed,
            s_t=trial.state,
            x_t=trial.observation,
            click_x=click_state,
            rt_ms=click_time_ms - self._onset_ms,
            repeated_click_flag=previous is not None and previous.click_x == click_state,
            points_awarded=points,
            score_total_at_checkpoint=self._total_score,
            show_past_dots_flag=self._show_past_dots,
            tutorial_phase=trial.tutorial_phase,
        )
        self._data.trials.append(record)
        self._trial_logger.log_trial(record)

        self._onset_ms = None
        self._advance()
        return record

    def _advance(self) -> None:
        self._trial_idx += 1
        if self._trial_idx >= len(self._blocks[self._block_pos][1]):
            finished_phase = self._blocks[self._block_pos][0]
            self._block_pos += 1
            self._trial_idx = 0
            self._skip_empty_blocks()
            logger.info(
                "Block complete (%s); score=%g",
                "main" if finished_phase is None else f"tutorial phase {finished_phase}",
                self._total_score,
            )
            if self.is_finished:
                logger.info(
                    "ExperimentSession finished: pid=%s, trials=%d, score=%g",
                    self._participant_id,
                    len(self._data.trials),
                    self._total_score,
                )

    def _skip_empty_blocks(self) -> None:
        while not self.is_finished and not self._blocks[self._block_pos][1]:
            self._block_pos += 1

    # --- Results ---

    def summary(self) -> dict[str, Any]:
        """Summarise the answered trials.

        Returns:
            ``total_trials``, ``total_points``, ``mean_points``,
            ``mean_rt_ms`` (over positive reaction times) and ``accuracy``
            (points as a fraction of the maximum possible). Zeros when no
            trial has been answered.
        """
        trials = self._data.trials
        n = len(trials)
        if n == 0:
            return {
                "total_trials": 0,
                "total_points": 0.0,
                "mean_points": 0.0,
                "mean_rt_ms": 0.0,
                "accuracy": 0.0,
            }
        total = sum(t.points_awarded for t in trials)
        rts = [t.rt_ms for t in trials if t.rt_ms > 0]
        max_possible = self._scoring.max_points * n
        return {
            "total_trials": n,
            "total_points": total,
            "mean_points": total / n,
            "mean_rt_ms": sum(rts) / len(rts) if rts else 0.0,
            "accuracy": total / max_possible if max_possible > 0 else 0.0,
        }
