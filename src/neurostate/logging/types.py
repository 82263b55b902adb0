"""Data types for the trial logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrialRecord:
    """Immutable record of one answered trial, as persisted and exported.

    Field names are the export column names.

    Attributes:
        pid: Participant identifier.
        condition: ``'HI'`` or ``'HD'``.
        block_idx: Index of the block the trial belongs to.
        trial_idx: Index of the trial within its block.
        tau_true: Trials since the last change-point.
        change_flag: True if the hidden state changed on this trial.
        s_t: Hidden state.
        x_t: Observation shown to the participant.
        click_x: Participant's estimate, in state units.
        rt_ms: Reaction time: click time minus trial onset (ms).
        repeated_click_flag: True if the estimate equals the previous one.
        points_awarded: Points for this trial.
        score_total_at_checkpoint: Running score after this trial.
        show_past_dots_flag: Between-subjects display flag.
        tutorial_phase: Tutorial phase, or None for main trials.
    """

    # Identity
    pid: str
    condition: str
    block_idx: int
    trial_idx: int

    # Stimulus
    tau_true: int
    change_flag: bool
    s_t: float
    x_t: float

    # Response
    click_x: float
    rt_ms: float
    repeated_click_flag: bool

    # Score
    points_awarded: float
    score_total_at_checkpoint: float

    # Display / phase
    show_past_dots_flag: bool
    tutorial_phase: int | None
