"""Data types for the stimulus generator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

CONDITIONS: tuple[str, ...] = ("HI", "HD")
"""Condition tags in generation order."""


@dataclass(frozen=True, slots=True)
class Trial:
    """Immutable record of one generated trial.

    Attributes:
        condition: ``'HI'`` or ``'HD'``.
        trial_idx: Position within the sequence (0-based).
        tau: Trials since the last change-point, after this trial's update.
        changed: True if the hidden state was resampled on this trial.
        state: Hidden state, in ``[0, STATE_RANGE]``.
        observation: Noisy draw around ``state``, in ``[0, STATE_RANGE]``.
        hazard_rate: Change probability used on this trial.
        tutorial_phase: Tutorial phase (1-based), or None for main trials.
        is_tutorial: True for tutorial trials.
        likelihood_half_width: Half-width actually used for the observation.
    """

    condition: str
    trial_idx: int
    tau: int
    changed: bool
    state: float
    observation: float
    hazard_rate: float
    tutorial_phase: int | None
    is_tutorial: bool
    likelihood_half_width: float

    def to_dict(self) -> dict[str, Any]:
        """Return the record under the persisted field names."""
        return {
            "trial_idx": self.trial_idx,
            "condition": self.condition,
            "tau_true": self.tau,
            "change_flag": self.changed,
            "s_t": self.state,
            "x_t": self.observation,
            "hazard_rate": self.hazard_rate,
            "tutorial_phase": self.tutorial_phase,
            "is_tutorial": self.is_tutorial,
            "likelihood_width": self.likelihood_half_width,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Trial:
        """Inverse of :meth:`to_dict`.

        Raises:
            KeyError: If a persisted field is missing.
        """
        phase = data["tutorial_phase"]
        return cls(
            condition=str(data["condition"]),
            trial_idx=int(data["trial_idx"]),
            tau=int(data["tau_true"]),
            changed=bool(data["change_flag"]),
            state=float(data["s_t"]),
            observation=float(data["x_t"]),
            hazard_rate=float(data["hazard_rate"]),
            tutorial_phase=None if phase is None else int(phase),
            is_tutorial=bool(data["is_tutorial"]),
            likelihood_half_width=float(data["likelihood_width"]),
        )


TrialSequence = tuple[Trial, ...]
"""Ordered, immutable trials sharing a condition and purpose."""


@dataclass(frozen=True, slots=True)
class ConditionSequences:
    """All sequences generated for one condition.

    Attributes:
        tutorials: One sequence per tutorial phase, phase 1 first.
        main: The main-experiment sequence.
    """

    tutorials: tuple[TrialSequence, ...]
    main: TrialSequence


SessionSequences = Mapping[str, ConditionSequences]
"""Read-only mapping from condition tag to that condition's sequences."""
