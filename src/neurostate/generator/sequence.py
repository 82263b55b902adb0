"""Trial-by-trial sequence generation.

State machine per sequence::

    state <- uniform(0, STATE_RANGE); tau <- 0
    for t in 0..n-1:
        h <- hazard(condition, tau)
        t == 0:  opening change-point, no change draw, tau stays 0
        t > 0:   changed <- u < h
                 changed -> explore (if eligible and gate passes) or
                            bimodal transition; tau <- 0
                 else    -> tau <- tau + 1
        x <- triangular(state, likelihood half-width)
        emit Trial

All draws come from one stream, in the order above. Changing the order
changes every sequence generated after the change.

Trial 0 takes no change draw, so seeded sequences are not draw-for-draw
compatible with the browser version of the task, which draws one there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from neurostate.coords import STATE_RANGE
from neurostate.exceptions import ConfigValidationError, SequenceGenerationError
from neurostate.generator.types import CONDITIONS, Trial, TrialSequence
from neurostate.hazard.registry import HazardModelRegistry
from neurostate.sampling.exploration import ExplorationPolicy
from neurostate.sampling.transition import TransitionParams, sample_bimodal_transition
from neurostate.sampling.triangular import sample_triangular

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig
    from neurostate.hazard.base import HazardModel
    from neurostate.rng.base import RandomStream

logger = logging.getLogger("neurostate")


class SequenceGenerator:
    """Generates trial sequences from a shared random stream.

    The generator owns no randomness of its own: every draw advances the
    *rng* passed at construction, so interleaving calls to ``generate()``
    changes their output. Hazard models, transition shape and exploration
    policy are fixed at construction from *config*.

    Args:
        config: Active configuration.
        rng: Stream shared by every sequence this generator produces.
    """

    def __init__(self, config: NeuroStateConfig, rng: RandomStream) -> None:
        self._config = config
        self._rng = rng
        self._hazards: dict[str, HazardModel] = {
            condition: HazardModelRegistry.build(condition, config) for condition in CONDITIONS
        }
        self._transition = TransitionParams.from_config(config)
        self._exploration = ExplorationPolicy.from_config(config)
        self._narrow_phases = frozenset(config.narrow_likelihood_phases)

    @property
    def rng(self) -> RandomStream:
        return self._rng

    @property
    def exploration(self) -> ExplorationPolicy:
        return self._exploration

    def likelihood_half_width(self, is_tutorial: bool, tutorial_phase: int | None) -> float:
        """Observation half-width for a block: narrowed in the configured tutorial phases."""
        width = self._config.likelihood_half_width
        if is_tutorial and tutorial_phase in self._narrow_phases:
            width *= self._config.narrow_likelihood_factor
        return width

    def generate(
        self,
        condition: str,
        n_trials: int,
        *,
        is_tutorial: bool = False,
        tutorial_phase: int | None = None,
    ) -> TrialSequence:
        """Generate one sequence.

        Args:
            condition: ``'HI'`` or ``'HD'``.
            n_trials: Number of trials (0 yields an empty sequence).
            is_tutorial: Whether the sequence belongs to a tutorial phase.
            tutorial_phase: 1-based phase; required for tutorials, forbidden
                otherwise.

        Returns:
            The generated trials, in order.

        Raises:
            ConfigValidationError: If *n_trials* is negative or not an integer.
            SequenceGenerationError: If *condition* is unknown or the
                tutorial phase is inconsistent with *is_tutorial*.
        """
        if isinstance(n_trials, bool) or not isinstance(n_trials, int) or n_trials < 0:
            raise ConfigValidationError(
                f"Trial count must be a non-negative integer, got {n_trials!r}"
            )
        hazard_model = self._hazards.get(condition)
        if hazard_model is None:
            raise SequenceGenerationError(
                f"Unknown condition {condition!r}; expected one of {', '.join(CONDITIONS)}"
            )
        if is_tutorial and (tutorial_phase is None or tutorial_phase < 1):
            raise SequenceGenerationError(
                f"Tutorial sequences need a phase >= 1, got {tutorial_phase!r}"
            )
        if not is_tutorial and tutorial_phase is not None:
            raise SequenceGenerationError("Main sequences cannot carry a tutorial phase")

        rng = self._rng
        width = self.likelihood_half_width(is_tutorial, tutorial_phase)
        state = rng.next() * STATE_RANGE
        tau = 0
        trials: list[Trial] = []

        for t in range(n_trials):
            hazard = hazard_model.hazard(tau)
            changed = t > 0 and rng.next() < hazard
            if changed:
                state = self._change_state(state, t, is_tutorial)
                tau = 0
            elif t > 0:
                tau += 1

            observation = sample_triangular(state, width, rng)
            trials.append(
                Trial(
                    condition=condition,
                    trial_idx=t,
                    tau=tau,
                    changed=changed,
                    state=state,
                    observation=observation,
                    hazard_rate=hazard,
                    tutorial_phase=tutorial_phase,
                    is_tutorial=is_tutorial,
                    likelihood_half_width=width,
                )
            )

        logger.debug(
            "Generated %s %s sequence: %d trials, %d change-points",
            condition,
            f"tutorial phase {tutorial_phase}" if is_tutorial else "main",
            n_trials,
            sum(1 for trial in trials if trial.changed),
        )
        return tuple(trials)

    def _change_state(self, state: float, trial_index: int, is_tutorial: bool) -> float:
        """Sample the post-change state: exploration first, bimodal otherwise."""
        if self._exploration.is_eligible(trial_index, is_tutorial):
            explored = self._exploration.try_explore(state, self._rng)
            if explored is not None:
                return explored
        return sample_bimodal_transition(state, self._rng, self._transition)
