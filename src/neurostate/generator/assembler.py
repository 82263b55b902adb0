"""Session assembly: every sequence an experiment run needs.

One stream, seeded once at construction, feeds all generation calls in a
fixed order::

    HI tutorials (phase 1 -> N), HI main, HD tutorials (phase 1 -> N), HD main

Reordering these calls changes every sequence after the first reordered one.
"""

from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from neurostate.config import load_config, resolve_config
from neurostate.coverage.analyzer import analyze_sequence
from neurostate.exceptions import SequenceGenerationError
from neurostate.generator.sequence import SequenceGenerator
from neurostate.generator.types import CONDITIONS, ConditionSequences, Trial, TrialSequence
from neurostate.rng.registry import StreamRegistry

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig
    from neurostate.coverage.types import CoverageReport
    from neurostate.generator.types import SessionSequences
    from neurostate.rng.base import RandomStream

logger = logging.getLogger("neurostate")


class StimulusGenerator:
    """Builds tutorial and main sequences for both conditions.

    Args:
        config: Active configuration. ``None`` loads the environment defaults.
    """

    def __init__(self, config: NeuroStateConfig | None = None) -> None:
        self._config = config if config is not None else load_config()
        self._rng = StreamRegistry.build(self._config)
        self._sequences = SequenceGenerator(self._config, self._rng)

        logger.info(
            "StimulusGenerator initialized: stream=%s, seed=%d, "
            "main_trials=%d, tutorial_trials=%s",
            self._rng.name,
            self._config.seed,
            self._config.main_trial_count,
            self._config.tutorial_trial_counts,
        )

    @property
    def config(self) -> NeuroStateConfig:
        return self._config

    @property
    def rng(self) -> RandomStream:
        return self._rng

    @property
    def main_trial_count(self) -> int:
        return self._config.main_trial_count

    def generate_sequence(
        self,
        condition: str,
        n_trials: int,
        *,
        is_tutorial: bool = False,
        tutorial_phase: int | None = None,
    ) -> TrialSequence:
        """Generate a single sequence from the shared stream.

        See :meth:`SequenceGenerator.generate`.
        """
        return self._sequences.generate(
            condition, n_trials, is_tutorial=is_tutorial, tutorial_phase=tutorial_phase
        )

    def generate_tutorial_sequences(self, condition: str) -> tuple[TrialSequence, ...]:
        """Generate every tutorial phase for *condition*, phase 1 first."""
        return tuple(
            self._sequences.generate(condition, n_trials, is_tutorial=True, tutorial_phase=phase)
            for phase, n_trials in enumerate(self._config.tutorial_trial_counts, start=1)
        )

    def generate_main_sequence(self, condition: str) -> TrialSequence:
        """Generate the main-experiment sequence for *condition*."""
        return self._sequences.generate(condition, self._config.main_trial_count)

    def generate_all_sequences(self) -> SessionSequences:
        """Generate the full session in the fixed order.

        Calling this twice on one generator continues the stream, so the
        second session differs from the first.

        Returns:
            Read-only mapping ``{'HI': ConditionSequences, 'HD': ...}``.
        """
        sequences: dict[str, ConditionSequences] = {}
        for condition in CONDITIONS:
            tutorials = self.generate_tutorial_sequences(condition)
            main = self.generate_main_sequence(condition)
            sequences[condition] = ConditionSequences(tutorials=tutorials, main=main)
        return MappingProxyType(sequences)

    def analyze_state_coverage(self, sequences: SessionSequences) -> dict[str, CoverageReport]:
        """Compute and log coverage of each condition's main sequence.

        Args:
            sequences: Output of :meth:`generate_all_sequences`.

        Returns:
            ``{'HI': CoverageReport, 'HD': CoverageReport}``.
        """
        reports: dict[str, CoverageReport] = {}
        for condition in CONDITIONS:
            report = analyze_sequence(sequences[condition].main, condition)
            reports[condition] = report
            pct = report.quartiles.percentages
            logger.info(
                "%s coverage: states %.1f-%.1f (%.1f%%), mean %.1f, "
                "quartiles Q1=%.1f%% Q2=%.1f%% Q3=%.1f%% Q4=%.1f%%",
                condition,
                report.states.min,
                report.states.max,
                report.states.coverage * 100.0,
                report.states.mean,
                *pct,
            )
        return reports


def create_generator(
    seed: int | None = None,
    main_trial_count: int | None = None,
    config: NeuroStateConfig | None = None,
    **overrides: Any,
) -> StimulusGenerator:
    """Build a StimulusGenerator from a seed, a main trial count and overrides.

    Args:
        seed: Stream seed; defaults to the config value.
        main_trial_count: Main-sequence length; defaults to the config value.
        config: Base configuration. ``None`` loads the environment defaults.
        **overrides: Any other config fields to replace.

    Returns:
        A generator ready for :meth:`StimulusGenerator.generate_all_sequences`.

    Raises:
        ConfigValidationError: If the seed, trial count or an override is invalid.
    """
    if seed is not None:
        overrides["seed"] = seed
    if main_trial_count is not None:
        overrides["main_trial_count"] = main_trial_count
    base = config if config is not None else load_config()
    return StimulusGenerator(resolve_config(base, overrides))


def export_sequences(sequences: SessionSequences, indent: int | None = 2) -> str:
    """Serialize a session to JSON so it can be reused across participants.

    Trials are written under their persisted field names.
    """
    payload = {
        condition: {
            "tutorials": [[trial.to_dict() for trial in seq] for seq in group.tutorials],
            "main": [trial.to_dict() for trial in group.main],
        }
        for condition, group in sequences.items()
    }
    return json.dumps(payload, indent=indent)


def import_sequences(text: str) -> SessionSequences:
    """Inverse of :func:`export_sequences`.

    Raises:
        SequenceGenerationError: If the document is not a session export.
    """
    try:
        payload = json.loads(text)
        sequences = {
            condition: ConditionSequences(
                tutorials=tuple(
                    tuple(Trial.from_dict(row) for row in seq) for seq in group["tutorials"]
                ),
                main=tuple(Trial.from_dict(row) for row in group["main"]),
            )
            for condition, group in payload.items()
        }
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise SequenceGenerationError(f"Not a sequence export: {exc}") from exc
    return MappingProxyType(sequences)
