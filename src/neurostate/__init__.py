"""neurostate: stimulus generation for a change-point estimation experiment.

A hidden one-dimensional state changes under a condition-specific hazard
(constant for HI, logistic in trials-since-change for HD) and emits noisy
triangular observations. The package generates reproducible tutorial and
main sequences from one seeded stream, scores participant estimates, and
logs and exports trial data for a presentation layer.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("neurostate")
except PackageNotFoundError:
    __version__ = "0.0.0"

from neurostate.config import NeuroStateConfig, load_config, resolve_config
from neurostate.coords import STATE_RANGE, coord_to_state, state_to_coord
from neurostate.exceptions import (
    ConfigValidationError,
    ExportError,
    NeuroStateError,
    SequenceGenerationError,
    SessionStateError,
)
from neurostate.generator import StimulusGenerator, Trial, create_generator
from neurostate.scoring import score
from neurostate.session import ExperimentSession

__all__ = [
    "STATE_RANGE",
    "ConfigValidationError",
    "ExperimentSession",
    "ExportError",
    "NeuroStateConfig",
    "NeuroStateError",
    "SequenceGenerationError",
    "SessionStateError",
    "StimulusGenerator",
    "Trial",
    "__version__",
    "coord_to_state",
    "create_generator",
    "load_config",
    "resolve_config",
    "score",
    "state_to_coord",
]
