"""Sampling primitives for neurostate.

Triangular observation noise, the bimodal transition mixture and the
exploration policy. Every function takes its random stream explicitly.
"""

from neurostate.sampling.exploration import ExplorationPolicy
from neurostate.sampling.transition import TransitionParams, sample_bimodal_transition
from neurostate.sampling.triangular import (
    clamp_state,
    sample_triangular,
    triangular_from_uniform,
)

__all__ = [
    "ExplorationPolicy",
    "TransitionParams",
    "clamp_state",
    "sample_bimodal_transition",
    "sample_triangular",
    "triangular_from_uniform",
]
