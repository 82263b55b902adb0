"""Bimodal state-transition distribution.

A change-point moves the hidden state either by a wide "large jump" around
mid-range or to one of two triangular lobes placed ``separation`` below or
above the current state. The large-jump component keeps long sequences from
collapsing onto a narrow band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from neurostate.coords import STATE_RANGE
from neurostate.sampling.triangular import sample_triangular

if TYPE_CHECKING:
    from neurostate.rng.base import RandomStream


@dataclass(frozen=True, slots=True)
class TransitionParams:
    """Shape of the transition mixture.

    Attributes:
        separation: Distance from the current state to each lobe centre.
        half_width: Half-width of each lobe.
        large_jump_probability: Probability of the wide mid-range jump.
        upper: Upper bound of the state line.
    """

    separation: float = 15.0
    half_width: float = 40.0
    large_jump_probability: float = 0.2
    upper: float = STATE_RANGE

    @classmethod
    def from_config(cls, config: Any) -> TransitionParams:
        """Build from a NeuroStateConfig (or compatible object)."""
        return cls(
            separation=config.change_separation,
            half_width=config.change_size_half_width,
            large_jump_probability=config.large_jump_probability,
        )


def sample_bimodal_transition(
    current_state: float,
    rng: RandomStream,
    params: TransitionParams | None = None,
) -> float:
    """Sample the post-change state.

    Draw order (fixed): the large-jump gate; then, for a regular move, the
    lobe choice; then the triangular draw.

    Args:
        current_state: State before the change.
        rng: Stream supplying the draws.
        params: Mixture shape. Defaults to :class:`TransitionParams`.

    Returns:
        New state in ``[0, params.upper]``.
    """
    if params is None:
        params = TransitionParams()

    if rng.next() < params.large_jump_probability:
        return sample_triangular(params.upper / 2.0, params.upper / 3.0, rng, params.upper)

    if rng.next() < 0.5:
        center = current_state - params.separation
    else:
        center = current_state + params.separation
    return sample_triangular(center, params.half_width, rng, params.upper)
