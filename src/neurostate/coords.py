"""State-space normalization shared by the generator and any display layer.

States live on ``[0, STATE_RANGE]`` and map linearly onto a coordinate
width: ``coord = (state / STATE_RANGE) * width``.
"""

from __future__ import annotations

STATE_RANGE: float = 300.0
"""Upper bound of the hidden-state line. Defined once for every collaborator."""


def _check_width(width: float) -> None:
    if width <= 0:
        raise ValueError(f"width must be > 0, got {width}")


def state_to_coord(state: float, width: float) -> float:
    """Map a state value onto a coordinate in ``[0, width]``.

    Args:
        state: State value in ``[0, STATE_RANGE]``.
        width: Width of the target coordinate space (e.g. canvas pixels).

    Returns:
        The linearly scaled coordinate.

    Raises:
        ValueError: If *width* is not positive.
    """
    _check_width(width)
    return (state / STATE_RANGE) * width


def coord_to_state(coord: float, width: float) -> float:
    """Inverse of :func:`state_to_coord`.

    Raises:
        ValueError: If *width* is not positive.
    """
    _check_width(width)
    return (coord / width) * STATE_RANGE
