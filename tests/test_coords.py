"""Tests for state/coordinate mapping."""

from __future__ import annotations

import pytest

from neurostate.coords import STATE_RANGE, coord_to_state, state_to_coord


class TestCoords:
    def test_state_range(self) -> None:
        assert STATE_RANGE == 300.0

    @pytest.mark.parametrize(
        ("state", "width", "coord"),
        [(0.0, 800.0, 0.0), (150.0, 800.0, 400.0), (300.0, 800.0, 800.0), (75.0, 600.0, 150.0)],
    )
    def test_state_to_coord(self, state: float, width: float, coord: float) -> None:
        assert state_to_coord(state, width) == pytest.approx(coord)

    def test_coord_to_state(self) -> None:
        assert coord_to_state(400.0, 800.0) == pytest.approx(150.0)

    def test_inverse(self) -> None:
        assert coord_to_state(state_to_coord(123.4, 917.0), 917.0) == pytest.approx(123.4)

    @pytest.mark.parametrize("width", [0.0, -10.0])
    def test_invalid_width(self, width: float) -> None:
        with pytest.raises(ValueError):
            state_to_coord(10.0, width)
        with pytest.raises(ValueError):
            coord_to_state(10.0, width)
