"""Tests for LCGStream."""

from __future__ import annotations

import numpy as np
import pytest

from neurostate.exceptions import ConfigValidationError
from neurostate.rng.lcg import LCGStream


class TestLCGStream:
    """Known-answer and determinism tests for the linear congruential stream."""

    def test_first_state_for_default_seed(self) -> None:
        """(12345 * 1664525 + 1013904223) mod 2**32 == 87628868."""
        stream = LCGStream(12345)
        value = stream.next()
        assert stream.current == 87628868
        assert value == 87628868 / 2**32

    def test_first_three_draws(self) -> None:
        stream = LCGStream(12345)
        draws = [stream.next() for _ in range(3)]
        assert draws == pytest.approx(
            [0.02040268573909998, 0.01654784823767841, 0.5431557944975793], abs=1e-15
        )

    def test_default_seed(self) -> None:
        assert LCGStream().seed == 12345

    def test_same_seed_same_sequence(self) -> None:
        a = LCGStream(42)
        b = LCGStream(42)
        assert [a.next() for _ in range(100)] == [b.next() for _ in range(100)]

    def test_different_seed_different_sequence(self) -> None:
        a = LCGStream(42)
        b = LCGStream(43)
        assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]

    def test_set_seed_restarts(self) -> None:
        stream = LCGStream(7)
        first = [stream.next() for _ in range(5)]
        stream.set_seed(7)
        assert [stream.next() for _ in range(5)] == first

    def test_outputs_in_unit_interval(self) -> None:
        stream = LCGStream(0)
        values = stream.next_array(10_000)
        assert np.all(values >= 0.0)
        assert np.all(values < 1.0)

    def test_next_array_matches_scalar_draws(self) -> None:
        a = LCGStream(99)
        b = LCGStream(99)
        arr = a.next_array(20)
        assert arr.dtype == np.float64
        assert arr.tolist() == [b.next() for _ in range(20)]

    def test_next_array_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            LCGStream().next_array(-1)

    def test_seed_zero_accepted(self) -> None:
        stream = LCGStream(0)
        assert stream.next() == 1013904223 / 2**32

    def test_max_seed_accepted(self) -> None:
        stream = LCGStream(2**32 - 1)
        assert 0.0 <= stream.next() < 1.0

    def test_numpy_integer_seed_accepted(self) -> None:
        assert LCGStream(np.uint32(12345)).seed == 12345

    @pytest.mark.parametrize("seed", [-1, 2**32, 1.5, "12345", None, True])
    def test_invalid_seed_raises(self, seed: object) -> None:
        with pytest.raises(ConfigValidationError):
            LCGStream(seed)  # type: ignore[arg-type]

    def test_set_seed_validates(self) -> None:
        stream = LCGStream()
        with pytest.raises(ConfigValidationError):
            stream.set_seed(-3)

    def test_describe(self) -> None:
        stream = LCGStream(12345)
        stream.next()
        info = stream.describe()
        assert info == {"stream": "lcg", "seed": 12345, "current": 87628868}
