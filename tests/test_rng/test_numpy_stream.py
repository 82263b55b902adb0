"""Tests for NumpyStream."""

from __future__ import annotations

import numpy as np
import pytest

from neurostate.exceptions import ConfigValidationError
from neurostate.rng.lcg import LCGStream
from neurostate.rng.numpy_stream import NumpyStream


class TestNumpyStream:
    def test_name(self) -> None:
        assert NumpyStream().name == "numpy"

    def test_matches_default_rng(self) -> None:
        stream = NumpyStream(2024)
        expected = np.random.default_rng(2024).random(5)
        assert [stream.next() for _ in range(5)] == expected.tolist()

    def test_deterministic(self) -> None:
        a = NumpyStream(5)
        b = NumpyStream(5)
        assert a.next_array(50).tolist() == b.next_array(50).tolist()

    def test_differs_from_lcg(self) -> None:
        assert NumpyStream(12345).next() != LCGStream(12345).next()

    def test_vectorised_draws_continue_stream(self) -> None:
        """next_array(n) advances like n scalar draws."""
        a = NumpyStream(11)
        b = NumpyStream(11)
        a.next_array(3)
        for _ in range(3):
            b.next()
        assert a.next() == b.next()

    def test_set_seed_restarts(self) -> None:
        stream = NumpyStream(3)
        first = stream.next()
        stream.next()
        stream.set_seed(3)
        assert stream.next() == first

    def test_next_array_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            NumpyStream().next_array(-2)

    def test_invalid_seed(self) -> None:
        with pytest.raises(ConfigValidationError):
            NumpyStream(-1)
