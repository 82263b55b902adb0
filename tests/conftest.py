"""Shared pytest fixtures for neurostate tests.

Provides reusable configuration objects, seeded random streams and small
generated sessions used across multiple test modules.
"""

from __future__ import annotations

import pytest

from neurostate.config import NeuroStateConfig
from neurostate.generator.assembler import StimulusGenerator
from neurostate.generator.types import SessionSequences
from neurostate.rng.lcg import LCGStream


def make_config(**overrides: object) -> NeuroStateConfig:
    """Build a config that ignores any local ``.env`` file."""
    return NeuroStateConfig(_env_file=None, **overrides)  # type: ignore[call-arg]


@pytest.fixture
def default_config() -> NeuroStateConfig:
    """Return a NeuroStateConfig with all default values."""
    return make_config()


@pytest.fixture
def silent_config() -> NeuroStateConfig:
    """Return a config with no trial logging for noise-free tests."""
    return make_config(log_level="none")


@pytest.fixture
def small_config() -> NeuroStateConfig:
    """Return the seed-12345 config with a five-trial main block."""
    return make_config(seed=12345, main_trial_count=5, log_level="none")


@pytest.fixture
def lcg() -> LCGStream:
    """Return an LCG stream at the default seed (12345)."""
    return LCGStream(12345)


@pytest.fixture
def small_sequences(small_config: NeuroStateConfig) -> SessionSequences:
    """Return a full session generated from ``small_config``."""
    return StimulusGenerator(small_config).generate_all_sequences()
