"""Tests for StimulusGenerator, create_generator and sequence export."""

from __future__ import annotations

import json
import logging
from types import MappingProxyType

import pytest

from neurostate.config import NeuroStateConfig
from neurostate.exceptions import ConfigValidationError, SequenceGenerationError
from neurostate.generator.assembler import (
    StimulusGenerator,
    create_generator,
    export_sequences,
    import_sequences,
)
from neurostate.generator.types import SessionSequences
from neurostate.rng.lcg import LCGStream
from neurostate.rng.numpy_stream import NumpyStream


def make_config(**overrides: object) -> NeuroStateConfig:
    return NeuroStateConfig(_env_file=None, **overrides)  # type: ignore[call-arg]


_HI_MAIN_STATES = [172.6125095039606] * 4 + [181.15185188689446]
_HI_MAIN_OBSERVATIONS = [
    169.59897249751415,
    162.51423168144905,
    164.74567950282415,
    153.60192958029924,
    169.7877612879143,
]
_HD_MAIN_OBSERVATIONS = [
    119.35872181754472,
    136.53608710114713,
    141.56864556646352,
    133.6618680812711,
    141.4735453296282,
]
_HD_MAIN_HAZARDS = [
    4.5397868702434395e-05,
    4.5397868702434395e-05,
    0.00012339457598623172,
    0.0003353501304664781,
    0.0009110511944006454,
]


class TestGenerateAllSequences:
    def test_structure(self, small_sequences: SessionSequences) -> None:
        assert list(small_sequences) == ["HI", "HD"]
        for group in small_sequences.values():
            assert [len(seq) for seq in group.tutorials] == [10, 10, 15, 15, 20]
            assert len(group.main) == 5

    def test_read_only(self, small_sequences: SessionSequences) -> None:
        assert isinstance(small_sequences, MappingProxyType)
        with pytest.raises(TypeError):
            small_sequences["HI"] = small_sequences["HD"]  # type: ignore[index]

    def test_tutorial_phases_tagged(self, small_sequences: SessionSequences) -> None:
        for group in small_sequences.values():
            for phase, seq in enumerate(group.tutorials, start=1):
                assert all(t.tutorial_phase == phase and t.is_tutorial for t in seq)
            assert all(t.tutorial_phase is None and not t.is_tutorial for t in group.main)

    def test_scenario_seed_12345(self, small_sequences: SessionSequences) -> None:
        main = small_sequences["HI"].main
        assert len(main) == 5
        assert main[0].tau == 0
        assert all(trial.hazard_rate == 0.1 for trial in main)
        assert all(0.0 <= t.state <= 300.0 and 0.0 <= t.observation <= 300.0 for t in main)

    def test_hi_main_golden(self, small_sequences: SessionSequences) -> None:
        main = small_sequences["HI"].main
        assert [t.tau for t in main] == [0, 1, 2, 3, 0]
        assert [t.changed for t in main] == [False, False, False, False, True]
        assert [t.state for t in main] == pytest.approx(_HI_MAIN_STATES)
        assert [t.observation for t in main] == pytest.approx(_HI_MAIN_OBSERVATIONS)

    def test_hd_main_golden(self, small_sequences: SessionSequences) -> None:
        main = small_sequences["HD"].main
        assert [t.tau for t in main] == [0, 1, 2, 3, 4]
        assert not any(t.changed for t in main)
        assert all(t.state == pytest.approx(133.37044660001993) for t in main)
        assert [t.observation for t in main] == pytest.approx(_HD_MAIN_OBSERVATIONS)
        assert [t.hazard_rate for t in main] == pytest.approx(_HD_MAIN_HAZARDS)

    def test_reproducible(self, small_config: NeuroStateConfig) -> None:
        a = StimulusGenerator(small_config).generate_all_sequences()
        b = StimulusGenerator(small_config).generate_all_sequences()
        assert dict(a) == dict(b)

    def test_second_call_continues_stream(self, small_config: NeuroStateConfig) -> None:
        gen = StimulusGenerator(small_config)
        first = gen.generate_all_sequences()
        second = gen.generate_all_sequences()
        assert first["HI"].main != second["HI"].main

    def test_fixed_generation_order(self, small_config: NeuroStateConfig) -> None:
        """The HI main block is drawn after every HI tutorial phase."""
        gen = StimulusGenerator(small_config)
        gen.generate_tutorial_sequences("HI")
        main = gen.generate_main_sequence("HI")
        expected = StimulusGenerator(small_config).generate_all_sequences()["HI"].main
        assert main == expected

    def test_empty_tutorials(self) -> None:
        config = make_config(main_trial_count=3, tutorial_trial_counts=[], log_level="none")
        sequences = StimulusGenerator(config).generate_all_sequences()
        assert sequences["HI"].tutorials == ()
        assert len(sequences["HD"].main) == 3

    def test_zero_main_trials(self) -> None:
        config = make_config(main_trial_count=0, log_level="none")
        sequences = StimulusGenerator(config).generate_all_sequences()
        assert sequences["HI"].main == ()
        assert sequences["HD"].main == ()


class TestStreamSelection:
    def test_default_lcg(self, small_config: NeuroStateConfig) -> None:
        assert isinstance(StimulusGenerator(small_config).rng, LCGStream)

    def test_numpy_stream(self) -> None:
        gen = StimulusGenerator(make_config(stream_type="numpy", main_trial_count=5))
        assert isinstance(gen.rng, NumpyStream)
        sequences = gen.generate_all_sequences()
        assert len(sequences["HD"].main) == 5

    def test_unknown_stream(self) -> None:
        with pytest.raises(KeyError):
            StimulusGenerator(make_config(stream_type="no_such_stream"))


class TestCreateGenerator:
    def test_seed_and_count(self) -> None:
        gen = create_generator(seed=7, main_trial_count=12, config=make_config())
        assert gen.config.seed == 7
        assert gen.main_trial_count == 12
        assert gen.rng.seed == 7

    def test_overrides(self) -> None:
        gen = create_generator(config=make_config(), exploration_enabled=False)
        assert gen.config.exploration_enabled is False

    @pytest.mark.parametrize("seed", [-1, 2**32])
    def test_invalid_seed(self, seed: int) -> None:
        with pytest.raises(ConfigValidationError):
            create_generator(seed=seed, config=make_config())

    @pytest.mark.parametrize("seed", [12345.0, "12345", True])
    def test_non_integer_seed(self, seed: object) -> None:
        with pytest.raises(ConfigValidationError):
            create_generator(
                seed=seed,  # type: ignore[arg-type]
                main_trial_count=5,
                config=make_config(),
            )

    def test_negative_count(self) -> None:
        with pytest.raises(ConfigValidationError):
            create_generator(main_trial_count=-1, config=make_config())

    def test_unknown_override(self) -> None:
        with pytest.raises(ConfigValidationError):
            create_generator(config=make_config(), bogus=1)

    def test_logs_initialization(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="neurostate"):
            create_generator(seed=3, main_trial_count=2, config=make_config())
        assert "seed=3" in caplog.text


class TestCoverage:
    @pytest.mark.parametrize("condition", ["HI", "HD"])
    def test_default_session_covers_range(self, condition: str) -> None:
        gen = create_generator(seed=12345, main_trial_count=1000, config=make_config())
        reports = gen.analyze_state_coverage(gen.generate_all_sequences())
        report = reports[condition]
        assert report.n_trials == 1000
        assert report.states.coverage > 0.8
        assert 0.0 <= report.states.min <= report.states.max <= 300.0

    def test_logs_per_condition(
        self, small_config: NeuroStateConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        gen = StimulusGenerator(small_config)
        sequences = gen.generate_all_sequences()
        with caplog.at_level(logging.INFO, logger="neurostate"):
            gen.analyze_state_coverage(sequences)
        messages = [r.message for r in caplog.records]
        assert any(m.startswith("HI coverage") for m in messages)
        assert any(m.startswith("HD coverage") for m in messages)

    def test_does_not_consume_stream(self, small_config: NeuroStateConfig) -> None:
        gen = StimulusGenerator(small_config)
        sequences = gen.generate_all_sequences()
        before = gen.rng.current  # type: ignore[attr-defined]
        gen.analyze_state_coverage(sequences)
        assert gen.rng.current == before  # type: ignore[attr-defined]


class TestSequenceExport:
    def test_json_document(self, small_sequences: SessionSequences) -> None:
        payload = json.loads(export_sequences(small_sequences))
        assert set(payload) == {"HI", "HD"}
        assert len(payload["HI"]["tutorials"]) == 5
        assert payload["HI"]["main"][0]["tau_true"] == 0
        assert "s_t" in payload["HD"]["main"][0]

    def test_import_restores_session(self, small_sequences: SessionSequences) -> None:
        restored = import_sequences(export_sequences(small_sequences))
        assert dict(restored) == dict(small_sequences)

    @pytest.mark.parametrize("text", ["not json", "[1, 2]", '{"HI": {"main": []}}'])
    def test_import_rejects_bad_documents(self, text: str) -> None:
        with pytest.raises(SequenceGenerationError):
            import_sequences(text)
