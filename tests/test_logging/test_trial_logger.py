"""Tests for TrialLogger and TrialRecord."""

from __future__ import annotations

import logging

import pytest

from neurostate.config import NeuroStateConfig
from neurostate.logging.logger import TrialLogger
from neurostate.logging.types import TrialRecord


def _config(**overrides: object) -> NeuroStateConfig:
    return NeuroStateConfig(_env_file=None, **overrides)  # type: ignore[call-arg]


def _make_record(**overrides: object) -> TrialRecord:
    """Create a TrialRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "pid": "P00042",
        "condition": "HI",
        "block_idx": 5,
        "trial_idx": 7,
        "tau_true": 2,
        "change_flag": False,
        "s_t": 150.0,
        "x_t": 158.5,
        "click_x": 155.0,
        "rt_ms": 820.0,
        "repeated_click_flag": False,
        "points_awarded": 1.0,
        "score_total_at_checkpoint": 6.25,
        "show_past_dots_flag": False,
        "tutorial_phase": None,
    }
    defaults.update(overrides)
    return TrialRecord(**defaults)  # type: ignore[arg-type]


class TestTrialRecord:
    def test_frozen(self) -> None:
        record = _make_record()
        with pytest.raises(AttributeError):
            record.click_x = 1.0  # type: ignore[misc]

    def test_slots(self) -> None:
        assert hasattr(_make_record(), "__slots__")


class TestTrialLogger:
    def test_log_level_none_no_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = TrialLogger(_config(log_level="none"))
        with caplog.at_level(logging.DEBUG, logger="neurostate"):
            log.log_trial(_make_record())
        assert len(caplog.records) == 0

    def test_log_level_summary_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = TrialLogger(_config(log_level="summary"))
        with caplog.at_level(logging.DEBUG, logger="neurostate"):
            log.log_trial(_make_record())
        assert len(caplog.records) == 1
        msg = caplog.records[0].message
        assert "pid=P00042" in msg
        assert "block=5" in msg
        assert "trial=7" in msg
        assert "points=1" in msg
        assert "phase=" not in msg

    def test_summary_includes_tutorial_phase(self, caplog: pytest.LogCaptureFixture) -> None:
        log = TrialLogger(_config(log_level="summary"))
        with caplog.at_level(logging.DEBUG, logger="neurostate"):
            log.log_trial(_make_record(tutorial_phase=3))
        assert "phase=3" in caplog.records[0].message

    def test_log_level_full_json(self, caplog: pytest.LogCaptureFixture) -> None:
        log = TrialLogger(_config(log_level="full"))
        with caplog.at_level(logging.DEBUG, logger="neurostate"):
            log.log_trial(_make_record())
        msg = caplog.records[0].message
        assert msg.startswith("trial_record:")
        assert '"click_x": 155.0' in msg

    def test_diagnostic_mode_stores_records(self) -> None:
        log = TrialLogger(_config(log_level="none", diagnostic_mode=True))
        for idx in range(3):
            log.log_trial(_make_record(trial_idx=idx))
        data = log.get_diagnostic_data()
        assert [r.trial_idx for r in data] == [0, 1, 2]

    def test_diagnostic_mode_false_no_storage(self) -> None:
        log = TrialLogger(_config(log_level="none"))
        log.log_trial(_make_record())
        assert log.get_diagnostic_data() == []

    def test_get_diagnostic_data_returns_copy(self) -> None:
        log = TrialLogger(_config(log_level="none", diagnostic_mode=True))
        log.log_trial(_make_record())
        log.get_diagnostic_data().clear()
        assert len(log.get_diagnostic_data()) == 1

    def test_summary_stats_empty(self) -> None:
        log = TrialLogger(_config(log_level="none", diagnostic_mode=True))
        assert log.get_summary_stats() == {}

    def test_summary_stats_computed(self) -> None:
        log = TrialLogger(_config(log_level="none", diagnostic_mode=True))
        log.log_trial(_make_record(click_x=150.0, points_awarded=1.0, rt_ms=600.0))
        log.log_trial(
            _make_record(
                click_x=165.0,
                points_awarded=0.25,
                rt_ms=1000.0,
                change_flag=True,
                repeated_click_flag=True,
            )
        )
        log.log_trial(_make_record(click_x=180.0, points_awarded=0.0, rt_ms=-5.0))

        stats = log.get_summary_stats()
        assert stats["total_trials"] == 3
        assert stats["total_points"] == pytest.approx(1.25)
        assert stats["mean_points"] == pytest.approx(1.25 / 3)
        assert stats["mean_abs_error"] == pytest.approx(15.0)
        assert stats["max_abs_error"] == pytest.approx(30.0)
        assert stats["mean_rt_ms"] == pytest.approx(800.0)
        assert stats["change_count"] == 1
        assert stats["repeated_click_count"] == 1
        assert stats["repeated_click_rate"] == pytest.approx(1 / 3)
