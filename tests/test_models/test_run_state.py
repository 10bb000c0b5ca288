"""Tests for TempoRunState derived properties."""

from __future__ import annotations

from hypertrophy_engine.models.enums import RunStatus
from hypertrophy_engine.models.run_state import TempoRunState


class TestStatus:
    def test_idle(self) -> None:
        assert TempoRunState(total_reps=10).status == RunStatus.IDLE

    def test_running(self) -> None:
        assert TempoRunState(total_reps=10, running=True).status == RunStatus.RUNNING

    def test_paused(self) -> None:
        state = TempoRunState(total_reps=10, running=True, paused=True)
        assert state.status == RunStatus.PAUSED

    def test_completed(self) -> None:
        state = TempoRunState(total_reps=10, current_rep_index=10)
        assert state.completed is True
        assert state.status == RunStatus.COMPLETED

    def test_last_rep_in_progress_not_completed(self) -> None:
        state = TempoRunState(total_reps=10, current_rep_index=9, running=True)
        assert state.completed is False


class TestDisplayRep:
    def test_one_based(self) -> None:
        assert TempoRunState(total_reps=10).display_rep == 1
        assert TempoRunState(total_reps=10, current_rep_index=4).display_rep == 5

    def test_capped_at_total(self) -> None:
        assert TempoRunState(total_reps=10, current_rep_index=10).display_rep == 10
