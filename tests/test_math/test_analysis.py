"""Tests for the pandas views over breakdowns and scores."""

from __future__ import annotations

import pytest

from hypertrophy_engine.math.analysis import breakdown_frame, phase_tut_frame, rep_range_profile
from hypertrophy_engine.math.session_budget import compute_session_breakdown
from hypertrophy_engine.models.session import SessionPlan
from hypertrophy_engine.models.tempo import TempoProfile


class TestBreakdownFrame:
    def test_rows_in_bucket_order(self, default_plan: SessionPlan) -> None:
        df = breakdown_frame(compute_session_breakdown(default_plan))
        assert list(df["bucket"]) == [
            "warmup", "lifting", "rest", "transition", "cardio", "cooldown",
        ]

    def test_totals(self, default_plan: SessionPlan) -> None:
        df = breakdown_frame(compute_session_breakdown(default_plan))
        assert df["seconds"].sum() == 2940
        assert df["minutes"].sum() == pytest.approx(49.0)
        assert df["percent"].sum() == pytest.approx(100.0)


class TestPhaseTutFrame:
    def test_labels_and_seconds(self, paused_tempo: TempoProfile) -> None:
        df = phase_tut_frame(paused_tempo, 4)
        assert list(df["phase"]) == ["Eccentric", "Bottom Pause", "Concentric", "Top Pause"]
        assert list(df["seconds"]) == [8.0, 4.0, 4.0, 4.0]


class TestRepRangeProfile:
    def test_columns(self, standard_tempo: TempoProfile) -> None:
        df = rep_range_profile(standard_tempo, [5, 10])
        assert list(df.columns) == [
            "reps", "load_pct", "set_tut_s", "strength", "hypertrophy", "metabolic",
        ]

    def test_row_values(self, standard_tempo: TempoProfile) -> None:
        df = rep_range_profile(standard_tempo, [10])
        row = df.iloc[0]
        assert row["load_pct"] == 79
        assert row["set_tut_s"] == 40
        assert row["strength"] == 60
        assert row["hypertrophy"] == 100
        assert row["metabolic"] == 40

    def test_scores_bounded(self, slow_tempo: TempoProfile) -> None:
        df = rep_range_profile(slow_tempo, range(1, 31))
        assert len(df) == 30
        for col in ("strength", "hypertrophy", "metabolic"):
            assert df[col].between(0, 100).all()
