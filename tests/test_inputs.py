"""Tests for building models from flat control values."""

from __future__ import annotations

import pytest

from hypertrophy_engine.exceptions import ParameterRangeError
from hypertrophy_engine.inputs import bounded_value, build_session_plan, build_tempo
from hypertrophy_engine.models.session import SessionPlan
from hypertrophy_engine.models.tempo import TempoProfile


class TestBoundedValue:
    def test_lenient_clamps(self) -> None:
        assert bounded_value("sets_per_exercise", 10) == 6

    def test_strict_raises(self) -> None:
        with pytest.raises(ParameterRangeError):
            bounded_value("sets_per_exercise", 10, strict=True)

    def test_unknown_control(self) -> None:
        with pytest.raises(KeyError):
            bounded_value("bench_press_pr", 100)


class TestBuildTempo:
    def test_empty_gives_default(self) -> None:
        assert build_tempo({}) == TempoProfile()

    def test_values_used(self) -> None:
        tempo = build_tempo(
            {"eccentric_s": 4, "bottom_pause_s": 2, "concentric_s": 1, "top_pause_s": 1}
        )
        assert tempo.notation == "4-2-1-1"

    def test_lenient_clamps_each_phase(self) -> None:
        tempo = build_tempo({"eccentric_s": 20, "concentric_s": 0, "top_pause_s": -3})
        assert tempo.as_tuple() == (8, 0, 1, 0)

    def test_strict_rejects(self) -> None:
        with pytest.raises(ParameterRangeError, match="eccentric_s"):
            build_tempo({"eccentric_s": 20}, strict=True)


class TestBuildSessionPlan:
    def test_empty_gives_default(self, default_plan: SessionPlan) -> None:
        assert build_session_plan({}) == default_plan

    def test_flat_keys(self) -> None:
        plan = build_session_plan(
            {
                "exercise_count": 4,
                "sets_per_exercise": 5,
                "reps_per_set": 8,
                "eccentric_s": 2,
                "rest_between_sets_s": 90,
                "cardio_min": 0,
            }
        )
        assert plan.resistance.exercise_count == 4
        assert plan.resistance.sets_per_exercise == 5
        assert plan.resistance.reps_per_set == 8
        assert plan.resistance.tempo.eccentric_s == 2
        assert plan.rest_between_sets_s == 90
        assert plan.cardio_min == 0
        assert plan.warmup_min == 5

    def test_lenient_snaps_rest_to_grid(self) -> None:
        plan = build_session_plan({"rest_between_sets_s": 100, "transition_between_exercises_s": 1})
        assert plan.rest_between_sets_s == 105
        assert plan.transition_between_exercises_s == 15

    def test_counts_are_ints(self) -> None:
        plan = build_session_plan({"reps_per_set": 12.0})
        assert isinstance(plan.resistance.reps_per_set, int)

    def test_strict_rejects_out_of_range(self) -> None:
        with pytest.raises(ParameterRangeError) as exc_info:
            build_session_plan({"cardio_min": 60}, strict=True)
        assert exc_info.value.name == "cardio_min"

    def test_strict_accepts_valid(self) -> None:
        plan = build_session_plan({"warmup_min": 0, "cooldown_min": 20}, strict=True)
        assert plan.warmup_min == 0
        assert plan.cooldown_min == 20
