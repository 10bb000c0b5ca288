"""Tests for the session time budget: breakdown, target status, formatting."""

from __future__ import annotations

import dataclasses

import pytest

from hypertrophy_engine.math.session_budget import (
    bucket_percentages,
    classify_target,
    compute_session_breakdown,
    describe_target,
    format_clock,
    target_gap_min,
    timeline_fraction,
)
from hypertrophy_engine.models.enums import TargetStatus
from hypertrophy_engine.models.session import ResistanceBlock, SessionPlan
from hypertrophy_engine.models.tempo import TempoProfile


class TestComputeSessionBreakdown:
    def test_default_challenge_breakdown(self, default_plan: SessionPlan) -> None:
        b = compute_session_breakdown(default_plan)
        assert b.warmup_s == 300
        assert b.lifting_s == 720  # 4 s x 10 reps x 3 sets x 6 exercises
        assert b.rest_s == 720  # 2 gaps x 60 s x 6 exercises
        assert b.transition_s == 300  # 5 switches x 60 s
        assert b.cardio_s == 600
        assert b.cooldown_s == 300
        assert b.total_s == 2940
        assert format_clock(b.total_s) == "49:00"

    def test_rep_duration_carried(self, default_plan: SessionPlan) -> None:
        assert compute_session_breakdown(default_plan).rep_duration_s == 4

    def test_total_equals_sum_of_buckets(self) -> None:
        plan = SessionPlan(
            warmup_min=7,
            resistance=ResistanceBlock(
                exercise_count=5,
                sets_per_exercise=4,
                reps_per_set=12,
                tempo=TempoProfile(2.5, 0.5, 1.5, 0.25),
            ),
            rest_between_sets_s=75,
            transition_between_exercises_s=45,
            cardio_min=13,
            cooldown_min=3,
        )
        b = compute_session_breakdown(plan)
        assert b.total_s == (
            b.warmup_s + b.lifting_s + b.rest_s + b.transition_s + b.cardio_s + b.cooldown_s
        )
        assert b.total_s == sum(b.buckets().values())

    def test_single_set_owes_no_rest(self, minimal_plan: SessionPlan) -> None:
        b = compute_session_breakdown(minimal_plan)
        assert b.rest_s == 0

    def test_single_exercise_owes_no_transition(self, minimal_plan: SessionPlan) -> None:
        b = compute_session_breakdown(minimal_plan)
        assert b.transition_s == 0

    @pytest.mark.parametrize("rest", [15, 60, 300])
    def test_rest_ignored_with_one_set(self, default_plan: SessionPlan, rest: int) -> None:
        block = dataclasses.replace(default_plan.resistance, sets_per_exercise=1)
        plan = dataclasses.replace(default_plan, resistance=block, rest_between_sets_s=rest)
        assert compute_session_breakdown(plan).rest_s == 0

    @pytest.mark.parametrize("transition", [15, 90, 300])
    def test_transition_ignored_with_one_exercise(
        self, default_plan: SessionPlan, transition: int
    ) -> None:
        block = dataclasses.replace(default_plan.resistance, exercise_count=1)
        plan = dataclasses.replace(
            default_plan, resistance=block, transition_between_exercises_s=transition
        )
        assert compute_session_breakdown(plan).transition_s == 0

    def test_zero_tempo_gives_zero_lifting(
        self, default_plan: SessionPlan, zero_tempo: TempoProfile
    ) -> None:
        block = dataclasses.replace(default_plan.resistance, tempo=zero_tempo)
        plan = dataclasses.replace(default_plan, resistance=block)
        b = compute_session_breakdown(plan)
        assert b.lifting_s == 0
        assert b.rest_s == 720  # rest is still owed between sets

    def test_plan_is_not_mutated(self, default_plan: SessionPlan) -> None:
        before = dataclasses.asdict(default_plan)
        compute_session_breakdown(default_plan)
        assert dataclasses.asdict(default_plan) == before


class TestBucketPercentages:
    def test_sum_to_100(self, default_plan: SessionPlan) -> None:
        pct = bucket_percentages(compute_session_breakdown(default_plan))
        assert sum(pct.values()) == pytest.approx(100.0)

    def test_lifting_share(self, default_plan: SessionPlan) -> None:
        pct = bucket_percentages(compute_session_breakdown(default_plan))
        assert pct["lifting"] == pytest.approx(720 / 2940 * 100)

    def test_empty_session_all_zero(self, minimal_plan: SessionPlan, zero_tempo: TempoProfile) -> None:
        block = dataclasses.replace(minimal_plan.resistance, tempo=zero_tempo)
        plan = dataclasses.replace(minimal_plan, resistance=block)
        pct = bucket_percentages(compute_session_breakdown(plan))
        assert set(pct.values()) == {0.0}
        assert len(pct) == 6


class TestClassifyTarget:
    def test_under(self) -> None:
        assert classify_target(30 * 60, 45) == TargetStatus.UNDER

    def test_near(self) -> None:
        assert classify_target(42 * 60, 45) == TargetStatus.NEAR

    def test_over(self) -> None:
        assert classify_target(49 * 60, 45) == TargetStatus.OVER

    def test_boundary_at_target_minus_margin_is_under(self) -> None:
        assert classify_target(40 * 60, 45) == TargetStatus.UNDER

    def test_just_above_margin_is_near(self) -> None:
        assert classify_target(40 * 60 + 1, 45) == TargetStatus.NEAR

    def test_boundary_at_target_is_near(self) -> None:
        assert classify_target(45 * 60, 45) == TargetStatus.NEAR

    def test_just_above_target_is_over(self) -> None:
        assert classify_target(45 * 60 + 1, 45) == TargetStatus.OVER


class TestDescribeTarget:
    def test_over_rounds_up(self) -> None:
        # 49:00 against 45 -> 4 min over
        msg = describe_target(2940, 45)
        assert msg.startswith("You are 4 minutes over target")

    def test_over_partial_minute_rounds_up(self) -> None:
        msg = describe_target(45 * 60 + 10, 45)
        assert "1 minutes over target" in msg

    def test_near_rounds_down(self) -> None:
        # 42:30 against 45 -> 2.5 min left -> "2 min remaining"
        msg = describe_target(42 * 60 + 30, 45)
        assert "close to the limit" in msg
        assert "2 min remaining" in msg

    def test_under_rounds_down(self) -> None:
        msg = describe_target(2940, 60)
        assert msg.startswith("Great pace!")
        assert "11 minutes to spare" in msg


class TestTargetGap:
    def test_positive_when_under(self) -> None:
        assert target_gap_min(30 * 60, 45) == 15

    def test_negative_when_over(self) -> None:
        assert target_gap_min(2940, 45) == -4


class TestTimelineFraction:
    def test_midpoint(self) -> None:
        assert timeline_fraction(45) == 0.5

    def test_capped_at_one(self) -> None:
        assert timeline_fraction(120) == 1.0

    def test_zero_scale(self) -> None:
        assert timeline_fraction(10, scale_min=0) == 0.0


class TestFormatClock:
    def test_pads_seconds(self) -> None:
        assert format_clock(65) == "1:05"

    def test_zero(self) -> None:
        assert format_clock(0) == "0:00"

    def test_long_session(self) -> None:
        assert format_clock(5400) == "90:00"

    def test_fractional_seconds_truncated(self) -> None:
        assert format_clock(59.9) == "0:59"
