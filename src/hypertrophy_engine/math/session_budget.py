"""Session time budget: how long a planned workout takes and how that
compares with a target duration.

Modeling assumption: the session is executed strictly in sequence. Rest is
owed only between sets of the same exercise and transitions only between
distinct exercises; there is no supersetting or circuit mode.
"""

from __future__ import annotations

import math

from hypertrophy_engine.models.enums import (
    SECONDS_PER_MINUTE,
    TARGET_NEAR_MARGIN_MIN,
    TIMELINE_SCALE_MIN,
    TargetStatus,
)
from hypertrophy_engine.models.session import SessionBreakdown, SessionPlan


def compute_session_breakdown(plan: SessionPlan) -> SessionBreakdown:
    """Break a session plan down into six duration buckets.

    Args:
        plan: Immutable snapshot of the session parameters. Values are
            expected to be within the control ranges already.

    Returns:
        A fresh SessionBreakdown in seconds.
    """
    block = plan.resistance
    rep_duration = block.tempo.rep_duration_s

    lifting = rep_duration * block.reps_per_set * block.sets_per_exercise * block.exercise_count

    # Rest only happens between sets of the same exercise
    if block.sets_per_exercise > 1:
        rest = (block.sets_per_exercise - 1) * plan.rest_between_sets_s * block.exercise_count
    else:
        rest = 0

    # Transitions only happen between distinct exercises
    if block.exercise_count > 1:
        transition = (block.exercise_count - 1) * plan.transition_between_exercises_s
    else:
        transition = 0

    return SessionBreakdown(
        warmup_s=plan.warmup_min * SECONDS_PER_MINUTE,
        lifting_s=lifting,
        rest_s=rest,
        transition_s=transition,
        cardio_s=plan.cardio_min * SECONDS_PER_MINUTE,
        cooldown_s=plan.cooldown_min * SECONDS_PER_MINUTE,
        rep_duration_s=rep_duration,
    )


def bucket_percentages(breakdown: SessionBreakdown) -> dict[str, float]:
    """Share of the total session spent in each bucket, as 0-100 percentages.

    An empty session (total 0) reports 0% for every bucket.
    """
    total = breakdown.total_s
    if total <= 0:
        return {name: 0.0 for name in breakdown.buckets()}
    return {name: seconds / total * 100 for name, seconds in breakdown.buckets().items()}


def classify_target(total_s: float, target_min: float) -> TargetStatus:
    """Place a session length into a three-tier status relative to a target.

    UNDER: total <= target - 5 min
    NEAR:  target - 5 min < total <= target
    OVER:  total > target

    Boundaries fall into the lower-severity tier.
    """
    total_min = total_s / SECONDS_PER_MINUTE
    if total_min > target_min:
        return TargetStatus.OVER
    if total_min > target_min - TARGET_NEAR_MARGIN_MIN:
        return TargetStatus.NEAR
    return TargetStatus.UNDER


def target_gap_min(total_s: float, target_min: float) -> float:
    """Minutes left before the target (negative when over)."""
    return (target_min * SECONDS_PER_MINUTE - total_s) / SECONDS_PER_MINUTE


def describe_target(total_s: float, target_min: float) -> str:
    """User-facing sentence for the session's target status.

    Overruns round up to whole minutes; remaining time rounds down, so the
    message never promises more slack than there is.
    """
    gap = target_gap_min(total_s, target_min)
    status = classify_target(total_s, target_min)

    if status == TargetStatus.OVER:
        return (
            f"You are {math.ceil(abs(gap))} minutes over target. "
            f"Reduce rest, sets, or cardio."
        )
    if status == TargetStatus.NEAR:
        return (
            f"You are close to the limit! {math.floor(gap)} min remaining. "
            f"Careful with adding volume."
        )
    return (
        f"Great pace! You are comfortably under the limit with "
        f"{math.floor(gap)} minutes to spare."
    )


def timeline_fraction(minutes: float, scale_min: float = TIMELINE_SCALE_MIN) -> float:
    """Position of *minutes* on a 0-scale_min timeline bar, capped at 1."""
    if scale_min <= 0:
        return 0.0
    return max(0.0, min(minutes / scale_min, 1.0))


def format_clock(seconds: float) -> str:
    """Convert seconds to 'M:SS'. e.g. 2940 -> '49:00', 75 -> '1:15'."""
    whole = max(0, int(seconds))
    mins, secs = divmod(whole, SECONDS_PER_MINUTE)
    return f"{mins}:{secs:02d}"
