"""Training effect scores: strength, hypertrophy and metabolic emphasis.

Each score is a small additive rule table over binned inputs (load, rep
count, rep duration, time under tension), clamped to [0, 100]. The bins
and weights form a teaching heuristic, not a physiological model.

Strength:
    load >= 85% +60 | load >= 75% +40 | else +10
    reps <= 5 +20   | reps <= 8 +10
    concentric <= 1.5 s +20 | else -20

Hypertrophy:
    6-25 reps +50 | 3-35 reps +40 | else +20
    rep 2-8 s +40 | rep > 8 s +20 | else +30
    set TUT >= 40 s +10

Metabolic:
    set TUT > 60 s +40 | > 40 s +20
    reps >= 15 +40     | reps >= 10 +20
    no pauses +20
"""

from __future__ import annotations

from hypertrophy_engine.models.effect_scores import EffectScoreSet
from hypertrophy_engine.models.enums import (
    HYPERTROPHY_EFFECTIVE_REPS,
    HYPERTROPHY_EFFECTIVE_REPS_POINTS,
    HYPERTROPHY_FAST_REP_DURATION_POINTS,
    HYPERTROPHY_MIN_SET_TUT_S,
    HYPERTROPHY_MODERATE_REP_DURATION_POINTS,
    HYPERTROPHY_MODERATE_REP_DURATION_S,
    HYPERTROPHY_OPTIMAL_REPS,
    HYPERTROPHY_OPTIMAL_REPS_POINTS,
    HYPERTROPHY_OTHER_REPS_POINTS,
    HYPERTROPHY_SET_TUT_POINTS,
    HYPERTROPHY_SLOW_REP_DURATION_POINTS,
    METABOLIC_HIGH_REPS,
    METABOLIC_HIGH_REPS_POINTS,
    METABOLIC_HIGH_TUT_POINTS,
    METABOLIC_HIGH_TUT_S,
    METABOLIC_MODERATE_REPS,
    METABOLIC_MODERATE_REPS_POINTS,
    METABOLIC_MODERATE_TUT_POINTS,
    METABOLIC_MODERATE_TUT_S,
    METABOLIC_NO_PAUSE_POINTS,
    SCORE_MAX,
    SCORE_MIN,
    STRENGTH_FAST_CONCENTRIC_POINTS,
    STRENGTH_FAST_CONCENTRIC_S,
    STRENGTH_HEAVY_LOAD_PCT,
    STRENGTH_HEAVY_LOAD_POINTS,
    STRENGTH_LIGHT_LOAD_POINTS,
    STRENGTH_LOW_REPS,
    STRENGTH_LOW_REPS_POINTS,
    STRENGTH_MID_REPS,
    STRENGTH_MID_REPS_POINTS,
    STRENGTH_MODERATE_LOAD_PCT,
    STRENGTH_MODERATE_LOAD_POINTS,
    STRENGTH_SLOW_CONCENTRIC_POINTS,
)
from hypertrophy_engine.models.tempo import TempoProfile


def _clamp_score(points: float) -> int:
    return int(min(SCORE_MAX, max(SCORE_MIN, points)))


def strength_score(tempo: TempoProfile, reps: int, load_pct: float) -> int:
    """Emphasis on maximal strength: heavy, low-rep, fast concentric."""
    points = 0
    if load_pct >= STRENGTH_HEAVY_LOAD_PCT:
        points += STRENGTH_HEAVY_LOAD_POINTS
    elif load_pct >= STRENGTH_MODERATE_LOAD_PCT:
        points += STRENGTH_MODERATE_LOAD_POINTS
    else:
        points += STRENGTH_LIGHT_LOAD_POINTS

    if reps <= STRENGTH_LOW_REPS:
        points += STRENGTH_LOW_REPS_POINTS
    elif reps <= STRENGTH_MID_REPS:
        points += STRENGTH_MID_REPS_POINTS

    # Voluntarily slow concentrics reduce motor unit recruitment
    if tempo.concentric_s <= STRENGTH_FAST_CONCENTRIC_S:
        points += STRENGTH_FAST_CONCENTRIC_POINTS
    else:
        points += STRENGTH_SLOW_CONCENTRIC_POINTS

    return _clamp_score(points)


def hypertrophy_score(tempo: TempoProfile, reps: int) -> int:
    """Emphasis on muscle growth: broad rep range, moderate rep duration."""
    rep_duration = tempo.rep_duration_s
    set_tut = rep_duration * reps

    points = 0
    optimal_low, optimal_high = HYPERTROPHY_OPTIMAL_REPS
    effective_low, effective_high = HYPERTROPHY_EFFECTIVE_REPS
    if optimal_low <= reps <= optimal_high:
        points += HYPERTROPHY_OPTIMAL_REPS_POINTS
    elif effective_low <= reps <= effective_high:
        points += HYPERTROPHY_EFFECTIVE_REPS_POINTS
    else:
        points += HYPERTROPHY_OTHER_REPS_POINTS

    moderate_low, moderate_high = HYPERTROPHY_MODERATE_REP_DURATION_S
    if moderate_low <= rep_duration <= moderate_high:
        points += HYPERTROPHY_MODERATE_REP_DURATION_POINTS
    elif rep_duration > moderate_high:
        # Super-slow reps force too large a load reduction
        points += HYPERTROPHY_SLOW_REP_DURATION_POINTS
    else:
        points += HYPERTROPHY_FAST_REP_DURATION_POINTS

    if set_tut >= HYPERTROPHY_MIN_SET_TUT_S:
        points += HYPERTROPHY_SET_TUT_POINTS

    return _clamp_score(points)


def metabolic_score(tempo: TempoProfile, reps: int) -> int:
    """Emphasis on metabolic stress: long continuous sets without pauses."""
    set_tut = tempo.rep_duration_s * reps

    points = 0
    if set_tut > METABOLIC_HIGH_TUT_S:
        points += METABOLIC_HIGH_TUT_POINTS
    elif set_tut > METABOLIC_MODERATE_TUT_S:
        points += METABOLIC_MODERATE_TUT_POINTS

    if reps >= METABOLIC_HIGH_REPS:
        points += METABOLIC_HIGH_REPS_POINTS
    elif reps >= METABOLIC_MODERATE_REPS:
        points += METABOLIC_MODERATE_REPS_POINTS

    if tempo.bottom_pause_s == 0 and tempo.top_pause_s == 0:
        points += METABOLIC_NO_PAUSE_POINTS

    return _clamp_score(points)


def score_training_effect(tempo: TempoProfile, reps: int, load_pct: float) -> EffectScoreSet:
    """Score a set's strength, hypertrophy and metabolic emphasis.

    Args:
        tempo: Phase durations of each rep.
        reps: Reps in the set.
        load_pct: Load as a percentage of 1RM.

    Returns:
        EffectScoreSet with each score clamped to [0, 100].
    """
    return EffectScoreSet(
        strength=strength_score(tempo, reps, load_pct),
        hypertrophy=hypertrophy_score(tempo, reps),
        metabolic=metabolic_score(tempo, reps),
    )
