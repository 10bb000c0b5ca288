"""Enumerations and heuristic constants for the hypertrophy engine.

The effect-score thresholds are a pedagogical model, not physiological
ground truth. They are kept as literal constants so they can be tested
exactly.
"""

from enum import IntEnum, auto


class TempoPhase(IntEnum):
    """Phases of a single repetition, in execution order."""

    ECCENTRIC = 0      # lowering
    BOTTOM_PAUSE = 1
    CONCENTRIC = 2     # lifting
    TOP_PAUSE = 3


class RunStatus(IntEnum):
    """Lifecycle of a simulated working set."""

    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()
    COMPLETED = auto()


class TargetStatus(IntEnum):
    """Session length relative to a target duration, by increasing severity."""

    UNDER = auto()
    NEAR = auto()
    OVER = auto()


# Cyclic phase order within one rep
PHASE_ORDER: tuple[TempoPhase, ...] = (
    TempoPhase.ECCENTRIC,
    TempoPhase.BOTTOM_PAUSE,
    TempoPhase.CONCENTRIC,
    TempoPhase.TOP_PAUSE,
)

# ---------------------------------------------------------------------------
# Session budget
# ---------------------------------------------------------------------------
SECONDS_PER_MINUTE = 60

# Bucket names in display order
SESSION_BUCKETS: tuple[str, ...] = (
    "warmup",
    "lifting",
    "rest",
    "transition",
    "cardio",
    "cooldown",
)

# Within this many minutes of the target the session counts as "near"
TARGET_NEAR_MARGIN_MIN = 5

# Timeline bar spans 0-90 minutes
TIMELINE_SCALE_MIN = 90

# Challenge presets offered to the learner (minutes)
TARGET_PRESETS_MIN: tuple[int, ...] = (30, 45, 60)

# ---------------------------------------------------------------------------
# Strength score
# ---------------------------------------------------------------------------
STRENGTH_HEAVY_LOAD_PCT = 85
STRENGTH_HEAVY_LOAD_POINTS = 60
STRENGTH_MODERATE_LOAD_PCT = 75
STRENGTH_MODERATE_LOAD_POINTS = 40
STRENGTH_LIGHT_LOAD_POINTS = 10

STRENGTH_LOW_REPS = 5
STRENGTH_LOW_REPS_POINTS = 20
STRENGTH_MID_REPS = 8
STRENGTH_MID_REPS_POINTS = 10

STRENGTH_FAST_CONCENTRIC_S = 1.5
STRENGTH_FAST_CONCENTRIC_POINTS = 20
STRENGTH_SLOW_CONCENTRIC_POINTS = -20

# ---------------------------------------------------------------------------
# Hypertrophy score
# ---------------------------------------------------------------------------
HYPERTROPHY_OPTIMAL_REPS = (6, 25)
HYPERTROPHY_OPTIMAL_REPS_POINTS = 50
HYPERTROPHY_EFFECTIVE_REPS = (3, 35)
HYPERTROPHY_EFFECTIVE_REPS_POINTS = 40
HYPERTROPHY_OTHER_REPS_POINTS = 20

HYPERTROPHY_MODERATE_REP_DURATION_S = (2, 8)
HYPERTROPHY_MODERATE_REP_DURATION_POINTS = 40
HYPERTROPHY_SLOW_REP_DURATION_POINTS = 20
HYPERTROPHY_FAST_REP_DURATION_POINTS = 30

HYPERTROPHY_MIN_SET_TUT_S = 40
HYPERTROPHY_SET_TUT_POINTS = 10

# ---------------------------------------------------------------------------
# Metabolic score
# ---------------------------------------------------------------------------
METABOLIC_HIGH_TUT_S = 60
METABOLIC_HIGH_TUT_POINTS = 40
METABOLIC_MODERATE_TUT_S = 40
METABOLIC_MODERATE_TUT_POINTS = 20

METABOLIC_HIGH_REPS = 15
METABOLIC_HIGH_REPS_POINTS = 40
METABOLIC_MODERATE_REPS = 10
METABOLIC_MODERATE_REPS_POINTS = 20

METABOLIC_NO_PAUSE_POINTS = 20

SCORE_MIN = 0
SCORE_MAX = 100

# ---------------------------------------------------------------------------
# Load vs. repetitions (% of 1RM for a set taken close to failure)
# ---------------------------------------------------------------------------
LOAD_PCT_BY_REPS: dict[int, int] = {
    1: 100,
    2: 97,
    3: 94,
    4: 92,
    5: 89,
    6: 87,
    7: 85,
    8: 83,
    9: 81,
    10: 79,
    12: 75,
    15: 69,
    20: 60,
    25: 53,
    30: 48,
}
