"""Data models for the hypertrophy engine."""

from hypertrophy_engine.models.effect_scores import EffectScoreSet
from hypertrophy_engine.models.enums import RunStatus, TargetStatus, TempoPhase
from hypertrophy_engine.models.ranges import PARAMETER_RANGES, ParameterRange
from hypertrophy_engine.models.run_state import TempoRunState
from hypertrophy_engine.models.session import (
    ResistanceBlock,
    SessionBreakdown,
    SessionPlan,
)
from hypertrophy_engine.models.tempo import TempoProfile

__all__ = [
    "EffectScoreSet",
    "PARAMETER_RANGES",
    "ParameterRange",
    "ResistanceBlock",
    "RunStatus",
    "SessionBreakdown",
    "SessionPlan",
    "TargetStatus",
    "TempoPhase",
    "TempoProfile",
    "TempoRunState",
]
