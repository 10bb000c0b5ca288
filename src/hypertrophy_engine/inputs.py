"""Build model objects from flat control values.

Interactive controls pass ``strict=False``: every value is clamped to its
slider range so a stray value can never reach the engine. Typed input (the
terminal runner) passes ``strict=True`` and gets a ParameterRangeError
instead of a silent correction.
"""

from __future__ import annotations

from typing import Any, Mapping

from hypertrophy_engine.models.ranges import PARAMETER_RANGES
from hypertrophy_engine.models.session import ResistanceBlock, SessionPlan
from hypertrophy_engine.models.tempo import TempoProfile

_DEFAULT_TEMPO = TempoProfile()
_DEFAULT_PLAN = SessionPlan()


def bounded_value(name: str, value: float, strict: bool = False) -> float:
    """Clamp or check a single control value against its range.

    Raises:
        KeyError: if *name* is not a known control.
        ParameterRangeError: in strict mode, if *value* is out of range.
    """
    spec = PARAMETER_RANGES[name]
    return spec.check(value) if strict else spec.clamp(value)


def _get(values: Mapping[str, Any], name: str, default: float, strict: bool) -> float:
    return bounded_value(name, values.get(name, default), strict=strict)


def build_tempo(values: Mapping[str, Any], strict: bool = False) -> TempoProfile:
    """Build a TempoProfile from eccentric_s/bottom_pause_s/concentric_s/top_pause_s."""
    return TempoProfile(
        eccentric_s=_get(values, "eccentric_s", _DEFAULT_TEMPO.eccentric_s, strict),
        bottom_pause_s=_get(values, "bottom_pause_s", _DEFAULT_TEMPO.bottom_pause_s, strict),
        concentric_s=_get(values, "concentric_s", _DEFAULT_TEMPO.concentric_s, strict),
        top_pause_s=_get(values, "top_pause_s", _DEFAULT_TEMPO.top_pause_s, strict),
    )


def build_session_plan(values: Mapping[str, Any], strict: bool = False) -> SessionPlan:
    """Build a SessionPlan from a flat dict of control values.

    Missing keys fall back to the SessionPlan defaults.
    """
    block = _DEFAULT_PLAN.resistance
    resistance = ResistanceBlock(
        exercise_count=int(_get(values, "exercise_count", block.exercise_count, strict)),
        sets_per_exercise=int(_get(values, "sets_per_exercise", block.sets_per_exercise, strict)),
        reps_per_set=int(_get(values, "reps_per_set", block.reps_per_set, strict)),
        tempo=build_tempo(values, strict=strict),
    )
    return SessionPlan(
        warmup_min=_get(values, "warmup_min", _DEFAULT_PLAN.warmup_min, strict),
        resistance=resistance,
        rest_between_sets_s=_get(
            values, "rest_between_sets_s", _DEFAULT_PLAN.rest_between_sets_s, strict
        ),
        transition_between_exercises_s=_get(
            values,
            "transition_between_exercises_s",
            _DEFAULT_PLAN.transition_between_exercises_s,
            strict,
        ),
        cardio_min=_get(values, "cardio_min", _DEFAULT_PLAN.cardio_min, strict),
        cooldown_min=_get(values, "cooldown_min", _DEFAULT_PLAN.cooldown_min, strict),
    )
