"""Shared test fixtures: tempos, session plans and simulators."""

from __future__ import annotations

import pytest

from hypertrophy_engine.models.session import ResistanceBlock, SessionPlan
from hypertrophy_engine.models.tempo import TempoProfile
from hypertrophy_engine.simulator import TempoSetSimulator


@pytest.fixture
def standard_tempo() -> TempoProfile:
    """3-0-1-0: 3 s lowering, 1 s lifting, no pauses (4 s per rep)."""
    return TempoProfile(eccentric_s=3, bottom_pause_s=0, concentric_s=1, top_pause_s=0)


@pytest.fixture
def paused_tempo() -> TempoProfile:
    """2-1-1-1: every phase non-zero (5 s per rep)."""
    return TempoProfile(eccentric_s=2, bottom_pause_s=1, concentric_s=1, top_pause_s=1)


@pytest.fixture
def slow_tempo() -> TempoProfile:
    """6-0-2-0: slow eccentric, 8 s per rep, no pauses."""
    return TempoProfile(eccentric_s=6, bottom_pause_s=0, concentric_s=2, top_pause_s=0)


@pytest.fixture
def zero_tempo() -> TempoProfile:
    """Degenerate tempo: every phase is 0 s."""
    return TempoProfile(eccentric_s=0, bottom_pause_s=0, concentric_s=0, top_pause_s=0)


@pytest.fixture
def default_plan(standard_tempo: TempoProfile) -> SessionPlan:
    """The default challenge: 6 exercises x 3 sets x 10 reps, 49:00 in total."""
    return SessionPlan(
        warmup_min=5,
        resistance=ResistanceBlock(
            exercise_count=6,
            sets_per_exercise=3,
            reps_per_set=10,
            tempo=standard_tempo,
        ),
        rest_between_sets_s=60,
        transition_between_exercises_s=60,
        cardio_min=10,
        cooldown_min=5,
    )


@pytest.fixture
def minimal_plan(standard_tempo: TempoProfile) -> SessionPlan:
    """One exercise, one set: no rest and no transitions owed."""
    return SessionPlan(
        warmup_min=0,
        resistance=ResistanceBlock(
            exercise_count=1,
            sets_per_exercise=1,
            reps_per_set=10,
            tempo=standard_tempo,
        ),
        rest_between_sets_s=180,
        transition_between_exercises_s=120,
        cardio_min=0,
        cooldown_min=0,
    )


@pytest.fixture
def three_rep_simulator(standard_tempo: TempoProfile) -> TempoSetSimulator:
    """Idle simulator for 3 reps at 3-0-1-0 (12 s set)."""
    return TempoSetSimulator(standard_tempo, total_reps=3)
