"""Tempo phase clock: pure state transitions for one working set.

Every function takes a TempoRunState and returns the next one. Calls that
are not valid in the current status return the *same* object unchanged,
so callers can detect a no-op with an identity check. Nothing here owns a
timer; whoever drives the set decides how often advance() is called.

State machine:
    IDLE --start--> RUNNING --pause--> PAUSED --resume/start--> RUNNING
    RUNNING --last top pause done--> COMPLETED --start--> RUNNING
    any --reset--> IDLE
"""

from __future__ import annotations

import dataclasses

from hypertrophy_engine.models.enums import PHASE_ORDER, RunStatus, TempoPhase
from hypertrophy_engine.models.run_state import TempoRunState
from hypertrophy_engine.models.tempo import TempoProfile


def initial_state(total_reps: int) -> TempoRunState:
    """Idle state at the top of the first rep."""
    return TempoRunState(total_reps=total_reps)


def start(state: TempoRunState) -> TempoRunState:
    """Begin a fresh set from IDLE/COMPLETED, or resume from PAUSED."""
    status = state.status
    if status == RunStatus.PAUSED:
        return resume(state)
    if status in (RunStatus.IDLE, RunStatus.COMPLETED):
        return TempoRunState(total_reps=state.total_reps, running=True)
    return state


def pause(state: TempoRunState) -> TempoRunState:
    """Freeze the clock, keeping every counter."""
    if state.status != RunStatus.RUNNING:
        return state
    return dataclasses.replace(state, paused=True)


def resume(state: TempoRunState) -> TempoRunState:
    """Unfreeze a paused set without resetting it."""
    if state.status != RunStatus.PAUSED:
        return state
    return dataclasses.replace(state, paused=False)


def reset(state: TempoRunState) -> TempoRunState:
    """Return to IDLE with all counters zeroed, from any status."""
    fresh = initial_state(state.total_reps)
    if state == fresh:
        return state
    return fresh


def next_phase(phase: TempoPhase) -> TempoPhase:
    """Phase that follows *phase* in the cyclic rep order."""
    return PHASE_ORDER[(PHASE_ORDER.index(phase) + 1) % len(PHASE_ORDER)]


def advance(state: TempoRunState, tempo: TempoProfile, delta_s: float) -> TempoRunState:
    """Advance a running set by *delta_s* seconds of wall time.

    A single call may cross several phases or reps, so a slow caller never
    skips a transition. Zero-duration phases complete on the call that
    enters them. Finishing the top pause of the last rep completes the set:
    the phase clock is pinned at the end of that pause and any overshoot is
    dropped from the elapsed total.

    Args:
        state: Current run state.
        tempo: Phase durations for the set.
        delta_s: Seconds since the previous tick. Negative values count as 0.

    Returns:
        The next state, or *state* itself if the set is not running.
    """
    if state.status != RunStatus.RUNNING:
        return state

    step = max(0.0, delta_s)
    phase = state.current_phase
    rep_index = state.current_rep_index
    phase_elapsed = state.phase_elapsed_s + step
    total_elapsed = state.total_elapsed_s + step

    duration = tempo.phase_duration(phase)
    while phase_elapsed >= duration:
        if phase == TempoPhase.TOP_PAUSE and rep_index + 1 >= state.total_reps:
            overshoot = phase_elapsed - duration
            return dataclasses.replace(
                state,
                current_rep_index=state.total_reps,
                current_phase=phase,
                phase_elapsed_s=duration,
                total_elapsed_s=total_elapsed - overshoot,
                running=False,
                paused=False,
            )
        if phase == TempoPhase.TOP_PAUSE:
            rep_index += 1
        phase_elapsed -= duration
        phase = next_phase(phase)
        duration = tempo.phase_duration(phase)

    return dataclasses.replace(
        state,
        current_rep_index=rep_index,
        current_phase=phase,
        phase_elapsed_s=phase_elapsed,
        total_elapsed_s=total_elapsed,
    )


def phase_progress(state: TempoRunState, tempo: TempoProfile) -> float:
    """Fraction of the active phase already done, in [0, 1].

    A zero-duration phase is instantly complete and reports 1.
    """
    duration = tempo.phase_duration(state.current_phase)
    if duration <= 0:
        return 1.0
    return max(0.0, min(state.phase_elapsed_s / duration, 1.0))


def stack_height(state: TempoRunState, tempo: TempoProfile) -> float:
    """Height of the weight stack, 0 at the bottom and 1 at the top.

    The eccentric lowers the stack, the concentric raises it, and the
    pauses hold it at either end.
    """
    progress = phase_progress(state, tempo)
    if state.current_phase == TempoPhase.ECCENTRIC:
        return 1.0 - progress
    if state.current_phase == TempoPhase.BOTTOM_PAUSE:
        return 0.0
    if state.current_phase == TempoPhase.CONCENTRIC:
        return progress
    return 1.0


def set_duration_s(tempo: TempoProfile, total_reps: int) -> float:
    """Time under tension of the whole set."""
    return tempo.rep_duration_s * total_reps


def remaining_s(state: TempoRunState, tempo: TempoProfile) -> float:
    """Seconds left in the set (0 once completed)."""
    if state.completed:
        return 0.0
    return max(0.0, set_duration_s(tempo, state.total_reps) - state.total_elapsed_s)


def phase_tut_breakdown(tempo: TempoProfile, reps: int) -> dict[TempoPhase, float]:
    """Seconds spent in each phase across a whole set of *reps*."""
    return {phase: tempo.phase_duration(phase) * reps for phase in PHASE_ORDER}
