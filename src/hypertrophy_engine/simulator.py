"""TempoSetSimulator: owns the phase clock of one working set."""

from __future__ import annotations

import logging
from typing import Callable

from hypertrophy_engine.math import tempo_clock
from hypertrophy_engine.models.enums import RunStatus
from hypertrophy_engine.models.run_state import TempoRunState
from hypertrophy_engine.models.tempo import TempoProfile

logger = logging.getLogger(__name__)

StateListener = Callable[[TempoRunState], None]


class TempoSetSimulator:
    """Runs a single set through its eccentric/pause/concentric/pause cycle.

    The simulator holds the only TempoRunState for its set and replaces it
    through the pure transitions in ``tempo_clock``. It has no timer of its
    own: the caller feeds elapsed wall time into tick(). Every control is
    safe to call in any status; invalid ones are no-ops.

    Usage:
        sim = TempoSetSimulator(TempoProfile(3, 0, 1, 0), total_reps=10)
        sim.start()
        sim.tick(0.016)
        sim.state.current_phase, sim.progress
    """

    def __init__(self, tempo: TempoProfile, total_reps: int) -> None:
        self._tempo = tempo
        self._state = tempo_clock.initial_state(total_reps)
        self._listeners: list[StateListener] = []

    @property
    def tempo(self) -> TempoProfile:
        return self._tempo

    @property
    def total_reps(self) -> int:
        return self._state.total_reps

    @property
    def state(self) -> TempoRunState:
        return self._state

    @property
    def status(self) -> RunStatus:
        return self._state.status

    @property
    def progress(self) -> float:
        """Fraction of the active phase completed, in [0, 1]."""
        return tempo_clock.phase_progress(self._state, self._tempo)

    @property
    def stack_height(self) -> float:
        return tempo_clock.stack_height(self._state, self._tempo)

    @property
    def remaining_s(self) -> float:
        return tempo_clock.remaining_s(self._state, self._tempo)

    def subscribe(self, listener: StateListener) -> None:
        """Call *listener* with every new state (never on no-ops)."""
        self._listeners.append(listener)

    def configure(
        self, tempo: TempoProfile | None = None, total_reps: int | None = None
    ) -> None:
        """Change the set parameters. Always returns the set to IDLE."""
        if tempo is not None:
            self._tempo = tempo
        reps = self._state.total_reps if total_reps is None else total_reps
        self._apply(tempo_clock.initial_state(reps), "configure")

    def start(self) -> None:
        self._apply(tempo_clock.start(self._state), "start")

    def pause(self) -> None:
        self._apply(tempo_clock.pause(self._state), "pause")

    def resume(self) -> None:
        self._apply(tempo_clock.resume(self._state), "resume")

    def reset(self) -> None:
        self._apply(tempo_clock.reset(self._state), "reset")

    def tick(self, delta_s: float) -> TempoRunState:
        """Advance the clock by *delta_s* seconds and return the new state."""
        self._apply(tempo_clock.advance(self._state, self._tempo, delta_s), "tick")
        return self._state

    def _apply(self, new_state: TempoRunState, action: str) -> None:
        previous = self._state
        if new_state is previous:
            return
        self._state = new_state

        if new_state.status != previous.status:
            logger.debug(
                "%s: %s -> %s (rep %d/%d)",
                action,
                previous.status.name,
                new_state.status.name,
                new_state.current_rep_index,
                new_state.total_reps,
            )
            if new_state.status == RunStatus.COMPLETED:
                logger.info(
                    "Set complete: %d reps, %.1fs under tension",
                    new_state.total_reps,
                    new_state.total_elapsed_s,
                )

        for listener in self._listeners:
            listener(new_state)
