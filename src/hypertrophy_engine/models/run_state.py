"""Live state of a simulated working set."""

from __future__ import annotations

from dataclasses import dataclass

from hypertrophy_engine.models.enums import RunStatus, TempoPhase


@dataclass(frozen=True)
class TempoRunState:
    """Snapshot of the phase clock for one working set.

    Produced only by the tempo_clock transition functions; renderers read
    it and never modify it. ``current_rep_index`` reaches ``total_reps``
    only when the top pause of the last rep has finished.
    """

    total_reps: int
    current_rep_index: int = 0
    current_phase: TempoPhase = TempoPhase.ECCENTRIC
    phase_elapsed_s: float = 0.0
    total_elapsed_s: float = 0.0
    running: bool = False
    paused: bool = False

    @property
    def completed(self) -> bool:
        return self.total_reps > 0 and self.current_rep_index >= self.total_reps

    @property
    def status(self) -> RunStatus:
        if self.running:
            return RunStatus.PAUSED if self.paused else RunStatus.RUNNING
        if self.completed:
            return RunStatus.COMPLETED
        return RunStatus.IDLE

    @property
    def display_rep(self) -> int:
        """1-based rep number shown to the user (capped at total_reps)."""
        return min(self.current_rep_index + 1, self.total_reps)
