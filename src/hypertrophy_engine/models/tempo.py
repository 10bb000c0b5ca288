"""Movement tempo: per-phase durations of one repetition."""

from __future__ import annotations

from dataclasses import dataclass

from hypertrophy_engine.models.enums import TempoPhase


@dataclass(frozen=True)
class TempoProfile:
    """Durations in seconds for the four phases of a rep.

    Eccentric and concentric carry the movement; pauses may be zero.
    A profile whose four phases are all zero is degenerate: it has no
    time under tension and every phase completes instantly.
    """

    eccentric_s: float = 3.0
    bottom_pause_s: float = 0.0
    concentric_s: float = 1.0
    top_pause_s: float = 0.0

    @property
    def rep_duration_s(self) -> float:
        return self.eccentric_s + self.bottom_pause_s + self.concentric_s + self.top_pause_s

    @property
    def is_degenerate(self) -> bool:
        return self.rep_duration_s == 0

    @property
    def has_pauses(self) -> bool:
        return self.bottom_pause_s > 0 or self.top_pause_s > 0

    @property
    def notation(self) -> str:
        """Tempo in eccentric-bottom-concentric-top order, e.g. '3-0-1-0'."""
        return "-".join(f"{d:g}" for d in self.as_tuple())

    def phase_duration(self, phase: TempoPhase) -> float:
        """Return the configured duration of *phase* in seconds."""
        return self.as_tuple()[phase]

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.eccentric_s, self.bottom_pause_s, self.concentric_s, self.top_pause_s)
