"""Session plan inputs and the derived time breakdown."""

from __future__ import annotations

from dataclasses import dataclass, field

from hypertrophy_engine.models.enums import SESSION_BUCKETS
from hypertrophy_engine.models.tempo import TempoProfile


@dataclass(frozen=True)
class ResistanceBlock:
    """The lifting part of a session: exercises x sets x reps at one tempo."""

    exercise_count: int = 6
    sets_per_exercise: int = 3
    reps_per_set: int = 10
    tempo: TempoProfile = field(default_factory=TempoProfile)


@dataclass(frozen=True)
class SessionPlan:
    """Immutable snapshot of every parameter of a planned session.

    This is the sole input to compute_session_breakdown(). Any slider change
    produces a new plan rather than mutating this one.
    """

    warmup_min: float = 5
    resistance: ResistanceBlock = field(default_factory=ResistanceBlock)
    rest_between_sets_s: float = 60
    transition_between_exercises_s: float = 60
    cardio_min: float = 10
    cooldown_min: float = 5


@dataclass(frozen=True)
class SessionBreakdown:
    """Time spent in each part of a session, in seconds.

    ``total_s`` is always derived from the six buckets so it can never
    disagree with them.
    """

    warmup_s: float
    lifting_s: float
    rest_s: float
    transition_s: float
    cardio_s: float
    cooldown_s: float
    rep_duration_s: float = 0.0

    @property
    def total_s(self) -> float:
        return (
            self.warmup_s
            + self.lifting_s
            + self.rest_s
            + self.transition_s
            + self.cardio_s
            + self.cooldown_s
        )

    @property
    def total_min(self) -> float:
        return self.total_s / 60

    def buckets(self) -> dict[str, float]:
        """Bucket name -> seconds, in display order."""
        return {name: getattr(self, f"{name}_s") for name in SESSION_BUCKETS}
