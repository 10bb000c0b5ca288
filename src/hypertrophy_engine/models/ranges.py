"""Valid ranges for every user-facing control.

The presentation layer clamps slider values through these ranges before
building model objects; the command-line runner checks them and rejects
bad input instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from hypertrophy_engine.exceptions import ParameterRangeError


@dataclass(frozen=True)
class ParameterRange:
    """Inclusive [minimum, maximum] range with a step grid anchored at minimum."""

    name: str
    minimum: float
    maximum: float
    step: float = 1
    unit: str = ""
    integer: bool = True

    def clamp(self, value: float) -> float:
        """Bound *value* to the range, then snap it to the nearest step."""
        bounded = min(max(value, self.minimum), self.maximum)
        if self.step > 0:
            steps = round((bounded - self.minimum) / self.step)
            bounded = min(self.minimum + steps * self.step, self.maximum)
        return int(round(bounded)) if self.integer else float(bounded)

    def check(self, value: float) -> float:
        """Return *value* unchanged if it lies within the range.

        Raises:
            ParameterRangeError: if value is below minimum or above maximum.
        """
        if value < self.minimum or value > self.maximum:
            raise ParameterRangeError(self.name, value, self.minimum, self.maximum)
        return int(value) if self.integer and float(value).is_integer() else value

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


PARAMETER_RANGES: dict[str, ParameterRange] = {
    r.name: r
    for r in (
        # Tempo (seconds)
        ParameterRange("eccentric_s", 1, 8, unit="s"),
        ParameterRange("bottom_pause_s", 0, 5, unit="s"),
        ParameterRange("concentric_s", 1, 8, unit="s"),
        ParameterRange("top_pause_s", 0, 5, unit="s"),
        # Resistance block
        ParameterRange("exercise_count", 1, 12),
        ParameterRange("sets_per_exercise", 1, 6),
        ParameterRange("reps_per_set", 1, 30),
        # Rest & transitions (seconds, 15 s steps)
        ParameterRange("rest_between_sets_s", 15, 300, step=15, unit="s"),
        ParameterRange("transition_between_exercises_s", 15, 300, step=15, unit="s"),
        # Blocks (minutes)
        ParameterRange("warmup_min", 0, 20, unit="min"),
        ParameterRange("cardio_min", 0, 40, unit="min"),
        ParameterRange("cooldown_min", 0, 20, unit="min"),
        # Load (% 1RM)
        ParameterRange("load_pct", 30, 100, unit="%"),
    )
}
