"""Effect scores: heuristic training emphasis of a set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EffectScoreSet:
    """Strength, hypertrophy and metabolic emphasis, each in [0, 100]."""

    strength: int
    hypertrophy: int
    metabolic: int

    def as_dict(self) -> dict[str, int]:
        return {
            "strength": self.strength,
            "hypertrophy": self.hypertrophy,
            "metabolic": self.metabolic,
        }
