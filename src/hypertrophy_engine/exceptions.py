"""Custom exception hierarchy for the hypertrophy engine."""

from __future__ import annotations


class HypertrophyEngineError(Exception):
    """Base exception for all hypertrophy_engine errors."""


class ParameterRangeError(HypertrophyEngineError, ValueError):
    """A control value lies outside its documented range."""

    def __init__(self, name: str, value: float, minimum: float, maximum: float) -> None:
        super().__init__(f"{name}={value:g} is outside the range {minimum:g}-{maximum:g}")
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
