"""Utility helpers bridging the Streamlit UI and the hypertrophy engine.

Pure functions for formatting, color maps and widget-value handling. No
Streamlit imports here so everything stays testable.
"""

from __future__ import annotations

from typing import Any, Mapping

from hypertrophy_engine.math.load_reps import load_for_reps, reps_for_load
from hypertrophy_engine.math.session_budget import format_clock
from hypertrophy_engine.models.enums import (
    SESSION_BUCKETS,
    RunStatus,
    TargetStatus,
    TempoPhase,
)
from hypertrophy_engine.models.ranges import PARAMETER_RANGES

from runner.config import TICK_INTERVAL_S  # visualizer refresh, shared with the terminal runner

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_minutes(seconds: float) -> str:
    """Convert seconds to a short minutes label. e.g. 300 -> '5 min', 90 -> '1.5 min'."""
    minutes = seconds / 60
    if minutes == int(minutes):
        return f"{int(minutes)} min"
    return f"{minutes:.1f} min"


def format_bucket_line(name: str, seconds: float, percent: float) -> str:
    """e.g. ('rest', 720, 24.5) -> 'Rest: 12:00 (24%)'."""
    return f"{BUCKET_LABELS.get(name, name.title())}: {format_clock(seconds)} ({percent:.0f}%)"


def format_range_caption(name: str) -> str:
    """Human caption of a control's range, e.g. 'eccentric_s' -> '1-8 s'."""
    spec = PARAMETER_RANGES[name]
    unit = f" {spec.unit}" if spec.unit and spec.unit != "%" else spec.unit
    return f"{spec.minimum:g}-{spec.maximum:g}{unit}"


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

BUCKET_COLORS: dict[str, str] = {
    "warmup": "#3B82F6",      # blue
    "lifting": "#10B981",     # emerald
    "rest": "#8B5CF6",        # violet
    "transition": "#F472B6",  # pink
    "cardio": "#EF4444",      # red
    "cooldown": "#F59E0B",    # amber
}

BUCKET_LABELS: dict[str, str] = {
    "warmup": "Warm-up",
    "lifting": "Lifting",
    "rest": "Rest",
    "transition": "Transitions",
    "cardio": "Cardio",
    "cooldown": "Cool-down",
}

STATUS_COLORS: dict[TargetStatus, str] = {
    TargetStatus.UNDER: "#10B981",
    TargetStatus.NEAR: "#F59E0B",
    TargetStatus.OVER: "#EF4444",
}

PHASE_COLORS: dict[TempoPhase, str] = {
    TempoPhase.ECCENTRIC: "#EF4444",
    TempoPhase.BOTTOM_PAUSE: "#F97316",
    TempoPhase.CONCENTRIC: "#EAB308",
    TempoPhase.TOP_PAUSE: "#3B82F6",
}

PHASE_LABELS: dict[TempoPhase, str] = {
    TempoPhase.ECCENTRIC: "Eccentric (lowering)",
    TempoPhase.BOTTOM_PAUSE: "Bottom pause",
    TempoPhase.CONCENTRIC: "Concentric (lifting)",
    TempoPhase.TOP_PAUSE: "Top pause",
}

RUN_STATUS_LABELS: dict[RunStatus, str] = {
    RunStatus.IDLE: "Ready",
    RunStatus.RUNNING: "Running",
    RunStatus.PAUSED: "Paused",
    RunStatus.COMPLETED: "Set complete",
}


def ordered_buckets(buckets: Mapping[str, float]) -> list[tuple[str, float]]:
    """Buckets in display order, skipping names the UI does not know."""
    return [(name, buckets[name]) for name in SESSION_BUCKETS if name in buckets]


# ---------------------------------------------------------------------------
# Linked reps / load sliders
# ---------------------------------------------------------------------------


def synced_load(reps: int) -> int:
    """Load slider value after the reps slider moved, kept within its range."""
    return int(PARAMETER_RANGES["load_pct"].clamp(load_for_reps(reps)))


def synced_reps(load_pct: int) -> int:
    """Reps slider value after the load slider moved, kept within its range."""
    return int(PARAMETER_RANGES["reps_per_set"].clamp(reps_for_load(load_pct)))


def slider_bounds(name: str) -> dict[str, Any]:
    """Keyword arguments for st.slider from a control's ParameterRange."""
    spec = PARAMETER_RANGES[name]
    return {
        "min_value": int(spec.minimum),
        "max_value": int(spec.maximum),
        "step": int(spec.step),
    }
