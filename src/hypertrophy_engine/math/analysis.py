"""Tabular views of engine outputs for charts and tables.

Builds on the same scoring and budget functions the live controls use;
nothing here adds new rules.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from hypertrophy_engine.math.effect_scores import score_training_effect
from hypertrophy_engine.math.load_reps import load_for_reps
from hypertrophy_engine.math.session_budget import bucket_percentages
from hypertrophy_engine.math.tempo_clock import phase_tut_breakdown
from hypertrophy_engine.models.session import SessionBreakdown
from hypertrophy_engine.models.tempo import TempoProfile


def breakdown_frame(breakdown: SessionBreakdown) -> pd.DataFrame:
    """One row per session bucket: seconds, minutes and share of total."""
    buckets = breakdown.buckets()
    percentages = bucket_percentages(breakdown)
    seconds = np.array(list(buckets.values()), dtype=np.float64)
    return pd.DataFrame(
        {
            "bucket": list(buckets.keys()),
            "seconds": seconds,
            "minutes": seconds / 60,
            "percent": [percentages[name] for name in buckets],
        }
    )


def phase_tut_frame(tempo: TempoProfile, reps: int) -> pd.DataFrame:
    """Seconds under tension per phase across a set, for a bar chart."""
    tut = phase_tut_breakdown(tempo, reps)
    return pd.DataFrame(
        {
            "phase": [phase.name.replace("_", " ").title() for phase in tut],
            "seconds": [float(v) for v in tut.values()],
        }
    )


def rep_range_profile(tempo: TempoProfile, reps_values: Sequence[int]) -> pd.DataFrame:
    """Effect scores across a range of rep counts at a fixed tempo.

    Each rep count is paired with its estimated %1RM so the table reflects
    sets taken close to failure.

    Args:
        tempo: Tempo used for every row.
        reps_values: Rep counts to evaluate.

    Returns:
        DataFrame with columns reps, load_pct, set_tut_s, strength,
        hypertrophy, metabolic.
    """
    reps = np.asarray(list(reps_values), dtype=np.int64)
    loads = [load_for_reps(int(r)) for r in reps]
    scores = [score_training_effect(tempo, int(r), load) for r, load in zip(reps, loads)]
    return pd.DataFrame(
        {
            "reps": reps,
            "load_pct": loads,
            "set_tut_s": reps * tempo.rep_duration_s,
            "strength": [s.strength for s in scores],
            "hypertrophy": [s.hypertrophy for s in scores],
            "metabolic": [s.metabolic for s in scores],
        }
    )
