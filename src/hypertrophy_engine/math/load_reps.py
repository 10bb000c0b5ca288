"""Load <-> repetition estimates from a %1RM lookup table.

Used to keep the reps and load controls in sync: moving one slider snaps
the other to the nearest tabulated pairing. Ties resolve to the lower rep
count.
"""

from __future__ import annotations

import numpy as np

from hypertrophy_engine.models.enums import LOAD_PCT_BY_REPS

_REPS = np.array(sorted(LOAD_PCT_BY_REPS), dtype=np.float64)
_LOADS = np.array([LOAD_PCT_BY_REPS[int(r)] for r in _REPS], dtype=np.float64)


def load_for_reps(reps: float) -> int:
    """Estimated %1RM for a set of *reps* taken close to failure.

    e.g. 10 -> 79, 11 -> 79 (ties go to the lower rep count), 13 -> 75.
    """
    # argmin returns the first minimum, i.e. the lowest rep count on a tie
    idx = int(np.argmin(np.abs(_REPS - reps)))
    return int(_LOADS[idx])


def reps_for_load(load_pct: float) -> int:
    """Estimated rep count achievable at *load_pct* of 1RM.

    e.g. 79 -> 10, 100 -> 1, 30 -> 30.
    """
    idx = int(np.argmin(np.abs(_LOADS - load_pct)))
    return int(_REPS[idx])
