"""Environment-variable-based configuration for the terminal runner."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("HYPERTROPHY_LOG_LEVEL", "INFO").upper()
TICK_INTERVAL_S: float = float(os.environ.get("TEMPO_TICK_INTERVAL", "0.1"))
DEFAULT_TARGET_MIN: int = int(os.environ.get("SESSION_TARGET_MIN", "45"))
