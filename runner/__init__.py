"""Terminal runner for the hypertrophy engine."""
