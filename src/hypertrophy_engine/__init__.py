"""Hypertrophy engine: session time budgets, tempo simulation and effect scores."""
