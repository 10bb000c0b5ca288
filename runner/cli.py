"""Terminal runner: session budgets, effect scores and a live tempo set.

Usage:
    python -m runner.cli budget --exercises 6 --sets 3 --reps 10 --target 45
    python -m runner.cli scores --tempo 3 0 1 0 --reps 10 --load 79
    python -m runner.cli tempo --tempo 3 0 1 0 --reps 5
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, Sequence

from hypertrophy_engine.exceptions import ParameterRangeError
from hypertrophy_engine.inputs import bounded_value, build_session_plan, build_tempo
from hypertrophy_engine.math.effect_scores import score_training_effect
from hypertrophy_engine.math.load_reps import load_for_reps
from hypertrophy_engine.math.session_budget import (
    bucket_percentages,
    compute_session_breakdown,
    describe_target,
    format_clock,
)
from hypertrophy_engine.models.enums import TARGET_PRESETS_MIN, RunStatus, TempoPhase
from hypertrophy_engine.models.run_state import TempoRunState
from hypertrophy_engine.simulator import TempoSetSimulator

from runner.config import DEFAULT_TARGET_MIN, LOG_LEVEL, TICK_INTERVAL_S

logger = logging.getLogger(__name__)

_TEMPO_FIELDS = ("eccentric_s", "bottom_pause_s", "concentric_s", "top_pause_s")


def _ranged(name: str, cast: Callable[[str], float] = float) -> Callable[[str], float]:
    """argparse type that rejects values outside the control range."""

    def parse(text: str) -> float:
        try:
            return bounded_value(name, cast(text), strict=True)
        except ParameterRangeError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    parse.__name__ = name
    return parse


def _positive_float(text: str) -> float:
    """argparse type for a multiplier that must be greater than zero."""
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{value:g} must be greater than 0")
    return value


def _tempo_values(tempo: Sequence[float]) -> dict[str, float]:
    return dict(zip(_TEMPO_FIELDS, tempo))


def _cmd_budget(args: argparse.Namespace) -> int:
    values = {
        "warmup_min": args.warmup,
        "exercise_count": args.exercises,
        "sets_per_exercise": args.sets,
        "reps_per_set": args.reps,
        "rest_between_sets_s": args.rest,
        "transition_between_exercises_s": args.transition,
        "cardio_min": args.cardio,
        "cooldown_min": args.cooldown,
        **_tempo_values(args.tempo),
    }
    try:
        plan = build_session_plan(values, strict=True)
    except ParameterRangeError as exc:
        logger.error("Invalid session plan: %s", exc)
        return 2

    breakdown = compute_session_breakdown(plan)
    percentages = bucket_percentages(breakdown)
    for name, seconds in breakdown.buckets().items():
        print(f"{name:<11} {format_clock(seconds):>6}  {percentages[name]:5.1f}%")
    print(f"{'total':<11} {format_clock(breakdown.total_s):>6}")
    print(describe_target(breakdown.total_s, args.target))
    return 0


def _cmd_scores(args: argparse.Namespace) -> int:
    try:
        tempo = build_tempo(_tempo_values(args.tempo), strict=True)
    except ParameterRangeError as exc:
        logger.error("Invalid tempo: %s", exc)
        return 2

    load = args.load if args.load is not None else load_for_reps(args.reps)
    scores = score_training_effect(tempo, args.reps, load)
    print(f"tempo {tempo.notation}, {args.reps} reps @ {load:g}% 1RM")
    for name, value in scores.as_dict().items():
        print(f"{name:<12} {value:3d}")
    return 0


def _cmd_tempo(args: argparse.Namespace) -> int:
    try:
        tempo = build_tempo(_tempo_values(args.tempo), strict=True)
    except ParameterRangeError as exc:
        logger.error("Invalid tempo: %s", exc)
        return 2

    sim = TempoSetSimulator(tempo, total_reps=args.reps)
    last_marker: tuple[int, TempoPhase] | None = None

    def announce(state: TempoRunState) -> None:
        nonlocal last_marker
        marker = (state.current_rep_index, state.current_phase)
        if state.status == RunStatus.RUNNING and marker != last_marker:
            last_marker = marker
            logger.info(
                "Rep %d/%d  %s", state.display_rep, state.total_reps, state.current_phase.name
            )

    sim.subscribe(announce)
    logger.info("Starting set: tempo %s x %d reps", tempo.notation, args.reps)
    sim.start()

    previous = time.monotonic()
    try:
        while sim.status == RunStatus.RUNNING:
            time.sleep(TICK_INTERVAL_S)
            now = time.monotonic()
            sim.tick((now - previous) * args.speed)
            previous = now
    except KeyboardInterrupt:
        sim.pause()
        logger.info(
            "Set interrupted at rep %d/%d after %.1fs",
            sim.state.display_rep,
            sim.total_reps,
            sim.state.total_elapsed_s,
        )
        return 130

    print(f"Time under tension: {format_clock(sim.state.total_elapsed_s)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hypertrophy Lab terminal runner")
    sub = parser.add_subparsers(dest="command", required=True)

    tempo_kwargs = dict(
        nargs=4,
        type=float,
        default=[3.0, 0.0, 1.0, 0.0],
        metavar=("ECC", "BOTTOM", "CON", "TOP"),
        help="Phase durations in seconds (default 3 0 1 0)",
    )

    budget = sub.add_parser("budget", help="Session time breakdown vs. a target")
    budget.add_argument("--warmup", type=_ranged("warmup_min"), default=5)
    budget.add_argument("--exercises", type=_ranged("exercise_count", int), default=6)
    budget.add_argument("--sets", type=_ranged("sets_per_exercise", int), default=3)
    budget.add_argument("--reps", type=_ranged("reps_per_set", int), default=10)
    budget.add_argument("--rest", type=_ranged("rest_between_sets_s"), default=60)
    budget.add_argument(
        "--transition", type=_ranged("transition_between_exercises_s"), default=60
    )
    budget.add_argument("--cardio", type=_ranged("cardio_min"), default=10)
    budget.add_argument("--cooldown", type=_ranged("cooldown_min"), default=5)
    budget.add_argument("--tempo", **tempo_kwargs)
    budget.add_argument(
        "--target",
        type=int,
        choices=TARGET_PRESETS_MIN,
        default=DEFAULT_TARGET_MIN,
    )
    budget.set_defaults(func=_cmd_budget)

    scores = sub.add_parser("scores", help="Strength / hypertrophy / metabolic scores")
    scores.add_argument("--tempo", **tempo_kwargs)
    scores.add_argument("--reps", type=_ranged("reps_per_set", int), default=10)
    scores.add_argument(
        "--load", type=_ranged("load_pct"), default=None,
        help="%% of 1RM (default: estimated from reps)",
    )
    scores.set_defaults(func=_cmd_scores)

    tempo = sub.add_parser("tempo", help="Run one set in real time")
    tempo.add_argument("--tempo", **tempo_kwargs)
    tempo.add_argument("--reps", type=_ranged("reps_per_set", int), default=5)
    tempo.add_argument("--speed", type=_positive_float, default=1.0, help="Clock speed multiplier")
    tempo.set_defaults(func=_cmd_tempo)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
