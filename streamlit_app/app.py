"""Hypertrophy Lab: Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py

Two activities share one engine: the Session Design Simulator (time budget
of a whole workout) and the Movement Tempo Explorer (live set simulation
and effect scores).
"""

from __future__ import annotations

import time

import pandas as pd
import streamlit as st

from hypertrophy_engine.inputs import build_session_plan, build_tempo
from hypertrophy_engine.math.analysis import (
    breakdown_frame,
    phase_tut_frame,
    rep_range_profile,
)
from hypertrophy_engine.math.effect_scores import score_training_effect
from hypertrophy_engine.math.session_budget import (
    bucket_percentages,
    classify_target,
    compute_session_breakdown,
    describe_target,
    format_clock,
    timeline_fraction,
)
from hypertrophy_engine.models.enums import (
    TARGET_PRESETS_MIN,
    TIMELINE_SCALE_MIN,
    RunStatus,
    TargetStatus,
)
from hypertrophy_engine.models.tempo import TempoProfile
from hypertrophy_engine.simulator import TempoSetSimulator

from helpers import (
    BUCKET_COLORS,
    PHASE_COLORS,
    PHASE_LABELS,
    RUN_STATUS_LABELS,
    STATUS_COLORS,
    TICK_INTERVAL_S,
    format_bucket_line,
    format_minutes,
    format_range_caption,
    ordered_buckets,
    slider_bounds,
    synced_load,
    synced_reps,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Hypertrophy Lab",
    page_icon="🏋️",
    layout="wide",
)

st.title("Hypertrophy Lab")

tab_session, tab_tempo = st.tabs(["Session Design Simulator", "Movement Tempo Explorer"])


def _slider(label: str, name: str, default: int, key: str) -> int:
    return st.slider(
        label,
        value=default,
        key=key,
        help=format_range_caption(name),
        **slider_bounds(name),
    )


# ---------------------------------------------------------------------------
# Session Design Simulator
# ---------------------------------------------------------------------------

with tab_session:
    target_min = st.radio(
        "Challenge",
        TARGET_PRESETS_MIN,
        index=TARGET_PRESETS_MIN.index(45),
        format_func=lambda m: f"{m} Min Challenge",
        horizontal=True,
    )
    st.caption(f"Can you design your ideal exercise session in under {target_min} min?")

    col_controls, col_summary = st.columns([7, 5])

    with col_controls:
        with st.expander("Warm-up", expanded=True):
            warmup_min = _slider("General warm-up (min)", "warmup_min", 5, "s_warmup")

        with st.expander("Resistance training", expanded=True):
            c1, c2, c3 = st.columns(3)
            with c1:
                exercise_count = _slider("Exercises", "exercise_count", 6, "s_ex")
            with c2:
                sets_per_exercise = _slider("Sets / exercise", "sets_per_exercise", 3, "s_sets")
            with c3:
                reps_per_set = _slider("Reps / set", "reps_per_set", 10, "s_reps")

            st.markdown("**Tempo (seconds)**")
            t1, t2, t3, t4 = st.columns(4)
            with t1:
                s_ecc = _slider("Eccentric", "eccentric_s", 3, "s_ecc")
            with t2:
                s_bot = _slider("Bottom", "bottom_pause_s", 0, "s_bot")
            with t3:
                s_con = _slider("Concentric", "concentric_s", 1, "s_con")
            with t4:
                s_top = _slider("Top", "top_pause_s", 0, "s_top")

        with st.expander("Rest & transitions", expanded=True):
            rest_s = _slider("Inter-set rest (s)", "rest_between_sets_s", 60, "s_rest")
            transition_s = _slider(
                "Exercise switch (s)", "transition_between_exercises_s", 60, "s_trans"
            )

        with st.expander("Cardio & cool-down", expanded=True):
            cardio_min = _slider("Cardio (min)", "cardio_min", 10, "s_cardio")
            cooldown_min = _slider("Cool-down (min)", "cooldown_min", 5, "s_cool")

    plan = build_session_plan(
        {
            "warmup_min": warmup_min,
            "exercise_count": exercise_count,
            "sets_per_exercise": sets_per_exercise,
            "reps_per_set": reps_per_set,
            "eccentric_s": s_ecc,
            "bottom_pause_s": s_bot,
            "concentric_s": s_con,
            "top_pause_s": s_top,
            "rest_between_sets_s": rest_s,
            "transition_between_exercises_s": transition_s,
            "cardio_min": cardio_min,
            "cooldown_min": cooldown_min,
        }
    )
    breakdown = compute_session_breakdown(plan)
    percentages = bucket_percentages(breakdown)
    status = classify_target(breakdown.total_s, target_min)

    with col_summary:
        st.metric("Total session", format_clock(breakdown.total_s))
        st.caption(
            f"Rep duration {breakdown.rep_duration_s:g}s · target {target_min} min "
            f"· timeline 0-{TIMELINE_SCALE_MIN} min"
        )
        st.progress(timeline_fraction(breakdown.total_min))

        message = describe_target(breakdown.total_s, target_min)
        if status == TargetStatus.OVER:
            st.error(message)
        elif status == TargetStatus.NEAR:
            st.warning(message)
        else:
            st.success(message)

        st.markdown(
            f'<div style="height:6px;background:{STATUS_COLORS[status]};'
            f'border-radius:3px;margin-bottom:8px;"></div>',
            unsafe_allow_html=True,
        )

        for name, seconds in ordered_buckets(breakdown.buckets()):
            st.markdown(
                f'<span style="color:{BUCKET_COLORS[name]};">■</span> '
                f"{format_bucket_line(name, seconds, percentages[name])}",
                unsafe_allow_html=True,
            )

        frame = breakdown_frame(breakdown).set_index("bucket")
        st.bar_chart(frame["minutes"])


# ---------------------------------------------------------------------------
# Movement Tempo Explorer
# ---------------------------------------------------------------------------


def _on_reps_change() -> None:
    st.session_state["t_load"] = synced_load(st.session_state["t_reps"])


def _on_load_change() -> None:
    st.session_state["t_reps"] = synced_reps(st.session_state["t_load"])


def _get_simulator(tempo: TempoProfile, reps: int) -> TempoSetSimulator:
    """One simulator per browser session; reconfigured when the set changes."""
    sim = st.session_state.get("tempo_sim")
    if sim is None:
        sim = TempoSetSimulator(tempo, total_reps=reps)
        st.session_state["tempo_sim"] = sim
    elif sim.tempo != tempo or sim.total_reps != reps:
        sim.configure(tempo=tempo, total_reps=reps)
    return sim


def _render_stack(sim: TempoSetSimulator) -> None:
    """Weight stack moving between 20px (bottom) and 220px (top)."""
    phase = sim.state.current_phase
    bottom_px = 20 + sim.stack_height * 200
    color = PHASE_COLORS[phase]
    st.markdown(
        f'<div style="position:relative;height:260px;border-radius:12px;'
        f'background:#F1F5F9;">'
        f'<div style="position:absolute;left:35%;width:30%;height:28px;'
        f'bottom:{bottom_px:.0f}px;background:{color};border-radius:6px;"></div>'
        f"</div>",
        unsafe_allow_html=True,
    )


with tab_tempo:
    st.session_state.setdefault("t_reps", 10)
    st.session_state.setdefault("t_load", synced_load(10))

    col_vis, col_ctrl = st.columns(2)

    with col_ctrl:
        st.subheader("Tempo")
        ecc = st.slider("Eccentric (lowering)", key="t_ecc", value=3, **slider_bounds("eccentric_s"))
        bot = st.slider("Bottom pause", key="t_bot", value=0, **slider_bounds("bottom_pause_s"))
        con = st.slider("Concentric (lifting)", key="t_con", value=1, **slider_bounds("concentric_s"))
        top = st.slider("Top pause", key="t_top", value=0, **slider_bounds("top_pause_s"))

        st.subheader("Set")
        st.slider("Total reps", key="t_reps", on_change=_on_reps_change, **slider_bounds("reps_per_set"))
        st.slider("Load (% 1RM)", key="t_load", on_change=_on_load_change, **slider_bounds("load_pct"))

    tempo = build_tempo(
        {"eccentric_s": ecc, "bottom_pause_s": bot, "concentric_s": con, "top_pause_s": top}
    )
    reps = int(st.session_state["t_reps"])
    load = int(st.session_state["t_load"])
    sim = _get_simulator(tempo, reps)

    with col_vis:
        st.subheader("Live visualizer")
        b1, b2, b3 = st.columns(3)
        if b1.button("Start", disabled=sim.status == RunStatus.RUNNING):
            sim.start()
            st.session_state["last_tick"] = time.monotonic()
        if b2.button("Pause", disabled=sim.status != RunStatus.RUNNING):
            sim.pause()
        if b3.button("Reset"):
            sim.reset()

        @st.fragment(run_every=TICK_INTERVAL_S)
        def _live_set() -> None:
            now = time.monotonic()
            last = st.session_state.get("last_tick", now)
            sim.tick(now - last)
            st.session_state["last_tick"] = now

            state = sim.state
            st.markdown(
                f"**{RUN_STATUS_LABELS[state.status]}** · rep {state.display_rep}/{state.total_reps}"
                f" · {PHASE_LABELS[state.current_phase]}"
            )
            _render_stack(sim)
            st.progress(sim.progress)
            m1, m2 = st.columns(2)
            m1.metric("Time under tension", f"{state.total_elapsed_s:.1f}s")
            m2.metric("Remaining", f"{sim.remaining_s:.1f}s")

        _live_set()

        st.caption(f"Tempo {tempo.notation} · {tempo.rep_duration_s:g}s per rep")
        st.bar_chart(phase_tut_frame(tempo, reps).set_index("phase"))

    st.divider()
    st.subheader("Training effect")
    scores = score_training_effect(tempo, reps, load)
    s1, s2, s3 = st.columns(3)
    s1.metric("Strength", scores.strength)
    s2.metric("Hypertrophy", scores.hypertrophy)
    s3.metric("Metabolic", scores.metabolic)
    st.bar_chart(pd.Series(scores.as_dict(), name="score"))

    with st.expander("Rep-range analysis at this tempo"):
        profile = rep_range_profile(tempo, [3, 5, 8, 10, 12, 15, 20, 25, 30])
        st.dataframe(profile, hide_index=True)
        st.caption(
            f"Set time under tension at {reps} reps: "
            f"{format_minutes(tempo.rep_duration_s * reps)}"
        )
