from __future__ import annotations

from typing import Any, cast

import pandas as pd
import streamlit as st

from planner.config import Settings, configure_logging, load_settings
from planner.forecast import ViewMode, breakdown_frame, forecast_to_frame
from planner.grid import DAYS
from planner.heatmap import heatmap_color, view_stats
from planner.io import build_template_workbook, write_export_workbook
from planner.reporting import INTERVAL_COLUMN, TOTAL_ROW_LABEL, day_totals, export_filename, export_tables, view_table
from planner.scenario import summarize_scenario
from planner.state import PlannerState, generate_scenario, receive_upload, select_view, set_budget
from planner.validation import flag_counts

VIEW_LABELS = {
    "baseline": "Baseline (required)",
    "scheduled": "Capped (scheduled)",
    "capacity": "Call capacity",
}


def _settings() -> Settings:
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()
        configure_logging(st.session_state["settings"])
    return cast(Settings, st.session_state["settings"])


def _state() -> PlannerState:
    if "planner_state" not in st.session_state:
        st.session_state["planner_state"] = PlannerState(budget=_settings().default_budget)
    return cast(PlannerState, st.session_state["planner_state"])


def _commit(state: PlannerState) -> None:
    st.session_state["planner_state"] = state


def _cell_style(value: Any, vmin: int, vmax: int) -> str:
    if value is None or pd.isna(value):
        return ""
    return f"background-color: {heatmap_color(float(value), vmin, vmax)}; color: #0f172a"


# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Staffing Planner", layout="wide")
st.title("Staffing Planner")
st.caption("Upload 14 days of hourly history (Calls + AHT tabs), cap the plan, and export the bundle.")

settings = _settings()


# -----------------------------
# Sidebar controls
# -----------------------------
with st.sidebar:
    st.header("Historical feed")
    uploaded = st.file_uploader("Workbook (.xlsx)", type=["xlsx"])
    if uploaded is not None:
        _commit(receive_upload(_state(), uploaded, uploaded.file_id))

    st.download_button(
        "Download input template",
        data=build_template_workbook(),
        file_name="planner_input_template.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

    st.divider()
    st.header("Scenario")
    budget = st.number_input(
        "Max concurrent agents",
        min_value=0,
        value=int(_state().budget),
        step=1,
    )
    generate = st.button("Generate scenario", disabled=not _state().has_forecast)


# -----------------------------
# Transitions
# -----------------------------
_commit(set_budget(_state(), float(budget)))

if generate:
    _commit(generate_scenario(_state()))

state = _state()

if state.error:
    st.error(state.error)

if not state.has_forecast:
    st.info("No forecast yet. Upload a workbook, or download the template to see the expected layout.")
    st.stop()


# -----------------------------
# View selection
# -----------------------------
views = list(VIEW_LABELS.keys()) if state.scenario_generated else ["baseline"]
current = state.view if state.view in views else "baseline"
picked = st.radio(
    "View",
    options=views,
    index=views.index(current),
    format_func=lambda v: VIEW_LABELS[v],
    horizontal=True,
)
if picked != state.view:
    state = select_view(state, picked)
    _commit(state)

view = cast(ViewMode, state.view)
intervals = state.intervals


# -----------------------------
# Heatmap
# -----------------------------
stats = view_stats(intervals, view)
table = view_table(intervals, view)
grid = table[table[INTERVAL_COLUMN] != TOTAL_ROW_LABEL]

st.subheader(VIEW_LABELS[view])
styled = grid.style.map(lambda v: _cell_style(v, stats.min, stats.max), subset=DAYS)
st.dataframe(styled, use_container_width=True, hide_index=True)

totals = day_totals(intervals, view)
cols = st.columns(len(DAYS))
for col, day, total in zip(cols, DAYS, totals):
    col.metric(day, f"{total:,}")

c1, c2, c3 = st.columns(3)
c1.metric("Intervals", f"{len(intervals)}")
c2.metric("Min", f"{stats.min}")
c3.metric("Max", f"{stats.max}")


# -----------------------------
# Scenario summary
# -----------------------------
scenario_budget = state.budget if state.scenario_budget is None else state.scenario_budget
summary = summarize_scenario(intervals, scenario_budget)
if summary is not None:
    st.subheader("Scenario")
    s1, s2, s3, s4 = st.columns(4)
    s1.metric("Peak required", f"{summary.peak_required}")
    s2.metric("Multiplier", f"{summary.multiplier:.3f}")
    s3.metric("Scheduled agent-hours", f"{summary.total_scheduled:,}", f"{summary.total_scheduled - summary.total_required:+,}")
    s4.metric("Intervals below requirement", f"{summary.understaffed_intervals}")

with st.expander("Interval detail + flags", expanded=False):
    st.dataframe(forecast_to_frame(intervals), use_container_width=True, hide_index=True)
    st.json(flag_counts(intervals))
    st.caption("Sizing steps: offered load (Erlangs), agents at 75% utilization, required after availability.")
    st.dataframe(breakdown_frame(intervals), use_container_width=True, hide_index=True)


# -----------------------------
# Export
# -----------------------------
st.download_button(
    "Export bundle (Excel)",
    data=write_export_workbook(export_tables(intervals)),
    file_name=export_filename(prefix=settings.export_prefix),
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)
