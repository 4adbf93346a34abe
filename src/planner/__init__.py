# src/planner/__init__.py
from __future__ import annotations

# -----------------------------
# Staffing / capacity core
# -----------------------------
from .staffing import (
    UTILIZATION_FACTOR,
    AVAILABILITY_FACTOR,
    MIN_AGENTS,
    StaffingBreakdown,
    offered_load_erlangs,
    staffing_breakdown,
    compute_required_agents,
)

from .capacity import (
    FALLBACK_AHT_SECONDS,
    max_calls_per_agent,
    estimate_capacity,
)

# -----------------------------
# Forecast ingestion
# -----------------------------
from .grid import HOURS, DAYS, HourGrid
from .forecast import (
    ViewMode,
    ForecastInterval,
    build_forecast,
    forecast_to_frame,
    metric_value,
)
from .io import (
    MissingTabsError,
    WorkbookReadError,
    read_workbook_matrices,
    write_export_workbook,
    build_template_workbook,
)

# -----------------------------
# Scenario + derived views
# -----------------------------
from .scenario import ScenarioSummary, generate_scenario, summarize_scenario
from .heatmap import ViewStats, view_stats, heatmap_rgb, heatmap_color
from .reporting import SHEET_TITLES, day_totals, view_table, export_tables, export_filename
from .validation import validate_forecast, flag_counts

# -----------------------------
# Session state
# -----------------------------
from .state import PlannerState

__all__ = [
    # Staffing
    "UTILIZATION_FACTOR",
    "AVAILABILITY_FACTOR",
    "MIN_AGENTS",
    "StaffingBreakdown",
    "offered_load_erlangs",
    "staffing_breakdown",
    "compute_required_agents",
    # Capacity
    "FALLBACK_AHT_SECONDS",
    "max_calls_per_agent",
    "estimate_capacity",
    # Ingestion
    "HOURS",
    "DAYS",
    "HourGrid",
    "ViewMode",
    "ForecastInterval",
    "build_forecast",
    "forecast_to_frame",
    "metric_value",
    "MissingTabsError",
    "WorkbookReadError",
    "read_workbook_matrices",
    "write_export_workbook",
    "build_template_workbook",
    # Scenario + views
    "ScenarioSummary",
    "generate_scenario",
    "summarize_scenario",
    "ViewStats",
    "view_stats",
    "heatmap_rgb",
    "heatmap_color",
    "SHEET_TITLES",
    "day_totals",
    "view_table",
    "export_tables",
    "export_filename",
    "validate_forecast",
    "flag_counts",
    # State
    "PlannerState",
]
