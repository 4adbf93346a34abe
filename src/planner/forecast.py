# src/planner/forecast.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Literal, Optional, Sequence, TypeAlias, cast, get_args

import pandas as pd

from .grid import DAYS, HOURS, HourGrid, format_hour
from .staffing import breakdown_to_dict, compute_required_agents, staffing_breakdown

logger = logging.getLogger(__name__)

ViewMode: TypeAlias = Literal["baseline", "scheduled", "capacity"]
VIEW_MODES: tuple[str, ...] = get_args(ViewMode)


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class ForecastInterval:
    hour: int
    day_of_week: int
    avg_calls: float
    avg_aht: float
    required_agents: int

    # Scenario outputs (set together)
    scheduled_agents: Optional[int] = None
    capacity: Optional[int] = None

    @property
    def day_name(self) -> str:
        return DAYS[self.day_of_week]

    @property
    def label(self) -> str:
        return format_hour(self.hour)


Forecast: TypeAlias = Sequence[ForecastInterval]


def validate_view(view: str) -> ViewMode:
    if view not in VIEW_MODES:
        raise ValueError(f"Unsupported view mode: {view}. Expected one of {list(VIEW_MODES)}")
    return cast(ViewMode, view)


def metric_value(interval: ForecastInterval, view: ViewMode) -> int:
    """The number a view shows for one interval. Unset scenario fields read as 0."""
    if view == "baseline":
        return interval.required_agents
    if view == "scheduled":
        return interval.scheduled_agents or 0
    if view == "capacity":
        return interval.capacity or 0
    raise ValueError(f"Unsupported view mode: {view}")


def raw_metric(interval: Optional[ForecastInterval], view: ViewMode) -> Optional[int]:
    """Like metric_value, but keeps absence (no interval / no scenario) as None."""
    if interval is None:
        return None
    if view == "baseline":
        return interval.required_agents
    if view == "scheduled":
        return interval.scheduled_agents
    if view == "capacity":
        return interval.capacity
    raise ValueError(f"Unsupported view mode: {view}")


# -----------------------------
# Ingestion
# -----------------------------
def build_forecast(
    calls_matrix: Sequence[Sequence[Any]],
    aht_matrix: Sequence[Sequence[Any]],
) -> List[ForecastInterval]:
    """
    Builds one interval per (hour, day) found in BOTH matrices.

    Matrix rows:
      column 0      hour label
      columns 1..7  week 1, Sunday..Saturday
      columns 8..14 week 2, Sunday..Saturday

    Averages are taken across the two weeks. Hours present in only one matrix
    are dropped without error.
    """
    calls = HourGrid.from_matrix(calls_matrix)
    aht = HourGrid.from_matrix(aht_matrix)

    intervals: List[ForecastInterval] = []
    for dow in range(len(DAYS)):
        for h in HOURS:
            if not (calls.has_hour(h) and aht.has_hour(h)):
                continue
            avg_calls = calls.mean(h, dow)
            avg_aht = aht.mean(h, dow)
            intervals.append(
                ForecastInterval(
                    hour=h,
                    day_of_week=dow,
                    avg_calls=avg_calls,
                    avg_aht=avg_aht,
                    required_agents=compute_required_agents(avg_calls, avg_aht),
                )
            )

    dropped = sorted(set(calls.hours()) ^ set(aht.hours()))
    if dropped:
        logger.debug("Hours present in only one matrix were skipped: %s", dropped)
    logger.info("Built forecast with %d intervals", len(intervals))
    return intervals


def find_interval(forecast: Forecast, hour: int, day_of_week: int) -> Optional[ForecastInterval]:
    for interval in forecast:
        if interval.hour == hour and interval.day_of_week == day_of_week:
            return interval
    return None


FRAME_COLUMNS = [
    "interval",
    "hour",
    "day_of_week",
    "day",
    "avg_calls",
    "avg_aht",
    "required_agents",
    "scheduled_agents",
    "capacity",
]


def forecast_to_frame(forecast: Forecast) -> pd.DataFrame:
    """Flat table of intervals; scenario columns use nullable Int64."""
    df = pd.DataFrame(
        [
            {
                "interval": i.label,
                "hour": i.hour,
                "day_of_week": i.day_of_week,
                "day": i.day_name,
                "avg_calls": float(i.avg_calls),
                "avg_aht": float(i.avg_aht),
                "required_agents": int(i.required_agents),
                "scheduled_agents": i.scheduled_agents,
                "capacity": i.capacity,
            }
            for i in forecast
        ],
        columns=FRAME_COLUMNS,
    )
    df["required_agents"] = df["required_agents"].astype("Int64")
    df["scheduled_agents"] = df["scheduled_agents"].astype("Int64")
    df["capacity"] = df["capacity"].astype("Int64")
    return df


def breakdown_frame(forecast: Forecast) -> pd.DataFrame:
    """Per-interval sizing steps: erlangs, agents at the utilization ceiling, required."""
    return pd.DataFrame(
        [
            {"interval": i.label, "day": i.day_name, **breakdown_to_dict(staffing_breakdown(i.avg_calls, i.avg_aht))}
            for i in forecast
        ],
        columns=["interval", "day", "erlangs", "agents_at_utilization", "required_agents"],
    )


__all__ = [
    "ViewMode",
    "VIEW_MODES",
    "ForecastInterval",
    "Forecast",
    "validate_view",
    "metric_value",
    "raw_metric",
    "build_forecast",
    "find_interval",
    "forecast_to_frame",
    "breakdown_frame",
    "FRAME_COLUMNS",
]
