# src/planner/reporting.py
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Dict, List, Optional, cast

import pandas as pd

from .forecast import Forecast, ViewMode, find_interval, metric_value, raw_metric, validate_view
from .grid import DAYS, HOURS, format_hour

INTERVAL_COLUMN = "Interval"
TOTAL_ROW_LABEL = "DAY TOTAL"
EXPORT_PREFIX = "Mawsool_Bundle"

# Sheet title per view, in workbook order.
SHEET_TITLES: Dict[str, str] = {
    "baseline": "Baseline Plan",
    "scheduled": "Capped Plan",
    "capacity": "Call Capacity",
}


def day_totals(forecast: Forecast, view: ViewMode) -> List[int]:
    """Sum of the view metric per day, Sunday..Saturday."""
    validate_view(view)
    totals = [0] * len(DAYS)
    for interval in forecast:
        totals[interval.day_of_week] += metric_value(interval, view)
    return totals


def view_table(forecast: Forecast, view: ViewMode) -> pd.DataFrame:
    """
    Hour x day pivot of one view:
      Interval | Sunday | ... | Saturday

    One row per operating hour in cycle order. Cells without an interval (or
    without scenario output) stay empty.
    """
    validate_view(view)
    rows = []
    for h in HOURS:
        row: Dict[str, object] = {INTERVAL_COLUMN: format_hour(h)}
        for dow, day in enumerate(DAYS):
            row[day] = raw_metric(find_interval(forecast, h, dow), view)
        rows.append(row)

    if view == "capacity":
        total: Dict[str, object] = {INTERVAL_COLUMN: TOTAL_ROW_LABEL}
        total.update(dict(zip(DAYS, day_totals(forecast, "capacity"))))
        rows.append(total)

    df = pd.DataFrame(rows, columns=[INTERVAL_COLUMN, *DAYS])
    for day in DAYS:
        df[day] = df[day].astype("Int64")
    return df


def export_tables(forecast: Forecast) -> Dict[str, pd.DataFrame]:
    """All three views keyed by sheet title, in export order."""
    return {title: view_table(forecast, cast(ViewMode, view)) for view, title in SHEET_TITLES.items()}


def export_filename(today: Optional[date] = None, prefix: str = EXPORT_PREFIX) -> str:
    d = today or datetime.now(timezone.utc).date()
    return f"{prefix}_{d.isoformat()}.xlsx"


__all__ = [
    "INTERVAL_COLUMN",
    "TOTAL_ROW_LABEL",
    "EXPORT_PREFIX",
    "SHEET_TITLES",
    "day_totals",
    "view_table",
    "export_tables",
    "export_filename",
]
