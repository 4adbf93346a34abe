# src/planner/grid.py
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence


# Contact-center operating day: 09:00..23:00, then 00:00..02:00.
HOURS: List[int] = [9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 0, 1, 2]
DAYS: List[str] = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

WEEKS: int = 2
MATRIX_WIDTH: int = 1 + WEEKS * len(DAYS)


# -----------------------------
# Helpers
# -----------------------------
def to_number(value: Any) -> float:
    """Coerce a raw cell to float. Blank, NaN and non-numeric cells read as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        out = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(out) or math.isinf(out):
        return 0.0
    return out


def _hour_label(value: Any) -> Optional[int]:
    """Returns the hour a row is keyed by, or None when column 0 is not a real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    v = float(value)
    if math.isnan(v) or not v.is_integer():
        return None
    return int(v)


def format_hour(hour: int) -> str:
    return f"{int(hour):02d}:00"


# -----------------------------
# Grid
# -----------------------------
@dataclass(frozen=True)
class HourGrid:
    """
    Typed view over a header-less matrix:
      hour -> (week 1 Sun..Sat, week 2 Sun..Sat)

    Only hours from the operating cycle are kept. When a matrix repeats an hour,
    the first row wins.
    """
    rows: Mapping[int, Sequence[float]]

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[Any]]) -> "HourGrid":
        wanted = set(HOURS)
        rows: Dict[int, List[float]] = {}

        for raw in matrix:
            raw = list(raw)
            if not raw:
                continue
            hour = _hour_label(raw[0])
            if hour is None or hour not in wanted or hour in rows:
                continue
            cells = raw[1:MATRIX_WIDTH]
            cells += [None] * (MATRIX_WIDTH - 1 - len(cells))
            rows[hour] = [to_number(c) for c in cells]

        return cls(rows=rows)

    def has_hour(self, hour: int) -> bool:
        return hour in self.rows

    def cell(self, hour: int, day_of_week: int, week: int) -> float:
        if not (0 <= day_of_week < len(DAYS)):
            raise ValueError(f"day_of_week must be in [0, {len(DAYS) - 1}]")
        if not (0 <= week < WEEKS):
            raise ValueError(f"week must be in [0, {WEEKS - 1}]")
        return self.rows[hour][week * len(DAYS) + day_of_week]

    def mean(self, hour: int, day_of_week: int) -> float:
        """Arithmetic mean of the same hour/day cell across the observed weeks."""
        total = sum(self.cell(hour, day_of_week, w) for w in range(WEEKS))
        return total / WEEKS

    def hours(self) -> List[int]:
        return [h for h in HOURS if h in self.rows]


__all__ = [
    "HOURS",
    "DAYS",
    "WEEKS",
    "MATRIX_WIDTH",
    "HourGrid",
    "to_number",
    "format_hour",
]
