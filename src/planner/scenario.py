# src/planner/scenario.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Optional

from .capacity import estimate_capacity
from .forecast import Forecast, ForecastInterval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioSummary:
    budget: float
    peak_required: int
    multiplier: float
    total_required: int
    total_scheduled: int
    total_capacity: int
    understaffed_intervals: int


def _budget(max_concurrent: float) -> float:
    """Finite budget; anything below 0 counts as 0 (every interval scheduled at 0)."""
    if isinstance(max_concurrent, bool):
        raise ValueError("max_concurrent must be a number")
    if not math.isfinite(float(max_concurrent)):
        raise ValueError("max_concurrent must be finite")
    return max(float(max_concurrent), 0.0)


def peak_required(forecast: Forecast) -> int:
    return max((i.required_agents for i in forecast), default=0)


def scheduled_for(required_agents: int, max_concurrent: float, peak: int) -> int:
    # required * budget / peak keeps the peak interval exactly on the budget
    return int(math.ceil(int(required_agents) * float(max_concurrent) / float(peak)))


def generate_scenario(forecast: Forecast, max_concurrent: float) -> List[ForecastInterval]:
    """
    Rescales the whole staffing curve so its busiest interval lands on the budget:

      multiplier = max_concurrent / max(required_agents)
      scheduled  = ceil(required_agents * multiplier)
      capacity   = estimate_capacity(scheduled, avg_aht)

    Every interval moves by the same ratio. With a multiplier below 1 some
    intervals end up under their own requirement; nothing floors them.
    Returns new records; the input is left untouched.
    """
    max_concurrent = _budget(max_concurrent)

    peak = peak_required(forecast)
    if not peak:
        return list(forecast)

    out: List[ForecastInterval] = []
    for interval in forecast:
        scheduled = scheduled_for(interval.required_agents, max_concurrent, peak)
        out.append(
            replace(
                interval,
                scheduled_agents=scheduled,
                capacity=estimate_capacity(scheduled, interval.avg_aht),
            )
        )

    logger.info(
        "Generated scenario: budget=%s peak_required=%d multiplier=%.4f intervals=%d",
        max_concurrent,
        peak,
        float(max_concurrent) / peak,
        len(out),
    )
    return out


def summarize_scenario(forecast: Forecast, max_concurrent: float) -> Optional[ScenarioSummary]:
    """Headline numbers for a generated scenario, or None before one exists."""
    if not forecast or any(i.scheduled_agents is None for i in forecast):
        return None

    peak = peak_required(forecast)
    return ScenarioSummary(
        budget=float(max_concurrent),
        peak_required=peak,
        multiplier=float(max_concurrent) / peak if peak else 0.0,
        total_required=sum(i.required_agents for i in forecast),
        total_scheduled=sum(i.scheduled_agents or 0 for i in forecast),
        total_capacity=sum(i.capacity or 0 for i in forecast),
        understaffed_intervals=sum(1 for i in forecast if (i.scheduled_agents or 0) < i.required_agents),
    )


__all__ = [
    "ScenarioSummary",
    "peak_required",
    "scheduled_for",
    "generate_scenario",
    "summarize_scenario",
]
