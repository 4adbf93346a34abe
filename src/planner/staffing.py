# src/planner/staffing.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict


# Fraction of paid time an agent spends handling calls.
UTILIZATION_FACTOR: float = 0.75
# Fraction of scheduled time an agent is actually available (breaks, shrinkage).
AVAILABILITY_FACTOR: float = 0.875
# Minimum viable coverage per interval.
MIN_AGENTS: int = 2

SECONDS_PER_HOUR: float = 3600.0


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class StaffingBreakdown:
    offered_load_erlangs: float
    agents_at_utilization: float
    required_agents: int


# -----------------------------
# Public API
# -----------------------------
def offered_load_erlangs(calls: float, aht_seconds: float) -> float:
    """
    Offered load a (Erlangs) for one hour of traffic:
      a = calls * aht_seconds / 3600
    """
    if calls <= 0 or aht_seconds <= 0:
        return 0.0
    return float(calls) * float(aht_seconds) / SECONDS_PER_HOUR


def staffing_breakdown(calls: float, aht_seconds: float) -> StaffingBreakdown:
    """
    Two-stage inflation of raw offered load:
      1) divide by the utilization ceiling
      2) divide by availability, round up, clamp at MIN_AGENTS

    Agents are assumed to absorb load linearly up to the utilization ceiling;
    there is no wait-time / service-level target here.
    """
    if calls <= 0 or aht_seconds <= 0:
        return StaffingBreakdown(
            offered_load_erlangs=0.0,
            agents_at_utilization=0.0,
            required_agents=MIN_AGENTS,
        )

    a = offered_load_erlangs(calls, aht_seconds)
    agents_floor = a / UTILIZATION_FACTOR
    required = int(math.ceil(agents_floor / AVAILABILITY_FACTOR))

    return StaffingBreakdown(
        offered_load_erlangs=a,
        agents_at_utilization=agents_floor,
        required_agents=max(required, MIN_AGENTS),
    )


def compute_required_agents(calls: float, aht_seconds: float) -> int:
    return staffing_breakdown(calls, aht_seconds).required_agents


def breakdown_to_dict(result: StaffingBreakdown) -> Dict[str, Any]:
    return {
        "erlangs": result.offered_load_erlangs,
        "agents_at_utilization": result.agents_at_utilization,
        "required_agents": result.required_agents,
    }


__all__ = [
    "UTILIZATION_FACTOR",
    "AVAILABILITY_FACTOR",
    "MIN_AGENTS",
    "StaffingBreakdown",
    "offered_load_erlangs",
    "staffing_breakdown",
    "compute_required_agents",
    "breakdown_to_dict",
]
