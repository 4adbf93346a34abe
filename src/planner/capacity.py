# src/planner/capacity.py
from __future__ import annotations

import math

from .staffing import SECONDS_PER_HOUR, UTILIZATION_FACTOR

# Assumed handle time used only to keep the per-agent rate finite when AHT is 0.
FALLBACK_AHT_SECONDS: float = 300.0


def max_calls_per_agent(aht_seconds: float) -> float:
    """Calls one agent can take in an hour at the utilization ceiling."""
    aht = float(aht_seconds) or FALLBACK_AHT_SECONDS
    return SECONDS_PER_HOUR * UTILIZATION_FACTOR / aht


def estimate_capacity(scheduled_agents: int, aht_seconds: float) -> int:
    """
    Expected handled calls for an interval:
      floor(scheduled_agents * max_calls_per_agent)

    Intervals with no recorded AHT report 0, even though max_calls_per_agent
    falls back to FALLBACK_AHT_SECONDS.
    """
    rate = max_calls_per_agent(aht_seconds)
    if not aht_seconds > 0:
        return 0
    return max(int(math.floor(int(scheduled_agents) * rate)), 0)


__all__ = [
    "FALLBACK_AHT_SECONDS",
    "max_calls_per_agent",
    "estimate_capacity",
]
