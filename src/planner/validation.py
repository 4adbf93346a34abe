from __future__ import annotations

import pandas as pd

from .forecast import Forecast, forecast_to_frame
from .staffing import MIN_AGENTS


FLAG_COLUMNS = [
    "flag_no_calls",
    "flag_no_aht",
    "flag_at_floor",
    "flag_understaffed",
    "flag_zero_capacity",
]


def validate_forecast(forecast: Forecast) -> pd.DataFrame:
    """
    Returns the forecast table with per-interval flags:
      flag_no_calls       avg_calls <= 0
      flag_no_aht         avg_aht <= 0 (capacity will report 0)
      flag_at_floor       required_agents sits on the minimum
      flag_understaffed   scheduled_agents < required_agents
      flag_zero_capacity  a scenario exists but capacity is 0
    """
    df = forecast_to_frame(forecast)

    has_scenario = df["scheduled_agents"].notna()
    scheduled = df["scheduled_agents"].fillna(0).astype(int)
    capacity = df["capacity"].fillna(0).astype(int)

    df["flag_no_calls"] = df["avg_calls"] <= 0
    df["flag_no_aht"] = df["avg_aht"] <= 0
    df["flag_at_floor"] = df["required_agents"].astype(int) <= MIN_AGENTS
    df["flag_understaffed"] = has_scenario & (scheduled < df["required_agents"].astype(int))
    df["flag_zero_capacity"] = has_scenario & (capacity == 0)

    for col in FLAG_COLUMNS:
        df[col] = df[col].astype(bool)
    return df


def flag_counts(forecast: Forecast) -> dict[str, int]:
    df = validate_forecast(forecast)
    return {col: int(df[col].sum()) for col in FLAG_COLUMNS}


__all__ = ["FLAG_COLUMNS", "validate_forecast", "flag_counts"]
