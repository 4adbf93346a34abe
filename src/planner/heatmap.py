# src/planner/heatmap.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .forecast import Forecast, ViewMode, metric_value, validate_view

RGB = Tuple[int, int, int]

GREEN: RGB = (16, 185, 129)
AMBER: RGB = (250, 204, 21)
RED: RGB = (239, 68, 68)
NEUTRAL_COLOR: str = "#10b981"


@dataclass(frozen=True)
class ViewStats:
    min: int
    max: int


def view_stats(forecast: Forecast, view: ViewMode) -> ViewStats:
    validate_view(view)
    if not forecast:
        return ViewStats(min=0, max=0)
    values = np.array([metric_value(i, view) for i in forecast], dtype=float)
    return ViewStats(min=int(values.min()), max=int(values.max()))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _lerp(a: RGB, b: RGB, f: float) -> RGB:
    start = np.array(a, dtype=float)
    out = start + (np.array(b, dtype=float) - start) * f
    r, g, bl = (_round_half_up(float(c)) for c in out)
    return (r, g, bl)


def heatmap_ratio(value: float, vmin: float, vmax: float) -> float:
    if vmax == vmin:
        return 0.0
    return float(np.clip((value - vmin) / (vmax - vmin), 0.0, 1.0))


def heatmap_rgb(value: float, vmin: float, vmax: float) -> RGB:
    """
    Three-stop gradient:
      ratio in [0, 0.5) -> green .. amber
      ratio in [0.5, 1] -> amber .. red
    """
    if vmax == vmin:
        return GREEN
    ratio = heatmap_ratio(value, vmin, vmax)
    if ratio < 0.5:
        return _lerp(GREEN, AMBER, ratio * 2)
    return _lerp(AMBER, RED, (ratio - 0.5) * 2)


def heatmap_color(value: float, vmin: float, vmax: float) -> str:
    if vmax == vmin:
        return NEUTRAL_COLOR
    r, g, b = heatmap_rgb(value, vmin, vmax)
    return f"rgb({r}, {g}, {b})"


__all__ = [
    "RGB",
    "GREEN",
    "AMBER",
    "RED",
    "NEUTRAL_COLOR",
    "ViewStats",
    "view_stats",
    "heatmap_ratio",
    "heatmap_rgb",
    "heatmap_color",
]
