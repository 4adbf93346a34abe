# src/planner/state.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence, Tuple

from .forecast import ForecastInterval, ViewMode, build_forecast, validate_view
from .io import WorkbookSource, read_workbook_matrices
from .scenario import generate_scenario as _rescale

logger = logging.getLogger(__name__)

DEFAULT_BUDGET: int = 20


@dataclass(frozen=True)
class PlannerState:
    """
    One planning session.

    forecast is None until the first successful upload. Every user action maps
    to a transition below that returns a new state.
    """
    forecast: Optional[Tuple[ForecastInterval, ...]] = None
    view: ViewMode = "baseline"
    budget: float = DEFAULT_BUDGET
    scenario_generated: bool = False
    scenario_budget: Optional[float] = None
    error: Optional[str] = None
    upload_id: Optional[str] = None

    @property
    def has_forecast(self) -> bool:
        return self.forecast is not None

    @property
    def intervals(self) -> Tuple[ForecastInterval, ...]:
        return self.forecast or ()


def ingest(
    state: PlannerState,
    calls_matrix: Sequence[Sequence[Any]],
    aht_matrix: Sequence[Sequence[Any]],
) -> PlannerState:
    """New upload: replaces the forecast wholesale and resets scenario + view."""
    forecast = tuple(build_forecast(calls_matrix, aht_matrix))
    return replace(
        state,
        forecast=forecast,
        view="baseline",
        scenario_generated=False,
        scenario_budget=None,
        error=None,
    )


def ingest_workbook(state: PlannerState, file: WorkbookSource) -> PlannerState:
    """
    Reads a workbook and ingests it. A workbook that cannot be used records the
    message in `error`; the previous forecast stays in place.
    """
    reset = replace(state, view="baseline", scenario_generated=False, scenario_budget=None, error=None)
    try:
        calls, aht = read_workbook_matrices(file)
    except ValueError as e:
        logger.warning("Upload rejected: %s", e)
        return replace(reset, error=str(e))
    return ingest(reset, calls, aht)


def receive_upload(state: PlannerState, file: WorkbookSource, upload_id: str) -> PlannerState:
    """
    Ingests an upload once per upload_id. Every new selection gets a new id, so
    re-selecting the same file still replaces the forecast; a rerun with the
    same id is a no-op.
    """
    if upload_id == state.upload_id:
        return state
    return replace(ingest_workbook(state, file), upload_id=upload_id)


def set_budget(state: PlannerState, budget: float) -> PlannerState:
    return replace(state, budget=budget)


def generate_scenario(state: PlannerState, budget: Optional[float] = None) -> PlannerState:
    """Rescales to the budget and switches to the scheduled view. No-op without a forecast."""
    if budget is not None:
        state = set_budget(state, budget)
    if not state.forecast:
        return state

    rescaled = tuple(_rescale(state.forecast, state.budget))
    return replace(
        state,
        forecast=rescaled,
        scenario_generated=True,
        scenario_budget=float(state.budget),
        view="scheduled",
    )


def select_view(state: PlannerState, view: str) -> PlannerState:
    return replace(state, view=validate_view(view))


__all__ = [
    "DEFAULT_BUDGET",
    "PlannerState",
    "ingest",
    "ingest_workbook",
    "receive_upload",
    "set_budget",
    "generate_scenario",
    "select_view",
]
