import io

import pandas as pd
import pytest

from planner.grid import HOURS
from planner.io import build_template_workbook
from planner.state import (
    DEFAULT_BUDGET,
    PlannerState,
    generate_scenario,
    ingest,
    ingest_workbook,
    receive_upload,
    select_view,
    set_budget,
)

CALLS = [[h] + [30] * 14 for h in HOURS]
AHT = [[h] + [300] * 14 for h in HOURS]


def _only_calls_sheet() -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame(CALLS).to_excel(writer, sheet_name="Calls", header=False, index=False)
    return buf.getvalue()


def test_initial_state():
    s = PlannerState()
    assert not s.has_forecast
    assert s.intervals == ()
    assert s.view == "baseline"
    assert s.budget == DEFAULT_BUDGET


def test_scenario_without_forecast_is_noop():
    s = PlannerState()
    assert generate_scenario(s) == s


def test_ingest_then_scenario_switches_view():
    s = ingest(PlannerState(), CALLS, AHT)
    assert len(s.intervals) == 126
    assert not s.scenario_generated

    s2 = generate_scenario(s, 10)
    assert s2.scenario_generated
    assert s2.view == "scheduled"
    assert s2.budget == 10
    assert s2.scenario_budget == 10.0
    assert all(i.scheduled_agents is not None and i.capacity is not None for i in s2.intervals)
    # original state untouched
    assert all(i.scheduled_agents is None for i in s.intervals)


def test_new_upload_replaces_forecast_and_resets():
    s = generate_scenario(ingest(PlannerState(), CALLS, AHT), 10)
    s = select_view(s, "capacity")

    s2 = ingest(s, CALLS[:1], AHT[:1])
    assert len(s2.intervals) == 7
    assert s2.view == "baseline"
    assert not s2.scenario_generated
    assert s2.scenario_budget is None


def test_ingest_workbook_success():
    s = ingest_workbook(PlannerState(), build_template_workbook(calls=10))
    assert s.error is None
    assert len(s.intervals) == 126


def test_missing_tabs_records_error_and_keeps_previous_forecast():
    s = generate_scenario(ingest(PlannerState(), CALLS, AHT), 10)
    s2 = ingest_workbook(s, _only_calls_sheet())

    assert s2.error == "Tabs missing."
    assert s2.forecast == s.forecast
    assert s2.view == "baseline"
    assert not s2.scenario_generated


def test_first_upload_failure_leaves_no_forecast():
    s = ingest_workbook(PlannerState(), b"junk")
    assert not s.has_forecast
    assert s.error


def test_select_view_validates():
    s = PlannerState()
    assert select_view(s, "capacity").view == "capacity"
    with pytest.raises(ValueError):
        select_view(s, "heatmap")


def test_set_budget():
    assert set_budget(PlannerState(), 35).budget == 35


def test_zero_budget_scenario_is_all_zero():
    s = generate_scenario(ingest(PlannerState(), CALLS, AHT), 0)
    assert s.scenario_generated
    assert s.scenario_budget == 0.0
    assert all(i.scheduled_agents == 0 and i.capacity == 0 for i in s.intervals)


def test_reselecting_same_file_resets_scenario():
    data = build_template_workbook(calls=30)
    s = receive_upload(PlannerState(), data, "upload-1")
    s = select_view(generate_scenario(s, 10), "capacity")

    # a rerun with the same upload keeps the scenario
    same = receive_upload(s, data, "upload-1")
    assert same == s

    # picking the identical file again is a new upload
    again = receive_upload(s, data, "upload-2")
    assert again.upload_id == "upload-2"
    assert again.view == "baseline"
    assert not again.scenario_generated
    assert all(i.scheduled_agents is None for i in again.intervals)
    assert len(again.intervals) == 126
