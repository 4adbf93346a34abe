from datetime import date

import pandas as pd

from planner.forecast import build_forecast
from planner.grid import DAYS, HOURS
from planner.reporting import (
    INTERVAL_COLUMN,
    TOTAL_ROW_LABEL,
    day_totals,
    export_filename,
    export_tables,
    view_table,
)
from planner.scenario import generate_scenario


def _forecast():
    # Saturday column left empty in both weeks
    calls = [[h] + [20 + d * 5 for d in range(6)] + [0] + [30 + d * 5 for d in range(6)] + [0] for h in HOURS[:10]]
    aht = [[h] + [280] * 14 for h in HOURS]
    return build_forecast(calls, aht)


def test_day_totals_baseline():
    forecast = _forecast()
    totals = day_totals(forecast, "baseline")
    assert len(totals) == 7
    for dow in range(7):
        assert totals[dow] == sum(i.required_agents for i in forecast if i.day_of_week == dow)


def test_day_totals_before_scenario_are_zero():
    assert day_totals(_forecast(), "capacity") == [0] * 7


def test_view_table_shape_and_blanks():
    df = view_table(_forecast(), "baseline")
    assert list(df.columns) == [INTERVAL_COLUMN, *DAYS]
    assert len(df) == len(HOURS)
    assert df[INTERVAL_COLUMN].tolist()[:2] == ["09:00", "10:00"]
    # hours without source rows stay empty
    assert df.iloc[-1][INTERVAL_COLUMN] == "02:00"
    assert df.iloc[-1][DAYS].isna().all()


def test_baseline_round_trip_matches_day_totals():
    forecast = _forecast()
    df = export_tables(forecast)["Baseline Plan"]
    from_table = [int(df[day].sum()) for day in DAYS]
    assert from_table == day_totals(forecast, "baseline")


def test_export_tables_titles_and_capacity_total():
    forecast = generate_scenario(_forecast(), 12)
    tables = export_tables(forecast)
    assert list(tables.keys()) == ["Baseline Plan", "Capped Plan", "Call Capacity"]

    cap = tables["Call Capacity"]
    assert len(cap) == len(HOURS) + 1
    assert cap.iloc[-1][INTERVAL_COLUMN] == TOTAL_ROW_LABEL
    totals = [int(cap.iloc[-1][day]) for day in DAYS]
    assert totals == day_totals(forecast, "capacity")

    assert len(tables["Capped Plan"]) == len(HOURS)


def test_scheduled_table_empty_before_scenario():
    df = export_tables(_forecast())["Capped Plan"]
    assert df[DAYS].isna().all().all()


def test_export_filename():
    assert export_filename(date(2024, 3, 7)) == "Mawsool_Bundle_2024-03-07.xlsx"
    assert export_filename(date(2024, 3, 7), prefix="Plan") == "Plan_2024-03-07.xlsx"
    assert export_filename().startswith("Mawsool_Bundle_")


def test_tables_are_dataframes():
    for df in export_tables(_forecast()).values():
        assert isinstance(df, pd.DataFrame)
