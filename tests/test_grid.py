import math

import numpy as np
import pytest

from planner.grid import DAYS, HOURS, HourGrid, format_hour, to_number


def test_operating_cycle():
    assert len(HOURS) == 18
    assert HOURS[0] == 9
    assert HOURS[-3:] == [0, 1, 2]
    assert DAYS[0] == "Sunday" and DAYS[6] == "Saturday"


def test_to_number_coerces_junk_to_zero():
    assert to_number(None) == 0.0
    assert to_number("abc") == 0.0
    assert to_number(float("nan")) == 0.0
    assert to_number("12") == 12.0
    assert to_number(7) == 7.0
    assert to_number(True) == 0.0


def test_format_hour():
    assert format_hour(9) == "09:00"
    assert format_hour(0) == "00:00"
    assert format_hour(23) == "23:00"


def test_grid_keeps_first_row_and_ignores_labels():
    matrix = [
        ["Hour", "Sun"],
        [9] + [1] * 14,
        [9] + [99] * 14,
        ["10"] + [5] * 14,
        [7] + [5] * 14,
    ]
    grid = HourGrid.from_matrix(matrix)
    assert grid.hours() == [9]
    assert grid.cell(9, 0, 0) == 1.0


def test_grid_accepts_numpy_and_float_hours():
    grid = HourGrid.from_matrix([[np.int64(10)] + [2] * 14, [11.0] + [3] * 14, [float("nan")] + [1] * 14])
    assert grid.hours() == [10, 11]


def test_short_rows_pad_with_zero():
    grid = HourGrid.from_matrix([[9, 10, 20]])
    assert grid.cell(9, 0, 0) == 10.0
    assert grid.cell(9, 1, 0) == 20.0
    assert grid.cell(9, 0, 1) == 0.0
    assert math.isclose(grid.mean(9, 0), 5.0)


def test_cell_rejects_bad_indices():
    grid = HourGrid.from_matrix([[9] + [1] * 14])
    with pytest.raises(ValueError):
        grid.cell(9, 7, 0)
    with pytest.raises(ValueError):
        grid.cell(9, 0, 2)
