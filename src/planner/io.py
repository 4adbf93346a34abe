from __future__ import annotations

import io
import logging
import os
import zipfile
from typing import IO, Any, List, Mapping, Tuple, Union

import pandas as pd

from .grid import HOURS, MATRIX_WIDTH

logger = logging.getLogger(__name__)

CALLS_SHEET = "Calls"
AHT_SHEET = "AHT"

Matrix = List[List[Any]]
WorkbookSource = Union[str, os.PathLike, bytes, IO[bytes]]


class MissingTabsError(ValueError):
    """Neither the named nor the positional calls/AHT sheet exists."""

    def __init__(self, message: str = "Tabs missing.") -> None:
        super().__init__(message)


class WorkbookReadError(ValueError):
    """The upload could not be parsed as a workbook at all."""


def _frame_to_matrix(df: pd.DataFrame) -> Matrix:
    return df.to_numpy(dtype=object).tolist()


def select_sheets(sheets: Mapping[str, pd.DataFrame]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Picks the calls and AHT sheets:
      - by exact name ("Calls", "AHT")
      - else by position (first, second)
    """
    names = list(sheets.keys())

    calls = sheets.get(CALLS_SHEET)
    if calls is None and len(names) >= 1:
        calls = sheets[names[0]]

    aht = sheets.get(AHT_SHEET)
    if aht is None and len(names) >= 2:
        aht = sheets[names[1]]

    if calls is None or aht is None:
        logger.warning("Workbook is missing calls/AHT sheets. Found: %s", names)
        raise MissingTabsError()

    return calls, aht


def read_workbook_matrices(file: WorkbookSource) -> Tuple[Matrix, Matrix]:
    """
    Reads the two-sheet historical workbook.
    Rows are header-less:
      column 0       hour (9..23, 0..2)
      columns 1..7   week 1, Sunday..Saturday
      columns 8..14  week 2, Sunday..Saturday

    Returns (calls_matrix, aht_matrix) as raw cell rows.
    """
    if isinstance(file, (bytes, bytearray)):
        file = io.BytesIO(file)

    try:
        sheets = pd.read_excel(file, sheet_name=None, header=None, engine="openpyxl")
    except (ValueError, OSError, KeyError, zipfile.BadZipFile) as e:
        raise WorkbookReadError(f"Could not read workbook: {e}") from e

    calls, aht = select_sheets(sheets)
    return _frame_to_matrix(calls), _frame_to_matrix(aht)


def write_export_workbook(tables: Mapping[str, pd.DataFrame]) -> bytes:
    """Writes one sheet per table (title -> frame) and returns the xlsx bytes."""
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for title, df in tables.items():
            df.to_excel(writer, sheet_name=title, index=False)
    return buf.getvalue()


def build_template_workbook(calls: float = 0.0, aht_seconds: float = 300.0) -> bytes:
    """
    Builds an upload template: "Calls" and "AHT" sheets, one row per operating
    hour, every day/week cell pre-filled with the given value.
    """
    if calls < 0:
        raise ValueError("calls must be >= 0")
    if aht_seconds < 0:
        raise ValueError("aht_seconds must be >= 0")

    width = MATRIX_WIDTH - 1
    calls_df = pd.DataFrame([[h] + [float(calls)] * width for h in HOURS])
    aht_df = pd.DataFrame([[h] + [float(aht_seconds)] * width for h in HOURS])

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        calls_df.to_excel(writer, sheet_name=CALLS_SHEET, header=False, index=False)
        aht_df.to_excel(writer, sheet_name=AHT_SHEET, header=False, index=False)
    return buf.getvalue()


__all__ = [
    "CALLS_SHEET",
    "AHT_SHEET",
    "MissingTabsError",
    "WorkbookReadError",
    "select_sheets",
    "read_workbook_matrices",
    "write_export_workbook",
    "build_template_workbook",
]
