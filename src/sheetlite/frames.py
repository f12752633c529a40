"""
pandas interop for sheets.

Converts between rectangular cell values and ``pandas.DataFrame``, and reads or
writes a DataFrame through the Range/Sheet facade. Missing values (NaN, NaT,
None) become blank cells; numpy scalars become plain Python scalars so they
can be stored as JSON.
"""

from typing import Any, List, Sequence

import pandas as pd

from sheetlite.spreadsheet.model import Range, Sheet
from sheetlite.utils.serialization import to_cell_value


def values_to_frame(values: Sequence[Sequence[Any]], header: bool = True) -> pd.DataFrame:
    """Build a DataFrame from rows of cell values.

    Args:
        values: Rows of values (as returned by ``Range.get_values()``)
        header: Use the first row as column names

    Returns:
        DataFrame with one row per data row. Blank cells stay ``""``.
    """
    rows = [list(row) for row in values]
    if not header:
        return pd.DataFrame(rows)
    if not rows:
        return pd.DataFrame()
    columns = [str(name) for name in rows[0]]
    return pd.DataFrame(rows[1:], columns=columns)


def frame_to_values(frame: pd.DataFrame, include_header: bool = True) -> List[List[Any]]:
    """Flatten a DataFrame into rows of JSON-compatible cell values.

    Args:
        frame: The DataFrame to convert (the index is not written)
        include_header: Emit the column names as the first row

    Returns:
        Rectangular list of rows
    """
    rows: List[List[Any]] = []
    if include_header:
        rows.append([str(name) for name in frame.columns])
    for record in frame.itertuples(index=False, name=None):
        rows.append([_frame_cell(value) for value in record])
    return rows


def read_frame(cell_range: Range, header: bool = True) -> pd.DataFrame:
    """Read a Range into a DataFrame."""
    return values_to_frame(cell_range.get_values(), header=header)


def write_frame(
    sheet: Sheet,
    frame: pd.DataFrame,
    row: int = 1,
    column: int = 1,
    include_header: bool = True,
) -> Range:
    """Write a DataFrame into a sheet with its top-left cell at (row, column).

    Args:
        sheet: Target sheet
        frame: DataFrame to write
        row: First row (1-indexed)
        column: First column (1-indexed)
        include_header: Write the column names as the first row

    Returns:
        The Range that now holds the frame
    """
    values = frame_to_values(frame, include_header=include_header)
    num_cols = len(frame.columns)
    target = sheet.get_range(row, column, len(values), num_cols)
    if values and num_cols:
        target.set_values(values)
    return target


def _frame_cell(value: Any) -> Any:
    if value is pd.NaT or value is pd.NA:
        return ""
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    return to_cell_value(value)
