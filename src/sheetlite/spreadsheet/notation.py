"""
A1 range notation codec.

Parses and serializes the textual addressing used by spreadsheets:
- Single cell: A1, ZZ100
- Rectangle: A1:B10
- Column band: B:B, A:C (row extent left open)
- Row band: 1:1, 2:5 (column extent left open)

All coordinates are 1-indexed, as in the spreadsheet UI. Columns use bijective
base-26 letters: A = 1, Z = 26, AA = 27.
"""

import re
from dataclasses import dataclass
from typing import Optional

from sheetlite.exceptions import InvalidNotation

_A1_RE = re.compile(r"([A-Z]*)([0-9]*)(?::([A-Z]*)([0-9]*))?", re.IGNORECASE | re.ASCII)
_LETTERS_RE = re.compile(r"[A-Z]+", re.IGNORECASE | re.ASCII)


@dataclass
class ParsedRange:
    """Structured result of parsing A1 notation.

    ``num_rows``/``end_row`` (or ``num_cols``/``end_col``) are ``None`` when the
    notation leaves that axis open, as in "B:B" or "1:1". The caller resolves
    them against the sheet's current bounds.

    Attributes:
        start_row: First row (1-indexed)
        start_col: First column (1-indexed)
        num_rows: Number of rows, or None when open-ended
        num_cols: Number of columns, or None when open-ended
        end_row: Last row (1-indexed, inclusive), or None
        end_col: Last column (1-indexed, inclusive), or None
    """
    start_row: int
    start_col: int
    num_rows: Optional[int] = None
    num_cols: Optional[int] = None
    end_row: Optional[int] = None
    end_col: Optional[int] = None

    @property
    def is_bounded(self) -> bool:
        """True when both extents are known without consulting the sheet."""
        return self.num_rows is not None and self.num_cols is not None


def column_letter_to_index(letters: str) -> int:
    """Convert column letter(s) to a 1-indexed column number.

    Args:
        letters: Column letter(s) in A1 notation (A, Z, AA, etc.), any case

    Returns:
        Column number (A = 1, Z = 26, AA = 27, etc.)

    Raises:
        InvalidNotation: If ``letters`` is empty or contains non-letters
    """
    if not _LETTERS_RE.fullmatch(letters):
        raise InvalidNotation(letters, "column must be one or more letters")
    index = 0
    for char in letters.upper():
        index = index * 26 + (ord(char) - 64)
    return index


def index_to_column_letter(index: int) -> str:
    """Convert a 1-indexed column number to letter(s).

    Args:
        index: Column number (1 = A, 26 = Z, 27 = AA, etc.)

    Returns:
        Column letter(s) in A1 notation

    Raises:
        ValueError: If index is less than 1
    """
    if index < 1:
        raise ValueError(f"Column index must be >= 1, got {index}")
    letters = ""
    while index > 0:
        remainder = (index - 1) % 26
        letters = chr(65 + remainder) + letters
        index = (index - remainder) // 26
    return letters


def parse_a1_notation(notation: str) -> ParsedRange:
    """Parse A1 notation into 1-indexed coordinates.

    Missing start coordinates default to 1. When the second part is absent the
    result is a single cell. When only one side names a column (or row), the
    other end of that axis equals the first side's; when neither does, the axis
    is left open. Corners are not reordered: "B2:A1" starts at B2 with an
    extent of 0 on each axis.

    Args:
        notation: A1 notation string, case-insensitive, with no surrounding
            whitespace

    Returns:
        ParsedRange with start coordinates and whatever extents are known

    Raises:
        InvalidNotation: If the text does not match the grammar
    """
    if not isinstance(notation, str):
        raise InvalidNotation(repr(notation), "notation must be a string")
    if not notation:
        raise InvalidNotation(notation, "empty range notation")

    match = _A1_RE.fullmatch(notation)
    if not match:
        raise InvalidNotation(notation)

    col1, row1, col2, row2 = match.groups()

    start_col = column_letter_to_index(col1) if col1 else 1
    start_row = _parse_row(row1, notation) if row1 else 1

    if not col2 and not row2:
        return ParsedRange(
            start_row=start_row,
            start_col=start_col,
            num_rows=1,
            num_cols=1,
        )

    if col2:
        end_col: Optional[int] = column_letter_to_index(col2)
    else:
        end_col = start_col if col1 else None

    if row2:
        end_row: Optional[int] = _parse_row(row2, notation)
    else:
        end_row = start_row if row1 else None

    result = ParsedRange(start_row=start_row, start_col=start_col)

    # An end before the start gives a non-positive extent; Range clamps it to 0.
    if end_row is not None:
        result.end_row = end_row
        result.num_rows = end_row - start_row + 1
    if end_col is not None:
        result.end_col = end_col
        result.num_cols = end_col - start_col + 1

    return result


def to_a1_notation(
    start_row: int,
    start_col: int,
    num_rows: int = 1,
    num_cols: int = 1,
) -> str:
    """Serialize a rectangle to A1 notation.

    Args:
        start_row: First row (1-indexed)
        start_col: First column (1-indexed)
        num_rows: Number of rows (at least 1)
        num_cols: Number of columns (at least 1)

    Returns:
        "A1" style text for a single cell, "A1:B10" style text otherwise

    Raises:
        ValueError: If a coordinate or extent is less than 1
    """
    if start_row < 1 or start_col < 1:
        raise ValueError("Row and column must be >= 1 (1-indexed)")
    if num_rows < 1 or num_cols < 1:
        raise ValueError("A1 notation needs at least one row and one column")

    start_cell = f"{index_to_column_letter(start_col)}{start_row}"
    if num_rows == 1 and num_cols == 1:
        return start_cell

    end_row = start_row + num_rows - 1
    end_col = start_col + num_cols - 1
    return f"{start_cell}:{index_to_column_letter(end_col)}{end_row}"


def _parse_row(digits: str, notation: str) -> int:
    row = int(digits)
    if row < 1:
        raise InvalidNotation(notation, "row numbers start at 1")
    return row
