"""
Spreadsheet facade classes.

This module provides the object model callers work with:
- Client: The collection of sheets behind one storage driver
- Sheet: A single named sheet; selects ranges and answers bounds queries
- Range: A rectangular cell region; reads, writes and clears its cells

Coordinates are 1-indexed, as in A1 notation. None of these objects caches
cell data: every call goes to the driver, so two handles on the same sheet
always observe the same state.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from sheetlite.drivers.base import FormattingDriver, SheetDriver
from sheetlite.exceptions import DimensionMismatch
from sheetlite.spreadsheet.address import ByCoordinates, ByNotation, RangeAddress
from sheetlite.spreadsheet.notation import parse_a1_notation, to_a1_notation
from sheetlite.utils.logging import get_logger

logger = get_logger(__name__)

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


class WrapStrategy(Enum):
    """Text wrapping of cells, valued with the Google Sheets API names."""
    WRAP = "WRAP"
    OVERFLOW = "OVERFLOW_CELL"
    CLIP = "CLIP"


class Range:
    """A rectangular cell region of one sheet.

    A Range owns no data. It addresses cells of its sheet through the driver.
    ``num_rows``/``num_cols`` may be 0 for a degenerate range (an open band
    on an empty sheet); negative extents are clamped to 0.

    Attributes:
        driver: The storage driver
        sheet_name: Name of the sheet the range belongs to
        row: First row (1-indexed)
        column: First column (1-indexed)
        num_rows: Number of rows
        num_cols: Number of columns
    """

    def __init__(
        self,
        driver: SheetDriver,
        sheet_name: str,
        row: int,
        column: int,
        num_rows: int = 1,
        num_cols: int = 1,
    ) -> None:
        """Initialize a Range.

        Raises:
            ValueError: If row or column is less than 1
        """
        if row < 1 or column < 1:
            raise ValueError("Row and column must be >= 1 (1-indexed)")

        self.driver = driver
        self.sheet_name = sheet_name
        self.row = row
        self.column = column
        self.num_rows = max(0, num_rows)
        self.num_cols = max(0, num_cols)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def get_values(self) -> List[List[Any]]:
        """Read every cell of the range; never-written cells read as ""."""
        return self.driver.get_values(
            self.sheet_name, self.row, self.column, self.num_rows, self.num_cols
        )

    def get_value(self) -> Any:
        """Read the top-left cell."""
        return self.driver.get_values(self.sheet_name, self.row, self.column, 1, 1)[0][0]

    def set_values(self, values: Sequence[Sequence[Any]]) -> "Range":
        """Replace every cell of the range.

        Args:
            values: Rows of values; must be num_rows x num_cols

        Returns:
            This range, for chaining

        Raises:
            DimensionMismatch: If the row count or the first row's length
                differs from the range's extent
        """
        values = [list(row) for row in values]
        first_width = len(values[0]) if values else self.num_cols
        if len(values) != self.num_rows or first_width != self.num_cols:
            raise DimensionMismatch(
                expected=(self.num_rows, self.num_cols),
                actual=(len(values), first_width),
            )
        self.driver.set_values(self.sheet_name, self.row, self.column, values)
        return self

    def set_value(self, value: Any) -> "Range":
        """Write a single value into the top-left cell, whatever the range's size."""
        self.driver.set_values(self.sheet_name, self.row, self.column, [[value]])
        return self

    def clear(self) -> "Range":
        """Delete every cell of the range."""
        self.driver.clear(
            self.sheet_name, self.row, self.column, self.num_rows, self.num_cols
        )
        return self

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def get_row(self) -> int:
        return self.row

    def get_column(self) -> int:
        return self.column

    def get_num_rows(self) -> int:
        return self.num_rows

    def get_num_columns(self) -> int:
        return self.num_cols

    def get_last_row(self) -> int:
        """Last row covered by the range (row + num_rows - 1)."""
        return self.row + self.num_rows - 1

    def get_last_column(self) -> int:
        """Last column covered by the range (column + num_cols - 1)."""
        return self.column + self.num_cols - 1

    def get_sheet(self) -> "Sheet":
        return Sheet(self.driver, self.sheet_name)

    def get_a1_notation(self) -> str:
        """Convert the range to A1 notation (e.g., "A1" or "B2:C10").

        A degenerate range is reported as its origin cell.
        """
        return to_a1_notation(
            self.row, self.column, max(1, self.num_rows), max(1, self.num_cols)
        )

    # ------------------------------------------------------------------
    # Cosmetics
    # ------------------------------------------------------------------

    def set_background(self, color: Optional[str]) -> "Range":
        """Set the background color from "#rrggbb" (or "#rgb"); None resets to white."""
        self._apply_format({"backgroundColor": _parse_color(color or "#ffffff")})
        return self

    def set_font_weight(self, weight: Optional[str]) -> "Range":
        """Set the font weight to "bold" or "normal"; None resets to normal."""
        weight = weight or "normal"
        if weight not in ("bold", "normal"):
            raise ValueError(f"Font weight must be 'bold' or 'normal', got {weight!r}")
        self._apply_format({"textFormat": {"bold": weight == "bold"}})
        return self

    def set_border(
        self,
        top: Optional[bool] = None,
        left: Optional[bool] = None,
        bottom: Optional[bool] = None,
        right: Optional[bool] = None,
        style: str = "SOLID",
    ) -> "Range":
        """Turn cell borders on (True) or off (False); None leaves a side unchanged."""
        borders: Dict[str, Any] = {}
        for side, enabled in (("top", top), ("left", left), ("bottom", bottom), ("right", right)):
            if enabled is not None:
                borders[side] = {"style": style if enabled else "NONE"}
        if borders:
            self._apply_format({"borders": borders})
        return self

    def set_wrap_strategy(self, strategy: WrapStrategy) -> "Range":
        self._apply_format({"wrapStrategy": WrapStrategy(strategy).value})
        return self

    def _apply_format(self, cell_format: Dict[str, Any]) -> None:
        if not isinstance(self.driver, FormattingDriver):
            logger.debug(
                "%s does not support formatting, ignoring %s on %s",
                type(self.driver).__name__, cell_format, self,
            )
            return
        self.driver.apply_format(
            self.sheet_name, self.row, self.column, self.num_rows, self.num_cols, cell_format
        )

    def __repr__(self) -> str:
        return f"Range({self.sheet_name!r}, {self.get_a1_notation()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (
            self.driver is other.driver
            and self.sheet_name == other.sheet_name
            and self.row == other.row
            and self.column == other.column
            and self.num_rows == other.num_rows
            and self.num_cols == other.num_cols
        )


class Sheet:
    """A named sheet: a sparse grid of cells held by the driver.

    Attributes:
        driver: The storage driver
        name: The sheet name
    """

    def __init__(self, driver: SheetDriver, name: str) -> None:
        self.driver = driver
        self.name = name

    def get_name(self) -> str:
        return self.name

    def resolve_range(self, address: RangeAddress) -> Range:
        """Build the Range an address selects.

        Open extents of A1 bands ("B:B", "1:1") are resolved against the
        sheet's current last row/column and clamped at 0.

        Args:
            address: ByNotation or ByCoordinates

        Returns:
            The selected Range

        Raises:
            InvalidNotation: If a ByNotation address is malformed
            ValueError: If the address kind is unknown
        """
        if address.kind == ByNotation.kind:
            parsed = parse_a1_notation(address.notation)
            num_rows = parsed.num_rows
            if num_rows is None:
                num_rows = max(0, self.get_last_row() - parsed.start_row + 1)
            num_cols = parsed.num_cols
            if num_cols is None:
                num_cols = max(0, self.get_last_column() - parsed.start_col + 1)
            return Range(
                self.driver, self.name, parsed.start_row, parsed.start_col, num_rows, num_cols
            )
        elif address.kind == ByCoordinates.kind:
            return Range(
                self.driver,
                self.name,
                address.row,
                address.column,
                address.num_rows,
                address.num_cols,
            )
        else:
            raise ValueError(f"Unknown range address kind: {address.kind}")

    def get_range(
        self,
        row_or_notation: Union[int, str],
        column: Optional[int] = None,
        num_rows: int = 1,
        num_cols: int = 1,
    ) -> Range:
        """Select a range by A1 notation or by coordinates.

        ``sheet.get_range("B2:C3")`` and ``sheet.get_range(2, 2, 2, 2)`` select
        the same cells.

        Raises:
            TypeError: If coordinates are given without a column, or notation with one
        """
        if isinstance(row_or_notation, str):
            if column is not None:
                raise TypeError("get_range() takes either A1 notation or coordinates, not both")
            return self.resolve_range(ByNotation(row_or_notation))
        if column is None:
            raise TypeError("get_range(row, column) requires a column")
        return self.resolve_range(ByCoordinates(row_or_notation, column, num_rows, num_cols))

    def get_last_row(self) -> int:
        """Highest occupied row, 0 for an empty sheet."""
        return self.driver.get_last_row(self.name)

    def get_last_column(self) -> int:
        """Highest occupied column, 0 for an empty sheet."""
        return self.driver.get_last_column(self.name)

    def get_data_range(self) -> Range:
        """Range from A1 to the last occupied cell; at least 1x1 on an empty sheet."""
        return Range(
            self.driver,
            self.name,
            1,
            1,
            max(1, self.get_last_row()),
            max(1, self.get_last_column()),
        )

    def append_row(self, row_contents: Sequence[Any]) -> "Sheet":
        """Write one row below the last occupied row, starting in column A."""
        self.driver.set_values(self.name, self.get_last_row() + 1, 1, [list(row_contents)])
        return self

    def clear(self) -> "Sheet":
        """Delete every cell of the sheet, keeping the sheet itself."""
        last_row = self.get_last_row()
        last_col = self.get_last_column()
        if last_row > 0 and last_col > 0:
            self.driver.clear(self.name, 1, 1, last_row, last_col)
        return self

    def set_frozen_rows(self, rows: int) -> "Sheet":
        if isinstance(self.driver, FormattingDriver):
            self.driver.freeze_rows(self.name, rows)
        else:
            logger.debug("%s cannot freeze rows, ignoring", type(self.driver).__name__)
        return self

    def auto_resize_columns(self, start_column: int, num_columns: int) -> "Sheet":
        if isinstance(self.driver, FormattingDriver):
            self.driver.auto_resize_columns(self.name, start_column, num_columns)
        else:
            logger.debug("%s cannot resize columns, ignoring", type(self.driver).__name__)
        return self

    def __repr__(self) -> str:
        return f"Sheet(name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sheet):
            return NotImplemented
        return self.driver is other.driver and self.name == other.name


class Client:
    """Entry point: the collection of sheets stored by one driver.

    The driver is injected; nothing here is global.

    Usage::

        client = Client(SqliteDriver("local-dev.db"))
        sheet = client.get_sheet_by_name("2026_02") or client.insert_sheet("2026_02")
        sheet.get_range("A1").set_value("SeatNo")

    Attributes:
        driver: The storage driver
    """

    def __init__(self, driver: SheetDriver) -> None:
        self.driver = driver

    def get_sheet_by_name(self, name: str) -> Optional[Sheet]:
        """Return the sheet with that name, or None when it does not exist."""
        if name in self.driver.get_sheet_names():
            return Sheet(self.driver, name)
        return None

    def get_sheets(self) -> List[Sheet]:
        """Return every sheet, in the driver's order."""
        return [Sheet(self.driver, name) for name in self.driver.get_sheet_names()]

    def get_sheet_names(self) -> List[str]:
        return self.driver.get_sheet_names()

    def get_active_sheet(self) -> Optional[Sheet]:
        """Return the first sheet, or None when there are no sheets."""
        names = self.driver.get_sheet_names()
        return Sheet(self.driver, names[0]) if names else None

    def insert_sheet(self, name: str, position: Optional[int] = None) -> Sheet:
        """Create a sheet (no-op if it exists) and return it.

        Args:
            name: The sheet name
            position: 0-indexed position among the sheets; last when omitted
        """
        self.driver.add_sheet(name, position)
        return Sheet(self.driver, name)

    def delete_sheet(self, sheet: Sheet) -> None:
        """Delete a sheet and all of its cells."""
        self.driver.delete_sheet(sheet.get_name())

    def get_num_sheets(self) -> int:
        return self.driver.get_num_sheets()

    def __repr__(self) -> str:
        return f"Client(driver={self.driver!r})"


def _parse_color(color: str) -> Dict[str, float]:
    """Convert "#rrggbb" or "#rgb" to a Sheets API Color (0..1 floats)."""
    match = _HEX_COLOR_RE.match(color.strip())
    if not match:
        raise ValueError(f"Color must be '#rrggbb' or '#rgb', got {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    red, green, blue = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    return {"red": red, "green": green, "blue": blue}
