"""
Abstract storage interfaces for sheet backends.

The SheetDriver protocol defines the contract that every backend must satisfy:
sparse cell storage scoped to named sheets, addressed with 1-indexed
coordinates. Concrete implementations include SqliteDriver (a local database
file) and GspreadDriver (a live Google Sheets spreadsheet). Any object
exposing this operation set is interchangeable behind ``Client``.

FormattingDriver is an optional capability for backends that can apply
cosmetics (colors, font weight, borders, frozen rows). Backends without it
simply never see cosmetic calls.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


class SheetDriver(Protocol):
    """Protocol for sparse sheet storage backends.

    Coordinates are 1-indexed. No method validates coordinates beyond what the
    storage itself needs; shape checks belong to the caller (``Range``).
    """

    def get_values(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
    ) -> List[List[Any]]:
        """Read a rectangular region.

        Returns:
            A ``num_rows`` x ``num_cols`` grid. Cells never written read as
            ``""``. Zero-size requests return a degenerate grid, never an error.
        """
        ...

    def set_values(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        values: List[List[Any]],
    ) -> None:
        """Upsert every cell of ``values`` with its top-left at (start_row, start_col).

        Creates the sheet when needed. Either every cell lands or none does.
        """
        ...

    def clear(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
    ) -> None:
        """Delete every cell in [start_row, start_row+num_rows) x [start_col, start_col+num_cols)."""
        ...

    def get_last_row(self, sheet_name: str) -> int:
        """Return the highest occupied row, or 0 when the sheet has no cells."""
        ...

    def get_last_column(self, sheet_name: str) -> int:
        """Return the highest occupied column, or 0 when the sheet has no cells."""
        ...

    def get_sheet_names(self) -> List[str]:
        """Return every sheet name in a stable order."""
        ...

    def add_sheet(self, sheet_name: str, position: Optional[int] = None) -> None:
        """Create a sheet, at a 0-indexed position or last. Existing names are a no-op."""
        ...

    def delete_sheet(self, sheet_name: str) -> None:
        """Delete a sheet and all of its cells. Unknown names are a no-op."""
        ...

    def get_num_sheets(self) -> int:
        """Return the number of sheets."""
        ...


@runtime_checkable
class FormattingDriver(Protocol):
    """Optional capability: cosmetics applied to regions and sheets.

    ``cell_format`` follows the Google Sheets ``CellFormat`` JSON shape, e.g.
    ``{"textFormat": {"bold": True}}`` or ``{"wrapStrategy": "CLIP"}``.
    """

    def apply_format(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
        cell_format: Dict[str, Any],
    ) -> None:
        ...

    def freeze_rows(self, sheet_name: str, num_rows: int) -> None:
        ...

    def auto_resize_columns(self, sheet_name: str, start_col: int, num_cols: int) -> None:
        ...
