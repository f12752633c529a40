"""
Google Sheets backed sheet storage.

This module provides GspreadDriver, which implements the SheetDriver and
FormattingDriver protocols on top of a live Google Sheets spreadsheet via
gspread. Each operation maps 1:1 to a worksheet call; API errors are wrapped
in StorageFailure with the failing operation in the message.
"""

from typing import Any, Dict, List, Optional

import gspread
from gspread.exceptions import APIError, WorksheetNotFound
from gspread.utils import ValueRenderOption

from sheetlite.config import Settings, get_settings
from sheetlite.exceptions import SheetNotFound, StorageFailure
from sheetlite.spreadsheet.notation import to_a1_notation
from sheetlite.utils.logging import get_logger

logger = get_logger(__name__)


class GspreadDriver:
    """
    Sheet storage on a Google Sheets spreadsheet.

    Unlike SqliteDriver, reads and writes require the sheet to exist and raise
    SheetNotFound otherwise. Bounds queries and deletes treat an unknown
    sheet as empty.

    Attributes:
        spreadsheet: The gspread Spreadsheet all sheets live in
        default_rows: Grid rows given to newly added worksheets
        default_cols: Grid columns given to newly added worksheets
    """

    def __init__(
        self,
        spreadsheet: gspread.Spreadsheet,
        default_rows: int = 1000,
        default_cols: int = 26,
    ) -> None:
        """
        Initialize the driver with an opened spreadsheet.

        Args:
            spreadsheet: A spreadsheet from an authenticated client, e.g.
                ``gspread.service_account().open_by_key(key)``
            default_rows: Number of rows for worksheets created by add_sheet
            default_cols: Number of columns for worksheets created by add_sheet
        """
        self.spreadsheet = spreadsheet
        self.default_rows = default_rows
        self.default_cols = default_cols

    @classmethod
    def open_by_key(
        cls,
        gc: gspread.Client,
        key: str,
        settings: Optional[Settings] = None,
    ) -> "GspreadDriver":
        """
        Open a spreadsheet by key and wrap it.

        Args:
            gc: An authenticated gspread client
            key: The spreadsheet key (the ID in its URL)
            settings: Settings providing default worksheet size

        Raises:
            StorageFailure: If the spreadsheet cannot be opened
        """
        settings = settings or get_settings()
        try:
            spreadsheet = gc.open_by_key(key)
        except APIError as e:
            raise StorageFailure(f"Failed to open spreadsheet '{key}': {e}") from e
        return cls(
            spreadsheet,
            default_rows=settings.default_sheet_rows,
            default_cols=settings.default_sheet_cols,
        )

    # ------------------------------------------------------------------
    # Cell operations
    # ------------------------------------------------------------------

    def get_values(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
    ) -> List[List[Any]]:
        """
        Read a region, padding the API's trimmed response with "".

        Raises:
            SheetNotFound: If the sheet does not exist
            StorageFailure: If the API call fails
        """
        worksheet = self._require_worksheet(sheet_name)
        num_rows = max(0, num_rows)
        num_cols = max(0, num_cols)
        if num_rows == 0 or num_cols == 0:
            return [[] for _ in range(num_rows)]

        range_name = to_a1_notation(start_row, start_col, num_rows, num_cols)
        try:
            fetched = worksheet.get_values(
                range_name, value_render_option=ValueRenderOption.unformatted
            )
        except APIError as e:
            raise StorageFailure(
                f"Failed to read values from range '{range_name}': {e}"
            ) from e
        return _pad(fetched, num_rows, num_cols)

    def set_values(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        values: List[List[Any]],
    ) -> None:
        """
        Write a block of values with its top-left at (start_row, start_col).

        Raises:
            SheetNotFound: If the sheet does not exist
            StorageFailure: If the API call fails
        """
        worksheet = self._require_worksheet(sheet_name)
        width = max((len(row) for row in values), default=0)
        if width == 0:
            return

        range_name = to_a1_notation(start_row, start_col, len(values), width)
        try:
            worksheet.update(values, range_name=range_name)
        except APIError as e:
            raise StorageFailure(
                f"Failed to write values to range '{range_name}': {e}"
            ) from e

    def clear(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
    ) -> None:
        """
        Clear a region. Unknown sheets and empty regions are a no-op.

        Raises:
            StorageFailure: If the API call fails
        """
        worksheet = self._find_worksheet(sheet_name)
        if worksheet is None or num_rows <= 0 or num_cols <= 0:
            return

        range_name = to_a1_notation(start_row, start_col, num_rows, num_cols)
        try:
            worksheet.batch_clear([range_name])
        except APIError as e:
            raise StorageFailure(f"Failed to clear range '{range_name}': {e}") from e

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def get_last_row(self, sheet_name: str) -> int:
        last_row = 0
        for index, row in enumerate(self._all_values(sheet_name), start=1):
            if any(cell != "" for cell in row):
                last_row = index
        return last_row

    def get_last_column(self, sheet_name: str) -> int:
        last_col = 0
        for row in self._all_values(sheet_name):
            for index, cell in enumerate(row, start=1):
                if cell != "" and index > last_col:
                    last_col = index
        return last_col

    # ------------------------------------------------------------------
    # Sheet lifecycle
    # ------------------------------------------------------------------

    def get_sheet_names(self) -> List[str]:
        return [worksheet.title for worksheet in self._worksheets()]

    def get_num_sheets(self) -> int:
        return len(self._worksheets())

    def add_sheet(self, sheet_name: str, position: Optional[int] = None) -> None:
        """
        Add a worksheet unless one with that title exists.

        Raises:
            StorageFailure: If the API call fails
        """
        if self._find_worksheet(sheet_name) is not None:
            return
        kwargs: Dict[str, Any] = {
            "title": sheet_name,
            "rows": self.default_rows,
            "cols": self.default_cols,
        }
        if position is not None:
            kwargs["index"] = position
        try:
            self.spreadsheet.add_worksheet(**kwargs)
        except APIError as e:
            raise StorageFailure(
                f"Failed to add worksheet '{sheet_name}' to spreadsheet: {e}"
            ) from e
        logger.info("Added worksheet %s", sheet_name)

    def delete_sheet(self, sheet_name: str) -> None:
        """
        Delete a worksheet. Unknown names are a no-op.

        Raises:
            StorageFailure: If the API call fails
        """
        worksheet = self._find_worksheet(sheet_name)
        if worksheet is None:
            return
        try:
            self.spreadsheet.del_worksheet(worksheet)
        except APIError as e:
            raise StorageFailure(
                f"Failed to delete worksheet '{sheet_name}': {e}"
            ) from e
        logger.info("Deleted worksheet %s", sheet_name)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def apply_format(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
        cell_format: Dict[str, Any],
    ) -> None:
        """
        Apply a CellFormat to a region.

        Raises:
            SheetNotFound: If the sheet does not exist
            StorageFailure: If the API call fails
        """
        worksheet = self._require_worksheet(sheet_name)
        if num_rows <= 0 or num_cols <= 0:
            return
        range_name = to_a1_notation(start_row, start_col, num_rows, num_cols)
        try:
            worksheet.format(range_name, cell_format)
        except APIError as e:
            raise StorageFailure(
                f"Failed to format range '{range_name}': {e}"
            ) from e

    def freeze_rows(self, sheet_name: str, num_rows: int) -> None:
        worksheet = self._require_worksheet(sheet_name)
        try:
            worksheet.freeze(rows=num_rows)
        except APIError as e:
            raise StorageFailure(
                f"Failed to freeze {num_rows} rows of '{sheet_name}': {e}"
            ) from e

    def auto_resize_columns(self, sheet_name: str, start_col: int, num_cols: int) -> None:
        worksheet = self._require_worksheet(sheet_name)
        if num_cols <= 0:
            return
        try:
            # gspread takes 0-indexed, end-exclusive column indices
            worksheet.columns_auto_resize(start_col - 1, start_col - 1 + num_cols)
        except APIError as e:
            raise StorageFailure(
                f"Failed to auto-resize columns of '{sheet_name}': {e}"
            ) from e

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _worksheets(self) -> List[gspread.Worksheet]:
        try:
            return self.spreadsheet.worksheets()
        except APIError as e:
            raise StorageFailure(f"Failed to list worksheets: {e}") from e

    def _find_worksheet(self, sheet_name: str) -> Optional[gspread.Worksheet]:
        try:
            return self.spreadsheet.worksheet(sheet_name)
        except WorksheetNotFound:
            return None
        except APIError as e:
            raise StorageFailure(f"Failed to look up worksheet '{sheet_name}': {e}") from e

    def _require_worksheet(self, sheet_name: str) -> gspread.Worksheet:
        worksheet = self._find_worksheet(sheet_name)
        if worksheet is None:
            raise SheetNotFound(sheet_name)
        return worksheet

    def _all_values(self, sheet_name: str) -> List[List[Any]]:
        worksheet = self._find_worksheet(sheet_name)
        if worksheet is None:
            return []
        try:
            return worksheet.get_all_values()
        except APIError as e:
            raise StorageFailure(
                f"Failed to read values of '{sheet_name}': {e}"
            ) from e


def _pad(values: List[List[Any]], num_rows: int, num_cols: int) -> List[List[Any]]:
    """Pad (or trim) a ragged API response to exactly num_rows x num_cols."""
    grid: List[List[Any]] = []
    for i in range(num_rows):
        row = list(values[i][:num_cols]) if i < len(values) else []
        row.extend([""] * (num_cols - len(row)))
        grid.append(row)
    return grid
