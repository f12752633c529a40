"""
Unit tests for GspreadDriver.

Tests cover:
- Reads: A1 range construction, unformatted rendering, padding of trimmed
  responses, SheetNotFound for unknown worksheets
- Writes and clears: range construction, no-op cases
- Bounds computed from get_all_values
- Sheet lifecycle: add (idempotent, positioned), delete
- Formatting: format, freeze, auto-resize
- Error wrapping: APIError is re-raised as StorageFailure
- Live Google Sheets round trip (marked @pytest.mark.slow, skipped by default)
"""

import uuid
from unittest.mock import Mock

import gspread
import pytest
from gspread.exceptions import APIError, WorksheetNotFound
from gspread.utils import ValueRenderOption

from sheetlite import Client
from sheetlite.config import Settings
from sheetlite.drivers.gspread_driver import GspreadDriver
from sheetlite.exceptions import SheetNotFound, StorageFailure


def _api_error(message="Quota exceeded", code=429, status="RESOURCE_EXHAUSTED"):
    mock_response = Mock()
    mock_response.json.return_value = {
        "error": {
            "code": code,
            "message": message,
            "status": status,
        }
    }
    return APIError(mock_response)


def _worksheet(title="Sheet1"):
    worksheet = Mock(spec=gspread.Worksheet)
    worksheet.title = title
    return worksheet


@pytest.fixture
def spreadsheet():
    """A spreadsheet holding one worksheet, "Sheet1"."""
    mock_spreadsheet = Mock(spec=gspread.Spreadsheet)
    worksheets = {"Sheet1": _worksheet("Sheet1")}

    def lookup(title):
        if title not in worksheets:
            raise WorksheetNotFound(title)
        return worksheets[title]

    mock_spreadsheet.worksheet.side_effect = lookup
    mock_spreadsheet.worksheets.side_effect = lambda: list(worksheets.values())
    mock_spreadsheet.sheets = worksheets
    return mock_spreadsheet


@pytest.fixture
def gs_driver(spreadsheet):
    return GspreadDriver(spreadsheet, default_rows=100, default_cols=10)


class TestReadWrite:
    """Test Suite for value reads and writes."""

    def test_get_values(self, spreadsheet, gs_driver):
        """Reads use the region's A1 range and unformatted values."""
        worksheet = spreadsheet.sheets["Sheet1"]
        worksheet.get_values.return_value = [["Name", "Age"], ["Alice", 30]]

        assert gs_driver.get_values("Sheet1", 1, 1, 2, 2) == [["Name", "Age"], ["Alice", 30]]
        worksheet.get_values.assert_called_once_with(
            "A1:B2", value_render_option=ValueRenderOption.unformatted
        )

    def test_get_values_pads_trimmed_response(self, spreadsheet, gs_driver):
        """The API drops trailing empty rows and cells; they read as ""."""
        spreadsheet.sheets["Sheet1"].get_values.return_value = [["x"]]
        assert gs_driver.get_values("Sheet1", 2, 2, 2, 3) == [["x", "", ""], ["", "", ""]]

    def test_get_values_zero_size(self, spreadsheet, gs_driver):
        assert gs_driver.get_values("Sheet1", 1, 1, 0, 2) == []
        assert gs_driver.get_values("Sheet1", 1, 1, 2, 0) == [[], []]
        spreadsheet.sheets["Sheet1"].get_values.assert_not_called()

    def test_get_values_unknown_sheet(self, gs_driver):
        with pytest.raises(SheetNotFound) as exc_info:
            gs_driver.get_values("Missing", 1, 1, 1, 1)
        assert exc_info.value.sheet_name == "Missing"

    def test_set_values(self, spreadsheet, gs_driver):
        values = [["a", "b"], ["c", "d"]]
        gs_driver.set_values("Sheet1", 2, 3, values)
        spreadsheet.sheets["Sheet1"].update.assert_called_once_with(values, range_name="C2:D3")

    def test_set_values_ragged_uses_widest_row(self, spreadsheet, gs_driver):
        gs_driver.set_values("Sheet1", 1, 1, [["a"], ["b", "c", "d"]])
        spreadsheet.sheets["Sheet1"].update.assert_called_once_with(
            [["a"], ["b", "c", "d"]], range_name="A1:C2"
        )

    def test_set_values_empty_is_noop(self, spreadsheet, gs_driver):
        gs_driver.set_values("Sheet1", 1, 1, [])
        gs_driver.set_values("Sheet1", 1, 1, [[]])
        spreadsheet.sheets["Sheet1"].update.assert_not_called()

    def test_set_values_unknown_sheet(self, gs_driver):
        with pytest.raises(SheetNotFound):
            gs_driver.set_values("Missing", 1, 1, [["x"]])

    def test_set_values_api_error(self, spreadsheet, gs_driver):
        """Error wrapping: APIError during update is caught and re-raised as StorageFailure."""
        spreadsheet.sheets["Sheet1"].update.side_effect = _api_error()

        with pytest.raises(StorageFailure) as exc_info:
            gs_driver.set_values("Sheet1", 1, 1, [["x"]])

        assert "Failed to write values" in str(exc_info.value)
        assert "A1" in str(exc_info.value)
        assert "Quota exceeded" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, APIError)

    def test_get_values_api_error(self, spreadsheet, gs_driver):
        spreadsheet.sheets["Sheet1"].get_values.side_effect = _api_error("Backend error", 500, "INTERNAL")
        with pytest.raises(StorageFailure, match="Failed to read values"):
            gs_driver.get_values("Sheet1", 1, 1, 1, 1)

    def test_clear(self, spreadsheet, gs_driver):
        gs_driver.clear("Sheet1", 2, 1, 3, 2)
        spreadsheet.sheets["Sheet1"].batch_clear.assert_called_once_with(["A2:B4"])

    def test_clear_noop_cases(self, spreadsheet, gs_driver):
        """Unknown sheets and empty regions do not call the API."""
        gs_driver.clear("Missing", 1, 1, 1, 1)
        gs_driver.clear("Sheet1", 1, 1, 0, 1)
        spreadsheet.sheets["Sheet1"].batch_clear.assert_not_called()


class TestBounds:
    """Test Suite for get_last_row / get_last_column."""

    def test_bounds_skip_trailing_blanks(self, spreadsheet, gs_driver):
        spreadsheet.sheets["Sheet1"].get_all_values.return_value = [
            ["a", "", ""],
            ["", "", "b"],
            ["", "", ""],
        ]
        assert gs_driver.get_last_row("Sheet1") == 2
        assert gs_driver.get_last_column("Sheet1") == 3

    def test_bounds_of_empty_and_unknown_sheets(self, spreadsheet, gs_driver):
        spreadsheet.sheets["Sheet1"].get_all_values.return_value = []
        assert gs_driver.get_last_row("Sheet1") == 0
        assert gs_driver.get_last_column("Sheet1") == 0
        assert gs_driver.get_last_row("Missing") == 0
        assert gs_driver.get_last_column("Missing") == 0


class TestSheets:
    """Test Suite for worksheet lifecycle."""

    def test_sheet_names(self, spreadsheet, gs_driver):
        spreadsheet.sheets["Data"] = _worksheet("Data")
        assert gs_driver.get_sheet_names() == ["Sheet1", "Data"]
        assert gs_driver.get_num_sheets() == 2

    def test_add_sheet(self, spreadsheet, gs_driver):
        gs_driver.add_sheet("Data")
        spreadsheet.add_worksheet.assert_called_once_with(title="Data", rows=100, cols=10)

    def test_add_sheet_at_position(self, spreadsheet, gs_driver):
        gs_driver.add_sheet("First", 0)
        spreadsheet.add_worksheet.assert_called_once_with(
            title="First", rows=100, cols=10, index=0
        )

    def test_add_existing_sheet_is_noop(self, spreadsheet, gs_driver):
        gs_driver.add_sheet("Sheet1")
        spreadsheet.add_worksheet.assert_not_called()

    def test_add_sheet_api_error(self, spreadsheet, gs_driver):
        """Error wrapping: APIError during add_worksheet is caught and re-raised as StorageFailure."""
        spreadsheet.add_worksheet.side_effect = _api_error("Permission denied", 403, "PERMISSION_DENIED")

        with pytest.raises(StorageFailure) as exc_info:
            gs_driver.add_sheet("Data")

        assert "Failed to add worksheet" in str(exc_info.value)
        assert "Data" in str(exc_info.value)
        assert "Permission denied" in str(exc_info.value)

    def test_delete_sheet(self, spreadsheet, gs_driver):
        worksheet = spreadsheet.sheets["Sheet1"]
        gs_driver.delete_sheet("Sheet1")
        spreadsheet.del_worksheet.assert_called_once_with(worksheet)

    def test_delete_unknown_sheet_is_noop(self, spreadsheet, gs_driver):
        gs_driver.delete_sheet("Missing")
        spreadsheet.del_worksheet.assert_not_called()

    def test_list_api_error(self, spreadsheet, gs_driver):
        spreadsheet.worksheets.side_effect = _api_error()
        with pytest.raises(StorageFailure, match="Failed to list worksheets"):
            gs_driver.get_sheet_names()

    def test_open_by_key(self, spreadsheet):
        mock_gc = Mock(spec=gspread.Client)
        mock_gc.open_by_key.return_value = spreadsheet
        settings = Settings(_env_file=None, default_sheet_rows=50, default_sheet_cols=5)

        driver = GspreadDriver.open_by_key(mock_gc, "abc123", settings)

        mock_gc.open_by_key.assert_called_once_with("abc123")
        assert driver.spreadsheet is spreadsheet
        assert (driver.default_rows, driver.default_cols) == (50, 5)

    def test_open_by_key_api_error(self):
        mock_gc = Mock(spec=gspread.Client)
        mock_gc.open_by_key.side_effect = _api_error("Not found", 404, "NOT_FOUND")
        with pytest.raises(StorageFailure, match="abc123"):
            GspreadDriver.open_by_key(mock_gc, "abc123", Settings(_env_file=None))


class TestFormatting:
    """Test Suite for cosmetics."""

    def test_apply_format(self, spreadsheet, gs_driver):
        gs_driver.apply_format("Sheet1", 1, 1, 1, 3, {"textFormat": {"bold": True}})
        spreadsheet.sheets["Sheet1"].format.assert_called_once_with(
            "A1:C1", {"textFormat": {"bold": True}}
        )

    def test_freeze_rows(self, spreadsheet, gs_driver):
        gs_driver.freeze_rows("Sheet1", 1)
        spreadsheet.sheets["Sheet1"].freeze.assert_called_once_with(rows=1)

    def test_auto_resize_columns(self, spreadsheet, gs_driver):
        """Columns are passed to gspread 0-indexed and end-exclusive."""
        gs_driver.auto_resize_columns("Sheet1", 2, 3)
        spreadsheet.sheets["Sheet1"].columns_auto_resize.assert_called_once_with(1, 4)

    def test_format_unknown_sheet(self, gs_driver):
        with pytest.raises(SheetNotFound):
            gs_driver.apply_format("Missing", 1, 1, 1, 1, {})

    def test_facade_forwards_cosmetics(self, spreadsheet, gs_driver):
        sheet = Client(gs_driver).get_sheet_by_name("Sheet1")
        sheet.get_range("A1:B1").set_font_weight("bold")
        sheet.set_frozen_rows(1)
        spreadsheet.sheets["Sheet1"].format.assert_called_once_with(
            "A1:B1", {"textFormat": {"bold": True}}
        )
        spreadsheet.sheets["Sheet1"].freeze.assert_called_once_with(rows=1)


@pytest.mark.slow
class TestLiveGspread:
    """Round trip against a real spreadsheet. Needs credentials and network."""

    @pytest.fixture(scope="class")
    def gc(self):
        """Class-wide authenticated gspread client."""
        try:
            return gspread.service_account()
        except Exception:
            pass
        try:
            return gspread.oauth()
        except Exception as exc:
            pytest.skip(f"No Google Sheets credentials available: {exc}")

    def test_round_trip(self, gc):
        spreadsheet = gc.create(f"sheetlite_test_{uuid.uuid4().hex[:8]}")
        try:
            client = Client(GspreadDriver(spreadsheet, default_rows=20, default_cols=5))
            sheet = client.insert_sheet("2026_02")
            sheet.get_range("A1").set_value("SeatNo")
            sheet.get_range(2, 1, 3, 1).set_values([[1], [2], [3]])

            assert sheet.get_range("A1:A4").get_values() == [["SeatNo"], [1], [2], [3]]
            assert sheet.get_last_row() == 4
        finally:
            gc.del_spreadsheet(spreadsheet.id)
