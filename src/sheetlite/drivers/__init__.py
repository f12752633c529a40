"""
Driver module for sheetlite.

This module provides storage backends for sheets. ``SqliteDriver`` keeps
cells in a local SQLite file; ``GspreadDriver`` forwards the same operations
to a Google Sheets spreadsheet.
"""

from sheetlite.drivers.base import FormattingDriver, SheetDriver
from sheetlite.drivers.gspread_driver import GspreadDriver
from sheetlite.drivers.sqlite_driver import SqliteDriver

__all__ = [
    "SheetDriver",
    "FormattingDriver",
    "SqliteDriver",
    "GspreadDriver",
]
