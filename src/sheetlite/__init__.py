"""
sheetlite - A local, SQLite-backed emulation of a spreadsheet.

This package provides a spreadsheet-style object model (Client, Sheet, Range)
over a pluggable storage driver. Cells are addressed with 1-indexed
coordinates or A1 notation and persisted sparsely, so scripts written against
a hosted spreadsheet can run and be tested locally.

Usage:
    >>> import sheetlite
    >>> client = sheetlite.connect("local-dev.db")
    >>> sheet = client.insert_sheet("2026_02")
    >>> sheet.get_range("A1").set_value("SeatNo")
    >>> sheet.get_range(2, 1, 3, 1).set_values([[1], [2], [3]])
    >>> sheet.get_range("A1:A4").get_values()
    [['SeatNo'], [1], [2], [3]]

Key components:
- Client / Sheet / Range: the facade scripts talk to
- SqliteDriver: persistent storage in a SQLite file
- GspreadDriver: the same contract on a live Google Sheets spreadsheet
- ScriptBridge: named-function calls with JSON envelopes for browser clients
"""

from typing import Optional

from .config import Settings, get_settings
from .spreadsheet import (
    ByCoordinates,
    ByNotation,
    Client,
    Range,
    Sheet,
    WrapStrategy,
    column_letter_to_index,
    index_to_column_letter,
    parse_a1_notation,
    to_a1_notation,
)
from .drivers import FormattingDriver, GspreadDriver, SheetDriver, SqliteDriver
from .bridge import ScriptBridge
from .exceptions import *

# Version
__version__ = "0.1.0"

__all__ = [
    'Client',
    'Sheet',
    'Range',
    'WrapStrategy',
    'ByNotation',
    'ByCoordinates',
    'SheetDriver',
    'FormattingDriver',
    'SqliteDriver',
    'GspreadDriver',
    'ScriptBridge',
    'Settings',
    'get_settings',
    'connect',
    'column_letter_to_index',
    'index_to_column_letter',
    'parse_a1_notation',
    'to_a1_notation',
    'SheetliteError',
    'InvalidNotation',
    'DimensionMismatch',
    'SheetNotFound',
    'StorageFailure',
]


def connect(path: Optional[str] = None, settings: Optional[Settings] = None) -> Client:
    """Open a Client on a SQLite database.

    Args:
        path: Database file; defaults to ``settings.database_path``
        settings: Settings to use; defaults to ``get_settings()``

    Returns:
        Client backed by a SqliteDriver. Close it with ``client.driver.close()``.
    """
    settings = settings or get_settings()
    if path is None:
        return Client(SqliteDriver.from_settings(settings))
    return Client(
        SqliteDriver(
            path,
            timeout=settings.sqlite_timeout_seconds,
            journal_mode=settings.sqlite_journal_mode,
        )
    )
