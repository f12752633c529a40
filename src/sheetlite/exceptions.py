"""
Exception classes for sheetlite.

These exceptions are used throughout the sheetlite package to signal addressing,
shape and storage errors raised by the facade and the drivers.
"""

from typing import Optional


class SheetliteError(Exception):
    """Base class for every error raised by sheetlite."""
    pass


class InvalidNotation(SheetliteError, ValueError):
    """Raised when range text does not match the A1 grammar.

    The text is rejected before any storage access happens. Examples:
        - Symbols outside letters, digits and a single colon ("!!!", "A1-B2")
        - More than one colon ("A1:B2:C3")
        - A row number of zero ("A0")
        - Blank text
    """

    def __init__(self, notation: str, reason: Optional[str] = None) -> None:
        self.notation = notation
        message = f"Invalid A1 notation: {notation!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DimensionMismatch(SheetliteError, ValueError):
    """Raised when a values array does not fit the Range it is written to.

    ``Range.set_values`` compares the number of rows and the length of the
    first row with the Range's declared extent.
    """

    def __init__(self, expected: tuple, actual: tuple) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            "The number of rows or columns in the data does not match the range: "
            f"expected {expected[0]}x{expected[1]}, got {actual[0]}x{actual[1]}"
        )


class SheetNotFound(SheetliteError):
    """Raised when an operation addresses a sheet that does not exist.

    Only backends that require existence raise it (the gspread driver on its
    read and write paths). The SQLite driver creates sheets on write and
    reports empty data for unknown sheets instead.
    """

    def __init__(self, sheet_name: str) -> None:
        self.sheet_name = sheet_name
        super().__init__(f"Sheet not found: {sheet_name!r}")


class StorageFailure(SheetliteError):
    """Raised when the backing store fails to execute or commit an operation.

    This error wraps ``sqlite3.Error`` (SQLite driver) and
    ``gspread.exceptions.APIError`` (gspread driver), keeping the original
    exception as ``__cause__``. Common causes include:
        - A locked or read-only database file
        - A corrupt database file
        - Google Sheets quota or permission errors

    Failures are never retried by sheetlite; retry policy belongs to the caller.
    """
    pass
