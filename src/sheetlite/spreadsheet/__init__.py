"""
Spreadsheet facade module.

This module provides the Client/Sheet/Range object model together with the
A1 notation codec and the range address variants it accepts.
"""

from sheetlite.spreadsheet.address import (
    ByCoordinates,
    ByNotation,
    RangeAddress,
    address_from_dict,
)
from sheetlite.spreadsheet.model import (
    Client,
    Range,
    Sheet,
    WrapStrategy,
)
from sheetlite.spreadsheet.notation import (
    ParsedRange,
    column_letter_to_index,
    index_to_column_letter,
    parse_a1_notation,
    to_a1_notation,
)

__all__ = [
    "Client",
    "Sheet",
    "Range",
    "WrapStrategy",
    "ByNotation",
    "ByCoordinates",
    "RangeAddress",
    "address_from_dict",
    "ParsedRange",
    "column_letter_to_index",
    "index_to_column_letter",
    "parse_a1_notation",
    "to_a1_notation",
]
