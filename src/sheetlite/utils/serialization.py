"""
Cell value serialization utilities.

Provides the JSON text encoding used to persist cell values. Values written to a
sheet are JSON-compatible scalars; numpy scalars and dates coming from pandas are
converted on the way in. Decoding never fails: stored text that is not valid JSON
is returned as the raw string so foreign or corrupt data never blocks a read.
"""

import datetime
import json
import math
from typing import Any

import numpy as np

from .logging import get_logger

logger = get_logger(__name__)


def is_blank(value: Any) -> bool:
    """Check whether a value represents an empty cell.

    ``None``, the empty string and NaN are blank. Blank values are not stored;
    writing one removes the cell.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    return False


def to_cell_value(value: Any) -> Any:
    """Convert a Python value to a JSON-compatible cell value.

    Conversions:
    - numpy scalar → the equivalent Python scalar
    - datetime / date / time → ISO 8601 string
    - NaN / None → ""
    - anything else → as-is

    Args:
        value: The value to convert

    Returns:
        A value that ``json.dumps`` accepts (for supported inputs)
    """
    if isinstance(value, np.generic):
        value = value.item()
    if is_blank(value):
        return ""
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return value


def encode_value(value: Any) -> str:
    """Encode a cell value to its stored JSON text.

    Raises:
        TypeError: If the value is not JSON-serializable
    """
    return json.dumps(to_cell_value(value), ensure_ascii=False, allow_nan=False)


def decode_value(text: Any) -> Any:
    """Decode stored JSON text back to a cell value.

    Args:
        text: The stored text (``None`` for a NULL column)

    Returns:
        The decoded value, ``""`` for NULL, or the raw text when it is not JSON
    """
    if text is None:
        return ""
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        logger.debug("Stored cell text is not JSON, returning it raw: %r", text)
        return text
