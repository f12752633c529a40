"""
Utility functions for sheetlite.

This module provides helpers shared by the drivers and the facade:
- serialization: JSON encoding of cell values
- visualization: Text rendering of cell grids
- logging: Logger setup for the sheetlite hierarchy
"""

from .logging import configure_logging, get_logger
from .serialization import (
    decode_value,
    encode_value,
    is_blank,
    to_cell_value,
)
from .visualization import render_grid

__all__ = [
    'configure_logging',
    'get_logger',
    'decode_value',
    'encode_value',
    'is_blank',
    'to_cell_value',
    'render_grid',
]
