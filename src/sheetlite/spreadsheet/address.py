"""
Range address variants.

A range inside a sheet is selected either by A1 notation or by explicit
coordinates. Both variants are plain dataclasses carrying a ``kind``
discriminant, which ``Sheet.resolve_range`` dispatches on:
- ByNotation: A1 text such as "B2:D10" or "C:C"
- ByCoordinates: 1-indexed row/column plus an optional extent
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union


@dataclass(frozen=True)
class ByNotation:
    """Select a range by A1 notation.

    Attributes:
        notation: The A1 text (e.g., "A1", "B2:C3", "B:B", "1:1")
    """
    notation: str
    kind: ClassVar[str] = "notation"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "kind": self.kind,
            "notation": self.notation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ByNotation":
        """Create from dictionary representation."""
        return cls(notation=data["notation"])


@dataclass(frozen=True)
class ByCoordinates:
    """Select a range by explicit 1-indexed coordinates.

    Attributes:
        row: First row (1-indexed)
        column: First column (1-indexed)
        num_rows: Number of rows (default 1)
        num_cols: Number of columns (default 1)
    """
    row: int
    column: int
    num_rows: int = 1
    num_cols: int = 1
    kind: ClassVar[str] = "coordinates"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "kind": self.kind,
            "row": self.row,
            "column": self.column,
            "num_rows": self.num_rows,
            "num_cols": self.num_cols,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ByCoordinates":
        """Create from dictionary representation."""
        return cls(
            row=data["row"],
            column=data["column"],
            num_rows=data.get("num_rows", 1),
            num_cols=data.get("num_cols", 1),
        )


# Type alias for all address variants
RangeAddress = Union[ByNotation, ByCoordinates]


def address_from_dict(data: Dict[str, Any]) -> RangeAddress:
    """Deserialize a range address from dictionary representation.

    Args:
        data: Dictionary with a 'kind' key naming the variant

    Returns:
        The corresponding address object

    Raises:
        ValueError: If the kind is unknown
    """
    kind = data.get("kind")
    if kind == ByNotation.kind:
        return ByNotation.from_dict(data)
    elif kind == ByCoordinates.kind:
        return ByCoordinates.from_dict(data)
    else:
        raise ValueError(f"Unknown range address kind: {kind}")
