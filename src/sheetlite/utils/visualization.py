"""
Grid visualization utilities.

Provides a plain-text rendering of cell values, with column letters across the
top and row numbers down the side, for inspecting sheet contents while
debugging.
"""

from typing import Any, List, Sequence

from ..spreadsheet.notation import index_to_column_letter


def render_grid(
    values: Sequence[Sequence[Any]],
    start_row: int = 1,
    start_col: int = 1,
    max_width: int = 20,
) -> str:
    """Render a block of values as a text table.

    Args:
        values: Rows of cell values (as returned by ``Range.get_values()``)
        start_row: Row number of the first row (1-indexed)
        start_col: Column number of the first column (1-indexed)
        max_width: Cell text longer than this is truncated with "…"

    Returns:
        A string containing the table, one line per row plus a header line

    Example:
        >>> print(render_grid([["SeatNo"], [1], [2]]))
          | A
        --+--------
        1 | SeatNo
        2 | 1
        3 | 2
    """
    if max_width < 1:
        raise ValueError("max_width must be at least 1")

    num_cols = max((len(row) for row in values), default=0)
    headers = [index_to_column_letter(start_col + j) for j in range(num_cols)]
    labels = [str(start_row + i) for i in range(len(values))]

    cells: List[List[str]] = []
    for row in values:
        texts = [_format_cell(value, max_width) for value in row]
        texts.extend([""] * (num_cols - len(texts)))
        cells.append(texts)

    widths = [len(header) for header in headers]
    for texts in cells:
        for j, text in enumerate(texts):
            widths[j] = max(widths[j], len(text))
    label_width = max((len(label) for label in labels), default=0)

    lines = [_join_line(" " * label_width, headers, widths)]
    lines.append("-" * (label_width + 1) + "+" + "+".join("-" * (w + 2) for w in widths))
    for label, texts in zip(labels, cells):
        lines.append(_join_line(label.rjust(label_width), texts, widths))
    return "\n".join(line.rstrip() for line in lines)


def _format_cell(value: Any, max_width: int) -> str:
    if isinstance(value, bool):
        text = "TRUE" if value else "FALSE"
    else:
        text = str(value)
    text = text.replace("\n", " ")
    if len(text) > max_width:
        text = text[: max_width - 1] + "…"
    return text


def _join_line(label: str, texts: List[str], widths: List[int]) -> str:
    if not texts:
        return label + " |"
    return label + " | " + " | ".join(text.ljust(w) for text, w in zip(texts, widths))
