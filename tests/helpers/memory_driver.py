"""
In-memory sheet driver for offline tests.

Implements the SheetDriver protocol with plain dictionaries so facade tests
can run without a database file, and so the same facade behavior can be
checked against a second backend. Every call is also appended to ``calls``
for inspection.
"""

from typing import Any, Dict, List, Optional, Tuple


class MemoryDriver:
    """Dictionary-backed implementation of the SheetDriver protocol.

    Fidelity notes:

    * **Cells**: stored per sheet as ``{(row, col): value}``; blank values
      (``""`` and ``None``) remove the cell, as in SqliteDriver.
    * **Sheets**: an ordered list of names; writes create the sheet.
    * **Formatting**: not supported, so the facade ignores cosmetics.

    Usage::

        driver = MemoryDriver()
        client = Client(driver)

        client.insert_sheet("Data").append_row(["a", "b"])
        assert driver.cells("Data") == {(1, 1): "a", (1, 2): "b"}
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, tuple]] = []
        self._order: List[str] = []
        self._cells: Dict[str, Dict[Tuple[int, int], Any]] = {}

    def get_values(self, sheet_name, start_row, start_col, num_rows, num_cols):
        self.calls.append(("get_values", (sheet_name, start_row, start_col, num_rows, num_cols)))
        cells = self._cells.get(sheet_name, {})
        return [
            [cells.get((start_row + i, start_col + j), "") for j in range(max(0, num_cols))]
            for i in range(max(0, num_rows))
        ]

    def set_values(self, sheet_name, start_row, start_col, values):
        self.calls.append(("set_values", (sheet_name, start_row, start_col, values)))
        self._ensure(sheet_name, None)
        cells = self._cells[sheet_name]
        for i, row in enumerate(values):
            for j, value in enumerate(row):
                key = (start_row + i, start_col + j)
                if value is None or value == "":
                    cells.pop(key, None)
                else:
                    cells[key] = value

    def clear(self, sheet_name, start_row, start_col, num_rows, num_cols):
        self.calls.append(("clear", (sheet_name, start_row, start_col, num_rows, num_cols)))
        cells = self._cells.get(sheet_name, {})
        for row, col in list(cells):
            if start_row <= row < start_row + num_rows and start_col <= col < start_col + num_cols:
                del cells[(row, col)]

    def get_last_row(self, sheet_name):
        return max((row for row, _ in self._cells.get(sheet_name, {})), default=0)

    def get_last_column(self, sheet_name):
        return max((col for _, col in self._cells.get(sheet_name, {})), default=0)

    def get_sheet_names(self):
        return list(self._order)

    def add_sheet(self, sheet_name, position=None):
        self.calls.append(("add_sheet", (sheet_name, position)))
        self._ensure(sheet_name, position)

    def delete_sheet(self, sheet_name):
        self.calls.append(("delete_sheet", (sheet_name,)))
        if sheet_name in self._order:
            self._order.remove(sheet_name)
        self._cells.pop(sheet_name, None)

    def get_num_sheets(self):
        return len(self._order)

    def cells(self, sheet_name: str) -> Dict[Tuple[int, int], Any]:
        """Return a copy of the stored cells of *sheet_name*."""
        return dict(self._cells.get(sheet_name, {}))

    def calls_named(self, name: str) -> List[tuple]:
        """Return the argument tuples of every recorded call to *name*."""
        return [args for call, args in self.calls if call == name]

    def _ensure(self, sheet_name: str, position: Optional[int]) -> None:
        if sheet_name in self._order:
            return
        if position is None:
            self._order.append(sheet_name)
        else:
            self._order.insert(position, sheet_name)
        self._cells[sheet_name] = {}
