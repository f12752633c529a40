"""
SQLite-backed sheet storage.

This module provides SqliteDriver, a persistent implementation of the
SheetDriver protocol. Cells are stored sparsely, one row per non-blank cell,
keyed by (sheet_name, row, col) with the value encoded as JSON text. Every
mutating call runs inside a single transaction, so a multi-cell write either
commits completely or not at all.
"""

import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

from sheetlite.config import JOURNAL_MODES, Settings, get_settings
from sheetlite.exceptions import StorageFailure
from sheetlite.utils.logging import get_logger
from sheetlite.utils.serialization import decode_value, encode_value, is_blank

logger = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS sheets (
    name TEXT PRIMARY KEY,
    position INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS cells (
    sheet_name TEXT NOT NULL,
    row INTEGER NOT NULL,
    col INTEGER NOT NULL,
    value TEXT,
    PRIMARY KEY (sheet_name, row, col),
    FOREIGN KEY (sheet_name) REFERENCES sheets(name) ON DELETE CASCADE
);
"""

_SELECT_REGION = """
SELECT row, col, value FROM cells
WHERE sheet_name = ? AND row >= ? AND row < ? AND col >= ? AND col < ?
"""

_DELETE_REGION = """
DELETE FROM cells
WHERE sheet_name = ? AND row >= ? AND row < ? AND col >= ? AND col < ?
"""

_UPSERT_CELL = """
INSERT INTO cells (sheet_name, row, col, value) VALUES (?, ?, ?, ?)
ON CONFLICT (sheet_name, row, col) DO UPDATE SET value = excluded.value
"""

_DELETE_CELL = "DELETE FROM cells WHERE sheet_name = ? AND row = ? AND col = ?"


class SqliteDriver:
    """Persistent sheet storage in a SQLite database file.

    Blank values (``""``, ``None``, NaN) are never stored: writing one deletes
    the cell, so a blank read back is the same whether it was written or not,
    and blanks never extend a sheet's bounds.

    Usage::

        with SqliteDriver("local-dev.db") as driver:
            driver.set_values("Sheet1", 1, 1, [["Name", "Age"], ["Alice", 30]])
            driver.get_values("Sheet1", 1, 1, 2, 2)

    Attributes:
        path: The database file path (or ``:memory:``)
        conn: The open sqlite3 connection, None after ``close()``
    """

    def __init__(
        self,
        path: str,
        timeout: float = 5.0,
        journal_mode: str = "WAL",
    ) -> None:
        """Open (creating if needed) the database and install the schema.

        Args:
            path: Database file path, or ``:memory:``
            timeout: Seconds to wait on a locked database
            journal_mode: SQLite journal mode applied on connect

        Raises:
            StorageFailure: If the database cannot be opened or initialized
            ValueError: If the journal mode is unknown
        """
        journal_mode = journal_mode.upper()
        if journal_mode not in JOURNAL_MODES:
            raise ValueError(f"Unknown SQLite journal mode: {journal_mode!r}")

        self.path = path
        try:
            # Transactions are managed explicitly in _transaction().
            self.conn: Optional[sqlite3.Connection] = sqlite3.connect(
                path, timeout=timeout, isolation_level=None
            )
            self.conn.execute("PRAGMA foreign_keys = ON")
            self.conn.execute(f"PRAGMA journal_mode = {journal_mode}")
            self.conn.executescript(SCHEMA)
        except sqlite3.Error as e:
            raise StorageFailure(f"Failed to open database '{path}': {e}") from e
        logger.info("Opened sheet database %s", path)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SqliteDriver":
        """Create a driver from application settings.

        Args:
            settings: Settings to use; defaults to ``get_settings()``
        """
        settings = settings or get_settings()
        return cls(
            settings.database_path,
            timeout=settings.sqlite_timeout_seconds,
            journal_mode=settings.sqlite_journal_mode,
        )

    # ------------------------------------------------------------------
    # Cell operations
    # ------------------------------------------------------------------

    def get_values(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
    ) -> List[List[Any]]:
        num_rows = max(0, num_rows)
        num_cols = max(0, num_cols)
        result: List[List[Any]] = [["" for _ in range(num_cols)] for _ in range(num_rows)]
        if num_rows == 0 or num_cols == 0:
            return result

        rows = self._query(
            _SELECT_REGION,
            (sheet_name, start_row, start_row + num_rows, start_col, start_col + num_cols),
            f"read values from '{sheet_name}'",
        )
        for row, col, value in rows:
            result[row - start_row][col - start_col] = decode_value(value)

        logger.debug(
            "Read %dx%d cells from %s at R%dC%d (%d stored)",
            num_rows, num_cols, sheet_name, start_row, start_col, len(rows),
        )
        return result

    def set_values(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        values: List[List[Any]],
    ) -> None:
        upserts: List[Tuple[str, int, int, str]] = []
        deletes: List[Tuple[str, int, int]] = []
        for i, row_values in enumerate(values):
            for j, value in enumerate(row_values):
                key = (sheet_name, start_row + i, start_col + j)
                if is_blank(value):
                    deletes.append(key)
                else:
                    upserts.append(key + (encode_value(value),))

        with self._transaction(f"write values to '{sheet_name}'") as conn:
            self._insert_sheet(conn, sheet_name, None)
            conn.executemany(_DELETE_CELL, deletes)
            conn.executemany(_UPSERT_CELL, upserts)

        logger.debug(
            "Wrote %d cells (%d blank) to %s at R%dC%d",
            len(upserts) + len(deletes), len(deletes), sheet_name, start_row, start_col,
        )

    def clear(
        self,
        sheet_name: str,
        start_row: int,
        start_col: int,
        num_rows: int,
        num_cols: int,
    ) -> None:
        if num_rows <= 0 or num_cols <= 0:
            return
        with self._transaction(f"clear range in '{sheet_name}'") as conn:
            cursor = conn.execute(
                _DELETE_REGION,
                (sheet_name, start_row, start_row + num_rows, start_col, start_col + num_cols),
            )
        logger.debug("Cleared %d cells from %s", cursor.rowcount, sheet_name)

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def get_last_row(self, sheet_name: str) -> int:
        rows = self._query(
            "SELECT COALESCE(MAX(row), 0) FROM cells WHERE sheet_name = ?",
            (sheet_name,),
            f"get last row of '{sheet_name}'",
        )
        return rows[0][0]

    def get_last_column(self, sheet_name: str) -> int:
        rows = self._query(
            "SELECT COALESCE(MAX(col), 0) FROM cells WHERE sheet_name = ?",
            (sheet_name,),
            f"get last column of '{sheet_name}'",
        )
        return rows[0][0]

    # ------------------------------------------------------------------
    # Sheet lifecycle
    # ------------------------------------------------------------------

    def get_sheet_names(self) -> List[str]:
        rows = self._query(
            "SELECT name FROM sheets ORDER BY position, rowid", (), "list sheets"
        )
        return [name for (name,) in rows]

    def get_num_sheets(self) -> int:
        rows = self._query("SELECT COUNT(*) FROM sheets", (), "count sheets")
        return rows[0][0]

    def add_sheet(self, sheet_name: str, position: Optional[int] = None) -> None:
        with self._transaction(f"add sheet '{sheet_name}'") as conn:
            created = self._insert_sheet(conn, sheet_name, position)
        if created:
            logger.info("Created sheet %s", sheet_name)

    def delete_sheet(self, sheet_name: str) -> None:
        with self._transaction(f"delete sheet '{sheet_name}'") as conn:
            found = conn.execute(
                "SELECT position FROM sheets WHERE name = ?", (sheet_name,)
            ).fetchone()
            conn.execute("DELETE FROM cells WHERE sheet_name = ?", (sheet_name,))
            if found is None:
                return
            conn.execute("DELETE FROM sheets WHERE name = ?", (sheet_name,))
            conn.execute(
                "UPDATE sheets SET position = position - 1 WHERE position > ?", found
            )
        logger.info("Deleted sheet %s", sheet_name)

    # ------------------------------------------------------------------
    # Connection management
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the database connection. Safe to call more than once."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None
            logger.info("Closed sheet database %s", self.path)

    def __enter__(self) -> "SqliteDriver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SqliteDriver(path={self.path!r})"

    def _connection(self) -> sqlite3.Connection:
        if self.conn is None:
            raise StorageFailure(f"Database '{self.path}' is closed")
        return self.conn

    def _query(self, sql: str, params: tuple, action: str) -> List[tuple]:
        try:
            return self._connection().execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StorageFailure(f"Failed to {action}: {e}") from e

    @contextmanager
    def _transaction(self, action: str) -> Iterator[sqlite3.Connection]:
        """Run the body in one IMMEDIATE transaction, rolling back on any error.

        Raises:
            StorageFailure: If SQLite fails to begin, execute or commit
        """
        conn = self._connection()
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
                conn.execute("COMMIT")
            except BaseException:
                if conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise
        except sqlite3.Error as e:
            raise StorageFailure(f"Failed to {action}: {e}") from e

    @staticmethod
    def _insert_sheet(
        conn: sqlite3.Connection, sheet_name: str, position: Optional[int]
    ) -> bool:
        """Insert a sheet row unless the name exists. Returns True when inserted.

        Positions stay dense (0..n-1); inserting in the middle shifts later sheets.
        """
        exists = conn.execute(
            "SELECT 1 FROM sheets WHERE name = ?", (sheet_name,)
        ).fetchone()
        if exists:
            return False

        (count,) = conn.execute("SELECT COUNT(*) FROM sheets").fetchone()
        if position is None or position >= count:
            position = count
        else:
            position = max(0, position)
            conn.execute(
                "UPDATE sheets SET position = position + 1 WHERE position >= ?",
                (position,),
            )
        conn.execute(
            "INSERT INTO sheets (name, position) VALUES (?, ?)", (sheet_name, position)
        )
        return True
