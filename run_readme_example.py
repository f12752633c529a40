"""Run the README example against a throwaway SQLite database."""

import sys
import tempfile
from pathlib import Path

import sheetlite
from sheetlite.utils import configure_logging, render_grid


with tempfile.TemporaryDirectory() as tmp:
    configure_logging("INFO")
    client = sheetlite.connect(str(Path(tmp) / "local-dev.db"))

    sheet = client.insert_sheet("2026_02")
    sheet.get_range("A1").set_value("SeatNo")
    sheet.get_range(2, 1, 3, 1).set_values([[1], [2], [3]])

    values = sheet.get_range("A1:A4").get_values()
    print(render_grid(values))
    print(f"last row: {sheet.get_last_row()}")

    client.driver.close()

if values != [["SeatNo"], [1], [2], [3]]:
    sys.exit("README example produced unexpected values")
