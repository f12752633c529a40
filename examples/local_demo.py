"""
Demonstration of a seat roster kept in a local SQLite database.

This script builds a monthly roster sheet through the Client/Sheet/Range
facade, appends rows, reads the data back as a DataFrame, and exposes a
couple of functions through a ScriptBridge the way a browser client would
call them.

Usage:
    python examples/local_demo.py [path/to/database.db]
"""

import json
import sys

import sheetlite
from sheetlite import ScriptBridge
from sheetlite.frames import read_frame
from sheetlite.utils import configure_logging, render_grid


def main():
    """Build a roster, print it, and call it through the bridge."""
    path = sys.argv[1] if len(sys.argv) > 1 else ":memory:"
    configure_logging("WARNING")

    print("=" * 70)
    print("sheetlite Local Demo")
    print("=" * 70)
    print()

    client = sheetlite.connect(path)
    try:
        # Step 1: a sheet per month, created on first use
        print(f"Step 1: Opening roster in {path}...")
        sheet = client.get_sheet_by_name("2026_02") or client.insert_sheet("2026_02")
        sheet.clear()
        sheet.append_row(["SeatNo", "Name", "Present"])
        sheet.get_range("A1:C1").set_font_weight("bold")
        print(f"✓ Sheets: {', '.join(client.get_sheet_names())}")
        print()

        # Step 2: rows land below the last occupied row
        print("Step 2: Appending seats...")
        for seat in [[1, "Alice", True], [2, "Bob", False], [3, "Charlie", True]]:
            sheet.append_row(seat)
        data = sheet.get_data_range()
        print(f"✓ Data range {data.get_a1_notation()}")
        print()
        print(render_grid(data.get_values()))
        print()

        # Step 3: open bands resolve against the current bounds
        print("Step 3: Reading column B as a band...")
        names = sheet.get_range("B:B").get_values()
        print(f"  B:B -> {[row[0] for row in names]}")
        print()

        # Step 4: pandas interop
        print("Step 4: As a DataFrame:")
        frame = read_frame(data)
        print(frame.to_string(index=False))
        print(f"  Present: {int(frame['Present'].sum())} of {len(frame)}")
        print()

        # Step 5: named functions with JSON envelopes
        print("Step 5: Bridge calls...")
        bridge = ScriptBridge()

        @bridge.expose
        def mark_present(seat_no):
            cell = sheet.get_range(int(seat_no) + 1, 3)
            cell.set_value(True)
            return cell

        @bridge.expose
        def get_seats():
            return sheet.get_data_range().get_values()

        for request in [
            {"function": "mark_present", "args": [2]},
            {"function": "get_seats", "args": []},
            {"function": "delete_everything", "args": []},
        ]:
            print(f"  {json.dumps(request)}")
            print(f"    -> {bridge.call_json(json.dumps(request))}")
    finally:
        client.driver.close()

    print()
    print("=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
