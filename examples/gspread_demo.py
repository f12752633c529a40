"""
Demonstration of the facade running on a live Google Sheets spreadsheet.

The same Client/Sheet/Range calls used locally are pointed at GspreadDriver,
which also applies cosmetics (bold header, frozen row, column widths) that the
SQLite driver ignores.

Authentication: requires either a service account JSON at
~/.config/gspread/service_account.json or OAuth credentials at
~/.config/gspread/credentials.json (browser flow on first use).
"""

import sys

import gspread

from sheetlite import Client, GspreadDriver, WrapStrategy
from sheetlite.config import get_settings


def _get_gspread_client() -> gspread.Client:
    """Authenticate with Google Sheets, trying service account then OAuth."""
    try:
        gc = gspread.service_account()
        print("✓ Authenticated via service account")
        return gc
    except Exception:
        pass
    try:
        gc = gspread.oauth()
        print("✓ Authenticated via OAuth")
        return gc
    except Exception as exc:
        print(f"✗ Could not authenticate with Google Sheets: {exc}")
        print()
        print("Set up credentials using one of:")
        print(
            "  • Service account: place key at ~/.config/gspread/service_account.json"
        )
        print("  • OAuth: place credentials at ~/.config/gspread/credentials.json")
        sys.exit(1)


def main():
    """Write a roster to a new spreadsheet and print its URL."""

    print("=" * 70)
    print("sheetlite Google Sheets Demo")
    print("=" * 70)
    print()

    print("Step 1: Authenticating with Google Sheets...")
    gc = _get_gspread_client()
    print()

    title = "sheetlite Demo - Seat Roster"
    print(f"Step 2: Creating spreadsheet '{title}'...")
    settings = get_settings()
    spreadsheet = gc.create(title)
    client = Client(
        GspreadDriver(
            spreadsheet,
            default_rows=settings.default_sheet_rows,
            default_cols=settings.default_sheet_cols,
        )
    )
    print()

    print("Step 3: Writing the roster...")
    sheet = client.insert_sheet("2026_02", 0)
    sheet.get_range("A1:C1").set_values([["SeatNo", "Name", "Present"]])
    sheet.get_range(2, 1, 3, 3).set_values(
        [[1, "Alice", True], [2, "Bob", False], [3, "Charlie", True]]
    )
    print(f"✓ Last row: {sheet.get_last_row()}")
    print()

    print("Step 4: Formatting...")
    header = sheet.get_range("A1:C1")
    header.set_font_weight("bold").set_background("#d9ead3")
    header.set_border(bottom=True)
    sheet.get_range("B:B").set_wrap_strategy(WrapStrategy.CLIP)
    sheet.set_frozen_rows(1).auto_resize_columns(1, 3)
    print("✓ Header formatted")
    print()

    print("✓ Spreadsheet created!")
    print("  URL:", spreadsheet.url)
    print()

    print("=" * 70)
    print("Demo complete! Open the URL above to see the result.")
    print("=" * 70)


if __name__ == "__main__":
    main()
