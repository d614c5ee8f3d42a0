from datetime import date, datetime
from decimal import Decimal

from src.attendance_ledger.attendance_ledger.core.enums import CellKind
from src.attendance_ledger.attendance_ledger.sheets.model import Cell, Sheet


def test_cell_of_tags_raw_values():
    assert Cell.of(None).kind == CellKind.EMPTY
    assert Cell.of("").kind == CellKind.EMPTY
    assert Cell.of("x").kind == CellKind.TEXT
    assert Cell.of(7).kind == CellKind.NUMBER
    assert Cell.of(Decimal("1.5")).kind == CellKind.NUMBER
    assert Cell.of(datetime(2025, 5, 17, 8, 0)) == Cell(CellKind.DATE, date(2025, 5, 17))


def test_as_text_of_whole_floats_drops_decimal():
    assert Cell.of(7.0).as_text() == "7"
    assert Cell.of(7.5).as_text() == "7.5"
    assert Cell.of(date(2025, 5, 17)).as_text() == "2025-05-17"


def test_last_row_and_column_track_non_empty_cells():
    sheet = Sheet("s")
    sheet.set_value(1, 1, "a")
    sheet.set_value(3, 4, "b")
    sheet.set_cell_format(9, 9, bold=True)

    assert (sheet.last_row, sheet.last_column) == (3, 4)

    sheet.set_value(3, 4, "")
    assert (sheet.last_row, sheet.last_column) == (1, 1)


def test_row_format_overlays_cell_format():
    sheet = Sheet("s")
    sheet.set_row_format(1, bold=True, background="#E0E0E0")
    sheet.set_cell_format(1, 2, number_format="0.0%")

    fmt = sheet.cell_format(1, 2)

    assert fmt.bold and fmt.background == "#E0E0E0" and fmt.number_format == "0.0%"


def test_to_rows_pads_to_last_column():
    sheet = Sheet("s")
    sheet.set_value(1, 1, "Student ID")
    sheet.set_value(1, 3, "Attended Days")
    sheet.set_value(2, 1, 1)

    assert sheet.to_rows() == [["Student ID", "", "Attended Days"], [1, "", ""]]
