from datetime import date

from src.attendance_ledger.attendance_ledger.core.constants import HEADER_BACKGROUND
from src.attendance_ledger.attendance_ledger.ledger.header_index import HeaderIndex
from src.attendance_ledger.attendance_ledger.sheets.model import Sheet


def header_texts(sheet):
    return [c.as_text() for c in sheet.get_row_values(1, sheet.last_column)]


def test_initialize_headers_lays_out_new_sheet():
    sheet = Sheet("Attendance")

    stats = HeaderIndex().initialize_headers(sheet)

    assert header_texts(sheet) == ["Student ID", "Student Name", "Attended Days", "Percentage"]
    assert (stats.attended_days, stats.percentage) == (3, 4)
    assert sheet.frozen_rows == 1
    assert sheet.cell_format(1, 2).bold
    assert sheet.cell_format(1, 4).background == HEADER_BACKGROUND


def test_date_column_appended_after_last_column(new_sheet):
    column = HeaderIndex().find_or_create_date_column(new_sheet, "05/17/2025")

    assert column == 5
    assert new_sheet.get_value(1, 5).as_text() == "05/17/2025"


def test_find_or_create_date_column_is_idempotent(new_sheet):
    headers = HeaderIndex()

    first = headers.find_or_create_date_column(new_sheet, "05/17/2025")
    second = headers.find_or_create_date_column(new_sheet, "05/17/2025")

    assert first == second
    assert header_texts(new_sheet).count("05/17/2025") == 1
    assert new_sheet.last_column == 5


def test_date_typed_header_is_matched(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name", "Attended Days", "Percentage", date(2025, 5, 17)]])

    assert HeaderIndex().find_or_create_date_column(sheet, "05/17/2025") == 5
    assert sheet.last_column == 5


def test_text_match_wins_over_earlier_date_typed_header(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name", date(2025, 5, 17), "05/17/2025"]])

    assert HeaderIndex().find_or_create_date_column(sheet, "05/17/2025") == 4


def test_statistic_columns_added_to_legacy_sheet(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name", "05/16/2025"], ["1", "Arik", "present"]])
    headers = HeaderIndex()

    stats = headers.ensure_statistic_columns(sheet)
    again = headers.ensure_statistic_columns(sheet)

    assert (stats.attended_days, stats.percentage) == (4, 5)
    assert again == stats
    assert header_texts(sheet) == ["Student ID", "Student Name", "05/16/2025", "Attended Days", "Percentage"]
    assert sheet.cell_format(1, 4).bold
    assert sheet.cell_format(1, 5).background == HEADER_BACKGROUND


def test_only_missing_statistic_column_is_appended(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name", "Percentage", "05/16/2025"]])

    stats = HeaderIndex().ensure_statistic_columns(sheet)

    assert (stats.attended_days, stats.percentage) == (5, 3)
    assert header_texts(sheet) == ["Student ID", "Student Name", "Percentage", "05/16/2025", "Attended Days"]


def test_identity_headers_repaired(make_sheet):
    sheet = make_sheet([["id", None, "05/16/2025"]])

    HeaderIndex().ensure_identity_headers(sheet)

    assert header_texts(sheet)[:2] == ["Student ID", "Student Name"]
    assert sheet.frozen_rows == 1
    assert sheet.row_format(1).bold
