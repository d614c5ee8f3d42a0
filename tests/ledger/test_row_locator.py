from src.attendance_ledger.attendance_ledger.ledger.row_locator import RowLocator


def test_no_data_rows_means_not_found(new_sheet):
    assert RowLocator.find_student_row(new_sheet, "1") is None


def test_ids_compare_by_text_form(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name"], [7, "A"], ["8", "B"]])

    assert RowLocator.find_student_row(sheet, "7") == 2
    assert RowLocator.find_student_row(sheet, 8) == 3


def test_first_matching_row_wins(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name"], ["3", "A"], ["5", "B"], ["5", "C"]])

    assert RowLocator.find_student_row(sheet, "5") == 3


def test_unknown_id_not_found(make_sheet):
    sheet = make_sheet([["Student ID", "Student Name"], ["3", "A"]])

    assert RowLocator.find_student_row(sheet, "4") is None
