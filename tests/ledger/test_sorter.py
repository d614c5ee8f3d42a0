from src.attendance_ledger.attendance_ledger.core.enums import IdSortMode
from src.attendance_ledger.attendance_ledger.ledger.sorter import Sorter

HEADER = ["Student ID", "Student Name", "Attended Days", "Percentage"]


def ids(sheet):
    return [c.as_text() for c in sheet.get_column_values(1, 2, sheet.last_row - 1)]


def test_numeric_ids_sort_by_value(make_sheet):
    sheet = make_sheet([HEADER, ["65", "Ymir"], ["2", "OOO"], ["10", "Ten"], ["1", "Arik"]])

    Sorter().sort_by_student_id(sheet)

    assert ids(sheet) == ["1", "2", "10", "65"]
    assert sheet.get_value(2, 2).as_text() == "Arik"
    assert sheet.get_value(5, 2).as_text() == "Ymir"
    assert [c.as_text() for c in sheet.get_row_values(1, 4)] == HEADER


def test_text_mode_sorts_lexicographically(make_sheet):
    sheet = make_sheet([HEADER, ["65", "Ymir"], ["2", "OOO"], ["10", "Ten"], ["1", "Arik"]])

    Sorter(IdSortMode.TEXT).sort_by_student_id(sheet)

    assert ids(sheet) == ["1", "10", "2", "65"]


def test_numbers_before_text_ids(make_sheet):
    sheet = make_sheet([HEADER, ["B", "b"], [12, "twelve"], ["A", "a"], ["3", "three"]])

    Sorter().sort_by_student_id(sheet)

    assert ids(sheet) == ["3", "12", "A", "B"]


def test_single_data_row_is_left_alone(make_sheet):
    sheet = make_sheet([HEADER, ["5", "Only"]])

    Sorter().sort_by_student_id(sheet)

    assert ids(sheet) == ["5"]


def test_cell_formats_move_with_rows(make_sheet):
    sheet = make_sheet([HEADER, ["2", "B", 1, "100.0%"], ["1", "A", 0, "N/A"]])
    sheet.set_cell_format(2, 4, number_format="0.0%")

    Sorter().sort_by_student_id(sheet)

    assert sheet.get_value(3, 4).as_text() == "100.0%"
    assert sheet.cell_format(3, 4).number_format == "0.0%"
    assert sheet.cell_format(2, 4).number_format is None


def test_non_finite_number_ids_sort_with_text(make_sheet):
    sheet = make_sheet([HEADER, [float("nan"), "nan"], ["B", "b"], [7, "seven"], [float("inf"), "inf"]])

    Sorter().sort_by_student_id(sheet)

    assert ids(sheet) == ["7", "B", "inf", "nan"]
