import pytest

from src.attendance_ledger.attendance_ledger.core.exceptions import StorageError
from src.attendance_ledger.attendance_ledger.sheets.model import Sheet


def test_changes_are_invisible_until_saved(store):
    sheet = store.create("Attendance")
    sheet.set_value(1, 1, "Student ID")

    assert store.get_by_name("Attendance").last_row == 0

    store.save(sheet)
    assert store.get_by_name("Attendance").get_value(1, 1).as_text() == "Student ID"


def test_create_twice_is_rejected(store):
    store.create("Attendance")

    with pytest.raises(StorageError):
        store.create("Attendance")


def test_saving_unknown_sheet_is_rejected(store):
    with pytest.raises(StorageError):
        store.save(Sheet("Nope"))


def test_list_names(store):
    store.create("A")
    store.create("B")

    assert sorted(store.list_names()) == ["A", "B"]
