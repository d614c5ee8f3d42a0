from __future__ import annotations

from src.attendance_ledger.attendance_ledger.core.exceptions import StorageError

SINGLE = {
    "command": "column_attendance",
    "sheet_name": "Attendance",
    "student_id": "1",
    "student_name": "Arik",
    "date": "2025-05-17",
    "time": "09:15:30",
}

BATCH = {
    "command": "batch_attendance",
    "sheet_name": "Attendance",
    "records": [
        {"student_id": "1", "student_name": "Arik", "date": "2025-05-17", "time": "09:15:30"},
        {"student_id": "2", "student_name": "OOO", "date": "2025-05-17", "time": "09:20:45"},
        {"student_id": "65", "student_name": "Ymir", "date": "2025-05-17", "time": "09:35:12"},
    ],
}


class FailingSaveStore:
    def __init__(self, inner):
        self._inner = inner

    def get_by_name(self, name):
        return self._inner.get_by_name(name)

    def create(self, name):
        return self._inner.create(name)

    def save(self, sheet):
        raise StorageError("disk full")

    def list_names(self):
        return self._inner.list_names()


def test_single_record_success_envelope(container, fixed_now):
    response = container.dispatcher.handle(SINGLE, now=fixed_now)

    assert response == {
        "result": "success",
        "message": "Attendance marked for Arik on 05/17/2025",
        "student": "Arik",
        "date": "05/17/2025",
    }


def test_batch_success_envelope(container, fixed_now):
    response = container.dispatcher.handle(BATCH, now=fixed_now)

    assert response["result"] == "success"
    assert response["message"] == "Successfully processed 3 attendance records"
    assert [d["student_id"] for d in response["details"]] == ["1", "2", "65"]
    assert all(d["success"] and d["date"] == "05/17/2025" for d in response["details"])


def test_batch_details_carry_record_failures(container, fixed_now):
    body = dict(BATCH, records=BATCH["records"] + [{"student_name": "No Id"}])

    response = container.dispatcher.handle(body, now=fixed_now)

    assert response["result"] == "success"
    assert response["details"][-1] == {"student_id": None, "success": False, "error": "student_id is required"}


def test_empty_batch_is_an_error(container, store):
    response = container.dispatcher.handle(dict(BATCH, records=[]))

    assert response == {"result": "error", "message": "No valid records provided"}
    assert list(store.list_names()) == []


def test_unknown_or_missing_command(container, store):
    assert container.dispatcher.handle({"command": "drop_tables"}) == {"result": "error", "message": "Invalid command"}
    assert container.dispatcher.handle({"sheet_name": "Attendance"})["message"] == "Invalid command"
    assert list(store.list_names()) == []


def test_legacy_command_is_refused(container, store):
    response = container.dispatcher.handle({"command": "mark_attendance", "sheet_name": "Attendance"})

    assert response == {"result": "error", "message": "Using old attendance system"}
    assert list(store.list_names()) == []


def test_non_object_body(container):
    assert container.dispatcher.handle(["column_attendance"])["result"] == "error"
    assert container.dispatcher.handle(None)["result"] == "error"


def test_missing_sheet_name_touches_nothing(container, store):
    response = container.dispatcher.handle(dict(SINGLE, sheet_name=None))

    assert response["result"] == "error"
    assert list(store.list_names()) == []


def test_store_failure_becomes_error_envelope(store, fixed_now):
    from src.attendance_ledger.attendance_ledger.container import build_container
    from src.attendance_ledger.attendance_ledger.core.enums import StorageBackend

    container = build_container(storage_backend=StorageBackend.MEMORY, sheets=FailingSaveStore(store))

    response = container.dispatcher.handle(SINGLE, now=fixed_now)

    assert response == {"result": "error", "message": "disk full"}
