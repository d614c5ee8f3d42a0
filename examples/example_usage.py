"""Example: drive the ledger through the command dispatcher (no Flask).

Runs the sample device batch against an in-memory store and prints the sheet.
"""

from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.core.enums import StorageBackend


def main():
    container = build_container(storage_backend=StorageBackend.MEMORY)
    response = container.dispatcher.handle(
        {
            "command": "batch_attendance",
            "sheet_name": "Attendance",
            "records": [
                {"student_id": "1", "student_name": "Arik", "date": "2025-05-17", "time": "09:15:30"},
                {"student_id": "2", "student_name": "OOO", "date": "2025-05-17", "time": "09:20:45"},
                {"student_id": "65", "student_name": "Ymir", "date": "2025-05-17", "time": "09:35:12"},
            ],
        }
    )
    print(response)
    for row in container.ledger_service.sheet_rows("Attendance"):
        print(row)


if __name__ == "__main__":
    main()
