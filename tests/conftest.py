from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.core.enums import StorageBackend
from src.attendance_ledger.attendance_ledger.ledger.header_index import HeaderIndex
from src.attendance_ledger.attendance_ledger.sheets.memory_store import InMemorySheetStore
from src.attendance_ledger.attendance_ledger.sheets.model import Sheet


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 5, 17, 9, 0, 0)


@pytest.fixture
def store() -> InMemorySheetStore:
    return InMemorySheetStore()


@pytest.fixture
def container(store):
    return build_container(storage_backend=StorageBackend.MEMORY, sheets=store)


@pytest.fixture
def make_sheet():
    """Build a sheet from a list of rows (row 1 = header)."""

    def _make(rows, name: str = "Attendance") -> Sheet:
        sheet = Sheet(name)
        for r, values in enumerate(rows, start=1):
            for c, value in enumerate(values, start=1):
                sheet.set_value(r, c, value)
        return sheet

    return _make


@pytest.fixture
def new_sheet():
    sheet = Sheet("Attendance")
    HeaderIndex().initialize_headers(sheet)
    return sheet
