from __future__ import annotations

from enum import Enum


class CellKind(str, Enum):
    """Tagged kind of a sheet cell value."""

    EMPTY = "EMPTY"
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"


class MarkerMode(str, Enum):
    """Which inbound field carries the attendance marker."""

    TIME = "time"
    STATUS = "status"


class CountingPolicy(str, Enum):
    NON_EMPTY = "non_empty"
    PRESENT_ONLY = "present_only"


class IdSortMode(str, Enum):
    NUMERIC = "numeric"
    TEXT = "text"


class Command(str, Enum):
    COLUMN_ATTENDANCE = "column_attendance"
    BATCH_ATTENDANCE = "batch_attendance"
    MARK_ATTENDANCE = "mark_attendance"


class StorageBackend(str, Enum):
    MYSQL = "mysql"
    MEMORY = "memory"
