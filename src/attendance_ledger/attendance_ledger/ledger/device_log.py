"""Offline attendance log kept by the reader device.

The device appends ``date,student_id[,student_name],status,synced`` lines while
it is offline and uploads the unsynced ones as one batch when it reconnects.
Rewriting the log only touches the ``synced`` field; every other line and
column is written back as it was read.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.exceptions import ValidationError

REQUIRED_COLUMNS = ("date", "student_id", "status", "synced")


@dataclass(frozen=True)
class DeviceLogEntry:
    line_no: int
    date: str
    student_id: str
    status: str
    synced: bool
    student_name: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "date": self.date,
            "student_id": self.student_id,
            "status": self.status,
        }
        if self.student_name:
            record["student_name"] = self.student_name
        return record


@dataclass(frozen=True)
class DeviceLog:
    fieldnames: List[str]
    entries: List[DeviceLogEntry]
    # Every data line as read, keyed by its line number, uploadable or not.
    rows: List[Tuple[int, Dict[str, Any]]]

    @property
    def unsynced(self) -> List[DeviceLogEntry]:
        return [e for e in self.entries if not e.synced]


def _is_synced(value: Optional[str]) -> bool:
    try:
        return int((value or "0").strip() or "0") != 0
    except ValueError:
        return False


def parse_device_log(text: str) -> DeviceLog:
    reader = csv.DictReader(io.StringIO(text))
    fieldnames = [f.strip() for f in (reader.fieldnames or [])]
    missing = [c for c in REQUIRED_COLUMNS if c not in fieldnames]
    if missing:
        raise ValidationError(f"Device log is missing columns: {', '.join(missing)}")
    reader.fieldnames = fieldnames

    entries = []
    rows = []
    for row in reader:
        rows.append((reader.line_num, row))
        student_id = (row.get("student_id") or "").strip()
        if not student_id:
            continue
        entries.append(
            DeviceLogEntry(
                line_no=reader.line_num,
                date=(row.get("date") or "").strip(),
                student_id=student_id,
                status=(row.get("status") or "").strip(),
                synced=_is_synced(row.get("synced")),
                student_name=(row.get("student_name") or "").strip() or None,
            )
        )
    return DeviceLog(fieldnames=fieldnames, entries=entries, rows=rows)


def mark_synced(log: DeviceLog, entries: Sequence[DeviceLogEntry]) -> str:
    """Render the log back to CSV with ``entries`` flagged as synced."""
    done = {e.line_no for e in entries}
    out = io.StringIO()
    # Surplus values past the header land under a None key; keep them in place.
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(log.fieldnames)
    for line_no, row in log.rows:
        values = [row.get(name) or "" for name in log.fieldnames]
        if line_no in done:
            values[log.fieldnames.index("synced")] = "1"
        writer.writerow(values + list(row.get(None) or []))
    return out.getvalue()
