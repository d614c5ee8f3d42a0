from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.constants import DEFAULT_MARKER
from ..core.enums import MarkerMode
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceEvent:
    """One inbound attendance observation from the reader device."""

    student_id: Any
    student_name: Optional[str] = None
    date: Optional[str] = None
    marker: Optional[Any] = None

    @property
    def value(self) -> Any:
        # An empty or missing marker is never written as empty.
        return self.marker if self.marker else DEFAULT_MARKER

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], *, mode: MarkerMode) -> "AttendanceEvent":
        if not isinstance(payload, dict):
            raise ValidationError("Attendance record must be an object")

        student_id = payload.get("student_id")
        if student_id is None or str(student_id).strip() == "":
            raise ValidationError("student_id is required")

        return cls(
            student_id=student_id,
            student_name=payload.get("student_name"),
            date=payload.get("date"),
            marker=payload.get(mode.value),
        )


@dataclass(frozen=True)
class RecordOutcome:
    """Result of writing one record: either a success or a captured failure."""

    student_id: Any
    success: bool
    student_name: Optional[str] = None
    date: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, *, student_id: Any, student_name: Optional[str], date: str) -> "RecordOutcome":
        return cls(student_id=student_id, success=True, student_name=student_name, date=date)

    @classmethod
    def failed(cls, *, student_id: Any, error: str) -> "RecordOutcome":
        return cls(student_id=student_id, success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {
                "student_id": self.student_id,
                "student_name": self.student_name,
                "date": self.date,
                "success": True,
            }
        return {"student_id": self.student_id, "success": False, "error": self.error}


@dataclass(frozen=True)
class StatisticColumns:
    attended_days: int
    percentage: int


@dataclass
class LedgerResult:
    """Outcome of one request-level operation (single or batch)."""

    outcomes: List[RecordOutcome] = field(default_factory=list)
    failed_steps: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_steps
