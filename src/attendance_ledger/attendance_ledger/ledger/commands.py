from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict

from ..core.enums import Command
from .model import LedgerResult
from .service import AttendanceLedgerService

logger = logging.getLogger(__name__)


def envelope(result: str, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"result": result, "message": message}
    body.update(extra)
    return body


def error(message: str, **extra: Any) -> Dict[str, Any]:
    return envelope("error", message, **extra)


def _step_failure_message(result: LedgerResult) -> str:
    steps = " and ".join(result.failed_steps)
    return f"Attendance recorded but {steps} update failed"


class CommandDispatcher:
    """Routes a device command body to the ledger and builds the response envelope.

    ``handle`` never raises: every fault comes back as ``{"result": "error"}``.
    """

    def __init__(self, ledger: AttendanceLedgerService):
        self._ledger = ledger

    def handle(self, data: Any, *, now: datetime | None = None) -> Dict[str, Any]:
        try:
            if not isinstance(data, dict):
                return error("Request body must be a JSON object")

            command = data.get("command")
            if command == Command.COLUMN_ATTENDANCE.value:
                return self._column_attendance(data, now=now)
            if command == Command.BATCH_ATTENDANCE.value:
                return self._batch_attendance(data, now=now)
            if command == Command.MARK_ATTENDANCE.value:
                return error("Using old attendance system")

            return error("Invalid command")
        except Exception as e:
            logger.error("Error handling command %r: %s", data.get("command") if isinstance(data, dict) else None, e)
            return error(str(e))

    def _column_attendance(self, data: Dict[str, Any], *, now: datetime | None) -> Dict[str, Any]:
        outcome, result = self._ledger.mark(data.get("sheet_name"), data, now=now)
        if not outcome.success:
            return error(outcome.error or "Failed to record attendance")
        if not result.ok:
            return error(_step_failure_message(result), student=outcome.student_name, date=outcome.date)

        return envelope(
            "success",
            f"Attendance marked for {outcome.student_name} on {outcome.date}",
            student=outcome.student_name,
            date=outcome.date,
        )

    def _batch_attendance(self, data: Dict[str, Any], *, now: datetime | None) -> Dict[str, Any]:
        records = data.get("records")
        result = self._ledger.process_batch(data.get("sheet_name"), records, now=now)
        details = [o.to_dict() for o in result.outcomes]
        if not result.ok:
            return error(_step_failure_message(result), details=details)

        return envelope(
            "success",
            f"Successfully processed {len(result.outcomes)} attendance records",
            details=details,
        )
