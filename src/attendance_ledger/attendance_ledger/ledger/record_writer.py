from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict

from ..core.constants import AUTO_RESIZE_MAX_COLUMNS
from ..core.enums import MarkerMode
from ..sheets.model import Sheet
from .date_normalizer import DateNormalizer
from .header_index import ID_COLUMN, NAME_COLUMN, HeaderIndex
from .model import AttendanceEvent, RecordOutcome
from .row_locator import RowLocator

logger = logging.getLogger(__name__)


class RecordWriter:
    def __init__(
        self,
        headers: HeaderIndex,
        rows: RowLocator | None = None,
        normalizer: DateNormalizer | None = None,
        *,
        marker_mode: MarkerMode = MarkerMode.TIME,
    ):
        self._headers = headers
        self._rows = rows or RowLocator()
        self._normalizer = normalizer or DateNormalizer()
        self._marker_mode = marker_mode

    def write_payload(self, sheet: Sheet, payload: Dict[str, Any], *, today: date, auto_resize: bool = False) -> RecordOutcome:
        """Parse and write one raw record; any failure is captured in the outcome."""
        try:
            event = AttendanceEvent.from_payload(payload, mode=self._marker_mode)
        except Exception as e:
            student_id = payload.get("student_id") if isinstance(payload, dict) else None
            logger.warning("Rejected attendance record for student %s: %s", student_id, e)
            return RecordOutcome.failed(student_id=student_id, error=str(e))
        return self.write_record(sheet, event, today=today, auto_resize=auto_resize)

    def write_record(self, sheet: Sheet, event: AttendanceEvent, *, today: date, auto_resize: bool = False) -> RecordOutcome:
        try:
            day_key = self._normalizer.day_key(event.date, today=today)
            date_column = self._headers.find_or_create_date_column(sheet, day_key)

            row = self._rows.find_student_row(sheet, event.student_id)
            if row is None:
                row = sheet.last_row + 1
                sheet.set_value(row, ID_COLUMN, event.student_id)
                sheet.set_value(row, NAME_COLUMN, event.student_name)

            sheet.set_value(row, date_column, event.value)

            if auto_resize and sheet.last_column < AUTO_RESIZE_MAX_COLUMNS:
                sheet.auto_resize_columns(1, date_column)

            return RecordOutcome.ok(student_id=event.student_id, student_name=event.student_name, date=day_key)
        except Exception as e:
            logger.error("Error processing record for student %s: %s", event.student_id, e)
            return RecordOutcome.failed(student_id=event.student_id, error=str(e))
