from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Sequence, Tuple

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_non_empty_list
from ..core.constants import BATCH_PROGRESS_EVERY
from ..core.enums import MarkerMode
from ..core.exceptions import ValidationError
from ..sheets.model import Sheet
from ..sheets.repository import SheetRepository
from .header_index import HeaderIndex
from .model import AttendanceEvent, LedgerResult, RecordOutcome
from .record_writer import RecordWriter
from .sorter import Sorter
from .statistics import StatisticsEngine

logger = logging.getLogger(__name__)


class AttendanceLedgerService:
    """Applies attendance events to the per-class sheets of a store.

    Every call loads one sheet, mutates it in memory and saves it once, so
    header and id lookups within a request all see the same snapshot.
    """

    def __init__(
        self,
        sheets: SheetRepository,
        headers: HeaderIndex,
        writer: RecordWriter,
        statistics: StatisticsEngine,
        sorter: Sorter,
        *,
        marker_mode: MarkerMode = MarkerMode.TIME,
    ):
        self._sheets = sheets
        self._headers = headers
        self._writer = writer
        self._statistics = statistics
        self._sorter = sorter
        self._marker_mode = marker_mode

    def _open_sheet(self, sheet_name: str) -> Tuple[Sheet, bool]:
        """Load ``sheet_name``; a missing sheet is built in memory and only
        registered with the store when it is saved."""
        sheet = self._sheets.get_by_name(sheet_name)
        if sheet is None:
            sheet = Sheet(sheet_name)
            self._headers.initialize_headers(sheet)
            return sheet, True
        self._headers.ensure_headers(sheet)
        return sheet, False

    def _save(self, sheet: Sheet, is_new: bool) -> None:
        if is_new:
            sheet.sheet_id = self._sheets.create(sheet.name).sheet_id
            logger.info("Created new sheet: %s", sheet.name)
        self._sheets.save(sheet)

    def _finish(self, sheet: Sheet) -> List[str]:
        """Statistics then sort; failures are logged and reported, never raised."""
        failed: List[str] = []
        try:
            self._statistics.recompute(sheet)
        except Exception:
            logger.exception("Error updating statistics on sheet %s", sheet.name)
            failed.append("statistics")
        try:
            self._sorter.sort_by_student_id(sheet)
        except Exception:
            logger.exception("Error during sorting of sheet %s", sheet.name)
            failed.append("sort")
        return failed

    def mark(self, sheet_name: Any, payload: Dict[str, Any], *, now: datetime | None = None) -> Tuple[RecordOutcome, LedgerResult]:
        """Single-record path.

        Invalid input is rejected before the store is touched. A record that
        fails to write leaves the stored sheet unchanged.
        """

        sheet_name = require_non_empty(sheet_name, "sheet_name")
        event = AttendanceEvent.from_payload(payload, mode=self._marker_mode)
        today = (now or now_local()).date()

        sheet, is_new = self._open_sheet(sheet_name)
        outcome = self._writer.write_record(sheet, event, today=today, auto_resize=True)
        if not outcome.success:
            return outcome, LedgerResult(outcomes=[outcome])

        failed_steps = self._finish(sheet)
        self._save(sheet, is_new)
        return outcome, LedgerResult(outcomes=[outcome], failed_steps=failed_steps)

    def process_batch(self, sheet_name: Any, records: Any, *, now: datetime | None = None) -> LedgerResult:
        records = require_non_empty_list(records, "No valid records provided")
        sheet_name = require_non_empty(sheet_name, "sheet_name")
        if not all(isinstance(r, dict) for r in records):
            raise ValidationError("Every attendance record must be an object")
        today = (now or now_local()).date()

        logger.info("Processing batch attendance: %d records", len(records))
        sheet, is_new = self._open_sheet(sheet_name)

        outcomes: List[RecordOutcome] = []
        for i, record in enumerate(records):
            outcomes.append(self._writer.write_payload(sheet, record, today=today))
            if i > 0 and i % BATCH_PROGRESS_EVERY == 0:
                logger.info("Processed %d of %d records", i, len(records))

        failed_steps = self._finish(sheet)
        self._save(sheet, is_new)
        return LedgerResult(outcomes=outcomes, failed_steps=failed_steps)

    def sheet_rows(self, sheet_name: str) -> Sequence[Sequence[Any]]:
        sheet = self._sheets.get_by_name(require_non_empty(sheet_name, "sheet_name"))
        if sheet is None:
            raise ValidationError(f"Sheet not found: {sheet_name}")
        return sheet.to_rows()
