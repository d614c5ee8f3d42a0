from __future__ import annotations

from ..core.constants import (
    ATTENDED_DAYS_HEADER,
    HEADER_BACKGROUND,
    PERCENTAGE_HEADER,
    STUDENT_ID_HEADER,
    STUDENT_NAME_HEADER,
)
from ..sheets.model import Sheet
from .date_normalizer import DateNormalizer
from .model import StatisticColumns

ID_COLUMN = 1
NAME_COLUMN = 2


class HeaderIndex:
    """Locates and lazily extends the header row of a sheet.

    Columns are only ever appended after the current last column, so existing
    column positions never shift.
    """

    def __init__(self, normalizer: DateNormalizer | None = None):
        self._normalizer = normalizer or DateNormalizer()

    @staticmethod
    def _header_width(sheet: Sheet) -> int:
        return max(sheet.last_column, NAME_COLUMN)

    @staticmethod
    def _style_header_cell(sheet: Sheet, column: int) -> None:
        sheet.set_cell_format(1, column, bold=True, background=HEADER_BACKGROUND)

    def initialize_headers(self, sheet: Sheet) -> StatisticColumns:
        """Header layout for a brand new sheet: id, name, then both statistic columns."""
        sheet.set_value(1, ID_COLUMN, STUDENT_ID_HEADER)
        sheet.set_value(1, NAME_COLUMN, STUDENT_NAME_HEADER)
        sheet.set_value(1, 3, ATTENDED_DAYS_HEADER)
        sheet.set_value(1, 4, PERCENTAGE_HEADER)

        sheet.set_row_format(1, bold=True, background=HEADER_BACKGROUND)
        sheet.frozen_rows = 1
        return StatisticColumns(attended_days=3, percentage=4)

    def ensure_identity_headers(self, sheet: Sheet) -> None:
        if sheet.get_value(1, ID_COLUMN).as_text() != STUDENT_ID_HEADER:
            sheet.set_value(1, ID_COLUMN, STUDENT_ID_HEADER)
        if sheet.get_value(1, NAME_COLUMN).as_text() != STUDENT_NAME_HEADER:
            sheet.set_value(1, NAME_COLUMN, STUDENT_NAME_HEADER)

        sheet.set_row_format(1, bold=True, background=HEADER_BACKGROUND)
        if sheet.frozen_rows < 1:
            sheet.frozen_rows = 1

    def ensure_headers(self, sheet: Sheet) -> StatisticColumns:
        """Repair identity headers and migrate legacy sheets missing statistic columns."""
        self.ensure_identity_headers(sheet)
        return self.ensure_statistic_columns(sheet)

    def ensure_statistic_columns(self, sheet: Sheet) -> StatisticColumns:
        width = self._header_width(sheet)
        headers = sheet.get_row_values(1, width)

        attended_col = -1
        percentage_col = -1
        for i, cell in enumerate(headers):
            text = cell.as_text()
            if text == ATTENDED_DAYS_HEADER and attended_col == -1:
                attended_col = i + 1
            elif text == PERCENTAGE_HEADER and percentage_col == -1:
                percentage_col = i + 1

        if attended_col == -1:
            width += 1
            attended_col = width
            sheet.set_value(1, attended_col, ATTENDED_DAYS_HEADER)
            self._style_header_cell(sheet, attended_col)

        if percentage_col == -1:
            width += 1
            percentage_col = width
            sheet.set_value(1, percentage_col, PERCENTAGE_HEADER)
            self._style_header_cell(sheet, percentage_col)

        return StatisticColumns(attended_days=attended_col, percentage=percentage_col)

    def find_or_create_date_column(self, sheet: Sheet, day_key: str) -> int:
        width = self._header_width(sheet)
        headers = sheet.get_row_values(1, width)

        # Exact text match first; date-typed cells are compared only in the second pass.
        for i, cell in enumerate(headers):
            if not cell.is_empty and not cell.is_date and cell.as_text() == day_key:
                return i + 1

        for i, cell in enumerate(headers):
            if self._normalizer.render_header(cell) == day_key:
                return i + 1

        column = width + 1
        sheet.set_value(1, column, day_key)
        return column
