from __future__ import annotations

import logging
from typing import List

from ..core.constants import ATTENDED_DAYS_HEADER, NOT_APPLICABLE, PERCENTAGE_HEADER, PERCENTAGE_NUMBER_FORMAT
from ..sheets.model import Sheet
from .counting.base import CountingStrategy
from .counting.non_empty_strategy import NonEmptyCounting
from .date_normalizer import DateNormalizer
from .header_index import HeaderIndex
from .model import StatisticColumns

logger = logging.getLogger(__name__)

FIRST_DATA_COLUMN = 3


def format_percentage(attended: int, total: int) -> str:
    return f"{attended / total * 100:.1f}%"


class StatisticsEngine:
    def __init__(
        self,
        headers: HeaderIndex,
        counting: CountingStrategy | None = None,
        normalizer: DateNormalizer | None = None,
    ):
        self._headers = headers
        self._counting = counting or NonEmptyCounting()
        self._normalizer = normalizer or DateNormalizer()

    def date_columns(self, sheet: Sheet, stats: StatisticColumns) -> List[int]:
        """Header columns that hold attendance for a day.

        Stray annotation columns are left out so they never count towards the total.
        """

        headers = sheet.get_row_values(1, sheet.last_column)
        columns = []
        for i in range(FIRST_DATA_COLUMN - 1, len(headers)):
            column = i + 1
            if column in (stats.attended_days, stats.percentage):
                continue
            header = headers[i]
            if header.as_text() in (ATTENDED_DAYS_HEADER, PERCENTAGE_HEADER):
                continue
            if self._normalizer.is_date_header(header):
                columns.append(column)
        return columns

    def recompute(self, sheet: Sheet) -> None:
        last_row = sheet.last_row
        if last_row <= 1:
            return

        stats = self._headers.ensure_statistic_columns(sheet)
        date_columns = self.date_columns(sheet, stats)
        total = len(date_columns)

        for row in range(2, last_row + 1):
            attended = sum(1 for col in date_columns if self._counting.counts(sheet.get_value(row, col)))
            sheet.set_value(row, stats.attended_days, attended)

            if total > 0:
                sheet.set_value(row, stats.percentage, format_percentage(attended, total))
                sheet.set_cell_format(row, stats.percentage, number_format=PERCENTAGE_NUMBER_FORMAT)
            else:
                sheet.set_value(row, stats.percentage, NOT_APPLICABLE)

        sheet.auto_resize_columns(stats.attended_days, 1)
        sheet.auto_resize_columns(stats.percentage, 1)

        logger.info("Updated attendance statistics for %d students on sheet %s", last_row - 1, sheet.name)
