from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, List, Tuple

from ..core.enums import CellKind, IdSortMode
from ..sheets.model import Cell, Sheet

logger = logging.getLogger(__name__)


def numeric_id_key(cell: Cell) -> Tuple[int, Any]:
    """Numeric ids first (by value), then other ids as text, empty ids last."""
    if cell.is_empty:
        return (2, "")
    if cell.kind == CellKind.NUMBER:
        number = Decimal(str(cell.value))
        return (0, number) if number.is_finite() else (1, cell.as_text())
    text = cell.as_text().strip()
    try:
        number = Decimal(text)
    except InvalidOperation:
        return (1, text)
    if not number.is_finite():
        return (1, text)
    return (0, number)


def text_id_key(cell: Cell) -> Tuple[int, Any]:
    if cell.is_empty:
        return (1, "")
    return (0, cell.as_text())


class Sorter:
    def __init__(self, mode: IdSortMode = IdSortMode.NUMERIC):
        self._key = numeric_id_key if mode == IdSortMode.NUMERIC else text_id_key

    def sort_by_student_id(self, sheet: Sheet) -> None:
        last_row = sheet.last_row
        if last_row <= 2:
            return

        def row_key(values: List[Cell]):
            return self._key(values[0])

        sheet.sort_range(2, last_row - 1, sheet.last_column, row_key)
        logger.debug("Sheet %s sorted by Student ID", sheet.name)
