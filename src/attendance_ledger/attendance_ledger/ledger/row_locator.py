from __future__ import annotations

from typing import Any, Optional

from ..sheets.model import Cell, Sheet
from .header_index import ID_COLUMN


class RowLocator:
    @staticmethod
    def find_student_row(sheet: Sheet, student_id: Any) -> Optional[int]:
        """Row index of the first data row holding ``student_id``, or None.

        Ids compare by their text form, so ``7`` and ``"7"`` match.
        """

        last_row = sheet.last_row
        if last_row <= 1:
            return None

        wanted = Cell.of(student_id).as_text()
        ids = sheet.get_column_values(ID_COLUMN, 2, last_row - 1)
        for i, cell in enumerate(ids):
            if not cell.is_empty and cell.as_text() == wanted:
                return i + 2
        return None
