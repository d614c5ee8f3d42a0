from __future__ import annotations

from ...sheets.model import Cell
from .base import CountingStrategy


class NonEmptyCounting(CountingStrategy):
    """Any marker counts, including clock times."""

    def counts(self, cell: Cell) -> bool:
        return not cell.is_empty and cell.as_text() != ""
