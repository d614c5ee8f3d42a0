from __future__ import annotations

from ...core.constants import DEFAULT_MARKER
from ...sheets.model import Cell
from .base import CountingStrategy


class PresentOnlyCounting(CountingStrategy):
    """Only the status word ``present`` counts (case-insensitive)."""

    def counts(self, cell: Cell) -> bool:
        return cell.as_text().strip().lower() == DEFAULT_MARKER
