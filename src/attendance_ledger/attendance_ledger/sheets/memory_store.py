from __future__ import annotations

import copy
from typing import Dict, Optional, Sequence

from ..core.exceptions import StorageError
from .model import Sheet
from .repository import SheetRepository


class InMemorySheetStore(SheetRepository):
    """Dict-backed store.

    Sheets are handed out as copies so a request only changes stored state
    when it calls ``save``.
    """

    def __init__(self):
        self._sheets: Dict[str, Sheet] = {}

    def get_by_name(self, name: str) -> Optional[Sheet]:
        sheet = self._sheets.get(name)
        return copy.deepcopy(sheet) if sheet is not None else None

    def create(self, name: str) -> Sheet:
        if name in self._sheets:
            raise StorageError(f"Sheet already exists: {name}")
        sheet = Sheet(name, sheet_id=len(self._sheets) + 1)
        self._sheets[name] = copy.deepcopy(sheet)
        return sheet

    def save(self, sheet: Sheet) -> None:
        if sheet.name not in self._sheets:
            raise StorageError(f"Unknown sheet: {sheet.name}")
        self._sheets[sheet.name] = copy.deepcopy(sheet)

    def list_names(self) -> Sequence[str]:
        return list(self._sheets)
