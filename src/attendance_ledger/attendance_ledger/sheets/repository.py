from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Sheet


class SheetRepository(Protocol):
    def get_by_name(self, name: str) -> Optional[Sheet]:
        raise NotImplementedError

    def create(self, name: str) -> Sheet:
        """Register an empty sheet under ``name`` and return it."""

        raise NotImplementedError

    def save(self, sheet: Sheet) -> None:
        raise NotImplementedError

    def list_names(self) -> Sequence[str]:
        raise NotImplementedError
