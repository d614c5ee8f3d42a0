from __future__ import annotations

from abc import ABC, abstractmethod

from ...sheets.model import Cell


class CountingStrategy(ABC):
    """Strategy Pattern: decide whether one date-column cell counts as attended."""

    @abstractmethod
    def counts(self, cell: Cell) -> bool:
        raise NotImplementedError
