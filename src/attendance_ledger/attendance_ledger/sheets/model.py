from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..core.enums import CellKind


@dataclass(frozen=True)
class Cell:
    """Tagged cell value: Text, Number, Date or Empty.

    Every raw value entering a sheet goes through :meth:`Cell.of`, so the rest
    of the code never has to guess what a stored value is.
    """

    kind: CellKind
    value: Any = None

    @classmethod
    def empty(cls) -> "Cell":
        return _EMPTY

    @classmethod
    def text(cls, value: str) -> "Cell":
        return cls(CellKind.TEXT, value) if value != "" else _EMPTY

    @classmethod
    def of(cls, raw: Any) -> "Cell":
        if isinstance(raw, Cell):
            return raw
        if raw is None:
            return _EMPTY
        if isinstance(raw, bool):
            return cls(CellKind.TEXT, "TRUE" if raw else "FALSE")
        if isinstance(raw, datetime):
            return cls(CellKind.DATE, raw.date())
        if isinstance(raw, date):
            return cls(CellKind.DATE, raw)
        if isinstance(raw, (int, float, Decimal)):
            return cls(CellKind.NUMBER, raw)
        return cls.text(str(raw))

    @property
    def is_empty(self) -> bool:
        return self.kind == CellKind.EMPTY

    @property
    def is_date(self) -> bool:
        return self.kind == CellKind.DATE

    def as_text(self) -> str:
        if self.kind == CellKind.EMPTY:
            return ""
        if self.kind == CellKind.DATE:
            return self.value.isoformat()
        if self.kind == CellKind.NUMBER:
            if isinstance(self.value, float) and self.value.is_integer():
                return str(int(self.value))
            return str(self.value)
        return str(self.value)

    def to_json(self) -> Any:
        if self.kind == CellKind.EMPTY:
            return ""
        if self.kind == CellKind.DATE:
            return self.value.isoformat()
        if isinstance(self.value, Decimal):
            return float(self.value)
        return self.value


_EMPTY = Cell(CellKind.EMPTY)


@dataclass(frozen=True)
class CellFormat:
    bold: bool = False
    background: Optional[str] = None
    number_format: Optional[str] = None

    def merged(self, override: "CellFormat") -> "CellFormat":
        return CellFormat(
            bold=self.bold or override.bold,
            background=override.background or self.background,
            number_format=override.number_format or self.number_format,
        )


class Sheet:
    """One class/group table addressed with 1-based (row, column) indexes.

    Row 1 is the header row. ``last_row``/``last_column`` report the highest
    index holding a non-empty cell, the same way a spreadsheet does.
    """

    def __init__(self, name: str, *, sheet_id: Optional[int] = None, frozen_rows: int = 0):
        self.name = name
        self.sheet_id = sheet_id
        self.frozen_rows = int(frozen_rows)
        self.column_widths: Dict[int, int] = {}
        self._cells: Dict[Tuple[int, int], Cell] = {}
        self._formats: Dict[Tuple[int, int], CellFormat] = {}
        self._row_formats: Dict[int, CellFormat] = {}

    @staticmethod
    def _check(row: int, column: int) -> None:
        if row < 1 or column < 1:
            raise ValueError(f"Invalid cell position ({row}, {column})")

    @property
    def last_row(self) -> int:
        return max((r for (r, _), cell in self._cells.items() if not cell.is_empty), default=0)

    @property
    def last_column(self) -> int:
        return max((c for (_, c), cell in self._cells.items() if not cell.is_empty), default=0)

    def get_value(self, row: int, column: int) -> Cell:
        self._check(row, column)
        return self._cells.get((row, column), _EMPTY)

    def set_value(self, row: int, column: int, value: Any) -> None:
        self._check(row, column)
        cell = Cell.of(value)
        if cell.is_empty:
            self._cells.pop((row, column), None)
        else:
            self._cells[(row, column)] = cell

    def get_row_values(self, row: int, width: int) -> List[Cell]:
        return [self.get_value(row, c) for c in range(1, width + 1)]

    def get_column_values(self, column: int, start_row: int, count: int) -> List[Cell]:
        return [self.get_value(r, column) for r in range(start_row, start_row + count)]

    # ---- formatting -------------------------------------------------------

    def set_cell_format(
        self,
        row: int,
        column: int,
        *,
        bold: Optional[bool] = None,
        background: Optional[str] = None,
        number_format: Optional[str] = None,
    ) -> None:
        self._check(row, column)
        current = self._formats.get((row, column), CellFormat())
        changes: Dict[str, Any] = {}
        if bold is not None:
            changes["bold"] = bool(bold)
        if background is not None:
            changes["background"] = background
        if number_format is not None:
            changes["number_format"] = number_format
        self._formats[(row, column)] = replace(current, **changes)

    def set_row_format(self, row: int, *, bold: Optional[bool] = None, background: Optional[str] = None) -> None:
        self._check(row, 1)
        current = self._row_formats.get(row, CellFormat())
        changes: Dict[str, Any] = {}
        if bold is not None:
            changes["bold"] = bool(bold)
        if background is not None:
            changes["background"] = background
        self._row_formats[row] = replace(current, **changes)

    def row_format(self, row: int) -> CellFormat:
        return self._row_formats.get(row, CellFormat())

    def cell_format(self, row: int, column: int) -> CellFormat:
        """Effective format: row format overlaid with the cell's own format."""
        return self.row_format(row).merged(self._formats.get((row, column), CellFormat()))

    def auto_resize_columns(self, start_column: int, count: int) -> None:
        last_row = self.last_row
        for column in range(start_column, start_column + count):
            texts = [self.get_value(r, column).as_text() for r in range(1, last_row + 1)]
            self.column_widths[column] = max([len(t) for t in texts] + [1])

    # ---- structural -------------------------------------------------------

    def sort_range(self, start_row: int, num_rows: int, num_columns: int, key: Callable[[List[Cell]], Any]) -> None:
        """Stable in-place sort of a row block; cell formats travel with their rows."""

        rows = []
        for r in range(start_row, start_row + num_rows):
            values = [self.get_value(r, c) for c in range(1, num_columns + 1)]
            formats = [self._formats.get((r, c)) for c in range(1, num_columns + 1)]
            rows.append((values, formats))

        rows.sort(key=lambda item: key(item[0]))

        for offset, (values, formats) in enumerate(rows):
            r = start_row + offset
            for c in range(1, num_columns + 1):
                self.set_value(r, c, values[c - 1])
                fmt = formats[c - 1]
                if fmt is None:
                    self._formats.pop((r, c), None)
                else:
                    self._formats[(r, c)] = fmt

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell, Optional[CellFormat]]]:
        """Yield every stored cell or formatted position in row-major order."""
        positions = sorted(set(self._cells) | set(self._formats))
        for row, column in positions:
            yield row, column, self._cells.get((row, column), _EMPTY), self._formats.get((row, column))

    def iter_row_formats(self) -> Iterator[Tuple[int, CellFormat]]:
        for row in sorted(self._row_formats):
            yield row, self._row_formats[row]

    def load_cell(self, row: int, column: int, cell: Cell, fmt: Optional[CellFormat] = None) -> None:
        self._check(row, column)
        if not cell.is_empty:
            self._cells[(row, column)] = cell
        if fmt is not None:
            self._formats[(row, column)] = fmt

    def to_rows(self) -> List[List[Any]]:
        width = self.last_column
        return [[cell.to_json() for cell in self.get_row_values(r, width)] for r in range(1, self.last_row + 1)]
