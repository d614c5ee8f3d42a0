from __future__ import annotations

import math
from typing import Any, Dict, Optional, Sequence, Tuple

import mysql.connector

from ..core.enums import CellKind
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Cell, CellFormat, Sheet
from .repository import SheetRepository


def _parse_number(text: str) -> Any:
    try:
        return int(text)
    except ValueError:
        return float(text)


def cell_to_params(sheet_id: int, row: int, column: int, cell: Cell, fmt: Optional[CellFormat]) -> Tuple[Any, ...]:
    """Map a cell onto ``ledger_cells`` columns.

    Numbers keep their exact text form in ``text_value``; ``number_value`` is a
    DOUBLE copy for querying and stays NULL for non-finite values.
    """
    fmt = fmt or CellFormat()
    text_value = number_value = date_value = None
    if cell.kind == CellKind.TEXT:
        text_value = cell.value
    elif cell.kind == CellKind.NUMBER:
        text_value = cell.as_text()
        number = float(cell.value)
        number_value = number if math.isfinite(number) else None
    elif cell.kind == CellKind.DATE:
        date_value = cell.value
    return (
        sheet_id,
        row,
        column,
        cell.kind.value,
        text_value,
        number_value,
        date_value,
        1 if fmt.bold else 0,
        fmt.background,
        fmt.number_format,
    )


def row_to_cell(r: Dict[str, Any]) -> Tuple[Cell, Optional[CellFormat]]:
    kind = CellKind(r["kind"])
    if kind == CellKind.TEXT:
        cell = Cell.text(r.get("text_value") or "")
    elif kind == CellKind.NUMBER:
        if r.get("text_value"):
            cell = Cell.of(_parse_number(r["text_value"]))
        else:
            number = float(r["number_value"])
            cell = Cell.of(int(number) if number.is_integer() else number)
    elif kind == CellKind.DATE:
        cell = Cell.of(normalize_mysql_date(r["date_value"]))
    else:
        cell = Cell.empty()

    fmt = None
    if r.get("is_bold") or r.get("background") or r.get("number_format"):
        fmt = CellFormat(
            bold=bool(r.get("is_bold")),
            background=r.get("background"),
            number_format=r.get("number_format"),
        )
    return cell, fmt


class MySQLSheetStore(SheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_name(self, name: str) -> Optional[Sheet]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT sheet_id, sheet_name, frozen_rows FROM ledger_sheets WHERE sheet_name=%s",
                    (name,),
                )
                s = fetchone(cur)
                if not s:
                    return None

                sheet = Sheet(str(s["sheet_name"]), sheet_id=int(s["sheet_id"]), frozen_rows=int(s["frozen_rows"]))

                cur.execute(
                    """
                    SELECT row_idx, col_idx, kind, text_value, number_value, date_value,
                           is_bold, background, number_format
                    FROM ledger_cells
                    WHERE sheet_id=%s
                    """,
                    (sheet.sheet_id,),
                )
                for r in fetchall(cur):
                    cell, fmt = row_to_cell(r)
                    sheet.load_cell(int(r["row_idx"]), int(r["col_idx"]), cell, fmt)

                cur.execute(
                    "SELECT row_idx, is_bold, background FROM ledger_row_formats WHERE sheet_id=%s",
                    (sheet.sheet_id,),
                )
                for r in fetchall(cur):
                    sheet.set_row_format(int(r["row_idx"]), bold=bool(r["is_bold"]), background=r.get("background"))

                cur.execute(
                    "SELECT col_idx, width FROM ledger_column_widths WHERE sheet_id=%s",
                    (sheet.sheet_id,),
                )
                for r in fetchall(cur):
                    sheet.column_widths[int(r["col_idx"])] = int(r["width"])

                return sheet
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to load sheet {name}: {e}") from e

    def create(self, name: str) -> Sheet:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("INSERT INTO ledger_sheets(sheet_name, frozen_rows) VALUES(%s, 0)", (name,))
                return Sheet(name, sheet_id=int(cur.lastrowid))
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to create sheet {name}: {e}") from e

    def save(self, sheet: Sheet) -> None:
        if sheet.sheet_id is None:
            raise StorageError(f"Sheet {sheet.name} was not created through this store")

        cell_params = [
            cell_to_params(sheet.sheet_id, row, column, cell, fmt)
            for row, column, cell, fmt in sheet.iter_cells()
        ]
        row_format_params = [
            (sheet.sheet_id, row, 1 if fmt.bold else 0, fmt.background)
            for row, fmt in sheet.iter_row_formats()
        ]
        width_params = [(sheet.sheet_id, col, width) for col, width in sorted(sheet.column_widths.items())]

        try:
            with db_cursor(self._conn_factory, dictionary=False) as (_, cur):
                cur.execute(
                    "UPDATE ledger_sheets SET frozen_rows=%s WHERE sheet_id=%s",
                    (sheet.frozen_rows, sheet.sheet_id),
                )
                cur.execute("DELETE FROM ledger_cells WHERE sheet_id=%s", (sheet.sheet_id,))
                cur.execute("DELETE FROM ledger_row_formats WHERE sheet_id=%s", (sheet.sheet_id,))
                cur.execute("DELETE FROM ledger_column_widths WHERE sheet_id=%s", (sheet.sheet_id,))
                if cell_params:
                    cur.executemany(
                        """
                        INSERT INTO ledger_cells(
                            sheet_id, row_idx, col_idx, kind, text_value, number_value, date_value,
                            is_bold, background, number_format
                        )
                        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                        """,
                        cell_params,
                    )
                if row_format_params:
                    cur.executemany(
                        "INSERT INTO ledger_row_formats(sheet_id, row_idx, is_bold, background) VALUES(%s,%s,%s,%s)",
                        row_format_params,
                    )
                if width_params:
                    cur.executemany(
                        "INSERT INTO ledger_column_widths(sheet_id, col_idx, width) VALUES(%s,%s,%s)",
                        width_params,
                    )
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to save sheet {sheet.name}: {e}") from e

    def list_names(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT sheet_name FROM ledger_sheets ORDER BY sheet_name")
            return [str(r["sheet_name"]) for r in fetchall(cur)]
