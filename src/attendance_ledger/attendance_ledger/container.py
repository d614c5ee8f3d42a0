from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.enums import CountingPolicy, IdSortMode, MarkerMode, StorageBackend
from .database.connection import DBConfig, DatabaseConnection
from .ledger.commands import CommandDispatcher
from .ledger.counting.factory import CountingStrategyFactory
from .ledger.date_normalizer import DateNormalizer
from .ledger.header_index import HeaderIndex
from .ledger.record_writer import RecordWriter
from .ledger.row_locator import RowLocator
from .ledger.service import AttendanceLedgerService
from .ledger.sorter import Sorter
from .ledger.statistics import StatisticsEngine
from .sheets.memory_store import InMemorySheetStore
from .sheets.mysql_sheet_store import MySQLSheetStore
from .sheets.repository import SheetRepository


@dataclass(frozen=True)
class Container:
    storage_backend: StorageBackend
    sheets: SheetRepository

    header_index: HeaderIndex
    record_writer: RecordWriter
    statistics: StatisticsEngine
    sorter: Sorter

    ledger_service: AttendanceLedgerService
    dispatcher: CommandDispatcher


def build_sheet_store(backend: StorageBackend, *, db_config: Optional[dict] = None) -> SheetRepository:
    if backend == StorageBackend.MEMORY:
        return InMemorySheetStore()
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
    return MySQLSheetStore(conn)


def build_container(
    *,
    db_config: Optional[dict] = None,
    storage_backend: StorageBackend = StorageBackend.MYSQL,
    marker_mode: MarkerMode = MarkerMode.TIME,
    counting_policy: Optional[CountingPolicy] = None,
    id_sort: IdSortMode = IdSortMode.NUMERIC,
    sheets: Optional[SheetRepository] = None,
) -> Container:
    sheets = sheets or build_sheet_store(storage_backend, db_config=db_config)

    normalizer = DateNormalizer()
    header_index = HeaderIndex(normalizer)
    record_writer = RecordWriter(header_index, RowLocator(), normalizer, marker_mode=marker_mode)
    statistics = StatisticsEngine(
        header_index,
        CountingStrategyFactory(policy=counting_policy).for_mode(marker_mode),
        normalizer,
    )
    sorter = Sorter(id_sort)

    ledger_service = AttendanceLedgerService(
        sheets,
        header_index,
        record_writer,
        statistics,
        sorter,
        marker_mode=marker_mode,
    )
    dispatcher = CommandDispatcher(ledger_service)

    return Container(
        storage_backend=storage_backend,
        sheets=sheets,
        header_index=header_index,
        record_writer=record_writer,
        statistics=statistics,
        sorter=sorter,
        ledger_service=ledger_service,
        dispatcher=dispatcher,
    )
