"""Attendance Ledger package.

Records attendance events sent by a badge/sensor reader into one sheet per
class, with a date column per day and per-student statistics. Organized by
feature modules (sheets, ledger, ...) with a thin Flask controller layer.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .container import build_container
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, list_tables
from .ledger.controller import register as register_ledger
from .settings import LedgerSettings, load_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[LedgerSettings] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.config["LEDGER_SETTINGS"] = settings

    db_config = settings.db_config
    if settings.debug:
        print(
            "[attendance-ledger] settings=", settings.module_name,
            " storage=", settings.storage_backend.value,
            " marker_mode=", settings.marker_mode.value,
        )

    if settings.storage_backend == StorageBackend.MYSQL and settings.auto_init_db:
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        if settings.debug:
            print(f"[attendance-ledger] schema ready (tables={len(list_tables(db_config))})")

    container = build_container(
        db_config=db_config,
        storage_backend=settings.storage_backend,
        marker_mode=settings.marker_mode,
        counting_policy=settings.counting_policy,
        id_sort=settings.id_sort,
    )
    app.extensions["attendance_ledger"] = container

    register_ledger(app, container)

    return app
