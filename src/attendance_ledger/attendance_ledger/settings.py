from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from types import ModuleType
from typing import Optional

from config import get_settings_module

from .core.enums import CountingPolicy, IdSortMode, MarkerMode, StorageBackend


@dataclass(frozen=True)
class LedgerSettings:
    """Typed view over the active ``config.<env>`` module."""

    module_name: str
    secret_key: str
    db_config: dict = field(default_factory=dict)
    debug: bool = False
    auto_init_db: bool = False
    storage_backend: StorageBackend = StorageBackend.MYSQL
    marker_mode: MarkerMode = MarkerMode.TIME
    counting_policy: Optional[CountingPolicy] = None
    id_sort: IdSortMode = IdSortMode.NUMERIC
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    @classmethod
    def from_module(cls, module: ModuleType) -> "LedgerSettings":
        policy = getattr(module, "COUNTING_POLICY", None)
        return cls(
            module_name=module.__name__,
            secret_key=getattr(module, "SECRET_KEY"),
            db_config=dict(getattr(module, "DB_CONFIG", {})),
            debug=bool(getattr(module, "DEBUG", False)),
            auto_init_db=bool(getattr(module, "AUTO_INIT_DB", False)),
            storage_backend=StorageBackend(str(getattr(module, "STORAGE_BACKEND", "mysql")).lower()),
            marker_mode=MarkerMode(str(getattr(module, "MARKER_MODE", "time")).lower()),
            counting_policy=CountingPolicy(str(policy).lower()) if policy else None,
            id_sort=IdSortMode(str(getattr(module, "ID_SORT", "numeric")).lower()),
            log_level=str(getattr(module, "LOG_LEVEL", "INFO")).upper(),
            host=str(getattr(module, "HOST", "0.0.0.0")),
            port=int(getattr(module, "PORT", 5000)),
        )


def load_settings(module_name: Optional[str] = None) -> LedgerSettings:
    return LedgerSettings.from_module(importlib.import_module(module_name or get_settings_module()))
