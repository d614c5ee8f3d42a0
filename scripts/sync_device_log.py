"""Upload the unsynced lines of a device attendance log as one batch.

Usage: python scripts/sync_device_log.py attendance.csv [--sheet Attendance]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_ledger.attendance_ledger import configure_logging
from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.core.constants import DEFAULT_SHEET_NAME
from src.attendance_ledger.attendance_ledger.ledger.device_log import mark_synced, parse_device_log
from src.attendance_ledger.attendance_ledger.settings import load_settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("log_file", type=Path)
    parser.add_argument("--sheet", default=DEFAULT_SHEET_NAME)
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    log = parse_device_log(args.log_file.read_text(encoding="utf-8"))
    pending = log.unsynced
    if not pending:
        print("No unsynced records found. Nothing to upload.")
        return 0

    container = build_container(
        db_config=settings.db_config,
        storage_backend=settings.storage_backend,
        marker_mode=settings.marker_mode,
        counting_policy=settings.counting_policy,
        id_sort=settings.id_sort,
    )
    response = container.dispatcher.handle(
        {
            "command": "batch_attendance",
            "sheet_name": args.sheet,
            "records": [e.to_record() for e in pending],
        }
    )
    print(f"{response['result']}: {response['message']}")

    # Rows stay unsynced unless the batch itself went through.
    if response["result"] != "success":
        return 1

    args.log_file.write_text(mark_synced(log, pending), encoding="utf-8")
    print(f"Marked {len(pending)} records as synced")
    return 0


if __name__ == "__main__":
    sys.exit(main())
