from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .commands import error

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"ok": True, "storage": container.storage_backend.value})

    @app.route("/", methods=["POST"], endpoint="device_command")
    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance")
    def api_attendance():
        """Device endpoint: always answers 200 with a result envelope."""
        try:
            data = request.get_json(silent=True)
            return jsonify(container.dispatcher.handle(data)), 200
        except Exception as e:
            logger.exception("Unhandled error in attendance endpoint")
            return jsonify(error(str(e))), 200

    @app.route("/api/sheets/<sheet_name>", methods=["GET"], endpoint="api_sheet_rows")
    def api_sheet_rows(sheet_name: str):
        try:
            rows = container.ledger_service.sheet_rows(sheet_name)
            return jsonify({"result": "success", "sheet_name": sheet_name, "rows": rows}), 200
        except ValidationError as e:
            return jsonify(error(str(e))), 404
        except Exception as e:
            logger.exception("Failed to read sheet %s", sheet_name)
            return jsonify(error(str(e))), 500
