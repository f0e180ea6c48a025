from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..container import Container
from ..core.constants import IMPORT_KEY_HEADER
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/import-xls", methods=["POST"], endpoint="api_import_xls")
    def api_import_xls():
        try:
            container.import_service.authorize(request.headers.get(IMPORT_KEY_HEADER))
        except AuthenticationError as e:
            return jsonify({"ok": False, "error": str(e)}), 401

        try:
            upload = request.files.get("file")
            if upload is None or not upload.filename:
                return jsonify({"ok": False, "error": "No file uploaded"}), 400

            record = container.import_service.import_upload(
                payload=upload.read(),
                filename=upload.filename,
                mimetype=upload.mimetype,
            )
            return jsonify({"ok": True, "importId": record.import_id, "stats": record.stats.as_dict()}), 200
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Import error")
            return jsonify({"ok": False, "error": "Internal server error", "details": str(e)}), 500
