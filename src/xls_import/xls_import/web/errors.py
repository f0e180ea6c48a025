from __future__ import annotations

from flask import Flask, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound, RequestEntityTooLarge

from ..common.validators import too_large_message
from ..core.constants import MAX_UPLOAD_BYTES


def register(app: Flask) -> None:
    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e: MethodNotAllowed):
        if request.path.startswith("/api/"):
            return jsonify({"ok": False, "error": "Method not allowed"}), 405
        return e

    @app.errorhandler(NotFound)
    def not_found(e: NotFound):
        if request.path.startswith("/api/"):
            return jsonify({"ok": False, "error": "Not found"}), 404
        return e

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e: RequestEntityTooLarge):
        # Raised while the body is still streaming in, before the upload is buffered.
        if not request.path.startswith("/api/"):
            return e
        max_bytes = int(app.config.get("MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES))
        return jsonify({"ok": False, "error": too_large_message(max_bytes)}), 400
