from __future__ import annotations

import logging

from flask import Flask, Response, jsonify

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/exports/year<int:year>.ts", methods=["GET"], endpoint="api_export_year")
    def api_export_year(year: int):
        try:
            doc = container.export_service.export_year(year)
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        except Exception as e:
            logger.exception("Error generating TypeScript export")
            return jsonify({"ok": False, "error": "Internal server error", "details": str(e)}), 500

        resp = Response(doc.content, status=200, content_type=doc.mimetype)
        resp.headers["Content-Disposition"] = f'attachment; filename="{doc.filename}"'
        return resp
