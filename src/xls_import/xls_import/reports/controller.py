from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/year/<int:year>", methods=["GET"], endpoint="api_year")
    def api_year(year: int):
        try:
            return jsonify(container.year_report_service.build_year_report(year)), 200
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        except Exception as e:
            logger.exception("Error fetching year data")
            return jsonify({"ok": False, "error": "Internal server error", "details": str(e)}), 500
