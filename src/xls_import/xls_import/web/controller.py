from __future__ import annotations

from flask import Flask, render_template

from ..container import Container
from ..core.constants import ALLOWED_SPREADSHEET_MIME_TYPES


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        year = int(app.config.get("EXPORT_YEAR", 2026))
        return render_template(
            "index.html",
            year=year,
            accepted_types=",".join((".xls", ".xlsx", *ALLOWED_SPREADSHEET_MIME_TYPES)),
            max_upload_mb=container.import_service.max_upload_bytes // (1024 * 1024),
        )
