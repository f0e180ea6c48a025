from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import (
    DEFAULT_DATABASE_NAME,
    DEFAULT_EXPORT_YEAR,
    MAX_UPLOAD_BYTES,
    MULTIPART_OVERHEAD_BYTES,
)
from .core.exceptions import ConfigurationError
from .database.bootstrap import ensure_indexes
from .exports.controller import register as register_exports
from .imports.controller import register as register_imports
from .reports.controller import register as register_reports
from .web.controller import register as register_web
from .web.errors import register as register_errors

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["EXPORT_YEAR"] = int(getattr(settings, "EXPORT_YEAR", DEFAULT_EXPORT_YEAR))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        mongo_uri = getattr(settings, "MONGODB_URI", None)
        if not mongo_uri:
            raise ConfigurationError("Please define the MONGODB_URI environment variable")
        database = getattr(settings, "MONGODB_DB", DEFAULT_DATABASE_NAME)
        logger.info("settings=%s db=%s", settings_module, database)

        container = build_container(
            mongo_config={"uri": mongo_uri, "database": database},
            import_key=getattr(settings, "IMPORT_KEY", None),
            max_upload_bytes=int(getattr(settings, "MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES)),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_indexes(container.conn)

    max_upload_bytes = container.import_service.max_upload_bytes
    app.config["MAX_UPLOAD_BYTES"] = max_upload_bytes
    app.config["MAX_CONTENT_LENGTH"] = max_upload_bytes + MULTIPART_OVERHEAD_BYTES

    register_imports(app, container)
    register_reports(app, container)
    register_exports(app, container)
    register_web(app, container)
    register_errors(app)

    return app
