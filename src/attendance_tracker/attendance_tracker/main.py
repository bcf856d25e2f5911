from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.exceptions import StorageError
from .dashboard.controller import register as register_dashboard
from .database.connection import DBConfig
from .system.controller import register as register_system
from .system.errors import register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["EXPOSE_ERROR_DETAILS"] = bool(getattr(settings, "EXPOSE_ERROR_DETAILS", app.config["DEBUG"]))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())
        container = build_container(db_config=db_config)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        try:
            container.attendance_service.ensure_schema()
        except StorageError as e:
            # Keep serving: /api/health reports the outage and /api/init can retry.
            logger.error("Schema initialization at startup failed: %s", e.details or e)

    register_error_handlers(app)
    register_system(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    app.extensions["attendance_container"] = container
    return app
