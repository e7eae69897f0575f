from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .academic_calendar.controller import register as register_calendar
from .academic_calendar.loader import load_calendar_file
from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_CALENDAR_PATH, DEFAULT_FLUSH_INTERVAL_SECONDS
from .database.bootstrap import apply_schema, missing_tables

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Pass a prebuilt ``container`` to skip settings/DB wiring (tests)."""
    app = Flask(__name__)

    if container is None:
        container = _container_from_settings(app)

    app.extensions["geo_attendance"] = container

    register_attendance(app, container)
    register_calendar(app, container)

    if container.flusher is not None:
        container.flusher.start()
        atexit.register(container.flusher.stop)

    return app


def _container_from_settings(app: Flask) -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        missing = missing_tables(db_config)
        if missing:
            logger.warning("schema applied but tables are still missing: %s", ", ".join(missing))
        else:
            logger.info("schema ready")

    calendar = load_calendar_file(getattr(settings, "CALENDAR_PATH", DEFAULT_CALENDAR_PATH))

    return build_container(
        db_config=db_config,
        calendar=calendar,
        flush_interval_seconds=float(getattr(settings, "FLUSH_INTERVAL_SECONDS", DEFAULT_FLUSH_INTERVAL_SECONDS)),
    )
