from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_AUTO_SIGNOUT_TIME, MAX_UPLOAD_BYTES
from .core.enums import VisitStatus
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .errors import register_error_handlers
from .kiosk.controller import register as register_kiosk
from .visitors.controller import register as register_visitors

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    VisitStatus.SCHEDULED: "Scheduled",
    VisitStatus.CHECKED_IN: "Checked In",
    VisitStatus.CHECKED_OUT: "Checked Out",
}


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ADMIN_PASSCODE"] = getattr(settings, "ADMIN_PASSCODE", "")
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", MAX_UPLOAD_BYTES))
    app.jinja_env.globals["status_label"] = lambda v: STATUS_LABELS[v.status]

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings.__name__, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            auto_signout_time=getattr(settings, "AUTO_SIGNOUT_TIME", DEFAULT_AUTO_SIGNOUT_TIME),
        )

    register_error_handlers(app)
    register_visitors(app, container)
    register_dashboard(app, container)
    register_kiosk(app, container)

    return app
