from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .employees.controller import register as register_employees
from .sheets.controller import register as register_sheets

logger = logging.getLogger(__name__)


def _load_settings():
    load_dotenv(override=False)
    settings_module = get_settings_module()
    return settings_module, importlib.import_module(settings_module)


def create_app(container: Optional[Container] = None) -> Flask:
    settings_module, settings = _load_settings()

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    sheets_config = getattr(settings, "SHEETS_CONFIG")
    logger.info(
        "settings=%s source=%s tolerance=%s",
        settings_module,
        sheets_config.get("url") or "<not configured>",
        sheets_config.get("late_tolerance_field"),
    )

    container = container or build_container(sheets_config=sheets_config)

    register_sheets(app, container)
    register_attendance(app, container)
    register_employees(app, container)

    return app


def run() -> None:
    _, settings = _load_settings()
    app = create_app()
    app.run(
        host=getattr(settings, "HOST", "127.0.0.1"),
        port=int(getattr(settings, "PORT", 3000)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )


if __name__ == "__main__":
    run()
