from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.responses import json_error
from .container import build_container
from .entries.controller import register as register_entries
from .pay.controller import register as register_pay
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    app.config["DEFAULT_HOURLY_RATE"] = float(getattr(settings, "DEFAULT_HOURLY_RATE", 0.0))
    app.config["ENTRIES_CSV_PATH"] = getattr(settings, "ENTRIES_CSV_PATH", "")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s entries=%s",
        settings_module,
        app.config["ENTRIES_CSV_PATH"] or "<memory>",
    )

    container = build_container(
        entries_csv_path=app.config["ENTRIES_CSV_PATH"],
        default_hourly_rate=app.config["DEFAULT_HOURLY_RATE"],
    )

    register_pay(app, container)
    register_entries(app, container)
    register_payroll(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return json_error("Not found", error="NOT_FOUND", status=404)

    return app
