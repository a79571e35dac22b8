from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance.controller import register as register_attendance
from .reviews.controller import register as register_reviews

_SETTING_NAMES = ("SECRET_KEY", "DEBUG", "TESTING", "LOG_LEVEL", "DEFAULT_SHIFT_TOKEN", "DEFAULT_WEEKLY_OFFS")


def _load_settings(overrides: dict | None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in _SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def create_app(settings_override: dict | None = None) -> Flask:
    load_dotenv(override=False)
    settings = _load_settings(settings_override)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("attendance_audit")

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    if app.config["DEBUG"]:
        logger.info(
            "settings=%s default_shift=%s weekly_offs=%s",
            settings["SETTINGS_MODULE"],
            settings.get("DEFAULT_SHIFT_TOKEN"),
            settings.get("DEFAULT_WEEKLY_OFFS"),
        )

    container = build_container(settings=settings)
    app.extensions["attendance_audit"] = container

    register_attendance(app, container)
    register_reviews(app, container)

    return app
