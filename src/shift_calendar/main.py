from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .schedules.controller import register as register_schedules
from .storage.base import KeyValueStorage

_SETTING_NAMES = (
    "STORAGE_PATH",
    "STORAGE_KEY",
    "ROLE_A_NAME",
    "ROLE_B_NAME",
    "ROLE_A_HOURS",
    "ROLE_B_HOURS",
)


def create_app(*, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger = logging.getLogger(__name__)

    engine_settings = {name: getattr(settings, name, None) for name in _SETTING_NAMES}
    container = build_container(settings=engine_settings, storage=storage)
    app.extensions["shift_calendar"] = container

    logger.info(
        "settings=%s storage=%s vacations=%d",
        settings_module,
        type(container.storage).__name__,
        len(container.vacation_store),
    )
    if container.vacation_store.load_warning:
        logger.warning("Started with empty vacation list: %s", container.vacation_store.load_warning)

    register_schedules(app, container)

    return app
