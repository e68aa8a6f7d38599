from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .payroll.controller import register as register_payroll


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log_level = getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logger = logging.getLogger(__name__)

    container = build_container(settings=settings)
    logger.info(
        "shift-payroll settings=%s regular_hours_per_day=%s overtime_rule=%s",
        settings_module, container.regular_hours_per_day, container.overtime_rule,
    )

    register_payroll(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
