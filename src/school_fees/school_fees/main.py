from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .fees.controller import register as register_fees
from .receipts.controller import register as register_receipts
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings
from .students.controller import register as register_students
from .transport.controller import register as register_transport
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["RECENT_RECEIPTS_LIMIT"] = int(getattr(settings, "RECENT_RECEIPTS_LIMIT", 5))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = bool(getattr(settings, "SEED_DEMO_DATA", False))
    container = build_container(seed=seed)
    app.extensions["school_fees"] = container
    logger.info("school-fees app ready (settings=%s, demo seed=%s)", settings_module, seed)

    register_students(app, container)
    register_transport(app, container)
    register_fees(app, container)
    register_receipts(app, container)
    register_reports(app, container)
    register_users(app, container)
    register_settings(app, container)

    return app
