from __future__ import annotations

import importlib
import logging
from pathlib import Path
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_error_handlers
from .container import Container, build_container, build_store
from .database.bootstrap import apply_schema, list_tables
from .kasbon.controller import register as register_kasbon
from .materials.controller import register as register_materials
from .notifications.controller import register as register_notifications
from .notifications.notifier import LoggingNotifier
from .overtime.controller import register as register_overtime
from .payroll.controller import register as register_payroll
from .premium.controller import register as register_premium
from .projects.controller import register as register_projects
from .quota.controller import register as register_quota
from .reports.controller import register as register_reports
from .transactions.controller import register as register_transactions
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)


def create_app(*, settings: Optional[ModuleType] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["TENANT_ID"] = getattr(settings, "TENANT_ID", "default")
    db_config = getattr(settings, "DB_CONFIG", {})
    mirror_enabled = bool(getattr(settings, "MIRROR_ENABLED", False))

    if mirror_enabled and getattr(settings, "AUTO_INIT_DB", False):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    if container is None:
        notifier = LoggingNotifier()
        store = build_store(
            storage_path=getattr(settings, "STORAGE_PATH", ""),
            mirror_enabled=mirror_enabled,
            db_config=db_config,
            tenant_id=app.config["TENANT_ID"],
            notifier=notifier,
        )
        container = build_container(store=store, notifier=notifier)
    app.extensions["abimanyu"] = container

    register_error_handlers(app)
    register_workers(app, container)
    register_overtime(app, container)
    register_payroll(app, container)
    register_kasbon(app, container)
    register_quota(app, container)
    register_premium(app, container)
    register_transactions(app, container)
    register_projects(app, container)
    register_materials(app, container)
    register_reports(app, container)
    register_notifications(app, container)

    logger.info("app ready (store=%s)", type(container.store).__name__)
    return app
