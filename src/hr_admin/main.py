from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .accounts.controller import register as register_accounts
from .common.http import register_error_handlers
from .config import get_settings_module
from .container import BACKEND_MYSQL, build_container
from .core.constants import DEFAULT_WORKFLOW_PAGE_SIZE
from .database.bootstrap import apply_schema, ensure_default_records, list_tables
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .requests.controller import register as register_requests
from .transfers.controller import register as register_transfers
from .workflow.controller import register as register_workflow

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"

_SETTING_NAMES = (
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "STORAGE_BACKEND",
    "STORAGE_FILE",
    "WORKFLOW_PAGE_SIZE",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in _SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(overrides or {})
    app.secret_key = app.config.get("SECRET_KEY")

    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    backend = str(app.config.get("STORAGE_BACKEND", BACKEND_MYSQL)).lower()
    db_config = dict(app.config.get("DB_CONFIG") or {})
    logger.info("settings=%s backend=%s", settings_module, backend)

    if backend == BACKEND_MYSQL:
        logger.info(
            "db=%s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if app.config.get("AUTO_INIT_DB"):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if app.config.get("AUTO_SEED_DB"):
            ensure_default_records(db_config)

    container = build_container(
        backend=backend,
        db_config=db_config,
        storage_file=app.config.get("STORAGE_FILE"),
        page_size=int(app.config.get("WORKFLOW_PAGE_SIZE") or DEFAULT_WORKFLOW_PAGE_SIZE),
    )
    app.extensions["hr_admin"] = container

    register_error_handlers(app)
    register_accounts(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_transfers(app, container)
    register_requests(app, container)
    register_workflow(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "healthy", "backend": backend})

    return app
