from __future__ import annotations

import importlib
import logging
from pathlib import Path
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import DomainError, InvalidStateError, NotFoundError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .schedules.controller import register as register_schedules
from .time_entries.controller import register as register_time_entries

ERROR_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    InvalidStateError: 409,
}


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        status = ERROR_STATUS.get(type(err), 400)
        app.logger.warning("rejected %s: %s", type(err).__name__, err)
        return jsonify({"error": type(err).__name__, "message": str(err)}), status


def _container_from_settings(settings: ModuleType) -> Container:
    return build_container(
        storage_backend=getattr(settings, "STORAGE_BACKEND", "memory"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    backend = getattr(settings, "STORAGE_BACKEND", "memory")
    app.logger.info("[workforce-records] settings=%s storage=%s", settings_module, backend)

    if container is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            db_config = getattr(settings, "DB_CONFIG")
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            app.logger.info("[workforce-records] schema ready (tables=%d)", len(list_tables(db_config)))
        container = _container_from_settings(settings)

    app.extensions["workforce_records"] = container
    _register_error_handlers(app)

    register_time_entries(app, container)
    register_payroll(app, container)
    register_schedules(app, container)
    register_leave(app, container)
    register_employees(app, container)

    return app
