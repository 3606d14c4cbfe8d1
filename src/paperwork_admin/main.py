from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .builders.controller import register as register_builders
from .container import Container, build_container
from .customers.controller import register as register_customers
from .database.bootstrap import apply_schema, list_tables
from .database.seed import seed_demo_data
from .documents.controller import register as register_documents
from .settings import get_settings_module

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["UPLOAD_FOLDER"] = getattr(settings, "UPLOAD_FOLDER", "uploads")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    storage_backend = getattr(settings, "STORAGE_BACKEND", "memory")
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    if container is None:
        if storage_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            storage_backend=storage_backend,
            db_config=db_config,
            document_numbering=getattr(settings, "DOCUMENT_NUMBERING", "count"),
            strict_status_transitions=bool(getattr(settings, "STRICT_STATUS_TRANSITIONS", False)),
            builder_name_case_sensitive=bool(getattr(settings, "BUILDER_NAME_CASE_SENSITIVE", True)),
        )

        if bool(getattr(settings, "SEED_DEMO_DATA", False)):
            seed_demo_data(container)

    app.extensions["paperwork_container"] = container

    register_documents(app, container)
    register_customers(app, container)
    register_builders(app, container)

    return app
