"""Ponto bot package.

A WhatsApp time-clock assistant organized by feature modules (commands,
reports, punches, messaging, bot) with a thin Flask controller layer and
service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .bot.controller import register as register_bot
from .common.logging_utils import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_PORT, DEFAULT_REPLY_DELAY_MS, DEFAULT_REPLY_TIMEOUT_SECONDS, DEFAULT_TIMEZONE
from .database.bootstrap import apply_schema, list_tables
from .messaging.evolution_gateway import EvolutionSettings

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s", settings_module)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "event store db=%s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        evolution = EvolutionSettings(
            api_url=getattr(settings, "EVOLUTION_API_URL", ""),
            api_key=getattr(settings, "EVOLUTION_API_KEY", ""),
            instance_name=getattr(settings, "EVOLUTION_INSTANCE_NAME", ""),
            delay_ms=int(getattr(settings, "REPLY_DELAY_MS", DEFAULT_REPLY_DELAY_MS)),
            timeout_seconds=float(getattr(settings, "REPLY_TIMEOUT_SECONDS", DEFAULT_REPLY_TIMEOUT_SECONDS)),
        )
        if not evolution.configured:
            logger.warning("Evolution API settings are incomplete; replies will not be delivered")

        container = build_container(
            db_config=db_config,
            evolution=evolution,
            timezone=getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE),
            mock_data_enabled=bool(getattr(settings, "MOCK_DATA_ENABLED", False)),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%s)", len(list_tables(container.conn)))

    app.extensions["ponto_bot"] = container
    register_bot(app, container)

    return app
