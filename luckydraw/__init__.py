"""Lucky draw order-number redemption service."""

from __future__ import annotations

import logging
import random

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from pymongo import MongoClient

logger = logging.getLogger(__name__)


def create_app(
    config_object: type | None = None,
    mongo_client: MongoClient | None = None,
    draw_rng: random.Random | None = None,
) -> Flask:
    """Application factory.

    Args:
        config_object: configuration class; resolved from APP_ENV when omitted.
        mongo_client: pre-built document store client (tests). When omitted,
            one is created from the environment's credentials and the process
            exits if none are configured.
        draw_rng: random source for server-side draws; SystemRandom when omitted.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from luckydraw.config import cors_origins, get_config
    from luckydraw.db import init_db
    from luckydraw.error_handlers import register_error_handlers
    from luckydraw.errors import CredentialsError
    from luckydraw.logging_config import configure_logging
    from luckydraw.routes.draw import draw_bp
    from luckydraw.routes.health import health_bp
    from luckydraw.routes.orders import orders_bp
    from luckydraw.services.authorization import build_authorizer
    from luckydraw.services.prize_service import PrizeTable

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    configure_logging(app)

    try:
        init_db(app, client=mongo_client)
    except CredentialsError as e:
        logger.critical("%s", e)
        raise SystemExit(1) from e

    app.extensions["sales_authorizer"] = build_authorizer(
        str(app.config["SALES_AUTH_MODE"]),
        str(app.config.get("SALES_API_TOKEN") or ""),
    )
    app.extensions["prize_table"] = PrizeTable.from_config(app.config.get("PRIZE_TABLE"))
    app.extensions["draw_rng"] = draw_rng

    CORS(app, resources={r"/*": {"origins": cors_origins(str(app.config.get("CORS_ORIGINS", "*")))}})
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(draw_bp)

    return app
