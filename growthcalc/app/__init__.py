"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from growthcalc.app.api.routes import api_bp
from growthcalc.core.config import AppConfig
from growthcalc.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or AppConfig.load()
    setup_logging(config.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = config.debug
    app.config["GROWTHCALC"] = config

    CORS(
        app,
        resources={r"/api/*": {"origins": list(config.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("growthcalc api ready (env=%s, workers=%d)", config.environment, config.max_workers)
    return app
