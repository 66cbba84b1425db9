"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from sipcalc.app.api.routes import api_bp
from sipcalc.config import AppSettings, get_settings
from sipcalc.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SIPCALC_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_allowed_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("SIP calculator API ready (env=%s)", settings.app_env)
    return app
