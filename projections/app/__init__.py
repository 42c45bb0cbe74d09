"""Application factory and app-wide configuration."""

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from projections import config
from projections.app.api.routes import api_bp
from projections.logging_config import setup_logging


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    setup_logging()

    app = Flask(__name__)
    app.config.update(
        DEBUG=config.DEBUG,
        CORS_ORIGINS=config.CORS_ORIGINS,
    )
    if overrides:
        app.config.update(overrides)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
