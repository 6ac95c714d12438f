"""Application factory and app-wide configuration."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional

from flask import Flask
from flask_cors import CORS

from wealthplanner.app.api.routes import api_bp
from wealthplanner.config import Settings, load_settings
from wealthplanner.log import init_request_logging, setup_logging


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def create_app(
    settings: Optional[Settings] = None,
    today: Optional[Callable[[], date]] = None,
) -> Flask:
    """Build the Flask app instance.

    `today` anchors every projection's first year; tests pin it.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["TODAY"] = today or _utc_today

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    init_request_logging(app)
    app.register_blueprint(api_bp, url_prefix="/api")
    return app
