"""Application factory for the GA4 report service."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .config import Settings
from .core import GA4Reporter
from .routes import bp as report_bp

logger = logging.getLogger("ga4report")


def create_app(
    settings: Optional[Settings] = None,
    reporter: Optional[GA4Reporter] = None,
) -> Flask:
    """Create and configure the Flask application.

    ``reporter`` is built from ``settings`` (or the environment) when not
    given.
    """
    app = Flask(__name__)
    app.json.sort_keys = False

    if reporter is None:
        settings = settings or Settings.from_env()
        reporter = GA4Reporter.from_settings(settings)
        logger.info("Reporting on %s", reporter.property_id)

    app.extensions["reporter"] = reporter
    app.register_blueprint(report_bp)
    CORS(
        app,
        resources={r"/report": {"origins": "*", "methods": ["POST"]}},
        send_wildcard=True,
    )

    return app


__all__ = ["create_app"]
