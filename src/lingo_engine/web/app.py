"""Flask application configuration and blueprint registration."""

from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify

from lingo_engine.logger import get_logger
from lingo_engine.translation import LocalizationEngine

from .routes.localize import localize_bp

logger = get_logger(__name__)


def build_app(engine: LocalizationEngine, request_timeout: Optional[float] = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Ensure JSON responses keep Unicode data.
    app.json.ensure_ascii = False
    if request_timeout is not None:
        app.config["LOCALIZE_TIMEOUT"] = request_timeout

    app.extensions["lingo_engine"] = engine

    register_blueprints(app)
    register_default_routes(app)

    return app


def register_blueprints(app: Flask) -> None:
    """Register Flask blueprints."""
    app.register_blueprint(localize_bp, url_prefix="/api/localize")


def register_default_routes(app: Flask) -> None:
    """Register default health route and error handlers."""

    @app.get("/health")
    def health_check():
        logger.debug("Health check requested")
        return jsonify({"status": "ok"})

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"success": False, "error": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(e):
        logger.exception("Internal server error: %s", e)
        return jsonify({"success": False, "error": "Internal server error"}), 500
