"""Flask application factory.

Kept out of `namenumber/__init__.py` so scripts importing
`namenumber.numerology` don't need Flask.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, request
from flask_smorest import Api

from .config import Config, resolve_log_level
from .routes import blp

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logging.getLogger("namenumber").setLevel(level)


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    _configure_logging(resolve_log_level(app.config.get("LOG_LEVEL")))

    api = Api(app)
    api.register_blueprint(blp)

    @app.before_request
    def log_request():
        logger.info("Request received %s %s", request.method, request.path)

    @app.get("/")
    def index():
        return {
            "service": "Thai Name Number Bot",
            "swagger_ui": "/swagger-ui",
            "openapi_json": "/openapi.json",
            "endpoints": ["/webhook", "/evaluate", "/health"],
        }

    @app.get("/health")
    def health():
        """
        Production-safe health endpoint.
        Reports whether the LINE credentials are configured (never their values).
        """
        secret_ok = bool(app.config.get("LINE_CHANNEL_SECRET"))
        token_ok = bool(app.config.get("LINE_CHANNEL_ACCESS_TOKEN"))
        body = {"ok": secret_ok and token_ok, "channel_secret_set": secret_ok, "access_token_set": token_ok}
        return body, (200 if body["ok"] else 503)

    return app
