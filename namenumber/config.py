from __future__ import annotations

import logging
import os

_TRUTHY = {"1", "true", "yes", "y", "on"}


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def resolve_log_level(value: str | None, default: str = "INFO") -> str:
    """
    Upper-cased level name, or `default` when logging doesn't know it.
    """
    level = (value or "").strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else default


def _env_float(name: str, default: float) -> float:
    """
    Tolerate blank values (Vercel/Render dashboards often save "" for unset vars).
    """
    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    return float(raw)


class Config:
    API_TITLE = "Thai Name Number Bot"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    # Both come from the LINE Developers console (Messaging API channel).
    # Without the secret every webhook call is rejected with 401;
    # without the token names are still scored but no reply goes out.
    LINE_CHANNEL_SECRET = os.getenv("LINE_CHANNEL_SECRET", "")
    LINE_CHANNEL_ACCESS_TOKEN = os.getenv("LINE_CHANNEL_ACCESS_TOKEN", "")

    LINE_REPLY_URL = os.getenv("LINE_REPLY_URL") or "https://api.line.me/v2/bot/message/reply"
    LINE_REPLY_TIMEOUT = _env_float("LINE_REPLY_TIMEOUT", 10.0)

    LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL"))
