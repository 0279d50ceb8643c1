"""LINE webhook signature (X-Line-Signature) helpers."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)


def sign_body(body: bytes, channel_secret: str) -> str:
    """Base64 HMAC-SHA256 of the raw request body, keyed by the channel secret."""
    mac = hmac.new(channel_secret.encode("utf-8"), body, hashlib.sha256)
    return base64.b64encode(mac.digest()).decode("ascii")


def validate_signature(body: bytes, signature: str | None, channel_secret: str | None) -> bool:
    if not channel_secret:
        logger.warning("LINE_CHANNEL_SECRET is not set")
        return False
    if not signature:
        return False
    expected = sign_body(body, channel_secret).encode("ascii")
    return hmac.compare_digest(expected, signature.encode("utf-8"))
