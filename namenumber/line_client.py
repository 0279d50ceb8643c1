"""Outbound client for the LINE Messaging API reply endpoint."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request

from .schemas import ReplyRequestSchema

logger = logging.getLogger(__name__)

_reply_schema = ReplyRequestSchema()


class LineReplyError(RuntimeError):
    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


def build_reply_payload(reply_token: str, text: str) -> dict:
    return _reply_schema.dump(
        {"reply_token": reply_token, "messages": [{"type": "text", "text": text}]}
    )


def reply_message(
    reply_token: str,
    text: str,
    *,
    access_token: str | None,
    url: str,
    timeout: float = 10.0,
) -> None:
    """
    Send a single text reply for `reply_token`.

    Raises LineReplyError when the token is missing, LINE answers with a
    non-2xx status, or the request cannot be made at all.
    """
    if not access_token:
        raise LineReplyError("LINE_CHANNEL_ACCESS_TOKEN is not set")

    data = json.dumps(build_reply_payload(reply_token, text), ensure_ascii=False).encode("utf-8")
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {access_token}",
    }
    req = urllib.request.Request(url, data=data, headers=headers, method="POST")

    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = resp.status
    except urllib.error.HTTPError as e:
        body = e.read().decode("utf-8", errors="replace") if hasattr(e, "read") else ""
        raise LineReplyError(f"LINE reply failed with {e.code}: {body}", status=e.code) from e
    except urllib.error.URLError as e:
        raise LineReplyError(f"LINE reply request failed: {e.reason}") from e
    except (OSError, http.client.HTTPException) as e:
        # Read timeouts and dropped connections are not wrapped by urllib.
        raise LineReplyError(f"LINE reply request failed: {e}") from e

    logger.debug("LINE reply sent (status=%s)", status)
