"""Turn decoded LINE webhook events into name-number replies."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from .line_client import LineReplyError
from .numerology import InvalidCharacterError, evaluate_name, format_reply

logger = logging.getLogger(__name__)

ReplyFn = Callable[[str, str], None]


def process_event(event: dict, reply: ReplyFn) -> bool:
    """
    Score a text message event and send the reply.

    Returns False for events that are not text messages. Scoring and
    reply errors propagate to the caller.
    """
    if event.get("type") != "message":
        return False
    message = event.get("message") or {}
    logger.info("Received message: %s", message.get("text"))
    if message.get("type") != "text":
        return False

    text = message.get("text") or ""

    result = evaluate_name(text)
    reply(event.get("reply_token") or "", format_reply(result))
    return True


def process_events(events: Iterable[dict], reply: ReplyFn) -> int:
    """Process every event; one failing event never blocks the rest."""
    replied = 0
    for event in events:
        try:
            if process_event(event, reply):
                replied += 1
        except (InvalidCharacterError, LineReplyError) as e:
            logger.warning("Error processing message: %s", e)
    return replied
