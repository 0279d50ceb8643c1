from __future__ import annotations

import json
import logging
from functools import partial

from flask import abort, current_app, request
from flask.views import MethodView
from marshmallow import ValidationError

from .line_client import reply_message
from .numerology import InvalidCharacterError, evaluate_name, format_reply
from .schemas import (
    EvaluateQueryArgsSchema,
    EvaluationResponseSchema,
    WebhookAckSchema,
    WebhookRequestSchema,
)
from .signature import validate_signature
from .webhook import process_events

from flask_smorest import Blueprint


logger = logging.getLogger(__name__)

blp = Blueprint("namenumber", __name__, url_prefix="/", description="Thai name number endpoints")

_webhook_schema = WebhookRequestSchema()


@blp.route("/webhook")
class Webhook(MethodView):
    def get(self):
        """
        Reachability probe; LINE only ever POSTs here.
        """
        return "OK"

    @blp.response(200, WebhookAckSchema)
    def post(self):
        """
        LINE Messaging API webhook.

        The raw body is verified against X-Line-Signature before it is decoded.
        Names that can't be scored (or replies that fail) are logged, and the
        request is still acknowledged so LINE doesn't redeliver it.
        """
        body = request.get_data(cache=False)
        signature = request.headers.get("X-Line-Signature")
        if not validate_signature(body, signature, current_app.config.get("LINE_CHANNEL_SECRET")):
            logger.warning("Invalid signature")
            abort(401, description="Invalid signature")

        try:
            payload = _webhook_schema.load(json.loads(body))
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            logger.warning("Error parsing webhook request: %s", e)
            abort(400, description="Malformed webhook request")

        reply = partial(
            reply_message,
            access_token=current_app.config.get("LINE_CHANNEL_ACCESS_TOKEN"),
            url=current_app.config["LINE_REPLY_URL"],
            timeout=current_app.config["LINE_REPLY_TIMEOUT"],
        )
        events = payload["events"]
        replied = process_events(events, reply)
        return {"received": len(events), "replied": replied}


@blp.route("/evaluate")
class Evaluate(MethodView):
    @blp.arguments(EvaluateQueryArgsSchema, location="query")
    @blp.response(200, EvaluationResponseSchema)
    def get(self, args):
        """
        Score a name without going through LINE.
        """
        name = args["name"].strip()
        try:
            result = evaluate_name(name)
        except InvalidCharacterError as e:
            abort(400, description=str(e))

        return {
            "name": result.name,
            "total": result.total,
            "breakdown": result.breakdown,
            "reply": format_reply(result),
            "characters": [{"character": ch, "value": value} for ch, value in result.scores],
        }
