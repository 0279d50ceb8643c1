from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class _LineSchema(Schema):
    # LINE adds fields over time (source, timestamp, mode, ...); ignore them.
    class Meta:
        unknown = EXCLUDE


class MessageSchema(_LineSchema):
    type = fields.String(required=True)
    text = fields.String(load_default=None, allow_none=True)


class EventSchema(_LineSchema):
    type = fields.String(required=True)
    reply_token = fields.String(data_key="replyToken", load_default=None, allow_none=True)
    message = fields.Nested(MessageSchema, load_default=None, allow_none=True)


class WebhookRequestSchema(_LineSchema):
    events = fields.List(fields.Nested(EventSchema), load_default=list)


class ReplyRequestSchema(Schema):
    reply_token = fields.String(required=True, data_key="replyToken")
    messages = fields.List(fields.Nested(MessageSchema), required=True)


class WebhookAckSchema(Schema):
    received = fields.Integer(required=True)
    replied = fields.Integer(required=True)


class EvaluateQueryArgsSchema(Schema):
    name = fields.String(required=True, allow_none=False)


class CharacterScoreSchema(Schema):
    character = fields.String(required=True)
    value = fields.Integer(required=True)


class EvaluationResponseSchema(Schema):
    name = fields.String(required=True)
    total = fields.Integer(required=True)
    breakdown = fields.String(required=True)
    reply = fields.String(required=True)
    characters = fields.List(fields.Nested(CharacterScoreSchema), required=True)
