import json

import pytest

from namenumber.factory import create_app
from namenumber.signature import sign_body

SECRET = "test-channel-secret"
TOKEN = "test-access-token"


class FakeResponse:
    status = 200

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def read(self):
        return b"{}"


@pytest.fixture
def app():
    return create_app(
        {
            "TESTING": True,
            "LINE_CHANNEL_SECRET": SECRET,
            "LINE_CHANNEL_ACCESS_TOKEN": TOKEN,
            "LINE_REPLY_URL": "https://line.invalid/v2/bot/message/reply",
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sent(monkeypatch):
    """Capture outbound LINE requests instead of hitting the network."""
    requests = []

    def fake_urlopen(req, timeout=None):
        requests.append(req)
        return FakeResponse()

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    return requests


def text_event(text, reply_token="reply-token-1"):
    return {
        "type": "message",
        "replyToken": reply_token,
        "source": {"type": "user", "userId": "U123"},
        "message": {"id": "1", "type": "text", "text": text},
    }


def signed_post(client, payload, secret=SECRET):
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    return client.post(
        "/webhook",
        data=body,
        headers={"Content-Type": "application/json", "X-Line-Signature": sign_body(body, secret)},
    )
