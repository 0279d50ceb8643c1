import http.client
import io
import json
import urllib.error

import pytest

from namenumber.line_client import LineReplyError, build_reply_payload, reply_message

URL = "https://line.invalid/v2/bot/message/reply"


def test_build_reply_payload():
    assert build_reply_payload("tok", "hello") == {
        "replyToken": "tok",
        "messages": [{"type": "text", "text": "hello"}],
    }


def test_reply_message_posts_json(sent):
    reply_message("tok", "ชื่อ ก", access_token="abc", url=URL, timeout=5)

    assert len(sent) == 1
    req = sent[0]
    assert req.full_url == URL
    assert req.get_method() == "POST"
    assert req.get_header("Authorization") == "Bearer abc"
    assert req.get_header("Content-type") == "application/json"
    assert json.loads(req.data.decode("utf-8")) == {
        "replyToken": "tok",
        "messages": [{"type": "text", "text": "ชื่อ ก"}],
    }


def test_reply_message_requires_access_token(sent):
    with pytest.raises(LineReplyError, match="LINE_CHANNEL_ACCESS_TOKEN is not set"):
        reply_message("tok", "hi", access_token="", url=URL)
    assert sent == []


def test_reply_message_wraps_http_errors(monkeypatch):
    def fake_urlopen(req, timeout=None):
        raise urllib.error.HTTPError(URL, 400, "Bad Request", {}, io.BytesIO(b'{"message":"Invalid reply token"}'))

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    with pytest.raises(LineReplyError) as exc:
        reply_message("tok", "hi", access_token="abc", url=URL)
    assert exc.value.status == 400
    assert "Invalid reply token" in str(exc.value)


def test_reply_message_wraps_transport_errors(monkeypatch):
    def fake_urlopen(req, timeout=None):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    with pytest.raises(LineReplyError) as exc:
        reply_message("tok", "hi", access_token="abc", url=URL)
    assert exc.value.status is None


@pytest.mark.parametrize(
    "error",
    [TimeoutError("timed out"), http.client.RemoteDisconnected("Remote end closed connection")],
)
def test_reply_message_wraps_read_failures(monkeypatch, error):
    def fake_urlopen(req, timeout=None):
        raise error

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    with pytest.raises(LineReplyError) as exc:
        reply_message("tok", "hi", access_token="abc", url=URL, timeout=0.5)
    assert exc.value.status is None
    assert exc.value.__cause__ is error
