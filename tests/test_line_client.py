"""LineClient tests: signature check, event flattening, content fetch, reply send"""
import base64
import hashlib
import hmac
import json
import logging
from types import SimpleNamespace

import httpx
import pytest
from linebot.v3.exceptions import InvalidSignatureError
from unittest.mock import AsyncMock, MagicMock, patch

from proofbot.config import Config
from proofbot.events import InboundEvent
from proofbot.line.client import LineClient

SECRET = "test-channel-secret"


def make_config(*, token: str = "test-access-token", secret: str = SECRET) -> Config:
    return Config(
        channel_access_token=token,
        channel_secret=secret,
        gemini_api_key="gemini-key",
        anthropic_api_key=None,
        openai_api_key=None,
        gemini_model="gemini-2.5-flash",
        host="0.0.0.0",
        port=3000,
        log_level="INFO",
    )


def sign(body: str, secret: str = SECRET) -> str:
    digest = hmac.new(secret.encode(), body.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def webhook_event(event_type: str, **extra) -> dict:
    return {
        "type": event_type,
        "mode": "active",
        "timestamp": 1700000000000,
        "source": {"type": "user", "userId": "U0123456789abcdef"},
        "webhookEventId": "01HZZZZZZZZZZZZZZZZZZZZZZZ",
        "deliveryContext": {"isRedelivery": False},
        **extra,
    }


def webhook_body(*events: dict) -> str:
    return json.dumps({"destination": "Udestination", "events": list(events)})


# ── signature check + parsing ─────────────────────────────────────────────────


def test_parse_events_flattens_text_and_image():
    body = webhook_body(
        webhook_event(
            "message",
            replyToken="tok1",
            message={"type": "text", "id": "100", "quoteToken": "q1", "text": "hello"},
        ),
        webhook_event(
            "message",
            replyToken="tok2",
            message={
                "type": "image",
                "id": "200",
                "quoteToken": "q2",
                "contentProvider": {"type": "line"},
            },
        ),
    )
    client = LineClient(make_config())

    events = client.parse_events(body, sign(body))

    assert events == [
        InboundEvent(type="message", reply_token="tok1", message_type="text", message_id="100", text="hello"),
        InboundEvent(type="message", reply_token="tok2", message_type="image", message_id="200"),
    ]


def test_parse_events_keeps_non_message_events():
    body = webhook_body(webhook_event("unfollow"))
    client = LineClient(make_config())

    events = client.parse_events(body, sign(body))

    assert events == [InboundEvent(type="unfollow")]


def test_parse_events_rejects_bad_signature():
    body = webhook_body()
    client = LineClient(make_config())

    with pytest.raises(InvalidSignatureError):
        client.parse_events(body, sign(body, secret="someone-else"))


def test_parse_events_rejects_missing_signature():
    client = LineClient(make_config())

    with pytest.raises(InvalidSignatureError):
        client.parse_events(webhook_body(), "")


def test_to_inbound_handles_event_without_message():
    event = SimpleNamespace(type="follow", reply_token="tokF")

    assert LineClient._to_inbound(event) == InboundEvent(type="follow", reply_token="tokF")


# ── content fetch ─────────────────────────────────────────────────────────────


async def test_fetch_content_streams_bytes_with_bearer_token(caplog):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"\xff\xd8jpeg\xff\xd9")

    client = LineClient(make_config(token="abc"), transport=httpx.MockTransport(handler))

    with caplog.at_level(logging.DEBUG, logger="proofbot.line.client"):
        content = await client.fetch_content("12345")

    assert content == b"\xff\xd8jpeg\xff\xd9"
    assert str(seen[0].url) == "https://api-data.line.me/v2/bot/message/12345/content"
    assert seen[0].headers["Authorization"] == "Bearer abc"
    assert "Fetched 8 bytes for message 12345" in caplog.text


async def test_fetch_content_raises_on_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(404, json={"message": "Not found"}))
    client = LineClient(make_config(), transport=transport)

    with pytest.raises(httpx.HTTPStatusError):
        await client.fetch_content("expired")


# ── reply send ────────────────────────────────────────────────────────────────


async def test_reply_text_sends_single_text_message():
    client = LineClient(make_config())
    response = MagicMock()
    response.to_dict.return_value = {"sentMessages": [{"id": "m1", "quoteToken": "q"}]}

    with patch("proofbot.line.client.AsyncApiClient"), patch(
        "proofbot.line.client.AsyncMessagingApi"
    ) as mock_api_cls:
        mock_api = MagicMock()
        mock_api.reply_message = AsyncMock(return_value=response)
        mock_api_cls.return_value = mock_api

        result = await client.reply_text("tok1", "hello")

    request = mock_api.reply_message.call_args.args[0]
    assert request.reply_token == "tok1"
    assert [m.text for m in request.messages] == ["hello"]
    assert result == {"sentMessages": [{"id": "m1", "quoteToken": "q"}]}
