import json

import httpx
import pytest

from src.adapter.services.resend_email_sender import RESEND_SEND_URL, ResendEmailSender


def make_sender(handler, api_key="re_test_key") -> ResendEmailSender:
    return ResendEmailSender(
        api_key=api_key,
        from_address="support@desk.example",
        chat_url_template="https://chat.example/{slug}",
        dashboard_url="https://dashboard.example/",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_guest_reply_posts_escaped_html():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": "msg_123"})

    sent = await make_sender(handler).send_guest_reply(
        to_email="guest@example.com",
        customer_name="Acme & Co",
        customer_slug="acme",
        message="<b>Open</b> at 9",
        guest_name="Jane",
    )

    assert sent is True
    assert len(requests) == 1
    request = requests[0]
    assert str(request.url) == RESEND_SEND_URL
    assert request.headers["Authorization"] == "Bearer re_test_key"
    payload = json.loads(request.content)
    assert payload["to"] == ["guest@example.com"]
    assert payload["subject"] == "Reply from Acme & Co"
    assert "&lt;b&gt;Open&lt;/b&gt; at 9" in payload["html"]
    assert "https://chat.example/acme" in payload["html"]
    assert "Hi Jane," in payload["html"]


@pytest.mark.asyncio
async def test_invitation_links_to_dashboard():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured.update(json.loads(request.content))
        return httpx.Response(200, json={"id": "msg_456"})

    sent = await make_sender(handler).send_invitation(
        to_email="new@example.com", customer_name="Acme", role="manager", token="tok123"
    )

    assert sent is True
    assert "https://dashboard.example/invite/tok123" in captured["html"]
    assert captured["from"] == "support@desk.example"


@pytest.mark.asyncio
async def test_api_error_returns_false():
    sent = await make_sender(lambda request: httpx.Response(422, json={})).send_invitation(
        to_email="new@example.com", customer_name="Acme", role="member", token="t"
    )

    assert sent is False


@pytest.mark.asyncio
async def test_timeout_returns_false():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    sent = await make_sender(handler).send_guest_reply(
        to_email="g@example.com", customer_name="Acme", customer_slug="acme", message="hi"
    )

    assert sent is False


@pytest.mark.asyncio
async def test_without_api_key_nothing_is_sent():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    sent = await make_sender(handler, api_key="").send_guest_reply(
        to_email="g@example.com", customer_name="Acme", customer_slug="acme", message="hi"
    )

    assert sent is False
    assert calls == []
