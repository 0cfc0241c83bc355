"""
Resend Email Sender

Sends guest replies and staff invitations via the Resend HTTP API.
"""

import html
import logging
from typing import Any, Dict, Optional

import httpx

from src.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)

RESEND_SEND_URL = "https://api.resend.com/emails"
RESEND_TIMEOUT_SECONDS = 20.0


class ResendEmailSender(IEmailSender):
    """IEmailSender backed by Resend. Without an API key every send is skipped."""

    def __init__(
        self,
        api_key: str,
        from_address: str,
        chat_url_template: str,
        dashboard_url: str,
        timeout: float = RESEND_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.from_address = from_address
        self.chat_url_template = chat_url_template
        self.dashboard_url = dashboard_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def send_guest_reply(
        self,
        to_email: str,
        customer_name: str,
        customer_slug: str,
        message: str,
        guest_name: Optional[str] = None,
    ) -> bool:
        chat_url = self.chat_url_template.format(slug=customer_slug)
        greeting = f"Hi {html.escape(guest_name)}," if guest_name else "Hi,"
        body = (
            f"<h1>{html.escape(customer_name)}</h1>"
            f"<p>{greeting}</p>"
            f"<p>We have answered your question:</p>"
            f"<blockquote>{html.escape(message)}</blockquote>"
            f'<p><a href="{html.escape(chat_url)}">Continue the conversation</a></p>'
        )
        payload = {
            "from": f"{customer_name} <{self.from_address}>",
            "to": [to_email],
            "subject": f"Reply from {customer_name}",
            "html": body,
        }
        return await self._send(payload, kind="guest_reply")

    async def send_invitation(
        self, to_email: str, customer_name: str, role: str, token: str
    ) -> bool:
        invite_url = f"{self.dashboard_url}/invite/{token}"
        body = (
            f"<p>You have been invited to join <strong>{html.escape(customer_name)}</strong>"
            f" as {html.escape(role)}.</p>"
            f'<p><a href="{html.escape(invite_url)}">Accept invitation</a></p>'
            "<p>The link is valid for 7 days.</p>"
        )
        payload = {
            "from": self.from_address,
            "to": [to_email],
            "subject": f"Invitation to {customer_name}",
            "html": body,
        }
        return await self._send(payload, kind="invitation")

    async def _send(self, payload: Dict[str, Any], kind: str) -> bool:
        if not self.api_key:
            logger.info(f"RESEND_API_KEY not set, skipping {kind} email")
            return False

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(RESEND_SEND_URL, headers=headers, json=payload)
        except httpx.TimeoutException:
            logger.warning(f"Resend timeout while sending {kind} email")
            return False
        except httpx.HTTPError:
            logger.exception(f"Resend connection error while sending {kind} email")
            return False

        if 200 <= response.status_code < 300:
            message_id = response.json().get("id")
            logger.info(f"Sent {kind} email, message_id={message_id}")
            return True

        logger.warning(f"Resend API error {response.status_code} for {kind} email")
        return False
