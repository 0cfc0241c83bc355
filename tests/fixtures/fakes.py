from typing import Any, Dict, List, Optional

from src.app.services.email_sender import IEmailSender
from src.app.services.push_sender import IPushSender, PushSubscriptionGone
from src.domain.entities import PushSubscription


class FakeEmailSender(IEmailSender):
    """Records outgoing emails instead of calling Resend"""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.guest_replies: List[Dict[str, Any]] = []
        self.invitations: List[Dict[str, Any]] = []

    async def send_guest_reply(
        self,
        to_email: str,
        customer_name: str,
        customer_slug: str,
        message: str,
        guest_name: Optional[str] = None,
    ) -> bool:
        self.guest_replies.append(
            {
                "to_email": to_email,
                "customer_name": customer_name,
                "customer_slug": customer_slug,
                "message": message,
                "guest_name": guest_name,
            }
        )
        return self.succeed

    async def send_invitation(
        self, to_email: str, customer_name: str, role: str, token: str
    ) -> bool:
        self.invitations.append(
            {"to_email": to_email, "customer_name": customer_name, "role": role, "token": token}
        )
        return self.succeed


class FakePushSender(IPushSender):
    """Endpoints listed in gone_endpoints answer like an expired subscription"""

    def __init__(self):
        self.gone_endpoints = set()
        self.sent: List[Dict[str, Any]] = []

    async def send(self, subscription: PushSubscription, payload: Dict[str, Any]) -> None:
        if subscription.endpoint in self.gone_endpoints:
            raise PushSubscriptionGone(subscription.endpoint, 410)
        self.sent.append({"endpoint": subscription.endpoint, "payload": payload})
