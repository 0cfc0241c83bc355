"""
Web Push Sender

Delivers VAPID-signed notifications through pywebpush.
"""

import asyncio
import json
import logging
from typing import Any, Dict

from pywebpush import WebPushException, webpush

from src.app.services.push_sender import IPushSender, PushSubscriptionGone
from src.domain.entities import PushSubscription

logger = logging.getLogger(__name__)

GONE_STATUS_CODES = (404, 410)


class WebPushSender(IPushSender):
    def __init__(self, vapid_private_key: str, vapid_claims_email: str):
        self.vapid_private_key = vapid_private_key
        self.vapid_claims_email = vapid_claims_email

    async def send(self, subscription: PushSubscription, payload: Dict[str, Any]) -> None:
        subscription_info = {
            "endpoint": subscription.endpoint,
            "keys": {"p256dh": subscription.p256dh, "auth": subscription.auth},
        }
        try:
            # pywebpush is blocking (requests)
            await asyncio.to_thread(
                webpush,
                subscription_info=subscription_info,
                data=json.dumps(payload),
                vapid_private_key=self.vapid_private_key,
                vapid_claims={"sub": self.vapid_claims_email},
            )
        except WebPushException as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            if status_code in GONE_STATUS_CODES:
                raise PushSubscriptionGone(subscription.endpoint, status_code) from exc
            logger.warning(f"Web push failed for subscription {subscription.id}: {status_code}")
            raise
