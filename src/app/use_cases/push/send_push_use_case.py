"""
Send Push Use Case

Fan-out of one notification to a user's or a customer's subscriptions.
"""

import asyncio
import logging
from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.push_sender import IPushSender, PushSubscriptionGone
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SendPushResponse

logger = logging.getLogger(__name__)

PUSH_ICON = "/icons/icon-192x192.png"
PUSH_BADGE = "/icons/icon-96x96.png"


class SendPushUseCase:
    """
    Use case for sending a push notification (internal callers only).

    Business Rules:
    - title and body are required
    - user_id wins over customer_id; one of them is required
    - All subscriptions are sent concurrently; one failure never stops others
    - Subscriptions reported gone (404/410) are deleted
    """

    def __init__(self, uow: UnitOfWork, push_sender: IPushSender):
        self.uow = uow
        self.push_sender = push_sender

    async def execute(
        self,
        title: str,
        body: str,
        user_id: Optional[UUID] = None,
        customer_id: Optional[UUID] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Result[SendPushResponse]:
        if not title or not body:
            return Return.err(Error("VALIDATION_ERROR", "title and body required"))
        if user_id is None and customer_id is None:
            return Return.err(Error("MISSING_TARGET", "customer_id or user_id required"))

        async with self.uow:
            if user_id is not None:
                subscriptions = await self.uow.push_subscriptions.get_by_user_id(user_id)
            else:
                subscriptions = await self.uow.push_subscriptions.get_by_customer_id(
                    customer_id
                )

            if not subscriptions:
                logger.info(f"No push subscriptions for {user_id or customer_id}")
                return Return.ok(SendPushResponse(sent=0, total=0))

            payload = {
                "title": title,
                "body": body,
                "icon": PUSH_ICON,
                "badge": PUSH_BADGE,
                "data": data or {},
            }
            results = await asyncio.gather(
                *(self.push_sender.send(sub, payload) for sub in subscriptions),
                return_exceptions=True,
            )

            sent = 0
            gone = set()
            for subscription, outcome in zip(subscriptions, results):
                if isinstance(outcome, PushSubscriptionGone):
                    gone.add(subscription.endpoint)
                elif isinstance(outcome, Exception):
                    logger.warning(
                        f"Push to subscription {subscription.id} failed: {outcome!r}"
                    )
                else:
                    sent += 1

            for endpoint in gone:
                await self.uow.push_subscriptions.delete_by_endpoint(endpoint)
            if gone:
                await self.uow.commit()
                logger.info(f"Removed {len(gone)} expired push subscriptions")

            logger.info(f"Push sent {sent}/{len(subscriptions)}")
            return Return.ok(SendPushResponse(sent=sent, total=len(subscriptions)))
