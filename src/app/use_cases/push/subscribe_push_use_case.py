from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import require_view
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PushSubscription
from src.domain.identity import Identity

from .dtos import SubscriptionResponse


class SubscribePushUseCase:
    """
    Use case for registering a browser push endpoint.

    Business Rules:
    - endpoint, p256dh and auth are required
    - Upsert by (user, endpoint): subscribing again refreshes keys
    - A customer_id, when given, must be visible to the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        identity: Identity,
        endpoint: str,
        p256dh: str,
        auth: str,
        customer_id: Optional[UUID] = None,
    ) -> Result[SubscriptionResponse]:
        if not endpoint or not p256dh or not auth:
            return Return.err(
                Error("VALIDATION_ERROR", "Subscription endpoint and keys are required")
            )

        async with self.uow:
            if customer_id is not None:
                error = require_view(identity, customer_id)
                if error:
                    return Return.err(error)

            subscription = await self.uow.push_subscriptions.get_by_user_and_endpoint(
                identity.user_id, endpoint
            )
            if subscription is None:
                subscription = PushSubscription(
                    user_id=identity.user_id,
                    customer_id=customer_id,
                    endpoint=endpoint,
                    p256dh=p256dh,
                    auth=auth,
                )
            else:
                subscription.p256dh = p256dh
                subscription.auth = auth
                subscription.customer_id = customer_id
                subscription.updated_at = utcnow()

            await self.uow.push_subscriptions.save(subscription)
            await self.uow.commit()

            return Return.ok(SubscriptionResponse(status="subscribed"))
