from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity

from .dtos import SubscriptionResponse


class UnsubscribePushUseCase:
    """Removes the caller's subscription for one endpoint (no-op when absent)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, endpoint: str
    ) -> Result[SubscriptionResponse]:
        if not endpoint:
            return Return.err(Error("VALIDATION_ERROR", "Subscription endpoint is required"))

        async with self.uow:
            await self.uow.push_subscriptions.delete_by_user_and_endpoint(
                identity.user_id, endpoint
            )
            await self.uow.commit()

            return Return.ok(SubscriptionResponse(status="unsubscribed"))
