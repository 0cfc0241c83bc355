from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.push_subscription_repository import (
    IPushSubscriptionRepository,
)
from src.domain.entities import PushSubscription


class PushSubscriptionRepository(IPushSubscriptionRepository):
    """PushSubscription repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_endpoint(
        self, user_id: UUID, endpoint: str
    ) -> Optional[PushSubscription]:
        stmt = select(PushSubscription).where(
            PushSubscription.user_id == user_id,
            PushSubscription.endpoint == endpoint,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[PushSubscription]:
        stmt = select(PushSubscription).where(PushSubscription.user_id == user_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_customer_id(self, customer_id: UUID) -> List[PushSubscription]:
        stmt = select(PushSubscription).where(
            PushSubscription.customer_id == customer_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, subscription: PushSubscription) -> PushSubscription:
        """Insert or update a subscription"""
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def delete_by_user_and_endpoint(self, user_id: UUID, endpoint: str) -> int:
        stmt = delete(PushSubscription).where(
            PushSubscription.user_id == user_id,
            PushSubscription.endpoint == endpoint,
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_endpoint(self, endpoint: str) -> int:
        """Drop an endpoint for every user (push service reported it gone)"""
        stmt = delete(PushSubscription).where(PushSubscription.endpoint == endpoint)
        result = await self.session.execute(stmt)
        return result.rowcount
