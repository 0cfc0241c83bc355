from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PushSubscription


class IPushSubscriptionRepository(ABC):
    """PushSubscription repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_endpoint(
        self, user_id: UUID, endpoint: str
    ) -> Optional[PushSubscription]:
        """Get subscription by user and endpoint"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[PushSubscription]:
        """Get all subscriptions of a user"""
        pass

    @abstractmethod
    async def get_by_customer_id(self, customer_id: UUID) -> List[PushSubscription]:
        """Get all subscriptions registered for a customer"""
        pass

    @abstractmethod
    async def save(self, subscription: PushSubscription) -> PushSubscription:
        """Insert or update a subscription"""
        pass

    @abstractmethod
    async def delete_by_user_and_endpoint(self, user_id: UUID, endpoint: str) -> int:
        """Delete a user's subscription. Returns count."""
        pass

    @abstractmethod
    async def delete_by_endpoint(self, endpoint: str) -> int:
        """Delete every subscription for an endpoint. Returns count."""
        pass
