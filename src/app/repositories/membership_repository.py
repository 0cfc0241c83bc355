from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from src.domain.entities import Membership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_customer(
        self, user_id: UUID, customer_id: UUID
    ) -> Optional[Membership]:
        """Get customer-scoped membership by user and customer (any status)"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get active memberships of a user, oldest first"""
        pass

    @abstractmethod
    async def has_any_by_user_id(self, user_id: UUID) -> bool:
        """Whether the user holds any membership, revoked ones included"""
        pass

    @abstractmethod
    async def clear_team(self, customer_id: UUID, team_id: UUID) -> int:
        """Detach every membership of the customer from a team. Returns count."""
        pass

    @abstractmethod
    async def get_active_by_customer_id(self, customer_id: UUID) -> List[Membership]:
        """Get active customer-scoped memberships, oldest first"""
        pass

    @abstractmethod
    async def count_active_by_customer_id(self, customer_id: UUID) -> int:
        """Count active customer-scoped memberships (seat usage)"""
        pass

    @abstractmethod
    async def count_active_by_team_ids(self, team_ids: List[UUID]) -> Dict[UUID, int]:
        """Count active memberships per team; teams without members are omitted"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass
