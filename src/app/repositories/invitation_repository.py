from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_customer_and_id(
        self, customer_id: UUID, invitation_id: UUID
    ) -> Optional[Invitation]:
        """Get an invitation only if it belongs to the customer"""
        pass

    @abstractmethod
    async def get_pending_by_customer_and_email(
        self, customer_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by customer and email"""
        pass

    @abstractmethod
    async def get_pending_by_customer_id(
        self, customer_id: UUID, now: datetime
    ) -> List[Invitation]:
        """Get pending invitations of a customer not yet expired at now, oldest first"""
        pass

    @abstractmethod
    async def clear_team(self, customer_id: UUID, team_id: UUID) -> int:
        """Detach every invitation of the customer from a team. Returns count."""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: Invitation) -> None:
        """Delete an invitation"""
        pass
