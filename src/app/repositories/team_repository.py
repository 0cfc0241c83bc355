from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_by_customer_and_id(
        self, customer_id: UUID, team_id: UUID
    ) -> Optional[Team]:
        """Get a team only if it belongs to the customer"""
        pass

    @abstractmethod
    async def get_by_customer_and_name(
        self, customer_id: UUID, name: str
    ) -> Optional[Team]:
        """Get a team of the customer by exact name"""
        pass

    @abstractmethod
    async def get_by_customer_id(self, customer_id: UUID) -> List[Team]:
        """Get all teams of a customer ordered by name"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team"""
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        """Update existing team"""
        pass

    @abstractmethod
    async def clear_default(self, customer_id: UUID) -> int:
        """Unset is_default on every team of the customer. Returns count."""
        pass

    @abstractmethod
    async def delete(self, team: Team) -> None:
        """Delete a team"""
        pass
