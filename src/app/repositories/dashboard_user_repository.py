from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import DashboardUser


class IDashboardUserRepository(ABC):
    """Legacy dashboard_users reader - application layer"""

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[DashboardUser]:
        """Get active legacy access rows of a user, oldest first"""
        pass
