from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Superadmin


class ISuperadminRepository(ABC):
    """Superadmin registry interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Superadmin]:
        """Get superadmin entry by user ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Superadmin]:
        """Get superadmin entry by the legacy email column"""
        pass
