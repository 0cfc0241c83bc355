from abc import ABC, abstractmethod
from datetime import datetime
from typing import FrozenSet, List, Optional
from uuid import UUID

from src.domain.entities import ChatSession


class IChatSessionRepository(ABC):
    """ChatSession repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[ChatSession]:
        """Get session by ID, including soft-deleted ones"""
        pass

    @abstractmethod
    async def list_visible(
        self, customer_ids: Optional[FrozenSet[UUID]], limit: int = 100
    ) -> List[ChatSession]:
        """
        List sessions for the dashboard.

        Excludes soft-deleted and suspicious sessions, newest activity first.
        customer_ids=None means no customer restriction.
        """
        pass

    @abstractmethod
    async def mark_all_as_read(
        self,
        customer_ids: Optional[FrozenSet[UUID]],
        reader_id: UUID,
        read_at: datetime,
    ) -> int:
        """Mark every unread, non-deleted session as read. Returns count."""
        pass

    @abstractmethod
    async def update(self, session: ChatSession) -> ChatSession:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete(self, session: ChatSession) -> None:
        """Hard delete a session together with its messages and audit rows"""
        pass
