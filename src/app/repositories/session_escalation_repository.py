from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import SessionEscalation


class ISessionEscalationRepository(ABC):
    """SessionEscalation repository interface - application layer"""

    @abstractmethod
    async def create(self, escalation: SessionEscalation) -> SessionEscalation:
        """Append an escalation record (immutable)"""
        pass

    @abstractmethod
    async def get_by_session_id(self, session_id: UUID) -> List[SessionEscalation]:
        """Get escalation history of a session, oldest first"""
        pass
