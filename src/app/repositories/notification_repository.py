from abc import ABC, abstractmethod
from uuid import UUID


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def mark_handled_by_session_id(self, session_id: UUID) -> int:
        """Mark every open notification of a session as handled. Returns count."""
        pass
