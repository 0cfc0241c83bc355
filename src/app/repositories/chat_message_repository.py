from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import ChatMessage


class IChatMessageRepository(ABC):
    """ChatMessage repository interface - application layer"""

    @abstractmethod
    async def get_by_session_id(self, session_id: UUID) -> List[ChatMessage]:
        """Get messages of a session ordered by timestamp ascending"""
        pass

    @abstractmethod
    async def create(self, message: ChatMessage) -> ChatMessage:
        """Append a message"""
        pass
