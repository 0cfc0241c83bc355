from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.chat_message_repository import IChatMessageRepository
from src.domain.entities import ChatMessage


class ChatMessageRepository(IChatMessageRepository):
    """ChatMessage repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_session_id(self, session_id: UUID) -> List[ChatMessage]:
        """Get messages of a session in chronological order"""
        stmt = (
            select(ChatMessage)
            .where(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.timestamp)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, message: ChatMessage) -> ChatMessage:
        """Append a message"""
        self.session.add(message)
        await self.session.flush()
        await self.session.refresh(message)
        return message
