from datetime import datetime
from typing import FrozenSet, List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.chat_session_repository import IChatSessionRepository
from src.domain.entities import ChatMessage, ChatSession, Notification, SessionEscalation


class ChatSessionRepository(IChatSessionRepository):
    """ChatSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[ChatSession]:
        """Get session by ID, including soft-deleted ones"""
        stmt = select(ChatSession).where(ChatSession.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_visible(
        self, customer_ids: Optional[FrozenSet[UUID]], limit: int = 100
    ) -> List[ChatSession]:
        """List live, non-suspicious sessions, most recently updated first"""
        if customer_ids is not None and not customer_ids:
            return []

        stmt = select(ChatSession).where(
            ChatSession.deleted_at.is_(None),
            ChatSession.is_suspicious.is_(False),
        )
        if customer_ids is not None:
            stmt = stmt.where(ChatSession.customer_id.in_(list(customer_ids)))

        stmt = stmt.order_by(ChatSession.updated_at.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def mark_all_as_read(
        self,
        customer_ids: Optional[FrozenSet[UUID]],
        reader_id: UUID,
        read_at: datetime,
    ) -> int:
        """Mark every unread, non-deleted session in scope as read"""
        if customer_ids is not None and not customer_ids:
            return 0

        stmt = update(ChatSession).where(
            ChatSession.is_read.is_(False),
            ChatSession.deleted_at.is_(None),
        )
        if customer_ids is not None:
            stmt = stmt.where(ChatSession.customer_id.in_(list(customer_ids)))

        stmt = stmt.values(is_read=True, read_at=read_at, read_by=reader_id)
        result = await self.session.execute(stmt)
        return result.rowcount

    async def update(self, session: ChatSession) -> ChatSession:
        """Update existing session"""
        self.session.add(session)
        await self.session.flush()
        await self.session.refresh(session)
        return session

    async def delete(self, session: ChatSession) -> None:
        """Hard delete a session with its messages, escalations and notifications"""
        for model in (ChatMessage, SessionEscalation, Notification):
            await self.session.execute(delete(model).where(model.session_id == session.id))
        await self.session.delete(session)
        await self.session.flush()
