from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_escalation_repository import (
    ISessionEscalationRepository,
)
from src.domain.entities import SessionEscalation


class SessionEscalationRepository(ISessionEscalationRepository):
    """SessionEscalation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, escalation: SessionEscalation) -> SessionEscalation:
        """Create an escalation entry (immutable)"""
        self.session.add(escalation)
        await self.session.flush()
        await self.session.refresh(escalation)
        return escalation

    async def get_by_session_id(self, session_id: UUID) -> List[SessionEscalation]:
        """Get the hand-over history of a session, oldest first"""
        stmt = (
            select(SessionEscalation)
            .where(SessionEscalation.session_id == session_id)
            .order_by(SessionEscalation.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
