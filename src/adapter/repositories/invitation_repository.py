from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_customer_and_id(
        self, customer_id: UUID, invitation_id: UUID
    ) -> Optional[Invitation]:
        """Get invitation by ID within a customer"""
        stmt = select(Invitation).where(
            Invitation.id == invitation_id, Invitation.customer_id == customer_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_customer_and_email(
        self, customer_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by customer and email"""
        stmt = select(Invitation).where(
            Invitation.customer_id == customer_id,
            Invitation.email == email.lower(),
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_pending_by_customer_id(
        self, customer_id: UUID, now: datetime
    ) -> List[Invitation]:
        """Get live pending invitations of a customer, oldest first"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.customer_id == customer_id,
                Invitation.status == InvitationStatus.pending,
                Invitation.expires_at > now,
            )
            .order_by(Invitation.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def clear_team(self, customer_id: UUID, team_id: UUID) -> int:
        """Detach every invitation of the customer from a team"""
        stmt = (
            update(Invitation)
            .where(Invitation.customer_id == customer_id, Invitation.team_id == team_id)
            .values(team_id=None)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: Invitation) -> None:
        """Delete an invitation"""
        await self.session.delete(invitation)
        await self.session.flush()
