from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Membership, MembershipStatus


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_customer(
        self, user_id: UUID, customer_id: UUID
    ) -> Optional[Membership]:
        """Get customer-scoped membership by user and customer (any status)"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.customer_id == customer_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get active memberships of a user, oldest first"""
        stmt = (
            select(Membership)
            .where(
                Membership.user_id == user_id,
                Membership.status == MembershipStatus.active,
            )
            .order_by(Membership.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def has_any_by_user_id(self, user_id: UUID) -> bool:
        """Whether the user holds any membership, revoked ones included"""
        stmt = select(Membership.id).where(Membership.user_id == user_id).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def clear_team(self, customer_id: UUID, team_id: UUID) -> int:
        """Detach every membership of the customer from a team"""
        stmt = (
            update(Membership)
            .where(Membership.customer_id == customer_id, Membership.team_id == team_id)
            .values(team_id=None)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def get_active_by_customer_id(self, customer_id: UUID) -> List[Membership]:
        """Get active customer-scoped memberships, oldest first"""
        stmt = (
            select(Membership)
            .where(
                Membership.customer_id == customer_id,
                Membership.status == MembershipStatus.active,
            )
            .order_by(Membership.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active_by_customer_id(self, customer_id: UUID) -> int:
        """Count active customer-scoped memberships (seat usage)"""
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(
                Membership.customer_id == customer_id,
                Membership.status == MembershipStatus.active,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def count_active_by_team_ids(self, team_ids: List[UUID]) -> Dict[UUID, int]:
        """Count active memberships per team; teams without members are omitted"""
        if not team_ids:
            return {}
        stmt = (
            select(Membership.team_id, func.count())
            .where(
                Membership.team_id.in_(team_ids),
                Membership.status == MembershipStatus.active,
            )
            .group_by(Membership.team_id)
        )
        result = await self.session.execute(stmt)
        return {team_id: int(count) for team_id, count in result.all()}

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership
