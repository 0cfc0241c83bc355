from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.team_repository import ITeamRepository
from src.domain.entities import Team


class TeamRepository(ITeamRepository):
    """Team repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_customer_and_id(
        self, customer_id: UUID, team_id: UUID
    ) -> Optional[Team]:
        """Get team by ID within a customer"""
        stmt = select(Team).where(Team.id == team_id, Team.customer_id == customer_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_customer_and_name(
        self, customer_id: UUID, name: str
    ) -> Optional[Team]:
        """Get team by exact name within a customer"""
        stmt = select(Team).where(Team.customer_id == customer_id, Team.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_customer_id(self, customer_id: UUID) -> List[Team]:
        """Get all teams of a customer, ordered by name"""
        stmt = select(Team).where(Team.customer_id == customer_id).order_by(Team.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, team: Team) -> Team:
        """Create a new team"""
        self.session.add(team)
        await self.session.flush()
        await self.session.refresh(team)
        return team

    async def update(self, team: Team) -> Team:
        """Update existing team"""
        self.session.add(team)
        await self.session.flush()
        await self.session.refresh(team)
        return team

    async def clear_default(self, customer_id: UUID) -> int:
        """Unset is_default on every team of the customer"""
        stmt = (
            update(Team)
            .where(Team.customer_id == customer_id, Team.is_default.is_(True))
            .values(is_default=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete(self, team: Team) -> None:
        """Delete a team"""
        await self.session.delete(team)
        await self.session.flush()
