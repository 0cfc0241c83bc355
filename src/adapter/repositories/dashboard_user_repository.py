from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.dashboard_user_repository import IDashboardUserRepository
from src.domain.entities import DashboardUser, MembershipStatus


class DashboardUserRepository(IDashboardUserRepository):
    """Legacy dashboard_users reader using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active_by_user_id(self, user_id: UUID) -> List[DashboardUser]:
        stmt = (
            select(DashboardUser)
            .where(
                DashboardUser.user_id == user_id,
                DashboardUser.status == MembershipStatus.active,
            )
            .order_by(DashboardUser.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
