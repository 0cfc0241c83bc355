from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.superadmin_repository import ISuperadminRepository
from src.domain.entities import Superadmin


class SuperadminRepository(ISuperadminRepository):
    """Superadmin registry implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[Superadmin]:
        stmt = select(Superadmin).where(Superadmin.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Superadmin]:
        stmt = select(Superadmin).where(Superadmin.email == email.lower())
        result = await self.session.exec(stmt)
        return result.first()
