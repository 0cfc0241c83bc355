from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.customer_repository import ICustomerRepository
from src.domain.entities import Customer


class CustomerRepository(ICustomerRepository):
    """Customer repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        """Get customer by ID"""
        stmt = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, customer_ids: List[UUID]) -> List[Customer]:
        """Get customers by a list of IDs, ordered by name"""
        if not customer_ids:
            return []
        stmt = (
            select(Customer)
            .where(Customer.id.in_(customer_ids))
            .order_by(Customer.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_organization_id(self, organization_id: UUID) -> List[Customer]:
        """Get all customers grouped under an organization"""
        stmt = (
            select(Customer)
            .where(Customer.organization_id == organization_id)
            .order_by(Customer.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_all(self) -> List[Customer]:
        """Get every customer, ordered by name"""
        stmt = select(Customer).order_by(Customer.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
