from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Customer


class ICustomerRepository(ABC):
    """Customer repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        """Get customer by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, customer_ids: List[UUID]) -> List[Customer]:
        """Get customers by a list of IDs, ordered by name"""
        pass

    @abstractmethod
    async def get_by_organization_id(self, organization_id: UUID) -> List[Customer]:
        """Get all customers grouped under an organization"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Customer]:
        """Get every customer, ordered by name"""
        pass
