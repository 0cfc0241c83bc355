"""
Principal & Identity

Who is calling, and what they may reach.
"""

from typing import Dict, FrozenSet, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .entities.enums import MembershipRole


class Principal(BaseModel):
    """Authenticated actor, immutable for the request"""

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str


class Identity(BaseModel):
    """
    Resolved access of a principal.

    has_all_customers is only ever set for superadmins. An empty
    accessible_customer_ids with has_all_customers=False means no access.
    """

    model_config = ConfigDict(frozen=True)

    principal: Principal
    is_superadmin: bool = False
    has_all_customers: bool = False
    accessible_customer_ids: FrozenSet[UUID] = frozenset()
    org_scope: Optional[UUID] = None
    roles: Dict[UUID, MembershipRole] = {}

    @property
    def user_id(self) -> UUID:
        return self.principal.id

    def role_for(self, customer_id: UUID) -> Optional[MembershipRole]:
        return self.roles.get(customer_id)

    def customer_filter(self) -> Optional[FrozenSet[UUID]]:
        """Customer ids to restrict queries to, or None for unrestricted."""
        if self.is_superadmin or self.has_all_customers:
            return None
        return self.accessible_customer_ids
