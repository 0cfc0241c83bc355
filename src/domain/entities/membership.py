"""
Membership Entity

Grants a role to a user over one organization or one customer.
"""

from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import MembershipRole, MembershipStatus


class Membership(SQLModel, table=True):
    """
    Membership entity - links a User to an Organization or a Customer.

    Business Rules:
    - Exactly one of organization_id / customer_id is set
    - (user_id, customer_id) and (user_id, organization_id) are unique
    - Revoked memberships grant nothing
    - team_id only applies to customer-scoped memberships
    - The owner membership of a customer cannot be changed or removed
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )
    customer_id: Optional[UUID] = Field(
        default=None, foreign_key="customers.id", index=True
    )

    role: MembershipRole = Field(nullable=False)
    status: MembershipStatus = Field(default=MembershipStatus.active)
    team_id: Optional[UUID] = Field(default=None, foreign_key="teams.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        CheckConstraint(
            "(organization_id IS NULL) <> (customer_id IS NULL)",
            name="ck_membership_single_scope",
        ),
        Index("idx_membership_user_customer", "user_id", "customer_id", unique=True),
        Index("idx_membership_user_org", "user_id", "organization_id", unique=True),
        Index("idx_membership_status", "status"),
    )

    @property
    def is_org_scoped(self) -> bool:
        return self.organization_id is not None

    @property
    def scope(self) -> Tuple[str, Optional[UUID]]:
        """("organization", id) or ("customer", id)"""
        if self.organization_id is not None:
            return "organization", self.organization_id
        return "customer", self.customer_id
