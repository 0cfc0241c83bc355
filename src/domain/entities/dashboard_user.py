"""
DashboardUser Entity

Legacy single-tenant staff table, read only by the identity resolver.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow
from .enums import MembershipRole, MembershipStatus


class DashboardUser(SQLModel, table=True):
    """
    DashboardUser entity - pre-Membership access rows.

    Business Rules:
    - Never written by this service
    - Used only when a user has no Membership rows at all
    """

    __tablename__ = "dashboard_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(nullable=False, index=True)
    customer_id: UUID = Field(nullable=False, index=True)

    role: MembershipRole = Field(default=MembershipRole.member)
    status: MembershipStatus = Field(default=MembershipStatus.active)
    team_id: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
