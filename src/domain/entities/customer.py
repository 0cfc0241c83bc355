"""
Customer Entity

The tenant: unit of data isolation for sessions, teams and staff.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import CustomerPlan


class Customer(SQLModel, table=True):
    """
    Customer entity - isolated tenant account.

    Business Rules:
    - Sessions, teams, invitations and customer memberships belong to exactly one customer
    - plan decides the seat limit for active members
    - organization_id groups customers for org-wide memberships
    """

    __tablename__ = "customers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(unique=True, index=True, max_length=100)
    plan: Optional[CustomerPlan] = Field(default=CustomerPlan.starter)
    logo_url: Optional[str] = Field(default=None, max_length=500)

    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_customer_name", "name"),)
