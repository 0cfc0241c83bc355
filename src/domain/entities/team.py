"""
Team Entity

Named group of staff within a customer.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Team(SQLModel, table=True):
    """
    Team entity - group of staff within a customer.

    Business Rules:
    - Name is unique per customer
    - At most one team per customer has is_default = true
    - A team with active members cannot be deleted
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    customer_id: UUID = Field(foreign_key="customers.id", nullable=False, index=True)

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    is_default: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_team_customer_name", "customer_id", "name", unique=True),
    )
