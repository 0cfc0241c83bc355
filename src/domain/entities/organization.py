"""
Organization Entity

Optional grouping of several customers under one subscription.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow
from .enums import CustomerPlan


class Organization(SQLModel, table=True):
    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    plan: CustomerPlan = Field(default=CustomerPlan.starter)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
