"""
Superadmin Entity

Registry of globally privileged accounts.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Superadmin(SQLModel, table=True):
    """
    Superadmin entity - presence of a row grants access to every customer.

    Business Rules:
    - Keyed by user_id
    - email is a legacy column, only read when the email fallback is enabled
    """

    __tablename__ = "superadmins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)
    email: Optional[str] = Field(default=None, index=True, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
