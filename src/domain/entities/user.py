"""
User Entity

Profile of a staff account authenticated upstream.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - the account behind an authenticated principal.

    Business Rules:
    - Email is unique and stored lower-case
    - Credentials and MFA live with the upstream identity provider
    - Access comes only from Memberships or the Superadmin registry
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
