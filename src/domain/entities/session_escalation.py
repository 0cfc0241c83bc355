"""
SessionEscalation Entity

Audit trail of session hand-overs.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class SessionEscalation(SQLModel, table=True):
    """
    SessionEscalation entity - one row per assignment change.

    Business Rules:
    - Immutable (never updated or deleted by staff actions)
    - from_* is the assignment before the change, to_* the one after
    """

    __tablename__ = "session_escalations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    session_id: UUID = Field(foreign_key="chat_sessions.id", nullable=False, index=True)

    from_user_id: Optional[UUID] = None
    from_team_id: Optional[UUID] = None
    to_user_id: Optional[UUID] = None
    to_team_id: Optional[UUID] = None

    reason: Optional[str] = Field(default=None, max_length=100)
    note: Optional[str] = None

    created_by: UUID = Field(nullable=False)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_escalation_session_created", "session_id", "created_at"),)
