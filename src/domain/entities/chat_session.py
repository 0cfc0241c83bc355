"""
ChatSession Entity

A guest conversation with the customer's chatbot.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import ChatSessionStatus


class ChatSession(SQLModel, table=True):
    """
    ChatSession entity - conversation between a guest and a customer's chatbot.

    Business Rules:
    - Created by the chat ingestion pipeline, mutated by staff
    - Read state, assignment and lifecycle are independent columns
    - escalation_level counts hand-overs; 0 means never assigned
    - deleted_at marks a soft delete; such sessions are hidden everywhere
    - Suspicious sessions are hidden from listings
    """

    __tablename__ = "chat_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    customer_id: UUID = Field(foreign_key="customers.id", nullable=False, index=True)

    guest_name: Optional[str] = Field(default=None, max_length=255)
    guest_email: Optional[str] = Field(default=None, max_length=255)
    guest_phone: Optional[str] = Field(default=None, max_length=50)

    status: ChatSessionStatus = Field(default=ChatSessionStatus.active)
    needs_human: bool = Field(default=False)

    is_read: bool = Field(default=False)
    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    read_by: Optional[UUID] = Field(default=None)

    assigned_user_id: Optional[UUID] = Field(default=None, index=True)
    assigned_team_id: Optional[UUID] = Field(default=None, index=True)
    escalation_level: int = Field(default=0)

    is_suspicious: bool = Field(default=False)

    # Soft delete
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    deleted_by: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_chat_session_customer_updated", "customer_id", "updated_at"),
        Index("idx_chat_session_is_read", "is_read"),
        Index("idx_chat_session_deleted_at", "deleted_at"),
    )

    @property
    def is_assigned(self) -> bool:
        return self.assigned_user_id is not None or self.assigned_team_id is not None
