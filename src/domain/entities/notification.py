"""
Notification Entity

Staff-facing alert that a session needs a human.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow
from .enums import NotificationStatus


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    session_id: UUID = Field(foreign_key="chat_sessions.id", nullable=False, index=True)
    customer_id: UUID = Field(nullable=False, index=True)

    status: NotificationStatus = Field(default=NotificationStatus.unread)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
