"""
ChatMessage Entity

Append-only message within a chat session.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import MessageRole, SenderType


class ChatMessage(SQLModel, table=True):
    __tablename__ = "chat_messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    session_id: UUID = Field(foreign_key="chat_sessions.id", nullable=False, index=True)

    role: MessageRole = Field(nullable=False)
    sender_type: SenderType = Field(default=SenderType.bot)
    content: str
    sender_user_id: Optional[UUID] = Field(default=None)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_chat_message_session_ts", "session_id", "timestamp"),)
