"""
Session Use Case DTOs (Data Transfer Objects)

All Response classes for the chat session domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import ChatMessage, ChatSession


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _str(value) -> Optional[str]:
    return str(value) if value is not None else None


# ============================================================================
# Response DTOs
# ============================================================================


class SessionSummary(BaseModel):
    """One row of the dashboard session list"""

    id: str
    customer_id: str
    customer_name: Optional[str] = None
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    guest_phone: Optional[str] = None
    status: str
    needs_human: bool
    is_read: bool
    read_at: Optional[str] = None
    read_by: Optional[str] = None
    assigned_user_id: Optional[str] = None
    assigned_team_id: Optional[str] = None
    escalation_level: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_entity(
        cls, session: ChatSession, customer_name: Optional[str] = None
    ) -> "SessionSummary":
        return cls(
            id=str(session.id),
            customer_id=str(session.customer_id),
            customer_name=customer_name,
            guest_name=session.guest_name,
            guest_email=session.guest_email,
            guest_phone=session.guest_phone,
            status=session.status.value,
            needs_human=session.needs_human,
            is_read=session.is_read,
            read_at=_iso(session.read_at),
            read_by=_str(session.read_by),
            assigned_user_id=_str(session.assigned_user_id),
            assigned_team_id=_str(session.assigned_team_id),
            escalation_level=session.escalation_level,
            created_at=_iso(session.created_at),
            updated_at=_iso(session.updated_at),
        )


class ListSessionsResponse(BaseModel):
    sessions: List[SessionSummary]


class MessageInfo(BaseModel):
    id: str
    role: str
    sender_type: str
    content: str
    sender_user_id: Optional[str] = None
    timestamp: Optional[str] = None

    @classmethod
    def from_entity(cls, message: ChatMessage) -> "MessageInfo":
        return cls(
            id=str(message.id),
            role=message.role.value,
            sender_type=message.sender_type.value,
            content=message.content,
            sender_user_id=_str(message.sender_user_id),
            timestamp=_iso(message.timestamp),
        )


class GetMessagesResponse(BaseModel):
    session_id: str
    messages: List[MessageInfo]


class SessionActionResponse(BaseModel):
    """Response for a single-session action; session is None after delete"""

    success: bool = True
    action: str
    session: Optional[SessionSummary] = None


class BulkActionResponse(BaseModel):
    success: bool = True
    action: str
    updated: int


class ReplyResponse(BaseModel):
    message: MessageInfo
    email_sent: bool
