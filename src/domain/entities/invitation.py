"""
Invitation Entity

Pending invitation for an email that has no account yet.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import InvitationStatus, MembershipRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending invitations to join a customer.

    Business Rules:
    - Created by admin/owner when the email has no account
    - Expires after 7 days
    - Token is single-use, cryptographically secure
    - At most one pending invitation per (customer_id, email)
    - Accepted by an external onboarding flow
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    customer_id: UUID = Field(foreign_key="customers.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    team_id: Optional[UUID] = Field(default=None, foreign_key="teams.id")
    token: str = Field(unique=True, index=True, max_length=64)

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    invited_by: Optional[UUID] = Field(default=None)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_customer_email", "customer_id", "email"),
        Index("idx_invitation_status", "status"),
    )

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now
