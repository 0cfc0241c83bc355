"""
PushSubscription Entity

Browser web-push endpoint registered by a staff user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PushSubscription(SQLModel, table=True):
    """
    PushSubscription entity - one row per (user, browser endpoint).

    Business Rules:
    - (user_id, endpoint) is unique; subscribing again refreshes the keys
    - Endpoints answered with 404/410 by the push service are deleted
    """

    __tablename__ = "push_subscriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(nullable=False, index=True)
    customer_id: Optional[UUID] = Field(default=None, index=True)

    endpoint: str = Field(max_length=1000)
    p256dh: str = Field(max_length=255)
    auth: str = Field(max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_push_subscription_user_endpoint", "user_id", "endpoint", unique=True),
    )
