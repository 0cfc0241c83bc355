"""
Support Desk Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ChatSessionStatus,
    CustomerPlan,
    InvitationStatus,
    MembershipRole,
    MembershipStatus,
    MessageRole,
    NotificationStatus,
    SenderType,
)

# Export all entities
from .user import User
from .superadmin import Superadmin
from .organization import Organization
from .customer import Customer
from .team import Team
from .membership import Membership
from .dashboard_user import DashboardUser
from .invitation import Invitation
from .chat_session import ChatSession
from .chat_message import ChatMessage
from .session_escalation import SessionEscalation
from .notification import Notification
from .push_subscription import PushSubscription
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ChatSessionStatus",
    "CustomerPlan",
    "InvitationStatus",
    "MembershipRole",
    "MembershipStatus",
    "MessageRole",
    "NotificationStatus",
    "SenderType",
    # Entities
    "User",
    "Superadmin",
    "Organization",
    "Customer",
    "Team",
    "Membership",
    "DashboardUser",
    "Invitation",
    "ChatSession",
    "ChatMessage",
    "SessionEscalation",
    "Notification",
    "PushSubscription",
    "AuditEvent",
]
