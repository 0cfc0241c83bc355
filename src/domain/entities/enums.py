"""
Support Desk Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """Staff role within a customer or organization, lowest to highest"""

    viewer = "viewer"
    member = "member"
    manager = "manager"
    admin = "admin"
    owner = "owner"

    @property
    def rank(self) -> int:
        return _ROLE_ORDER.index(self)

    def at_least(self, other: "MembershipRole") -> bool:
        return self.rank >= other.rank


_ROLE_ORDER = [
    MembershipRole.viewer,
    MembershipRole.member,
    MembershipRole.manager,
    MembershipRole.admin,
    MembershipRole.owner,
]


class MembershipStatus(str, Enum):
    """Membership status"""

    active = "active"
    revoked = "revoked"


class CustomerPlan(str, Enum):
    """Subscription tier of a customer"""

    starter = "starter"
    pro = "pro"
    enterprise = "enterprise"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"


class ChatSessionStatus(str, Enum):
    active = "active"
    waiting = "waiting"
    ended = "ended"


class MessageRole(str, Enum):
    user = "user"
    assistant = "assistant"


class SenderType(str, Enum):
    bot = "bot"
    human = "human"


class NotificationStatus(str, Enum):
    unread = "unread"
    read = "read"
    handled = "handled"
