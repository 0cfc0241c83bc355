import pytest
from unittest.mock import AsyncMock, MagicMock

REPOSITORIES = (
    "users",
    "superadmins",
    "customers",
    "memberships",
    "dashboard_users",
    "teams",
    "chat_sessions",
    "chat_messages",
    "session_escalations",
    "invitations",
    "notifications",
    "push_subscriptions",
    "audit_events",
)

# Write methods that hand back the entity they were given
PASSTHROUGH_METHODS = (
    ("users", "create"),
    ("memberships", "create"),
    ("memberships", "update"),
    ("teams", "create"),
    ("teams", "update"),
    ("chat_sessions", "update"),
    ("chat_messages", "create"),
    ("session_escalations", "create"),
    ("invitations", "create"),
    ("invitations", "update"),
    ("push_subscriptions", "save"),
    ("audit_events", "create"),
)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())
    for repo, method in PASSTHROUGH_METHODS:
        getattr(getattr(uow, repo), method).side_effect = lambda entity: entity

    return uow
