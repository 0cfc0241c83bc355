"""
Use Cases

Organized into domain folders:
- sessions/: Chat session listing, actions and replies
- teams/: Team management
- members/: Staff membership and invitations
- push/: Push subscriptions and fan-out
- context/: Caller context

Import from subdirectories for better organization.
"""

from .context import LoadContextUseCase
from .members import (
    InviteMemberUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
    UpdateMemberUseCase,
)
from .push import SendPushUseCase, SubscribePushUseCase, UnsubscribePushUseCase
from .sessions import (
    BulkSessionActionUseCase,
    GetSessionMessagesUseCase,
    ListSessionsUseCase,
    ReplyToSessionUseCase,
    SessionActionsUseCase,
)
from .teams import (
    CreateTeamUseCase,
    DeleteTeamUseCase,
    ListTeamsUseCase,
    UpdateTeamUseCase,
)

__all__ = [
    # Sessions
    "ListSessionsUseCase",
    "GetSessionMessagesUseCase",
    "SessionActionsUseCase",
    "BulkSessionActionUseCase",
    "ReplyToSessionUseCase",
    # Teams
    "ListTeamsUseCase",
    "CreateTeamUseCase",
    "UpdateTeamUseCase",
    "DeleteTeamUseCase",
    # Members
    "ListMembersUseCase",
    "InviteMemberUseCase",
    "UpdateMemberUseCase",
    "RemoveMemberUseCase",
    # Push
    "SubscribePushUseCase",
    "UnsubscribePushUseCase",
    "SendPushUseCase",
    # Context
    "LoadContextUseCase",
]
