"""
Chat Session Use Cases

Listing, reading, replying to and mutating chat sessions.
"""

from .bulk_session_action_use_case import BulkSessionActionUseCase
from .dtos import (
    BulkActionResponse,
    GetMessagesResponse,
    ListSessionsResponse,
    MessageInfo,
    ReplyResponse,
    SessionActionResponse,
    SessionSummary,
)
from .get_session_messages_use_case import GetSessionMessagesUseCase
from .list_sessions_use_case import ListSessionsUseCase
from .reply_to_session_use_case import ReplyToSessionUseCase
from .session_actions_use_case import SessionActionsUseCase

__all__ = [
    "ListSessionsUseCase",
    "GetSessionMessagesUseCase",
    "SessionActionsUseCase",
    "BulkSessionActionUseCase",
    "ReplyToSessionUseCase",
    "SessionSummary",
    "ListSessionsResponse",
    "MessageInfo",
    "GetMessagesResponse",
    "SessionActionResponse",
    "BulkActionResponse",
    "ReplyResponse",
]
