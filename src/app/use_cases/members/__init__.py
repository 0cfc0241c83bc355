"""
Staff Membership Use Cases

Listing, inviting, updating and removing the staff of a customer.
"""

from .dtos import (
    InviteMemberResponse,
    ListMembersResponse,
    MemberInfo,
    RemoveMemberResponse,
    UpdateMemberResponse,
)
from .invite_member_use_case import InviteMemberUseCase
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_member_use_case import UpdateMemberUseCase

__all__ = [
    "ListMembersUseCase",
    "InviteMemberUseCase",
    "UpdateMemberUseCase",
    "RemoveMemberUseCase",
    "MemberInfo",
    "ListMembersResponse",
    "InviteMemberResponse",
    "UpdateMemberResponse",
    "RemoveMemberResponse",
]
