"""
Member Use Case DTOs (Data Transfer Objects)

All Response classes for the staff membership domain.
"""

from typing import List, Optional

from pydantic import BaseModel


class MemberInfo(BaseModel):
    """An active member or a pending invitation (is_invite=True)"""

    id: str
    user_id: Optional[str] = None
    email: str
    role: str
    team_id: Optional[str] = None
    team_name: Optional[str] = None
    status: str
    is_invite: bool = False
    created_at: Optional[str] = None
    expires_at: Optional[str] = None


class ListMembersResponse(BaseModel):
    users: List[MemberInfo]


class InviteMemberResponse(BaseModel):
    """
    status is "added" when an existing account got access directly,
    "invited" when an invitation was created.
    """

    status: str
    membership_id: Optional[str] = None
    user_id: Optional[str] = None
    invite_id: Optional[str] = None
    expires_at: Optional[str] = None
    email_sent: bool = False


class UpdateMemberResponse(BaseModel):
    status: str
    member: MemberInfo


class RemoveMemberResponse(BaseModel):
    status: str
