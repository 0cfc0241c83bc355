from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    InviteMemberResponse,
    InviteMemberUseCase,
    ListMembersResponse,
    ListMembersUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateMemberResponse,
    UpdateMemberUseCase,
)
from src.depends import get_email_sender, get_identity, get_unit_of_work
from src.domain.identity import Identity

router = APIRouter(prefix="/customers/{customer_id}/users", tags=["Users"])


class InviteUserRequest(BaseModel):
    """
    Invite user HTTP request payload

    Existing accounts get access directly; other emails get an invitation.
    """

    email: EmailStr = Field(..., description="Email address to add")
    role: str = Field(default="member", description="viewer/member/manager/admin")
    team_id: Optional[UUID] = None


class UpdateUserRequest(BaseModel):
    """Only the fields sent are changed; team_id=null clears the team"""

    role: Optional[str] = None
    team_id: Optional[UUID] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=ListMembersResponse)
async def list_users(
    customer_id: UUID,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users And Pending Invitations

    Raises:
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
    """
    use_case = ListMembersUseCase(uow)
    result = await use_case.execute(identity, customer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InviteMemberResponse)
async def invite_user(
    customer_id: UUID,
    request: InviteUserRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Invite Or Add User

    Raises:
        - 400 Bad Request: INVALID_ROLE, PLAN_LIMIT_EXCEEDED (details.limit),
          INVITE_ALREADY_EXISTS, ALREADY_HAS_ACCESS
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
        - 404 Not Found: CUSTOMER_NOT_FOUND, TEAM_NOT_FOUND
    """
    use_case = InviteMemberUseCase(uow, email_sender)
    result = await use_case.execute(
        identity, customer_id, request.email, request.role, request.team_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=UpdateMemberResponse
)
async def update_user(
    customer_id: UUID,
    user_id: UUID,
    request: UpdateUserRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User Role Or Team

    Raises:
        - 400 Bad Request: CANNOT_CHANGE_OWNER, INVALID_ROLE
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
        - 404 Not Found: MEMBERSHIP_NOT_FOUND, TEAM_NOT_FOUND
    """
    use_case = UpdateMemberUseCase(
        uow,
        allow_superadmin_owner_override=ApplicationConfig.SUPERADMIN_OWNER_OVERRIDE,
    )
    result = await use_case.execute(
        identity, customer_id, user_id, request.model_dump(exclude_unset=True)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=RemoveMemberResponse
)
async def remove_user(
    customer_id: UUID,
    user_id: UUID,
    is_invite: bool = Query(default=False),
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove User Or Invitation

    With is_invite=true, user_id is the invitation id.

    Raises:
        - 400 Bad Request: CANNOT_REMOVE_OWNER, CANNOT_REMOVE_SELF
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
        - 404 Not Found: MEMBERSHIP_NOT_FOUND, INVITE_NOT_FOUND
    """
    use_case = RemoveMemberUseCase(
        uow,
        allow_superadmin_owner_override=ApplicationConfig.SUPERADMIN_OWNER_OVERRIDE,
    )
    result = await use_case.execute(identity, customer_id, user_id, is_invite=is_invite)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
