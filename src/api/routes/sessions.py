from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, raise_for_error
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions import (
    BulkActionResponse,
    BulkSessionActionUseCase,
    GetMessagesResponse,
    GetSessionMessagesUseCase,
    ListSessionsResponse,
    ListSessionsUseCase,
    ReplyResponse,
    ReplyToSessionUseCase,
    SessionActionResponse,
    SessionActionsUseCase,
)
from src.depends import get_email_sender, get_identity, get_unit_of_work
from src.domain.identity import Identity

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class SessionActionRequest(BaseModel):
    """
    Session action HTTP request payload

    action: markAsRead, markAsUnread, assign or delete
    """

    action: str = Field(..., description="Action name")
    data: Optional[Dict[str, Any]] = Field(default=None, description="Action arguments")


class AssignData(BaseModel):
    """Arguments of the assign action"""

    to_user_id: Optional[UUID] = Field(
        default=None, validation_alias=AliasChoices("to_user_id", "toUserId")
    )
    to_team_id: Optional[UUID] = Field(
        default=None, validation_alias=AliasChoices("to_team_id", "toTeamId")
    )
    reason: Optional[str] = Field(default=None, max_length=100)
    note: Optional[str] = None


class BulkActionRequest(BaseModel):
    action: str = Field(..., description="Bulk action name (markAllAsRead)")
    customer_id: Optional[UUID] = Field(
        default=None, validation_alias=AliasChoices("customer_id", "customerId")
    )


class ReplyRequest(BaseModel):
    message: str = Field(..., min_length=1, description="Reply text sent to the guest")


@router.get("", status_code=status.HTTP_200_OK, response_model=ListSessionsResponse)
async def list_sessions(
    customer_id: Optional[UUID] = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Chat Sessions

    Sessions of every customer the caller can view (or of one customer),
    newest activity first. Deleted and suspicious sessions are excluded.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: ACCESS_DENIED for an explicit customer filter
    """
    use_case = ListSessionsUseCase(uow)
    result = await use_case.execute(identity, customer_id=customer_id, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/bulk", status_code=status.HTTP_200_OK, response_model=BulkActionResponse)
async def bulk_session_action(
    request: BulkActionRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Bulk Session Action

    markAllAsRead marks every unread session in scope as read.

    Raises:
        - 400 Bad Request: UNKNOWN_ACTION
        - 403 Forbidden: ACCESS_DENIED for an explicit customer
    """
    use_case = BulkSessionActionUseCase(uow)
    result = await use_case.execute(identity, request.action, request.customer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{session_id}", status_code=status.HTTP_200_OK, response_model=SessionActionResponse
)
async def session_action(
    session_id: UUID,
    request: SessionActionRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Session Action

    Applies markAsRead, markAsUnread, assign or delete to one session.

    Raises:
        - 400 Bad Request: UNKNOWN_ACTION, INVALID_ASSIGNMENT, VALIDATION_ERROR
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: SESSION_NOT_FOUND, TEAM_NOT_FOUND, USER_NOT_FOUND
        - 500 Internal Server Error: ASSIGNMENT_FAILED
    """
    data = request.data or {}
    if request.action == "assign":
        try:
            data = AssignData.model_validate(data).model_dump()
        except ValidationError as exc:
            raise ClientError(
                Error(
                    "VALIDATION_ERROR",
                    "Invalid assign data",
                    details={
                        "fields": [
                            {
                                "field": ".".join(str(part) for part in e["loc"]),
                                "message": e["msg"],
                            }
                            for e in exc.errors()
                        ]
                    },
                ),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

    use_case = SessionActionsUseCase(uow, hard_delete=ApplicationConfig.SESSION_HARD_DELETE)
    result = await use_case.execute(identity, session_id, request.action, data)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{session_id}/messages",
    status_code=status.HTTP_200_OK,
    response_model=GetMessagesResponse,
)
async def get_session_messages(
    session_id: UUID,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Session Messages

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: SESSION_NOT_FOUND (missing, deleted or out of scope)
    """
    use_case = GetSessionMessagesUseCase(uow)
    result = await use_case.execute(identity, session_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{session_id}/reply", status_code=status.HTTP_200_OK, response_model=ReplyResponse
)
async def reply_to_session(
    session_id: UUID,
    request: ReplyRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Reply To Guest

    Saves a human reply, clears needs_human and emails the guest when an
    address is known. email_sent reports whether the email went out.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: SESSION_NOT_FOUND
        - 500 Internal Server Error: MESSAGE_SAVE_FAILED
    """
    use_case = ReplyToSessionUseCase(uow, email_sender)
    result = await use_case.execute(identity, session_id, request.message)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
