from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.teams import (
    CreateTeamUseCase,
    DeleteTeamResponse,
    DeleteTeamUseCase,
    ListTeamsResponse,
    ListTeamsUseCase,
    TeamInfo,
    UpdateTeamUseCase,
)
from src.depends import get_identity, get_unit_of_work
from src.domain.identity import Identity

router = APIRouter(prefix="/customers/{customer_id}/teams", tags=["Teams"])


class CreateTeamRequest(BaseModel):
    name: str = Field(..., max_length=100, description="Team name, unique per customer")
    description: Optional[str] = Field(default=None, max_length=500)
    is_default: bool = False


class UpdateTeamRequest(BaseModel):
    """Only the fields sent are changed"""

    name: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    is_default: Optional[bool] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=ListTeamsResponse)
async def list_teams(
    customer_id: UUID,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Teams

    Raises:
        - 403 Forbidden: ACCESS_DENIED
    """
    use_case = ListTeamsUseCase(uow)
    result = await use_case.execute(identity, customer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TeamInfo)
async def create_team(
    customer_id: UUID,
    request: CreateTeamRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Team

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (missing name)
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
        - 409 Conflict: TEAM_NAME_TAKEN
    """
    use_case = CreateTeamUseCase(uow)
    result = await use_case.execute(
        identity,
        customer_id,
        request.name,
        description=request.description,
        is_default=request.is_default,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{team_id}", status_code=status.HTTP_200_OK, response_model=TeamInfo)
async def update_team(
    customer_id: UUID,
    team_id: UUID,
    request: UpdateTeamRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Team

    Setting is_default=true clears the default flag of every other team.

    Raises:
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
        - 404 Not Found: TEAM_NOT_FOUND
        - 409 Conflict: TEAM_NAME_TAKEN
    """
    use_case = UpdateTeamUseCase(uow)
    result = await use_case.execute(
        identity, customer_id, team_id, request.model_dump(exclude_unset=True)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{team_id}", status_code=status.HTTP_200_OK, response_model=DeleteTeamResponse
)
async def delete_team(
    customer_id: UUID,
    team_id: UUID,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Team

    Raises:
        - 400 Bad Request: TEAM_HAS_MEMBERS (details.member_count)
        - 403 Forbidden: ACCESS_DENIED, INSUFFICIENT_ROLE
        - 404 Not Found: TEAM_NOT_FOUND
    """
    use_case = DeleteTeamUseCase(uow)
    result = await use_case.execute(identity, customer_id, team_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
