from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import LoadContextResponse, LoadContextUseCase
from src.depends import get_identity, get_unit_of_work
from src.domain.identity import Identity

router = APIRouter(tags=["Context"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=LoadContextResponse)
async def get_me(
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User Context

    Returns the caller's profile, superadmin flag, organization scope and
    the customers they can access with their role in each.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = LoadContextUseCase(uow)
    result = await use_case.execute(identity)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
