from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.internal_auth import verify_internal_api_key
from src.app.services.push_sender import IPushSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.push import (
    SendPushResponse,
    SendPushUseCase,
    SubscribePushUseCase,
    SubscriptionResponse,
    UnsubscribePushUseCase,
)
from src.depends import get_identity, get_push_sender, get_unit_of_work
from src.domain.identity import Identity

router = APIRouter(prefix="/push", tags=["Push"])


class SubscriptionKeys(BaseModel):
    p256dh: Optional[str] = None
    auth: Optional[str] = None


class BrowserSubscription(BaseModel):
    """PushSubscription.toJSON() as produced by the browser"""

    endpoint: Optional[str] = None
    keys: SubscriptionKeys = SubscriptionKeys()


class SubscribeRequest(BaseModel):
    subscription: BrowserSubscription = BrowserSubscription()
    customer_id: Optional[UUID] = Field(
        default=None, validation_alias=AliasChoices("customer_id", "customerId")
    )


class UnsubscribeRequest(BaseModel):
    endpoint: Optional[str] = None


class SendPushRequest(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None
    user_id: Optional[UUID] = Field(
        default=None, validation_alias=AliasChoices("user_id", "userId")
    )
    customer_id: Optional[UUID] = Field(
        default=None, validation_alias=AliasChoices("customer_id", "customerId")
    )
    data: Optional[Dict[str, Any]] = None


@router.post(
    "/subscriptions", status_code=status.HTTP_200_OK, response_model=SubscriptionResponse
)
async def subscribe(
    request: SubscribeRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register Push Subscription

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (endpoint or keys missing)
        - 403 Forbidden: ACCESS_DENIED for a customer the caller cannot view
    """
    use_case = SubscribePushUseCase(uow)
    result = await use_case.execute(
        identity,
        endpoint=request.subscription.endpoint,
        p256dh=request.subscription.keys.p256dh,
        auth=request.subscription.keys.auth,
        customer_id=request.customer_id,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/subscriptions", status_code=status.HTTP_200_OK, response_model=SubscriptionResponse
)
async def unsubscribe(
    request: UnsubscribeRequest,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Push Subscription

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (endpoint missing)
    """
    use_case = UnsubscribePushUseCase(uow)
    result = await use_case.execute(identity, request.endpoint)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/send",
    status_code=status.HTTP_200_OK,
    response_model=SendPushResponse,
    dependencies=[Depends(verify_internal_api_key)],
)
async def send_push(
    request: SendPushRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    push_sender: IPushSender = Depends(get_push_sender),
):
    """
    Send Push Notification (internal)

    Requires the X-Internal-API-Key header. Targets one user (preferred) or
    every subscription of a customer.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, MISSING_TARGET
        - 401 Unauthorized: UNAUTHORIZED, INVALID_API_KEY
    """
    use_case = SendPushUseCase(uow, push_sender)
    result = await use_case.execute(
        request.title,
        request.body,
        user_id=request.user_id,
        customer_id=request.customer_id,
        data=request.data,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
