from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.resend_email_sender import ResendEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.web_push_sender import WebPushSender
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.email_sender import IEmailSender
from src.app.services.identity_resolver import IdentityResolver
from src.app.services.push_sender import IPushSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity, Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Principal:
    """
    Dependency to extract and verify the bearer token.

    Returns:
        Principal built from the token's subject and email claims

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)
    subject = (payload or {}).get("sub") or (payload or {}).get("user_id")
    if payload is None or subject is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        user_id = UUID(str(subject))
    except ValueError:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid token subject"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return Principal(id=user_id, email=payload.get("email") or "")


async def get_identity(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Identity:
    """Resolve the caller's customer access once per request."""
    resolver = IdentityResolver(
        uow, superadmin_email_fallback=ApplicationConfig.SUPERADMIN_EMAIL_FALLBACK
    )
    return await resolver.resolve(principal)


def get_email_sender() -> IEmailSender:
    return ResendEmailSender(
        api_key=ApplicationConfig.RESEND_API_KEY,
        from_address=ApplicationConfig.EMAIL_FROM_ADDRESS,
        chat_url_template=ApplicationConfig.CHAT_URL_TEMPLATE,
        dashboard_url=ApplicationConfig.DASHBOARD_URL,
    )


def get_push_sender() -> IPushSender:
    return WebPushSender(
        vapid_private_key=ApplicationConfig.VAPID_PRIVATE_KEY,
        vapid_claims_email=ApplicationConfig.VAPID_CLAIMS_EMAIL,
    )
