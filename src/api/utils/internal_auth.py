"""
Internal API Key Authentication

Validates the shared key of service-to-service callers (push fan-out).
"""

import secrets

from fastapi import Header, status
from libs.result import Error
from src.api.error import ClientError
from config import ApplicationConfig


async def verify_internal_api_key(x_internal_api_key: str = Header(None)):
    """
    Verify internal API key from X-Internal-API-Key header.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_internal_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Internal API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not secrets.compare_digest(
        x_internal_api_key.encode(), str(ApplicationConfig.INTERNAL_API_KEY).encode()
    ):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid internal API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
