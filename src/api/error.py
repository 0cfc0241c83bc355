from typing import Dict

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Use case error codes that are the caller's fault; anything else is a 500
CLIENT_ERROR_STATUS: Dict[str, int] = {
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_API_KEY": status.HTTP_401_UNAUTHORIZED,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "SESSION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TEAM_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBERSHIP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TEAM_NAME_TAKEN": status.HTTP_409_CONFLICT,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "PLAN_LIMIT_EXCEEDED": status.HTTP_400_BAD_REQUEST,
    "INVITE_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "ALREADY_HAS_ACCESS": status.HTTP_400_BAD_REQUEST,
    "CANNOT_CHANGE_OWNER": status.HTTP_400_BAD_REQUEST,
    "CANNOT_REMOVE_OWNER": status.HTTP_400_BAD_REQUEST,
    "CANNOT_REMOVE_SELF": status.HTTP_400_BAD_REQUEST,
    "TEAM_HAS_MEMBERS": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ASSIGNMENT": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_ACTION": status.HTTP_400_BAD_REQUEST,
    "MISSING_TARGET": status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error: Error) -> None:
    """Raise the HTTP-facing exception for a failed use case result."""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
