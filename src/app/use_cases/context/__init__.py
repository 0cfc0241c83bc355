"""
Caller Context Use Cases
"""

from .load_context_use_case import (
    CustomerAccess,
    LoadContextResponse,
    LoadContextUseCase,
    UserContext,
)

__all__ = [
    "LoadContextUseCase",
    "LoadContextResponse",
    "CustomerAccess",
    "UserContext",
]
