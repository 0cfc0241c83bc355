from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import require_view
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.identity import Identity

from .dtos import BulkActionResponse

MARK_ALL_AS_READ = "markAllAsRead"


class BulkSessionActionUseCase:
    """
    Use case for actions over every session in scope.

    Business Rules:
    - Only markAllAsRead is supported
    - An explicit customer requires view access; otherwise the caller's own
      customer filter applies (no customers means nothing is touched)
    - One UPDATE of unread, non-deleted sessions; safe to retry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, action: str, customer_id: Optional[UUID] = None
    ) -> Result[BulkActionResponse]:
        if action != MARK_ALL_AS_READ:
            return Return.err(Error("UNKNOWN_ACTION", f"Unknown action: {action}"))

        async with self.uow:
            if customer_id is not None:
                error = require_view(identity, customer_id)
                if error:
                    return Return.err(error)
                customer_filter = frozenset({customer_id})
            else:
                customer_filter = identity.customer_filter()

            updated = await self.uow.chat_sessions.mark_all_as_read(
                customer_filter, identity.user_id, utcnow()
            )
            await self.uow.commit()

            return Return.ok(BulkActionResponse(action=action, updated=updated))
