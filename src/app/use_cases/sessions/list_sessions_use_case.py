"""
List Sessions Use Case

Dashboard listing of chat sessions across the caller's customers.
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_guard import require_view
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity

from .dtos import ListSessionsResponse, SessionSummary

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


class ListSessionsUseCase:
    """
    Use case for listing chat sessions.

    Business Rules:
    - Only sessions of customers the identity can view
    - Soft-deleted and suspicious sessions are never listed
    - Most recently updated first
    - An explicit customer filter requires view access to that customer
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        identity: Identity,
        customer_id: Optional[UUID] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> Result[ListSessionsResponse]:
        limit = max(1, min(limit, MAX_LIMIT))

        async with self.uow:
            if customer_id is not None:
                error = require_view(identity, customer_id)
                if error:
                    return Return.err(error)
                customer_filter = frozenset({customer_id})
            else:
                customer_filter = identity.customer_filter()

            sessions = await self.uow.chat_sessions.list_visible(customer_filter, limit)

            customer_ids = list({s.customer_id for s in sessions})
            customers = await self.uow.customers.get_by_ids(customer_ids)
            names = {c.id: c.name for c in customers}

            return Return.ok(
                ListSessionsResponse(
                    sessions=[
                        SessionSummary.from_entity(s, names.get(s.customer_id))
                        for s in sessions
                    ]
                )
            )
