from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_guard import require_view
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity

from .dtos import ListTeamsResponse, TeamInfo


class ListTeamsUseCase:
    """Teams of a customer ordered by name, with active member counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, customer_id: UUID
    ) -> Result[ListTeamsResponse]:
        async with self.uow:
            error = require_view(identity, customer_id)
            if error:
                return Return.err(error)

            teams = await self.uow.teams.get_by_customer_id(customer_id)
            counts = await self.uow.memberships.count_active_by_team_ids(
                [t.id for t in teams]
            )
            return Return.ok(
                ListTeamsResponse(
                    teams=[TeamInfo.from_entity(t, counts.get(t.id, 0)) for t in teams]
                )
            )
