from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import require_administer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from src.domain.identity import Identity

from .dtos import DeleteTeamResponse


class DeleteTeamUseCase:
    """
    Use case for deleting a team.

    Business Rules:
    - Only admins/owners (or superadmins) can delete teams
    - A team still referenced by active memberships is not deleted;
      the error carries the member count
    - Revoked memberships and invitations lose their team_id first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, customer_id: UUID, team_id: UUID
    ) -> Result[DeleteTeamResponse]:
        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            team = await self.uow.teams.get_by_customer_and_id(customer_id, team_id)
            if team is None:
                return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))

            counts = await self.uow.memberships.count_active_by_team_ids([team.id])
            member_count = counts.get(team.id, 0)
            if member_count > 0:
                return Return.err(
                    Error(
                        "TEAM_HAS_MEMBERS",
                        f"Team has {member_count} members. Move them to another team first.",
                        details={"member_count": member_count},
                    )
                )

            # Revoked memberships and invitations may still point at the team
            await self.uow.memberships.clear_team(customer_id, team.id)
            await self.uow.invitations.clear_team(customer_id, team.id)
            await self.uow.teams.delete(team)

            audit = AuditEvent(
                customer_id=customer_id,
                user_id=identity.user_id,
                action="team_deleted",
                event_metadata={"team_id": str(team_id), "name": team.name},
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            return Return.ok(DeleteTeamResponse(status="deleted"))
