"""
Update Team Use Case
"""

from typing import Any, Dict
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import require_administer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from src.domain.identity import Identity

from .dtos import TeamInfo

UPDATABLE_FIELDS = ("name", "description", "is_default")


class UpdateTeamUseCase:
    """
    Use case for updating a team.

    Business Rules:
    - Only admins/owners (or superadmins) can update teams
    - Only name, description and is_default can change
    - Renaming keeps names unique per customer
    - Setting is_default clears every other default of the customer first,
      so at most one default remains
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        identity: Identity,
        customer_id: UUID,
        team_id: UUID,
        changes: Dict[str, Any],
    ) -> Result[TeamInfo]:
        """
        Execute update team use case.

        Args:
            identity: Resolved caller
            customer_id: Customer owning the team
            team_id: Team to update
            changes: Fields explicitly sent by the caller

        Returns:
            Result with TeamInfo, or Error
        """
        changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}

        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            team = await self.uow.teams.get_by_customer_and_id(customer_id, team_id)
            if team is None:
                return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))

            if "name" in changes:
                name = (changes["name"] or "").strip()
                if not name:
                    return Return.err(Error("VALIDATION_ERROR", "Team name is required"))
                other = await self.uow.teams.get_by_customer_and_name(customer_id, name)
                if other is not None and other.id != team.id:
                    return Return.err(
                        Error("TEAM_NAME_TAKEN", f"A team named '{name}' already exists")
                    )
                team.name = name

            if "description" in changes:
                team.description = changes["description"]

            if changes.get("is_default") is True:
                await self.uow.teams.clear_default(customer_id)
                team.is_default = True
            elif changes.get("is_default") is False:
                team.is_default = False

            team = await self.uow.teams.update(team)

            audit = AuditEvent(
                customer_id=customer_id,
                user_id=identity.user_id,
                action="team_updated",
                event_metadata={"team_id": str(team_id), "changes": changes},
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            counts = await self.uow.memberships.count_active_by_team_ids([team.id])
            return Return.ok(TeamInfo.from_entity(team, counts.get(team.id, 0)))
