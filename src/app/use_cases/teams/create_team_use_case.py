"""
Create Team Use Case
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.access_guard import require_administer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, Team
from src.domain.identity import Identity

from .dtos import TeamInfo


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Business Rules:
    - Only admins/owners (or superadmins) can create teams
    - Name is required and trimmed; unique per customer
    - A new default team clears the previous default first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        identity: Identity,
        customer_id: UUID,
        name: str,
        description: Optional[str] = None,
        is_default: bool = False,
    ) -> Result[TeamInfo]:
        name = (name or "").strip()
        if not name:
            return Return.err(Error("VALIDATION_ERROR", "Team name is required"))

        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            existing = await self.uow.teams.get_by_customer_and_name(customer_id, name)
            if existing is not None:
                return Return.err(
                    Error("TEAM_NAME_TAKEN", f"A team named '{name}' already exists")
                )

            if is_default:
                await self.uow.teams.clear_default(customer_id)

            team = Team(
                customer_id=customer_id,
                name=name,
                description=description,
                is_default=is_default,
            )
            try:
                team = await self.uow.teams.create(team)
            except IntegrityError:
                # Lost a race against a concurrent create with the same name
                await self.uow.rollback()
                return Return.err(
                    Error("TEAM_NAME_TAKEN", f"A team named '{name}' already exists")
                )

            audit = AuditEvent(
                customer_id=customer_id,
                user_id=identity.user_id,
                action="team_created",
                event_metadata={"team_id": str(team.id), "name": name},
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            return Return.ok(TeamInfo.from_entity(team))
