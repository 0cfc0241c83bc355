"""
Update Member Use Case

Changes the role and/or team of a customer's staff member.
"""

from typing import Any, Dict
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import (
    check_owner_change,
    invalid_role_error,
    parse_grantable_role,
    require_administer,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, MembershipStatus
from src.domain.identity import Identity

from .dtos import UpdateMemberResponse
from .list_members_use_case import member_info


class UpdateMemberUseCase:
    """
    Use case for updating a membership.

    Business Rules:
    - Only admins/owners (or superadmins) can update staff
    - The owner membership cannot be changed (superadmin override is a
      configuration decision, off by default)
    - New role must be grantable; owner is never granted here
    - team_id must belong to the customer; null clears the team
    """

    def __init__(self, uow: UnitOfWork, allow_superadmin_owner_override: bool = False):
        self.uow = uow
        self.allow_superadmin_owner_override = allow_superadmin_owner_override

    async def execute(
        self,
        identity: Identity,
        customer_id: UUID,
        user_id: UUID,
        changes: Dict[str, Any],
    ) -> Result[UpdateMemberResponse]:
        """
        Execute update member use case.

        Args:
            identity: Resolved caller
            customer_id: Customer of the membership
            user_id: Staff member to update
            changes: Fields explicitly sent (role, team_id)

        Returns:
            Result with UpdateMemberResponse DTO, or Error
        """
        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            membership = await self.uow.memberships.get_by_user_and_customer(
                user_id, customer_id
            )
            if membership is None or membership.status != MembershipStatus.active:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "User is not a member of this customer")
                )

            error = check_owner_change(
                identity, membership, self.allow_superadmin_owner_override
            )
            if error:
                return Return.err(error)

            old_role = membership.role.value
            old_team_id = membership.team_id

            if changes.get("role") is not None:
                new_role = parse_grantable_role(changes["role"])
                if new_role is None:
                    return Return.err(invalid_role_error(changes["role"]))
                membership.role = new_role

            if "team_id" in changes:
                team_id = changes["team_id"]
                if team_id is not None:
                    team = await self.uow.teams.get_by_customer_and_id(
                        customer_id, team_id
                    )
                    if team is None:
                        return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))
                membership.team_id = team_id

            membership = await self.uow.memberships.update(membership)

            audit = AuditEvent(
                customer_id=customer_id,
                user_id=identity.user_id,
                action="member_updated",
                event_metadata={
                    "target_user_id": str(user_id),
                    "old_role": old_role,
                    "new_role": membership.role.value,
                    "old_team_id": str(old_team_id) if old_team_id else None,
                    "new_team_id": str(membership.team_id) if membership.team_id else None,
                },
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            user = await self.uow.users.get_by_id(user_id)
            team_names = {}
            if membership.team_id is not None:
                team = await self.uow.teams.get_by_customer_and_id(
                    customer_id, membership.team_id
                )
                if team is not None:
                    team_names[team.id] = team.name

            return Return.ok(
                UpdateMemberResponse(
                    status="updated", member=member_info(membership, user, team_names)
                )
            )
