"""
List Members Use Case

Active staff of a customer followed by its pending invitations.
"""

from typing import Dict, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_guard import require_administer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Membership, User
from src.domain.identity import Identity

from .dtos import ListMembersResponse, MemberInfo


def display_email(user_id: UUID, user: Optional[User]) -> str:
    """Account email, or a shortened id when the profile is missing."""
    if user is not None and user.email:
        return user.email
    return f"{str(user_id)[:8]}..."


def member_info(
    membership: Membership, user: Optional[User], team_names: Dict[UUID, str]
) -> MemberInfo:
    return MemberInfo(
        id=str(membership.id),
        user_id=str(membership.user_id),
        email=display_email(membership.user_id, user),
        role=membership.role.value,
        team_id=str(membership.team_id) if membership.team_id else None,
        team_name=team_names.get(membership.team_id) if membership.team_id else None,
        status=membership.status.value,
        created_at=membership.created_at.isoformat() if membership.created_at else None,
    )


class ListMembersUseCase:
    """
    Use case for listing the staff of a customer.

    Business Rules:
    - Only admins/owners (or superadmins) can list staff
    - Active customer-scoped memberships first, oldest first
    - Pending invitations follow, flagged is_invite; expired ones are left out
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, customer_id: UUID
    ) -> Result[ListMembersResponse]:
        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            memberships = await self.uow.memberships.get_active_by_customer_id(
                customer_id
            )
            users = await self.uow.users.get_by_ids([m.user_id for m in memberships])
            users_by_id = {u.id: u for u in users}
            teams = await self.uow.teams.get_by_customer_id(customer_id)
            team_names = {t.id: t.name for t in teams}
            invitations = await self.uow.invitations.get_pending_by_customer_id(
                customer_id, utcnow()
            )

            rows = [
                member_info(m, users_by_id.get(m.user_id), team_names)
                for m in memberships
            ]
            rows.extend(
                MemberInfo(
                    id=str(inv.id),
                    email=inv.email,
                    role=inv.role.value,
                    team_id=str(inv.team_id) if inv.team_id else None,
                    team_name=team_names.get(inv.team_id) if inv.team_id else None,
                    status=inv.status.value,
                    is_invite=True,
                    created_at=inv.created_at.isoformat() if inv.created_at else None,
                    expires_at=inv.expires_at.isoformat() if inv.expires_at else None,
                )
                for inv in invitations
            )
            return Return.ok(ListMembersResponse(users=rows))
