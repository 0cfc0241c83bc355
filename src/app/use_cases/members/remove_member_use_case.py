"""
Remove Member Use Case

Revokes a staff member's access, or withdraws a pending invitation.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import (
    check_owner_removal,
    check_self_removal,
    require_administer,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, MembershipStatus
from src.domain.identity import Identity

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Use case for removing staff from a customer.

    Business Rules:
    - Only admins/owners (or superadmins) can remove staff
    - is_invite=True deletes the invitation row instead
    - Nobody can remove themselves (checked before owner protection)
    - The owner cannot be removed (superadmin override is configurable)
    - Removal is a soft delete: status=revoked
    """

    def __init__(self, uow: UnitOfWork, allow_superadmin_owner_override: bool = False):
        self.uow = uow
        self.allow_superadmin_owner_override = allow_superadmin_owner_override

    async def execute(
        self,
        identity: Identity,
        customer_id: UUID,
        target_id: UUID,
        is_invite: bool = False,
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            identity: Resolved caller
            customer_id: Customer to remove from
            target_id: User id, or invitation id when is_invite
            is_invite: Whether target_id names an invitation

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            if is_invite:
                return await self._delete_invitation(identity, customer_id, target_id)

            error = check_self_removal(identity, target_id)
            if error:
                return Return.err(error)

            membership = await self.uow.memberships.get_by_user_and_customer(
                target_id, customer_id
            )
            if membership is None or membership.status != MembershipStatus.active:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "User is not a member of this customer")
                )

            error = check_owner_removal(
                identity, membership, self.allow_superadmin_owner_override
            )
            if error:
                return Return.err(error)

            membership.status = MembershipStatus.revoked
            await self.uow.memberships.update(membership)

            audit = AuditEvent(
                customer_id=customer_id,
                user_id=identity.user_id,
                action="member_removed",
                event_metadata={
                    "removed_user_id": str(target_id),
                    "removed_user_role": membership.role.value,
                },
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            return Return.ok(RemoveMemberResponse(status="removed"))

    async def _delete_invitation(
        self, identity: Identity, customer_id: UUID, invitation_id: UUID
    ) -> Result[RemoveMemberResponse]:
        invitation = await self.uow.invitations.get_by_customer_and_id(
            customer_id, invitation_id
        )
        if invitation is None:
            return Return.err(Error("INVITE_NOT_FOUND", "Invitation not found"))

        await self.uow.invitations.delete(invitation)

        audit = AuditEvent(
            customer_id=customer_id,
            user_id=identity.user_id,
            action="invite_deleted",
            event_metadata={
                "invitation_id": str(invitation_id),
                "invited_email": invitation.email,
            },
        )
        await self.uow.audit_events.create(audit)
        await self.uow.commit()

        return Return.ok(RemoveMemberResponse(status="invite_deleted"))
