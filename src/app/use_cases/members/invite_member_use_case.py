"""
Invite Member Use Case

Gives an email access to a customer: directly when the account exists,
through an invitation otherwise.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import (
    check_seat_available,
    invalid_role_error,
    parse_grantable_role,
    require_administer,
)
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    AuditEvent,
    Invitation,
    InvitationStatus,
    Membership,
    MembershipRole,
    MembershipStatus,
)
from src.domain.identity import Identity

from .dtos import InviteMemberResponse

logger = logging.getLogger(__name__)

INVITATION_TTL = timedelta(days=7)


class InviteMemberUseCase:
    """
    Use case for adding staff to a customer.

    Business Rules:
    - Only admins/owners (or superadmins) can invite
    - Role must be grantable (owner never is); defaults to member
    - Team, when given, must belong to the customer
    - Seat limit of the customer's plan applies (best effort)
    - Existing account: active membership created, a revoked one reactivated,
      an active one rejected with ALREADY_HAS_ACCESS
    - Otherwise: at most one live pending invitation per (customer, email);
      a stale one is marked expired before a new one is issued
    - Invitation token: secrets.token_urlsafe(32), 7-day expiry
    - Invitation email goes out after commit and never fails the request
    """

    def __init__(self, uow: UnitOfWork, email_sender: Optional[IEmailSender] = None):
        self.uow = uow
        self.email_sender = email_sender

    async def execute(
        self,
        identity: Identity,
        customer_id: UUID,
        email: str,
        role: str = MembershipRole.member.value,
        team_id: Optional[UUID] = None,
    ) -> Result[InviteMemberResponse]:
        """
        Execute invite member use case.

        Args:
            identity: Resolved caller
            customer_id: Target customer
            email: Email address to add
            role: Role to grant (viewer/member/manager/admin)
            team_id: Optional team within the customer

        Returns:
            Result with InviteMemberResponse DTO, or Error
        """
        email = (email or "").strip().lower()
        if not email or "@" not in email:
            return Return.err(Error("VALIDATION_ERROR", "A valid email is required"))

        membership_role = parse_grantable_role(role)
        if membership_role is None:
            return Return.err(invalid_role_error(role))

        async with self.uow:
            error = require_administer(identity, customer_id)
            if error:
                return Return.err(error)

            customer = await self.uow.customers.get_by_id(customer_id)
            if customer is None:
                return Return.err(Error("CUSTOMER_NOT_FOUND", "Customer not found"))

            if team_id is not None:
                team = await self.uow.teams.get_by_customer_and_id(customer_id, team_id)
                if team is None:
                    return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))

            existing_user = await self.uow.users.get_by_email(email)
            existing_membership = None
            if existing_user is not None:
                existing_membership = await self.uow.memberships.get_by_user_and_customer(
                    existing_user.id, customer_id
                )
                if (
                    existing_membership is not None
                    and existing_membership.status == MembershipStatus.active
                ):
                    return Return.err(
                        Error("ALREADY_HAS_ACCESS", "User already has access")
                    )

            active_members = await self.uow.memberships.count_active_by_customer_id(
                customer_id
            )
            error = check_seat_available(customer, active_members)
            if error:
                return Return.err(error)

            if existing_user is not None:
                if existing_membership is not None:
                    existing_membership.status = MembershipStatus.active
                    existing_membership.role = membership_role
                    existing_membership.team_id = team_id
                    membership = await self.uow.memberships.update(existing_membership)
                else:
                    membership = await self.uow.memberships.create(
                        Membership(
                            user_id=existing_user.id,
                            customer_id=customer_id,
                            role=membership_role,
                            team_id=team_id,
                        )
                    )

                audit = AuditEvent(
                    customer_id=customer_id,
                    user_id=identity.user_id,
                    action="member_added",
                    event_metadata={
                        "added_user_id": str(existing_user.id),
                        "role": membership_role.value,
                    },
                )
                await self.uow.audit_events.create(audit)
                await self.uow.commit()

                return Return.ok(
                    InviteMemberResponse(
                        status="added",
                        membership_id=str(membership.id),
                        user_id=str(existing_user.id),
                    )
                )

            now = utcnow()
            pending = await self.uow.invitations.get_pending_by_customer_and_email(
                customer_id, email
            )
            if pending is not None:
                if not pending.is_expired(now):
                    return Return.err(
                        Error(
                            "INVITE_ALREADY_EXISTS",
                            "A pending invitation already exists for this email",
                        )
                    )
                pending.status = InvitationStatus.expired
                await self.uow.invitations.update(pending)

            invitation = Invitation(
                customer_id=customer_id,
                email=email,
                role=membership_role,
                team_id=team_id,
                token=secrets.token_urlsafe(32),
                invited_by=identity.user_id,
                expires_at=now + INVITATION_TTL,
            )
            invitation = await self.uow.invitations.create(invitation)

            audit = AuditEvent(
                customer_id=customer_id,
                user_id=identity.user_id,
                action="invite_sent",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": email,
                    "role": membership_role.value,
                },
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            invite_id = str(invitation.id)
            token = invitation.token
            expires_at = invitation.expires_at.isoformat()
            customer_name = customer.name

        email_sent = False
        if self.email_sender:
            try:
                email_sent = await self.email_sender.send_invitation(
                    to_email=email,
                    customer_name=customer_name,
                    role=membership_role.value,
                    token=token,
                )
            except Exception:
                logger.exception(f"Invitation email failed for invite {invite_id}")

        return Return.ok(
            InviteMemberResponse(
                status="invited",
                invite_id=invite_id,
                expires_at=expires_at,
                email_sent=email_sent,
            )
        )
