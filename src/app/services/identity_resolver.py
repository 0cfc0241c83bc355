"""
Identity Resolver

Turns an authenticated principal into the set of customers it may reach.
"""

import logging
from typing import Dict, Set
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MembershipRole
from src.domain.identity import Identity, Principal

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Resolves a Principal into an Identity.

    Business Rules:
    - Superadmin registry (by user id) short-circuits to all customers
    - The legacy email-keyed superadmin lookup only runs when enabled
    - Only active memberships grant access
    - An organization membership wins over direct customer memberships
    - dashboard_users is consulted only when the user has no memberships
      of any status
    - No access resolves to an empty set, never to "all"
    """

    def __init__(self, uow: UnitOfWork, superadmin_email_fallback: bool = False):
        self.uow = uow
        self.superadmin_email_fallback = superadmin_email_fallback

    async def resolve(self, principal: Principal) -> Identity:
        async with self.uow:
            if await self._is_superadmin(principal):
                return Identity(
                    principal=principal, is_superadmin=True, has_all_customers=True
                )

            memberships = await self.uow.memberships.get_active_by_user_id(principal.id)

            org_memberships = [m for m in memberships if m.organization_id is not None]
            if org_memberships:
                # Oldest organization membership defines the scope
                org_membership = org_memberships[0]
                customers = await self.uow.customers.get_by_organization_id(
                    org_membership.organization_id
                )
                return Identity(
                    principal=principal,
                    org_scope=org_membership.organization_id,
                    accessible_customer_ids=frozenset(c.id for c in customers),
                    roles={c.id: org_membership.role for c in customers},
                )

            roles: Dict[UUID, MembershipRole] = {}
            for membership in memberships:
                if membership.customer_id is not None:
                    roles.setdefault(membership.customer_id, membership.role)

            # A revoked membership still rules out the legacy table
            if not memberships and not await self.uow.memberships.has_any_by_user_id(
                principal.id
            ):
                legacy_rows = await self.uow.dashboard_users.get_active_by_user_id(
                    principal.id
                )
                if legacy_rows:
                    legacy = legacy_rows[0]
                    logger.info(
                        f"Resolved user {principal.id} through legacy dashboard_users"
                    )
                    roles[legacy.customer_id] = legacy.role

            accessible: Set[UUID] = set(roles)
            return Identity(
                principal=principal,
                accessible_customer_ids=frozenset(accessible),
                roles=roles,
            )

    async def _is_superadmin(self, principal: Principal) -> bool:
        if await self.uow.superadmins.get_by_user_id(principal.id) is not None:
            return True
        if self.superadmin_email_fallback and principal.email:
            return await self.uow.superadmins.get_by_email(principal.email) is not None
        return False
