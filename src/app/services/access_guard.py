"""
Access Guard

Pure authorization decisions over a resolved Identity.
"""

from typing import Optional, Union
from uuid import UUID

from libs.result import Error
from src.domain.entities import Customer, CustomerPlan, Membership, MembershipRole
from src.domain.identity import Identity

PLAN_SEAT_LIMITS = {
    CustomerPlan.starter: 3,
    CustomerPlan.pro: 10,
    CustomerPlan.enterprise: 999,
}

ADMIN_ROLES = (MembershipRole.admin, MembershipRole.owner)

# Roles that can be handed out through invite or update
GRANTABLE_ROLES = (
    MembershipRole.viewer,
    MembershipRole.member,
    MembershipRole.manager,
    MembershipRole.admin,
)


def can_view(identity: Identity, customer_id: UUID) -> bool:
    if identity.is_superadmin or identity.has_all_customers:
        return True
    return customer_id in identity.accessible_customer_ids


def can_administer(identity: Identity, customer_id: UUID) -> bool:
    if identity.is_superadmin:
        return True
    return identity.role_for(customer_id) in ADMIN_ROLES


def can_manage(identity: Identity, customer_id: UUID) -> bool:
    """Session handling rights: any working role, viewers excluded."""
    if identity.is_superadmin:
        return True
    role = identity.role_for(customer_id)
    return role is not None and role.at_least(MembershipRole.member)


def require_view(identity: Identity, customer_id: UUID) -> Optional[Error]:
    if can_view(identity, customer_id):
        return None
    return Error("ACCESS_DENIED", "You do not have access to this customer")


def require_administer(identity: Identity, customer_id: UUID) -> Optional[Error]:
    if can_administer(identity, customer_id):
        return None
    if not can_view(identity, customer_id):
        return Error("ACCESS_DENIED", "You do not have access to this customer")
    return Error("INSUFFICIENT_ROLE", "Only admins and owners can do this")


def require_manage(identity: Identity, customer_id: UUID) -> Optional[Error]:
    if can_manage(identity, customer_id):
        return None
    return Error("INSUFFICIENT_ROLE", "Your role does not allow this action")


def seat_limit_for(plan: Union[CustomerPlan, str, None]) -> int:
    """Seat limit of a plan tier; unknown or missing plans count as starter."""
    try:
        return PLAN_SEAT_LIMITS[CustomerPlan(plan)]
    except ValueError:
        return PLAN_SEAT_LIMITS[CustomerPlan.starter]


def check_seat_available(customer: Customer, active_members: int) -> Optional[Error]:
    """
    Capacity guard evaluated before adding a member.

    Best effort: the count and the insert are not locked together.
    """
    limit = seat_limit_for(customer.plan)
    if active_members < limit:
        return None
    return Error(
        "PLAN_LIMIT_EXCEEDED",
        f"Your plan allows max {limit} users. Upgrade to add more.",
        details={"limit": limit},
    )


def parse_grantable_role(role: Union[MembershipRole, str]) -> Optional[MembershipRole]:
    try:
        parsed = MembershipRole(role)
    except ValueError:
        return None
    return parsed if parsed in GRANTABLE_ROLES else None


def invalid_role_error(role: object) -> Error:
    allowed = ", ".join(r.value for r in GRANTABLE_ROLES)
    return Error("INVALID_ROLE", f"Invalid role: {role}. Must be one of: {allowed}")


def _owner_override(identity: Identity, allow_superadmin_override: bool) -> bool:
    return allow_superadmin_override and identity.is_superadmin


def check_owner_change(
    identity: Identity, membership: Membership, allow_superadmin_override: bool = False
) -> Optional[Error]:
    if membership.role != MembershipRole.owner:
        return None
    if _owner_override(identity, allow_superadmin_override):
        return None
    return Error("CANNOT_CHANGE_OWNER", "The owner's role cannot be changed")


def check_owner_removal(
    identity: Identity, membership: Membership, allow_superadmin_override: bool = False
) -> Optional[Error]:
    if membership.role != MembershipRole.owner:
        return None
    if _owner_override(identity, allow_superadmin_override):
        return None
    return Error("CANNOT_REMOVE_OWNER", "The owner cannot be removed")


def check_self_removal(identity: Identity, target_user_id: UUID) -> Optional[Error]:
    if identity.user_id == target_user_id:
        return Error("CANNOT_REMOVE_SELF", "You cannot remove yourself")
    return None
