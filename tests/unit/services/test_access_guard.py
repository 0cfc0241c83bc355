from uuid import uuid4

import pytest

from src.app.services.access_guard import (
    can_administer,
    can_manage,
    can_view,
    check_owner_change,
    check_owner_removal,
    check_seat_available,
    check_self_removal,
    parse_grantable_role,
    require_administer,
    seat_limit_for,
)
from src.domain.entities import Customer, CustomerPlan, Membership, MembershipRole
from tests.fixtures.identities import (
    no_access_identity,
    staff_identity,
    superadmin_identity,
)


def test_superadmin_can_view_and_administer_any_customer():
    identity = superadmin_identity()
    for _ in range(5):
        customer_id = uuid4()
        assert can_view(identity, customer_id)
        assert can_administer(identity, customer_id)
        assert can_manage(identity, customer_id)


@pytest.mark.parametrize(
    "role, view, manage, administer",
    [
        (MembershipRole.viewer, True, False, False),
        (MembershipRole.member, True, True, False),
        (MembershipRole.manager, True, True, False),
        (MembershipRole.admin, True, True, True),
        (MembershipRole.owner, True, True, True),
    ],
)
def test_role_decisions(role, view, manage, administer):
    customer_id = uuid4()
    identity = staff_identity({customer_id: role})

    assert can_view(identity, customer_id) is view
    assert can_manage(identity, customer_id) is manage
    assert can_administer(identity, customer_id) is administer


def test_no_access_identity_sees_nothing():
    identity = no_access_identity()
    customer_id = uuid4()

    assert not can_view(identity, customer_id)
    assert not can_administer(identity, customer_id)
    assert require_administer(identity, customer_id).code == "ACCESS_DENIED"


def test_require_administer_distinguishes_role_from_scope():
    customer_id = uuid4()
    identity = staff_identity({customer_id: MembershipRole.member})

    assert require_administer(identity, customer_id).code == "INSUFFICIENT_ROLE"


@pytest.mark.parametrize(
    "plan, limit",
    [
        (CustomerPlan.starter, 3),
        (CustomerPlan.pro, 10),
        (CustomerPlan.enterprise, 999),
        ("pro", 10),
        (None, 3),
        ("platinum", 3),
    ],
)
def test_seat_limit_for(plan, limit):
    assert seat_limit_for(plan) == limit


def test_check_seat_available_denies_at_limit():
    customer = Customer(name="Acme", slug="acme", plan=CustomerPlan.starter)

    assert check_seat_available(customer, 2) is None

    error = check_seat_available(customer, 3)
    assert error.code == "PLAN_LIMIT_EXCEEDED"
    assert error.details == {"limit": 3}
    assert "3" in error.message


def test_owner_membership_is_protected_even_for_superadmin_by_default():
    owner = Membership(user_id=uuid4(), customer_id=uuid4(), role=MembershipRole.owner)
    identity = superadmin_identity()

    assert check_owner_change(identity, owner).code == "CANNOT_CHANGE_OWNER"
    assert check_owner_removal(identity, owner).code == "CANNOT_REMOVE_OWNER"


def test_superadmin_owner_override_when_enabled():
    owner = Membership(user_id=uuid4(), customer_id=uuid4(), role=MembershipRole.owner)

    assert check_owner_change(superadmin_identity(), owner, True) is None
    assert check_owner_removal(superadmin_identity(), owner, True) is None

    customer_admin = staff_identity({owner.customer_id: MembershipRole.admin})
    assert check_owner_removal(customer_admin, owner, True).code == "CANNOT_REMOVE_OWNER"


def test_self_removal_is_rejected():
    identity = staff_identity({uuid4(): MembershipRole.admin})

    assert check_self_removal(identity, identity.user_id).code == "CANNOT_REMOVE_SELF"
    assert check_self_removal(identity, uuid4()) is None


def test_owner_is_never_grantable():
    assert parse_grantable_role("owner") is None
    assert parse_grantable_role("superuser") is None
    assert parse_grantable_role("manager") == MembershipRole.manager
