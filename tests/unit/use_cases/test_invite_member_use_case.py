from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.use_cases.members import InviteMemberUseCase
from src.domain.base import utcnow
from src.domain.entities import (
    Customer,
    CustomerPlan,
    Invitation,
    InvitationStatus,
    Membership,
    MembershipRole,
    MembershipStatus,
    Team,
    User,
)
from tests.fixtures.identities import staff_identity, superadmin_identity


@pytest.fixture
def customer():
    return Customer(id=uuid4(), name="Acme", slug="acme", plan=CustomerPlan.starter)


@pytest.fixture
def admin(customer):
    return staff_identity({customer.id: MembershipRole.admin})


@pytest.fixture
def email_sender():
    sender = AsyncMock()
    sender.send_invitation.return_value = True
    return sender


@pytest.fixture
def uow(mock_uow, customer):
    mock_uow.customers.get_by_id.return_value = customer
    mock_uow.users.get_by_email.return_value = None
    mock_uow.memberships.get_by_user_and_customer.return_value = None
    mock_uow.memberships.count_active_by_customer_id.return_value = 1
    mock_uow.invitations.get_pending_by_customer_and_email.return_value = None
    return mock_uow


@pytest.mark.asyncio
async def test_new_email_gets_invitation(uow, customer, admin, email_sender):
    result = await InviteMemberUseCase(uow, email_sender).execute(
        admin, customer.id, " New.Person@Example.com ", "manager"
    )

    assert result.is_ok()
    assert result.value.status == "invited"
    assert result.value.email_sent is True

    invitation = uow.invitations.create.await_args.args[0]
    assert invitation.email == "new.person@example.com"
    assert invitation.role == MembershipRole.manager
    assert invitation.invited_by == admin.user_id
    assert len(invitation.token) >= 32
    ttl = invitation.expires_at - invitation.created_at
    assert abs(ttl - timedelta(days=7)) < timedelta(seconds=5)
    assert result.value.invite_id == str(invitation.id)
    assert uow.audit_events.create.await_args.args[0].action == "invite_sent"
    email_sender.send_invitation.assert_awaited_once_with(
        to_email="new.person@example.com",
        customer_name="Acme",
        role="manager",
        token=invitation.token,
    )


@pytest.mark.asyncio
async def test_existing_account_is_added_directly(uow, customer, admin, email_sender):
    user = User(id=uuid4(), email="known@example.com")
    uow.users.get_by_email.return_value = user

    result = await InviteMemberUseCase(uow, email_sender).execute(
        admin, customer.id, "known@example.com"
    )

    assert result.is_ok()
    assert result.value.status == "added"
    assert result.value.user_id == str(user.id)
    membership = uow.memberships.create.await_args.args[0]
    assert membership.role == MembershipRole.member
    assert membership.customer_id == customer.id
    assert membership.status == MembershipStatus.active
    uow.invitations.create.assert_not_called()
    email_sender.send_invitation.assert_not_called()


@pytest.mark.asyncio
async def test_revoked_membership_is_reactivated(uow, customer, admin):
    user = User(id=uuid4(), email="back@example.com")
    revoked = Membership(
        user_id=user.id,
        customer_id=customer.id,
        role=MembershipRole.viewer,
        status=MembershipStatus.revoked,
    )
    uow.users.get_by_email.return_value = user
    uow.memberships.get_by_user_and_customer.return_value = revoked

    result = await InviteMemberUseCase(uow).execute(
        admin, customer.id, "back@example.com", "admin"
    )

    assert result.value.membership_id == str(revoked.id)
    assert revoked.status == MembershipStatus.active
    assert revoked.role == MembershipRole.admin
    uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_active_member_already_has_access(uow, customer, admin):
    user = User(id=uuid4(), email="here@example.com")
    uow.users.get_by_email.return_value = user
    uow.memberships.get_by_user_and_customer.return_value = Membership(
        user_id=user.id, customer_id=customer.id, role=MembershipRole.member
    )

    result = await InviteMemberUseCase(uow).execute(admin, customer.id, "here@example.com")

    assert result.error.code == "ALREADY_HAS_ACCESS"


@pytest.mark.asyncio
async def test_plan_limit_is_enforced(uow, customer, admin):
    uow.memberships.count_active_by_customer_id.return_value = 3

    result = await InviteMemberUseCase(uow).execute(admin, customer.id, "x@example.com")

    assert result.error.code == "PLAN_LIMIT_EXCEEDED"
    assert result.error.details == {"limit": 3}
    uow.invitations.create.assert_not_called()
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_live_pending_invitation_blocks_a_second_one(uow, customer, admin):
    uow.invitations.get_pending_by_customer_and_email.return_value = Invitation(
        customer_id=customer.id,
        email="x@example.com",
        role=MembershipRole.member,
        token="t",
        expires_at=utcnow() + timedelta(days=2),
    )

    result = await InviteMemberUseCase(uow).execute(admin, customer.id, "x@example.com")

    assert result.error.code == "INVITE_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_stale_pending_invitation_is_expired_and_replaced(uow, customer, admin):
    stale = Invitation(
        customer_id=customer.id,
        email="x@example.com",
        role=MembershipRole.member,
        token="old",
        expires_at=utcnow() - timedelta(days=1),
    )
    uow.invitations.get_pending_by_customer_and_email.return_value = stale

    result = await InviteMemberUseCase(uow).execute(admin, customer.id, "x@example.com")

    assert result.is_ok()
    assert stale.status == InvitationStatus.expired
    uow.invitations.update.assert_awaited_once_with(stale)
    assert uow.invitations.create.await_args.args[0].token != "old"


@pytest.mark.asyncio
async def test_email_failure_does_not_fail_invite(uow, customer, admin, email_sender):
    email_sender.send_invitation.side_effect = RuntimeError("boom")

    result = await InviteMemberUseCase(uow, email_sender).execute(
        admin, customer.id, "x@example.com"
    )

    assert result.is_ok()
    assert result.value.email_sent is False
    uow.commit.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["owner", "superuser", ""])
async def test_ungrantable_roles_are_rejected(uow, customer, admin, role):
    result = await InviteMemberUseCase(uow).execute(admin, customer.id, "x@example.com", role)

    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_invalid_email(uow, customer, admin):
    result = await InviteMemberUseCase(uow).execute(admin, customer.id, "not-an-email")

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_manager_cannot_invite(uow, customer):
    manager = staff_identity({customer.id: MembershipRole.manager})

    result = await InviteMemberUseCase(uow).execute(manager, customer.id, "x@example.com")

    assert result.error.code == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_team_must_belong_to_customer(uow, customer):
    uow.teams.get_by_customer_and_id.return_value = None

    result = await InviteMemberUseCase(uow).execute(
        superadmin_identity(), customer.id, "x@example.com", team_id=uuid4()
    )

    assert result.error.code == "TEAM_NOT_FOUND"


@pytest.mark.asyncio
async def test_invitation_carries_team(uow, customer):
    team = Team(id=uuid4(), customer_id=customer.id, name="Support")
    uow.teams.get_by_customer_and_id.return_value = team

    result = await InviteMemberUseCase(uow).execute(
        superadmin_identity(), customer.id, "x@example.com", team_id=team.id
    )

    assert result.is_ok()
    assert uow.invitations.create.await_args.args[0].team_id == team.id
