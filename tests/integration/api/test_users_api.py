from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.base import utcnow
from src.domain.entities import (
    CustomerPlan,
    DashboardUser,
    Invitation,
    InvitationStatus,
    Membership,
    MembershipRole,
    MembershipStatus,
)
from tests.fixtures.seed import (
    add,
    auth_headers,
    create_customer,
    create_staff,
    create_superadmin,
    create_team,
    create_user,
    reload,
)


@pytest.mark.asyncio
async def test_invite_new_email_creates_invitation(
    client: AsyncClient, db_session, email_sender
):
    customer = await create_customer(db_session, "acme", plan=CustomerPlan.pro)
    owner = await create_staff(db_session, "owner@acme.com", customer, MembershipRole.owner)
    customer_id = customer.id
    headers = auth_headers(owner)

    response = await client.post(
        f"/customers/{customer_id}/users",
        json={"email": "New.Hire@Acme.com", "role": "manager"},
        headers=headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "invited"
    assert data["email_sent"] is True

    invitation = (
        await db_session.execute(select(Invitation).where(Invitation.customer_id == customer_id))
    ).scalar_one()
    assert invitation.email == "new.hire@acme.com"
    assert invitation.status == InvitationStatus.pending
    assert str(invitation.id) == data["invite_id"]
    assert email_sender.invitations[0]["token"] == invitation.token

    listing = await client.get(f"/customers/{customer_id}/users", headers=headers)
    rows = listing.json()["users"]
    assert [(r["email"], r["is_invite"]) for r in rows] == [
        ("owner@acme.com", False),
        ("new.hire@acme.com", True),
    ]

    again = await client.post(
        f"/customers/{customer_id}/users",
        json={"email": "new.hire@acme.com"},
        headers=headers,
    )
    assert again.status_code == 400
    assert again.json()["error"]["code"] == "INVITE_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_invite_existing_account_adds_member(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    known = await create_user(db_session, "known@elsewhere.com")
    team = await create_team(db_session, customer, "Support")
    customer_id, known_id, team_id = customer.id, known.id, team.id
    headers = auth_headers(admin)

    response = await client.post(
        f"/customers/{customer_id}/users",
        json={"email": "known@elsewhere.com", "team_id": str(team_id)},
        headers=headers,
    )

    assert response.status_code == 201
    assert response.json()["status"] == "added"
    membership = (
        await db_session.execute(
            select(Membership).where(
                Membership.user_id == known_id, Membership.customer_id == customer_id
            )
        )
    ).scalar_one()
    assert membership.role == MembershipRole.member
    assert membership.team_id == team_id

    duplicate = await client.post(
        f"/customers/{customer_id}/users",
        json={"email": "known@elsewhere.com"},
        headers=headers,
    )
    assert duplicate.status_code == 400
    assert duplicate.json()["error"]["code"] == "ALREADY_HAS_ACCESS"


@pytest.mark.asyncio
async def test_starter_plan_seat_limit(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "tiny", plan=CustomerPlan.starter)
    owner = await create_staff(db_session, "owner@tiny.com", customer, MembershipRole.owner)
    await create_staff(db_session, "two@tiny.com", customer, MembershipRole.member)
    await create_staff(db_session, "three@tiny.com", customer, MembershipRole.member)
    customer_id = customer.id
    headers = auth_headers(owner)

    response = await client.post(
        f"/customers/{customer_id}/users", json={"email": "four@tiny.com"}, headers=headers
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "PLAN_LIMIT_EXCEEDED"
    assert error["details"] == {"limit": 3}
    assert error["message"] == "Your plan allows max 3 users. Upgrade to add more."


@pytest.mark.asyncio
async def test_invite_rejects_owner_role_and_bad_email(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    customer_id = customer.id
    headers = auth_headers(admin)

    owner_role = await client.post(
        f"/customers/{customer_id}/users",
        json={"email": "x@acme.com", "role": "owner"},
        headers=headers,
    )
    bad_email = await client.post(
        f"/customers/{customer_id}/users", json={"email": "not-an-email"}, headers=headers
    )

    assert owner_role.status_code == 400
    assert owner_role.json()["error"]["code"] == "INVALID_ROLE"
    assert bad_email.status_code == 400
    assert bad_email.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_member_role_cannot_manage_users(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    member = await create_staff(db_session, "m@acme.com", customer, MembershipRole.member)
    customer_id = customer.id
    headers = auth_headers(member)

    response = await client.get(f"/customers/{customer_id}/users", headers=headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_update_member_role_and_team(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    agent = await create_staff(db_session, "agent@acme.com", customer, MembershipRole.member)
    team = await create_team(db_session, customer, "Escalations")
    customer_id, agent_id, team_id = customer.id, agent.id, team.id
    headers = auth_headers(admin)

    response = await client.patch(
        f"/customers/{customer_id}/users/{agent_id}",
        json={"role": "manager", "team_id": str(team_id)},
        headers=headers,
    )

    assert response.status_code == 200
    member = response.json()["member"]
    assert member["role"] == "manager"
    assert member["team_name"] == "Escalations"

    cleared = await client.patch(
        f"/customers/{customer_id}/users/{agent_id}", json={"team_id": None}, headers=headers
    )
    assert cleared.status_code == 200
    assert cleared.json()["member"]["team_id"] is None
    assert cleared.json()["member"]["role"] == "manager"


@pytest.mark.asyncio
async def test_owner_is_protected_even_from_superadmin(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    owner = await create_staff(db_session, "owner@acme.com", customer, MembershipRole.owner)
    root = await create_superadmin(db_session)
    customer_id, owner_id = customer.id, owner.id
    headers = auth_headers(root)

    change = await client.patch(
        f"/customers/{customer_id}/users/{owner_id}", json={"role": "admin"}, headers=headers
    )
    remove = await client.delete(f"/customers/{customer_id}/users/{owner_id}", headers=headers)

    assert change.status_code == 400
    assert change.json()["error"]["code"] == "CANNOT_CHANGE_OWNER"
    assert remove.status_code == 400
    assert remove.json()["error"]["code"] == "CANNOT_REMOVE_OWNER"


@pytest.mark.asyncio
async def test_admin_cannot_remove_self(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    customer_id, admin_id = customer.id, admin.id
    headers = auth_headers(admin)

    response = await client.delete(f"/customers/{customer_id}/users/{admin_id}", headers=headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CANNOT_REMOVE_SELF"


@pytest.mark.asyncio
async def test_remove_member_revokes_access(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    agent = await create_staff(db_session, "agent@acme.com", customer, MembershipRole.member)
    customer_id, agent_id = customer.id, agent.id
    admin_headers = auth_headers(admin)
    agent_headers = auth_headers(agent)

    response = await client.delete(
        f"/customers/{customer_id}/users/{agent_id}", headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json() == {"status": "removed"}

    membership = (
        await db_session.execute(
            select(Membership)
            .where(Membership.user_id == agent_id)
            .execution_options(populate_existing=True)
        )
    ).scalar_one()
    assert membership.status == MembershipStatus.revoked

    sessions = await client.get(f"/sessions?customer_id={customer_id}", headers=agent_headers)
    assert sessions.status_code == 403


@pytest.mark.asyncio
async def test_removed_member_with_legacy_row_is_denied(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    agent = await create_staff(db_session, "agent@acme.com", customer, MembershipRole.member)
    await add(
        db_session,
        DashboardUser(user_id=agent.id, customer_id=customer.id, role=MembershipRole.admin),
    )
    customer_id, agent_id = customer.id, agent.id
    admin_headers = auth_headers(admin)
    agent_headers = auth_headers(agent)

    response = await client.delete(
        f"/customers/{customer_id}/users/{agent_id}", headers=admin_headers
    )
    assert response.status_code == 200

    listing = await client.get(f"/customers/{customer_id}/users", headers=agent_headers)
    assert listing.status_code == 403

    context = await client.get("/me", headers=agent_headers)
    assert context.status_code == 200
    assert context.json()["customers"] == []


@pytest.mark.asyncio
async def test_reinvite_after_accepted_invitation(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme", plan=CustomerPlan.pro)
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    accepted = await add(
        db_session,
        Invitation(
            customer_id=customer.id,
            email="returning@acme.com",
            role=MembershipRole.member,
            token="accepted-token",
            invited_by=admin.id,
            status=InvitationStatus.accepted,
            expires_at=utcnow() + timedelta(days=3),
        ),
    )
    customer_id, accepted_id = customer.id, accepted.id
    headers = auth_headers(admin)

    response = await client.post(
        f"/customers/{customer_id}/users",
        json={"email": "returning@acme.com"},
        headers=headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "invited"
    assert body["invite_id"] != str(accepted_id)

    rows = (
        await db_session.execute(
            select(Invitation)
            .where(Invitation.customer_id == customer_id)
            .execution_options(populate_existing=True)
        )
    ).scalars().all()
    assert sorted(row.status for row in rows) == sorted(
        [InvitationStatus.accepted, InvitationStatus.pending]
    )


@pytest.mark.asyncio
async def test_expired_invitations_are_not_listed(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    await add(
        db_session,
        Invitation(
            customer_id=customer.id,
            email="lapsed@acme.com",
            role=MembershipRole.member,
            token="lapsed-token",
            invited_by=admin.id,
            expires_at=utcnow() - timedelta(days=1),
        ),
    )
    customer_id = customer.id
    headers = auth_headers(admin)

    invited = await client.post(
        f"/customers/{customer_id}/users", json={"email": "fresh@acme.com"}, headers=headers
    )
    assert invited.status_code == 201

    listing = await client.get(f"/customers/{customer_id}/users", headers=headers)

    assert listing.status_code == 200
    invite_emails = [row["email"] for row in listing.json()["users"] if row["is_invite"]]
    assert invite_emails == ["fresh@acme.com"]


@pytest.mark.asyncio
async def test_remove_pending_invitation(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    admin = await create_staff(db_session, "admin@acme.com", customer, MembershipRole.admin)
    customer_id = customer.id
    headers = auth_headers(admin)

    invited = await client.post(
        f"/customers/{customer_id}/users", json={"email": "later@acme.com"}, headers=headers
    )
    invite_id = invited.json()["invite_id"]

    response = await client.delete(
        f"/customers/{customer_id}/users/{invite_id}?is_invite=true", headers=headers
    )

    assert response.status_code == 200
    assert response.json() == {"status": "invite_deleted"}
    remaining = (
        await db_session.execute(select(Invitation).where(Invitation.customer_id == customer_id))
    ).scalars().all()
    assert remaining == []

    missing = await client.delete(
        f"/customers/{customer_id}/users/{invite_id}?is_invite=true", headers=headers
    )
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "INVITE_NOT_FOUND"
