import pytest
from httpx import AsyncClient

from src.domain.entities import CustomerPlan, DashboardUser, MembershipRole
from tests.fixtures.seed import (
    add,
    auth_headers,
    create_customer,
    create_staff,
    create_superadmin,
    create_user,
)


@pytest.mark.asyncio
async def test_staff_context(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme", plan=CustomerPlan.pro)
    await create_customer(db_session, "other")
    user = await create_staff(db_session, "staff@acme.example", customer, MembershipRole.manager)
    user_id, customer_id = str(user.id), str(customer.id)
    headers = auth_headers(user)

    response = await client.get("/me", headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == user_id
    assert data["user"]["email"] == "staff@acme.example"
    assert data["is_superadmin"] is False
    assert data["customers"] == [
        {"id": customer_id, "name": "Acme", "slug": "acme", "plan": "pro", "role": "manager"}
    ]


@pytest.mark.asyncio
async def test_superadmin_context_lists_all_customers(client: AsyncClient, db_session):
    await create_customer(db_session, "acme")
    await create_customer(db_session, "globex")
    root = await create_superadmin(db_session)
    headers = auth_headers(root)

    response = await client.get("/me", headers=headers)

    data = response.json()
    assert data["is_superadmin"] is True
    assert sorted(c["slug"] for c in data["customers"]) == ["acme", "globex"]


@pytest.mark.asyncio
async def test_legacy_dashboard_user_still_grants_access(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "legacy")
    user = await create_user(db_session, "old@legacy.example")
    await add(
        db_session,
        DashboardUser(user_id=user.id, customer_id=customer.id, role=MembershipRole.admin),
    )
    headers = auth_headers(user)

    response = await client.get("/me", headers=headers)

    assert [(c["slug"], c["role"]) for c in response.json()["customers"]] == [
        ("legacy", "admin")
    ]


@pytest.mark.asyncio
async def test_invalid_jwt(client: AsyncClient):
    response = await client.get("/me", headers={"Authorization": "Bearer invalid_token_here"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
