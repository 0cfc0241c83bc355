import pytest
from httpx import AsyncClient
from sqlmodel import select

from config import ApplicationConfig
from src.domain.entities import MembershipRole, PushSubscription
from tests.fixtures.seed import auth_headers, create_customer, create_staff

INTERNAL_HEADERS = {"X-Internal-API-Key": ApplicationConfig.INTERNAL_API_KEY}


async def subscriptions_of(db_session, user_id):
    result = await db_session.execute(
        select(PushSubscription)
        .where(PushSubscription.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().all()


@pytest.mark.asyncio
async def test_subscribe_is_an_upsert(client: AsyncClient, db_session, test_data):
    customer = await create_customer(db_session, "acme")
    user = await create_staff(db_session, "v@acme.example", customer, MembershipRole.viewer)
    user_id, customer_id = user.id, customer.id
    headers = auth_headers(user)
    payload = test_data.get_copy("push_subscription")
    payload["customerId"] = str(customer_id)

    first = await client.post("/push/subscriptions", json=payload, headers=headers)
    payload["subscription"]["keys"]["auth"] = "rotated-secret"
    second = await client.post("/push/subscriptions", json=payload, headers=headers)

    assert first.status_code == 200
    assert second.json() == {"status": "subscribed"}
    stored = await subscriptions_of(db_session, user_id)
    assert len(stored) == 1
    assert stored[0].auth == "rotated-secret"
    assert stored[0].customer_id == customer_id


@pytest.mark.asyncio
async def test_subscribe_without_keys(client: AsyncClient, db_session):
    customer = await create_customer(db_session, "acme")
    user = await create_staff(db_session, "v@acme.example", customer, MembershipRole.viewer)
    headers = auth_headers(user)

    response = await client.post(
        "/push/subscriptions",
        json={"subscription": {"endpoint": "https://push.example/x"}},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_unsubscribe(client: AsyncClient, db_session, test_data):
    customer = await create_customer(db_session, "acme")
    user = await create_staff(db_session, "v@acme.example", customer, MembershipRole.viewer)
    user_id = user.id
    headers = auth_headers(user)
    payload = test_data.get_copy("push_subscription")
    await client.post("/push/subscriptions", json=payload, headers=headers)

    response = await client.request(
        "DELETE",
        "/push/subscriptions",
        json={"endpoint": payload["subscription"]["endpoint"]},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json() == {"status": "unsubscribed"}
    assert await subscriptions_of(db_session, user_id) == []


@pytest.mark.asyncio
async def test_send_requires_internal_key(client: AsyncClient, test_data):
    missing = await client.post("/push/send", json=test_data.get_copy("send_push"))
    wrong = await client.post(
        "/push/send",
        json=test_data.get_copy("send_push"),
        headers={"X-Internal-API-Key": "wrong"},
    )

    assert missing.status_code == 401
    assert missing.json()["error"]["code"] == "UNAUTHORIZED"
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_send_to_customer_prunes_gone_endpoints(
    client: AsyncClient, db_session, push_sender, test_data
):
    customer = await create_customer(db_session, "acme")
    alice = await create_staff(db_session, "alice@acme.example", customer, MembershipRole.viewer)
    bob = await create_staff(db_session, "bob@acme.example", customer, MembershipRole.member)
    customer_id, bob_id = customer.id, bob.id
    subscribers = (
        (auth_headers(alice), "https://push.example/alice"),
        (auth_headers(bob), "https://push.example/bob"),
    )
    for headers, endpoint in subscribers:
        await client.post(
            "/push/subscriptions",
            json={
                "subscription": {"endpoint": endpoint, "keys": {"p256dh": "p", "auth": "a"}},
                "customer_id": str(customer_id),
            },
            headers=headers,
        )
    push_sender.gone_endpoints.add("https://push.example/bob")

    payload = test_data.get_copy("send_push")
    payload["customerId"] = str(customer_id)
    response = await client.post("/push/send", json=payload, headers=INTERNAL_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"success": True, "sent": 1, "total": 2}
    assert [s["endpoint"] for s in push_sender.sent] == ["https://push.example/alice"]
    assert push_sender.sent[0]["payload"]["title"] == "New conversation"
    assert await subscriptions_of(db_session, bob_id) == []


@pytest.mark.asyncio
async def test_send_without_target(client: AsyncClient, test_data):
    response = await client.post(
        "/push/send", json=test_data.get_copy("send_push"), headers=INTERNAL_HEADERS
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_TARGET"
