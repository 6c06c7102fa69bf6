"""Customer views and staff accounts."""

from zelvix.core.config import settings
from zelvix.core.security import SecurityUtils
from zelvix.models import User

API = "/api/v1/users"


async def test_staff_create_hashes_password(client, session_factory):
    response = await client.post(
        f"{API}/staff",
        json={"name": "Meera", "email": "Meera@Zelvix.in", "password": "warehouse1", "role": "Warehouse"},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "meera@zelvix.in"
    assert data["role"] == "warehouse"
    assert data["status"] == "not_block"
    assert "password_hash" not in data
    assert "password" not in data

    async with session_factory() as session:
        stored = await session.get(User, data["id"])
    assert stored.password_hash != "warehouse1"
    assert SecurityUtils.verify_password("warehouse1", stored.password_hash)


async def test_staff_rejects_customer_role(client):
    response = await client.post(
        f"{API}/staff",
        json={"email": "meera@zelvix.in", "password": "warehouse1", "role": "user"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "role: Invalid role value"


async def test_staff_short_password(client):
    response = await client.post(
        f"{API}/staff",
        json={"email": "meera@zelvix.in", "password": "abc", "role": "sales"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "password: Password must be at least 6 characters"


async def test_staff_email_taken_by_customer(client, make_user):
    await make_user(email="asha@zelvix.in")

    response = await client.post(
        f"{API}/staff",
        json={"email": "ASHA@zelvix.in", "password": "secret12", "role": "sales"},
    )

    assert response.status_code == 409
    assert response.json()["message"] == "User already exists with this email"


async def test_staff_password_change(client, session_factory, make_user):
    staff = await make_user(email="ravi@zelvix.in", role="sales")

    response = await client.put(f"{API}/staff", json={"userId": staff.id, "password": "newpass1"})

    assert response.status_code == 200
    async with session_factory() as session:
        stored = await session.get(User, staff.id)
    assert SecurityUtils.verify_password("newpass1", stored.password_hash)


async def test_customer_list_excludes_staff(client, make_user):
    await make_user(email="asha@zelvix.in")
    await make_user(email="admin@zelvix.in", role="admin")

    response = await client.get(f"{API}/customers")
    staff = await client.get(f"{API}/staff")

    assert response.json()["message"] == "Customer list fetched successfully"
    assert [item["email"] for item in response.json()["data"]] == ["asha@zelvix.in"]
    assert [item["email"] for item in staff.json()["data"]] == ["admin@zelvix.in"]


async def test_customer_view_hides_staff_record(client, make_user):
    admin = await make_user(email="admin@zelvix.in", role="admin")

    response = await client.get(f"{API}/customers/{admin.id}")

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


async def test_customers_cannot_be_created_here(client):
    response = await client.post(f"{API}/customers", json={"email": "new@zelvix.in"})

    assert response.status_code == 405


async def test_customer_update_by_user_id_alias(client, make_user):
    customer = await make_user()

    response = await client.put(f"{API}/customers", json={"userId": customer.id, "name": "Asha R"})

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Asha R"


async def test_customer_email_in_use(client, make_user):
    await make_user(email="asha@zelvix.in")
    other = await make_user(email="ravi@zelvix.in")

    response = await client.put(f"{API}/customers/{other.id}", json={"email": "Asha@zelvix.in"})

    assert response.status_code == 409
    assert response.json()["message"] == "Email is already in use"


async def test_invalid_account_status(client, make_user):
    customer = await make_user()

    response = await client.put(f"{API}/customers/{customer.id}", json={"status": "banned"})

    assert response.status_code == 400
    assert response.json()["message"] == "status: Status must be 'block' or 'not_block'"


async def test_block_moves_customer_between_views(client, make_user):
    customer = await make_user()

    blocked = await client.put(f"{API}/customers/{customer.id}", json={"status": "block"})
    pending = await client.get(f"{API}/pending-customers")
    blocked_list = await client.get(f"{API}/blocked")

    assert blocked.status_code == 200
    assert pending.json()["data"] == []
    assert [item["id"] for item in blocked_list.json()["data"]] == [customer.id]


async def test_unblock_from_blocked_view(client, make_user):
    customer = await make_user(status="block")

    response = await client.put(f"{API}/blocked", json={"userId": customer.id, "status": "not_block"})
    again = await client.get(f"{API}/blocked/{customer.id}")

    assert response.status_code == 200
    assert response.json()["message"] == "Customer status updated successfully"
    assert response.json()["data"]["status"] == "not_block"
    assert again.status_code == 404


async def test_pending_customer_delete(client, session_factory, make_user):
    customer = await make_user()

    response = await client.delete(f"{API}/pending-customers", params={"id": customer.id})

    assert response.status_code == 200
    assert response.json()["message"] == "Pending customer deleted successfully"
    async with session_factory() as session:
        assert await session.get(User, customer.id) is None


async def test_admin_guard(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_REQUIRES_ROLE", True)

    refused = await client.get(f"{API}/staff")
    allowed = await client.get(f"{API}/staff", headers={"Cookie": "admin_role=admin"})

    assert refused.status_code == 403
    assert refused.json()["message"] == "Admin access required"
    assert allowed.status_code == 200
