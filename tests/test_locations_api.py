"""Admin CRUD contract exercised through the location resources."""

from sqlalchemy import select

from zelvix.models import Country, State

API = "/api/v1"


async def test_create_country_normalizes_fields(client):
    response = await client.post(f"{API}/countries", json={"name": " India ", "iso_code": "in", "phone_code": "+91"})

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Country created successfully"
    assert body["data"]["name"] == "India"
    assert body["data"]["iso_code"] == "IN"
    assert body["data"]["status"] == "active"


async def test_duplicate_country_name_is_conflict(client, country):
    response = await client.post(f"{API}/countries", json={"name": "india"})

    assert response.status_code == 409
    assert response.json() == {"message": "Country already exists with this name"}


async def test_missing_name_is_bad_request(client):
    response = await client.post(f"{API}/countries", json={"iso_code": "FR"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("name:")


async def test_invalid_status_is_rejected(client):
    response = await client.post(f"{API}/countries", json={"name": "France", "status": "archived"})

    assert response.status_code == 400


async def test_state_requires_existing_country(client):
    response = await client.post(f"{API}/states", json={"country_id": 999, "name": "Goa"})

    assert response.status_code == 404
    assert response.json() == {"message": "Country not found"}


async def test_state_unique_per_country(client, state):
    response = await client.post(f"{API}/states", json={"country_id": state.country_id, "name": "KARNATAKA"})

    assert response.status_code == 409
    assert response.json()["message"] == "State already exists in this country"


async def test_list_paginates_newest_first(client, country):
    for name in ("Goa", "Kerala", "Punjab"):
        created = await client.post(f"{API}/states", json={"country_id": country.id, "name": name})
        assert created.status_code == 201

    response = await client.get(f"{API}/states", params={"page": 1, "limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "States fetched successfully"
    assert [item["name"] for item in body["data"]] == ["Punjab", "Kerala"]
    assert body["pagination"] == {
        "page": 1,
        "limit": 2,
        "totalItems": 3,
        "totalPages": 2,
        "hasNextPage": True,
        "hasPrevPage": False,
    }


async def test_list_filters_and_ignores_bad_values(client, country):
    await client.post(f"{API}/states", json={"country_id": country.id, "name": "Goa", "status": "inactive"})
    await client.post(f"{API}/states", json={"country_id": country.id, "name": "Kerala"})

    inactive = await client.get(f"{API}/states", params={"status": "inactive"})
    searched = await client.get(f"{API}/states", params={"search": "ker"})
    ignored = await client.get(f"{API}/states", params={"status": "bogus", "country_id": "abc", "limit": "abc"})

    assert [item["name"] for item in inactive.json()["data"]] == ["Goa"]
    assert [item["name"] for item in searched.json()["data"]] == ["Kerala"]
    assert ignored.json()["pagination"]["totalItems"] == 2
    assert ignored.json()["pagination"]["limit"] == 10


async def test_get_single_by_path_and_query(client, country):
    by_path = await client.get(f"{API}/countries/{country.id}")
    by_query = await client.get(f"{API}/countries", params={"id": country.id})

    assert by_path.json()["data"]["name"] == "India"
    assert by_query.json()["message"] == "Country fetched successfully"


async def test_invalid_and_missing_ids(client):
    invalid = await client.get(f"{API}/countries/abc")
    missing = await client.get(f"{API}/countries/42")

    assert invalid.status_code == 400
    assert invalid.json()["message"] == "Valid country id is required"
    assert missing.status_code == 404
    assert missing.json()["message"] == "Country not found"


async def test_partial_update_keeps_other_fields(client, country):
    response = await client.patch(f"{API}/countries/{country.id}", json={"phone_code": "0091"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone_code"] == "0091"
    assert data["name"] == "India"
    assert data["iso_code"] == "IN"


async def test_update_with_id_in_body(client, country):
    response = await client.put(f"{API}/countries", json={"id": country.id, "name": "Bharat"})

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Bharat"


async def test_update_requires_a_field(client, country):
    response = await client.put(f"{API}/countries/{country.id}", json={"unknown": 1})

    assert response.status_code == 400
    assert response.json()["message"] == "At least one field is required to update"


async def test_update_null_on_required_field(client, country):
    response = await client.put(f"{API}/countries/{country.id}", json={"name": None})

    assert response.status_code == 400
    assert response.json()["message"] == "name cannot be empty"


async def test_update_unique_check_excludes_self(client, country):
    await client.post(f"{API}/countries", json={"name": "Nepal", "iso_code": "NP"})

    same = await client.put(f"{API}/countries/{country.id}", json={"name": "India", "iso_code": "IN"})
    clash = await client.put(f"{API}/countries/{country.id}", json={"iso_code": "np"})

    assert same.status_code == 200
    assert clash.status_code == 409
    assert clash.json()["message"] == "Country already exists with this iso_code"


async def test_update_rechecks_parent_only_when_changed(client, state):
    moved = await client.put(f"{API}/states/{state.id}", json={"country_id": 777})
    renamed = await client.put(f"{API}/states/{state.id}", json={"name": "Karnataka State"})

    assert moved.status_code == 404
    assert renamed.status_code == 200


async def test_delete_by_query(client, session_factory, country):
    response = await client.delete(f"{API}/countries", params={"id": country.id})

    assert response.status_code == 200
    assert response.json() == {"message": "Country deleted successfully"}
    async with session_factory() as session:
        assert await session.get(Country, country.id) is None

    again = await client.delete(f"{API}/countries/{country.id}")
    assert again.status_code == 404


async def test_delete_referenced_country_is_conflict(client, session_factory, state):
    response = await client.delete(f"{API}/countries/{state.country_id}")

    assert response.status_code == 409
    async with session_factory() as session:
        remaining = await session.scalars(select(State))
        assert len(remaining.all()) == 1


async def test_shipping_rate_amount_range(client, pincode):
    bad = await client.post(
        f"{API}/shipping-rates",
        json={"pincode_id": pincode.id, "min_amount": 500, "max_amount": 100, "shipping_amount": 50},
    )
    good = await client.post(
        f"{API}/shipping-rates",
        json={"pincode_id": pincode.id, "min_amount": 0, "max_amount": "999.995", "shipping_amount": 49},
    )

    assert bad.status_code == 400
    assert bad.json()["message"] == "min_amount cannot be greater than max_amount"
    assert good.status_code == 201
    assert good.json()["data"]["max_amount"] == 1000.0

    merged = await client.put(f"{API}/shipping-rates/{good.json()['data']['id']}", json={"min_amount": 2000})
    assert merged.status_code == 400


async def test_unknown_route_uses_message_envelope(client):
    response = await client.get(f"{API}/nowhere")

    assert response.status_code == 404
    assert "message" in response.json()
