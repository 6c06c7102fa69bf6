"""Spreadsheet import for countries, states, cities and pincodes."""

from sqlalchemy import select

from zelvix.core.config import settings
from zelvix.models import City, Country, State

API = "/api/v1"
XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def upload(content, name="rows.xlsx"):
    return {"file": (name, content, XLSX)}


async def test_state_import_reports_bad_rows_and_keeps_good_ones(client, session_factory, country, excel_file):
    content = excel_file([
        {"Country ID": country.id, "State Name": "Goa", "State Code": "ga", "Status": "active"},
        {"Country ID": country.id, "State Name": "Kerala", "State Code": "kl", "Status": "INACTIVE"},
        {"Country ID": 999, "State Name": "Nowhere", "State Code": "", "Status": ""},
        {"Country ID": "abc", "State Name": "Broken", "State Code": "", "Status": ""},
    ])

    response = await client.post(f"{API}/states/import", files=upload(content))

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "State excel imported successfully"
    assert body["data"] == {"totalRows": 4, "validRows": 2, "created": 2, "updated": 0, "failedRows": 2}
    assert body["errors"] == [
        "Row 4: country_id 999 not found",
        "Row 5: valid country_id is required",
    ]

    async with session_factory() as session:
        states = {s.name: s for s in (await session.scalars(select(State))).all()}
    assert states["Goa"].state_code == "GA"
    assert states["Kerala"].status == "inactive"


async def test_five_row_sheet_isolates_the_missing_parent(client, state, excel_file):
    content = excel_file([
        {"country_id": state.country_id, "name": "Goa", "state_code": "GA"},
        {"country_id": state.country_id, "name": "Karnataka", "state_code": "KA"},
        {"country_id": 404, "name": "Atlantis", "state_code": "AT"},
        {"country_id": state.country_id, "name": "Kerala", "state_code": "KL"},
        {"country_id": state.country_id, "name": "Assam", "state_code": "AS"},
    ])

    response = await client.post(f"{API}/states/import", files=upload(content))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["totalRows"] == 5
    assert data["created"] + data["updated"] == 4
    assert data["updated"] == 1
    assert data["failedRows"] == 1
    assert response.json()["errors"] == ["Row 4: country_id 404 not found"]


async def test_oversized_sheet_is_rejected(client, excel_file, monkeypatch):
    monkeypatch.setattr(settings, "MAX_IMPORT_SIZE", 64)
    content = excel_file([{"name": "India", "iso": "IN"}])

    response = await client.post(f"{API}/countries/import", files=upload(content))

    assert response.status_code == 400
    assert response.json()["message"] == "File size must be 10MB or less"


async def test_import_updates_existing_by_natural_key(client, session_factory, state, excel_file):
    content = excel_file([
        {"country_id": state.country_id, "name": "karnataka", "state_code": "kar", "status": "inactive"},
    ])

    response = await client.post(f"{API}/states/import", files=upload(content))

    assert response.json()["data"]["created"] == 0
    assert response.json()["data"]["updated"] == 1
    async with session_factory() as session:
        refreshed = await session.get(State, state.id)
    assert refreshed.state_code == "KAR"
    assert refreshed.status == "inactive"


async def test_repeated_key_in_one_sheet_updates_the_first_row(client, session_factory, country, excel_file):
    content = excel_file([
        {"country_id": country.id, "name": "Goa", "state_code": "GA"},
        {"country_id": country.id, "name": "GOA", "state_code": "GO"},
    ])

    response = await client.post(f"{API}/states/import", files=upload(content))

    assert response.json()["data"]["created"] == 1
    assert response.json()["data"]["updated"] == 1
    async with session_factory() as session:
        states = (await session.scalars(select(State))).all()
    assert [(s.name, s.state_code) for s in states] == [("Goa", "GO")]


async def test_country_import_rejects_taken_iso_code(client, country, excel_file):
    content = excel_file([
        {"Country": "Nepal", "ISO": "np", "Phone Code": "+977"},
        {"Country": "Indus", "ISO": "in", "Phone Code": ""},
    ])

    response = await client.post(f"{API}/countries/import", files=upload(content))

    body = response.json()
    assert body["data"]["created"] == 1
    assert body["errors"] == ['Row 3: Country "Indus": iso_code "IN" already used']


async def test_city_and_pincode_import(client, session_factory, city, excel_file):
    cities = excel_file([{"state_id": city.state_id, "city": "Mysuru"}])
    pincodes = excel_file([{"city_id": city.id, "pin code": 560002.0, "area": "Shivajinagar"}])

    city_response = await client.post(f"{API}/cities/import", files=upload(cities))
    pincode_response = await client.post(f"{API}/pincodes/import", files=upload(pincodes))

    assert city_response.status_code == 201
    assert pincode_response.status_code == 201
    async with session_factory() as session:
        names = (await session.scalars(select(City.name).order_by(City.id))).all()
    assert names == ["Bengaluru", "Mysuru"]


async def test_all_rows_failing_parent_check(client, excel_file):
    content = excel_file([{"country_id": 5, "name": "Goa"}, {"country_id": 6, "name": "Kerala"}])

    response = await client.post(f"{API}/states/import", files=upload(content))

    assert response.status_code == 400
    assert response.json()["message"] == "No rows imported because all rows are invalid"
    assert response.json()["errors"] == ["Row 2: country_id 5 not found", "Row 3: country_id 6 not found"]


async def test_no_valid_rows(client, excel_file):
    content = excel_file([{"name": "", "iso": "XX"}])

    response = await client.post(f"{API}/countries/import", files=upload(content))

    assert response.status_code == 400
    assert response.json()["message"] == "No valid rows found"
    assert response.json()["errors"] == ["Row 2: name is required"]


async def test_missing_file(client):
    response = await client.post(f"{API}/countries/import")

    assert response.status_code == 400
    assert response.json()["message"] == "Excel file is required"


async def test_unreadable_file(client):
    response = await client.post(f"{API}/countries/import", files=upload(b"not a spreadsheet"))

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid Excel file"


async def test_empty_sheet(client, excel_file):
    content = excel_file([], columns=["name"])

    response = await client.post(f"{API}/countries/import", files=upload(content))

    assert response.status_code == 400
    assert response.json()["message"] == "Excel sheet is empty"


async def test_unknown_status_falls_back_to_active(client, session_factory, excel_file):
    content = excel_file([{"name": "Sri Lanka", "iso_code": "lk", "status": "weird"}])

    response = await client.post(f"{API}/countries/import", files=upload(content))

    assert response.status_code == 201
    async with session_factory() as session:
        record = await session.scalar(select(Country).where(Country.name == "Sri Lanka"))
    assert record.iso_code == "LK"
    assert record.status == "active"
