"""End-to-end tests for the /graphql endpoint."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.main import create_app

RECORD_FIELDS = "id name disease dateAdded"


@pytest.fixture
def app() -> FastAPI:
    """A fresh application (and record store) per test."""
    return create_app()


async def execute(app: FastAPI, query: str, variables: dict | None = None) -> dict:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql", json={"query": query, "variables": variables or {}}
        )
    return response.json()


@pytest.mark.asyncio
async def test_records_query_returns_seed(app):
    body = await execute(app, f"{{ records {{ {RECORD_FIELDS} }} }}")

    assert "errors" not in body or not body["errors"]
    records = body["data"]["records"]
    assert len(records) == 20
    assert records[0] == {
        "id": "1",
        "name": "Aarav",
        "disease": "Cataracts",
        "dateAdded": "2025-01-05T09:10:00.000Z",
    }


@pytest.mark.asyncio
async def test_record_query_by_id(app):
    body = await execute(app, f'{{ record(id: "3") {{ {RECORD_FIELDS} }} }}')
    assert body["data"]["record"]["name"] == "Rahul"
    assert body["data"]["record"]["disease"] == "Uveitis"


@pytest.mark.asyncio
async def test_record_query_missing_is_null_not_error(app):
    body = await execute(app, f"{{ record(id: 404) {{ {RECORD_FIELDS} }} }}")
    assert body["data"] == {"record": None}
    assert not body.get("errors")


@pytest.mark.asyncio
async def test_add_record_then_fetch(app):
    mutation = f"""
        mutation Add($name: String!, $disease: Disease!) {{
            addRecord(name: $name, disease: $disease) {{ {RECORD_FIELDS} }}
        }}
    """
    body = await execute(app, mutation, {"name": "Test", "disease": "Glaucoma"})
    created = body["data"]["addRecord"]
    assert created["id"] == "21"
    assert created["name"] == "Test"
    assert created["disease"] == "Glaucoma"
    assert created["dateAdded"].endswith("Z")

    fetched = await execute(app, f'{{ record(id: "21") {{ {RECORD_FIELDS} }} }}')
    assert fetched["data"]["record"] == created

    listing = await execute(app, "{ records { id } }")
    assert len(listing["data"]["records"]) == 21


@pytest.mark.asyncio
async def test_add_record_with_date(app):
    body = await execute(
        app,
        'mutation { addRecord(name: " Zoya ", disease: Uveitis, '
        'dateAdded: "2025-02-01T10:00:00+01:00") { name dateAdded } }',
    )
    assert body["data"]["addRecord"] == {
        "name": "Zoya",
        "dateAdded": "2025-02-01T09:00:00.000Z",
    }


@pytest.mark.asyncio
async def test_add_record_blank_name_is_an_error(app):
    body = await execute(app, 'mutation { addRecord(name: "  ", disease: Glaucoma) { id } }')

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Name is required."

    listing = await execute(app, "{ records { id } }")
    assert len(listing["data"]["records"]) == 20


@pytest.mark.asyncio
async def test_add_record_unknown_disease_is_rejected(app):
    body = await execute(app, 'mutation { addRecord(name: "Test", disease: InvalidDisease) { id } }')

    assert body.get("data") is None
    assert body["errors"]
    assert "InvalidDisease" in body["errors"][0]["message"]


@pytest.mark.asyncio
async def test_update_record_disease_only(app):
    body = await execute(
        app,
        f'mutation {{ updateRecord(id: "5", disease: Uveitis) {{ {RECORD_FIELDS} }} }}',
    )
    assert body["data"]["updateRecord"] == {
        "id": "5",
        "name": "Neha",
        "disease": "Uveitis",
        "dateAdded": "2025-01-09T12:30:00.000Z",
    }


@pytest.mark.asyncio
async def test_update_record_missing_id(app):
    body = await execute(app, 'mutation { updateRecord(id: "77", name: "X") { id } }')

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Record with id 77 not found."


@pytest.mark.asyncio
async def test_update_record_invalid_date(app):
    body = await execute(
        app, 'mutation { updateRecord(id: "1", dateAdded: "someday") { id } }'
    )
    assert body["errors"][0]["message"] == "dateAdded must be a valid ISO date/time."

    record = await execute(app, '{ record(id: "1") { dateAdded } }')
    assert record["data"]["record"]["dateAdded"] == "2025-01-05T09:10:00.000Z"


@pytest.mark.asyncio
async def test_delete_record_missing(app):
    body = await execute(
        app,
        f'mutation {{ deleteRecord(id: "999") {{ success message removed {{ {RECORD_FIELDS} }} }} }}',
    )
    assert not body.get("errors")
    assert body["data"]["deleteRecord"] == {
        "success": False,
        "message": "Record with id 999 not found.",
        "removed": None,
    }


@pytest.mark.asyncio
async def test_delete_record_existing(app):
    body = await execute(
        app, 'mutation { deleteRecord(id: "4") { success message removed { id name } } }'
    )
    assert body["data"]["deleteRecord"] == {
        "success": True,
        "message": "Record 4 deleted successfully.",
        "removed": {"id": "4", "name": "Sneha"},
    }

    listing = await execute(app, "{ records { id } }")
    ids = [r["id"] for r in listing["data"]["records"]]
    assert "4" not in ids
    assert len(ids) == 19


@pytest.mark.asyncio
async def test_apps_do_not_share_records(app):
    await execute(app, 'mutation { deleteRecord(id: "1") { success } }')

    other = create_app()
    body = await execute(other, '{ record(id: "1") { name } }')
    assert body["data"]["record"]["name"] == "Aarav"


@pytest.mark.asyncio
async def test_graphiql_served_for_browsers(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()
