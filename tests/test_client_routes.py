from sqlalchemy import select, func, text

from app.adapters.outbound.persistence.models import Client
from app.application.use_cases.client_use_cases import AsyncClientService

GRACE = {"fullName": "Grace Hopper", "email": "grace@example.com", "age": 85}
ALAN = {"fullName": "Alan Turing", "email": "alan@example.com", "age": 41}


async def count_clients(db):
    result = await db.execute(select(func.count()).select_from(Client))
    return result.scalar_one()


async def test_clients_require_token(client):
    for method, url in [("GET", "/clients"), ("POST", "/clients"), ("DELETE", "/clients/1")]:
        response = await client.request(method, url, json=GRACE if method == "POST" else None)
        assert response.status_code == 401, (method, url)
        assert response.json() == {"error": "Unauthorized"}


async def test_list_clients_starts_empty(client, auth_headers):
    response = await client.get("/clients", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []


async def test_create_client_returns_stored_row(client, auth_headers):
    response = await client.post("/clients", json=GRACE, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "full_name", "email", "age"}
    assert body["full_name"] == "Grace Hopper"
    assert body["email"] == "grace@example.com"
    assert body["age"] == 85


async def test_created_client_matches_row_by_id(client, auth_headers, db):
    created = (await client.post("/clients", json=GRACE, headers=auth_headers)).json()

    row = await db.get(Client, created["id"])

    assert row is not None
    assert {"id": row.id, "full_name": row.full_name, "email": row.email, "age": row.age} == created


async def test_list_clients_returns_every_row(client, auth_headers):
    grace = (await client.post("/clients", json=GRACE, headers=auth_headers)).json()
    alan = (await client.post("/clients", json=ALAN, headers=auth_headers)).json()

    response = await client.get("/clients", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == [grace, alan]


async def test_create_client_with_non_integer_age_is_400_and_inserts_nothing(client, auth_headers, db):
    response = await client.post("/clients", json={**GRACE, "age": "eighty"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input data"}
    assert await count_clients(db) == 0


async def test_create_client_with_invalid_email_is_400(client, auth_headers):
    response = await client.post("/clients", json={**GRACE, "email": "grace"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input data"}


async def test_delete_missing_client_is_404_and_changes_nothing(client, auth_headers, db):
    await client.post("/clients", json=GRACE, headers=auth_headers)

    response = await client.delete("/clients/9999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Client not found"}
    assert await count_clients(db) == 1


async def test_delete_non_integer_id_is_404(client, auth_headers):
    response = await client.delete("/clients/abc", headers=auth_headers)
    assert response.status_code == 404


async def test_delete_client_removes_it_from_list(client, auth_headers):
    grace = (await client.post("/clients", json=GRACE, headers=auth_headers)).json()
    alan = (await client.post("/clients", json=ALAN, headers=auth_headers)).json()

    response = await client.delete(f"/clients/{grace['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Client deleted successfully"}
    remaining = (await client.get("/clients", headers=auth_headers)).json()
    assert remaining == [alan]


async def test_store_failure_is_generic_500(client, auth_headers, db):
    await db.execute(text("DROP TABLE clients"))
    await db.commit()

    response = await client.get("/clients", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


async def test_unexpected_error_is_generic_500(client, auth_headers, monkeypatch):
    async def explode(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(AsyncClientService, "list_clients", explode)

    response = await client.get("/clients", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


async def test_unexpected_error_keeps_cors_headers(client, auth_headers, monkeypatch):
    async def explode(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(AsyncClientService, "list_clients", explode)

    response = await client.get(
        "/clients", headers={**auth_headers, "Origin": "http://frontend.example"}
    )

    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "*"


async def test_responses_carry_no_timing_header(client, auth_headers):
    response = await client.get("/clients", headers=auth_headers)
    assert "x-process-time" not in response.headers


async def test_create_client_store_failure_is_generic_500(client, auth_headers, db):
    await db.execute(text("DROP TABLE clients"))
    await db.commit()

    response = await client.post("/clients", json=GRACE, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


async def test_delete_client_store_failure_is_generic_500(client, auth_headers, db):
    await db.execute(text("DROP TABLE clients"))
    await db.commit()

    response = await client.delete("/clients/1", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


async def test_create_client_with_snake_case_name_is_400(client, auth_headers, db):
    body = {"full_name": "Grace Hopper", "email": "grace@example.com", "age": 85}

    response = await client.post("/clients", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input data"}
    assert await count_clients(db) == 0


async def test_create_client_with_age_beyond_column_range_is_400(client, auth_headers, db):
    response = await client.post("/clients", json={**GRACE, "age": 10 ** 20}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input data"}
    assert await count_clients(db) == 0


async def test_create_client_malformed_json_is_400(client, auth_headers):
    response = await client.post(
        "/clients",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input data"}
