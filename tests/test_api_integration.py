"""End-to-end tests: router -> EmployeeService -> repository -> SQLite."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

import employee_service.main as main_module
from employee_service.core.db import get_db
from employee_service.main import app
from employee_service.models.employee import Employee

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]

EMPLOYEE = {"firstName": "firstName", "lastName": "lastName", "email": "email@email.com"}


@pytest_asyncio.fixture
async def client(session_factory):
    async def _get_test_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def test_create_employee(client):
    r = await client.post("/api/employees", json=EMPLOYEE)

    assert r.status_code == 201
    body = r.json()
    assert body["id"] > 0
    assert body["firstName"] == "firstName"
    assert body["lastName"] == "lastName"
    assert body["email"] == "email@email.com"


async def test_create_keeps_surrounding_whitespace(client):
    payload = {"firstName": " Ada ", "lastName": "Lovelace", "email": " ada@email.com "}

    r = await client.post("/api/employees", json=payload)

    assert r.status_code == 201
    employee_id = r.json()["id"]
    assert r.json() == {"id": employee_id, **payload}
    fetched = await client.get(f"/api/employees/{employee_id}")
    assert fetched.json()["firstName"] == " Ada "
    assert fetched.json()["email"] == " ada@email.com "


async def test_duplicate_email_is_rejected_and_not_stored(client):
    assert (await client.post("/api/employees", json=EMPLOYEE)).status_code == 201

    r = await client.post(
        "/api/employees",
        json={"firstName": "other", "lastName": "person", "email": "email@email.com"},
    )

    assert r.status_code == 409
    listing = await client.get("/api/employees")
    assert len(listing.json()) == 1


async def test_list_employees(client, repository):
    await repository.save_all(
        [
            Employee(first_name="firstName1", last_name="lastName1", email="email1@email.com"),
            Employee(first_name="firstName2", last_name="lastName2", email="email2@email.com"),
        ]
    )

    r = await client.get("/api/employees")

    assert r.status_code == 200
    assert len(r.json()) == 2


async def test_list_employees_empty(client):
    r = await client.get("/api/employees")

    assert r.status_code == 200
    assert r.json() == []


async def test_get_employee_by_id(client, repository, employee):
    await repository.save(employee)

    r = await client.get(f"/api/employees/{employee.id}")

    assert r.status_code == 200
    assert r.json()["email"] == "email@email.com"


async def test_get_invalid_id_returns_404(client, repository, employee):
    await repository.save(employee)

    r = await client.get("/api/employees/0")

    assert r.status_code == 404


async def test_update_employee(client):
    employee_id = (await client.post("/api/employees", json=EMPLOYEE)).json()["id"]
    updated = {"firstName": "updateFirstName", "lastName": "updateLastName", "email": "updateEmail@email.com"}

    r = await client.put(f"/api/employees/{employee_id}", json=updated)

    assert r.status_code == 200
    assert r.json() == {"id": employee_id, **updated}
    fetched = await client.get(f"/api/employees/{employee_id}")
    assert fetched.json()["firstName"] == "updateFirstName"
    assert fetched.json()["email"] == "updateEmail@email.com"


async def test_update_invalid_id_returns_404(client):
    await client.post("/api/employees", json=EMPLOYEE)

    r = await client.put(
        "/api/employees/0",
        json={"firstName": "updateFirstName", "lastName": "updateLastName", "email": "updateEmail@email.com"},
    )

    assert r.status_code == 404


async def test_update_to_email_of_another_employee_returns_409(client):
    await client.post("/api/employees", json=EMPLOYEE)
    second_id = (
        await client.post(
            "/api/employees",
            json={"firstName": "second", "lastName": "person", "email": "second@email.com"},
        )
    ).json()["id"]

    r = await client.put(
        f"/api/employees/{second_id}",
        json={"firstName": "second", "lastName": "person", "email": "email@email.com"},
    )

    assert r.status_code == 409
    fetched = await client.get(f"/api/employees/{second_id}")
    assert fetched.json()["email"] == "second@email.com"


async def test_delete_employee(client):
    employee_id = (await client.post("/api/employees", json=EMPLOYEE)).json()["id"]

    r = await client.delete(f"/api/employees/{employee_id}")

    assert r.status_code == 200
    assert (await client.get(f"/api/employees/{employee_id}")).status_code == 404
    # 두 번째 삭제도 200
    assert (await client.delete(f"/api/employees/{employee_id}")).status_code == 200


async def test_health_reports_connected_database(client, session_factory, monkeypatch):
    monkeypatch.setattr(main_module, "AsyncSessionLocal", session_factory)

    r = await client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["db"] == "connected"
    assert "version" in body


async def test_root(client):
    r = await client.get("/")

    assert r.status_code == 200
    assert r.json()["docs"] == "/docs"
