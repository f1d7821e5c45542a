"""API tests against an in-memory agenda. /health does not require Neo4j."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from agenda.infrastructure import AgendaSettings, KeyMode, build_agenda

CONTACT = {
    "name": "Ana",
    "phone": "555",
    "age": 20,
    "birthdate": "01/01/2000",
    "category": "Friend",
}

APPOINTMENT = {
    "title": "Dentist",
    "date": "15/03/2025",
    "time": "09:30",
    "priority": "High",
    "duration": 45,
}


@pytest.fixture
def client():
    app.state.service = build_agenda(AgendaSettings())
    yield TestClient(app)
    app.state.service = None


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_read_list_contact(client):
    r = client.post("/contacts", json=CONTACT)
    assert r.status_code == 201
    assert r.json() == {"id": 0}

    r = client.get("/contacts/0")
    assert r.status_code == 200
    assert r.json() == {**CONTACT, "email": "", "id": 0}

    r = client.get("/contacts")
    assert [item["id"] for item in r.json()] == [0]


def test_create_contact_validation_error(client):
    r = client.post("/contacts", json={**CONTACT, "birthdate": "31/04/2025"})
    assert r.status_code == 400
    assert "birthdate" in r.json()["detail"]

    r = client.post("/contacts", json={**CONTACT, "name": ""})
    assert r.status_code == 400
    assert client.get("/contacts").json() == []


def test_negative_age_rejected_by_request_model(client):
    r = client.post("/contacts", json={**CONTACT, "age": -1})
    assert r.status_code == 422


def test_read_missing_contact_is_404(client):
    assert client.get("/contacts/3").status_code == 404


def test_update_and_delete_contact(client):
    client.post("/contacts", json=CONTACT)

    r = client.put("/contacts/0", json={**CONTACT, "name": "Ana Maria"})
    assert r.status_code == 200
    assert client.get("/contacts/0").json()["name"] == "Ana Maria"

    assert client.put("/contacts/9", json=CONTACT).status_code == 404
    assert client.put("/contacts/0", json={**CONTACT, "phone": ""}).status_code == 400

    assert client.delete("/contacts/0").json() == {"deleted": True}
    assert client.delete("/contacts/0").json() == {"deleted": False}


def test_list_contacts_skips_deleted(client):
    for name in ("a", "b", "c"):
        client.post("/contacts", json={**CONTACT, "name": name})
    client.delete("/contacts/1")
    items = client.get("/contacts").json()
    assert [(item["id"], item["name"]) for item in items] == [(0, "a"), (2, "c")]


def test_appointment_routes(client):
    r = client.post("/appointments", json=APPOINTMENT)
    assert r.status_code == 201
    assert r.json() == {"id": 0}

    assert client.get("/appointments/0").json() == {**APPOINTMENT, "description": "", "id": 0}

    r = client.post("/appointments", json={**APPOINTMENT, "time": "24:00"})
    assert r.status_code == 400
    assert "time" in r.json()["detail"]

    r = client.put("/appointments/0", json={**APPOINTMENT, "priority": "Low"})
    assert r.status_code == 200
    assert client.get("/appointments").json()[0]["priority"] == "Low"

    assert client.delete("/appointments/0").json() == {"deleted": True}
    assert client.get("/appointments/0").status_code == 404


def test_caller_keyed_mode_uses_user_header():
    app.state.service = build_agenda(AgendaSettings(key_mode=KeyMode.CALLER))
    try:
        client = TestClient(app)
        r = client.post("/contacts", json=CONTACT, headers={"X-User-Id": "alice"})
        assert r.json() == {"id": "alice"}
        client.post("/contacts", json={**CONTACT, "name": "Ana 2"}, headers={"X-User-Id": "alice"})
        r = client.post("/contacts", json=CONTACT)
        assert r.json() == {"id": "default"}

        assert client.get("/contacts/alice").json()["name"] == "Ana 2"
        assert [item["id"] for item in client.get("/contacts").json()] == ["alice", "default"]
    finally:
        app.state.service = None


def test_numeric_caller_ids_are_reachable():
    app.state.service = build_agenda(AgendaSettings(key_mode=KeyMode.CALLER))
    try:
        client = TestClient(app)
        r = client.post("/contacts", json=CONTACT, headers={"X-User-Id": "42"})
        assert r.json() == {"id": "42"}

        r = client.get("/contacts/42")
        assert r.status_code == 200
        assert r.json()["id"] == "42"

        r = client.put("/contacts/42", json={**CONTACT, "name": "Ana 42"})
        assert r.status_code == 200
        assert client.get("/contacts/42").json()["name"] == "Ana 42"

        assert client.delete("/contacts/42").json() == {"deleted": True}
        assert client.get("/contacts/42").status_code == 404
    finally:
        app.state.service = None


def test_numeric_caller_ids_reach_appointments():
    app.state.service = build_agenda(AgendaSettings(key_mode=KeyMode.CALLER))
    try:
        client = TestClient(app)
        client.post("/appointments", json=APPOINTMENT, headers={"X-User-Id": "7"})
        assert client.get("/appointments/7").status_code == 200
        assert client.delete("/appointments/7").json() == {"deleted": True}
    finally:
        app.state.service = None
