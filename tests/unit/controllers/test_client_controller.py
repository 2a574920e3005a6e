import pytest

from tests.factories.test_factories import AppointmentFactory, ClientFactory

pytestmark = [pytest.mark.unit, pytest.mark.controllers]


def test_create_and_get_client(client):
    created = client.post("/api/clients", json=ClientFactory.create_data())

    assert created.status_code == 201
    data = created.get_json()["data"]
    assert data["id"] == 1
    assert data["birthDate"] == "1994-06-12"
    assert data["isNew"] is False

    fetched = client.get("/api/clients/1").get_json()["data"]
    assert fetched == data


def test_create_rejects_bad_email(client):
    response = client.post("/api/clients", json=ClientFactory.create_data(email="sofia"))

    assert response.status_code == 400
    assert response.get_json()["details"] == {"field": "email"}


def test_update_and_delete(client):
    client.post("/api/clients", json=ClientFactory.create_data())

    updated = client.put(
        "/api/clients/1", json=ClientFactory.create_data(phone="555-9999", isNew=True)
    )
    assert updated.get_json()["data"]["phone"] == "555-9999"
    assert updated.get_json()["data"]["isNew"] is True

    assert client.delete("/api/clients/1").get_json()["data"] == {"deleted": True}
    assert client.get("/api/clients/1").status_code == 404
    assert client.get("/api/clients").get_json()["data"] == []


def test_update_unknown_client(client):
    response = client.put("/api/clients/77", json=ClientFactory.create_data())

    assert response.status_code == 404


def test_client_appointments_match_by_name(client, state):
    client.post("/api/clients", json=ClientFactory.create_data(name="Sofia Garcia"))
    state.appointment_repo.create(AppointmentFactory.create(client_name="Sofia  Garcia"))
    state.appointment_repo.create(AppointmentFactory.create(client_name="Elena Rodriguez"))

    data = client.get("/api/clients/1/appointments").get_json()["data"]

    assert [a["clientName"] for a in data] == ["Sofia  Garcia"]
