import pytest

pytestmark = [pytest.mark.unit, pytest.mark.controllers]


def test_default_profile(client):
    data = client.get("/api/settings/profile").get_json()["data"]

    assert data == {"salonName": "Manicurista Pro", "ownerName": "Ana Martínez"}


def test_update_profile(client):
    response = client.put(
        "/api/settings/profile", json={"salonName": "Uñas de Lujo", "ownerName": "Carla"}
    )

    assert response.status_code == 200
    assert client.get("/api/settings/profile").get_json()["data"]["salonName"] == "Uñas de Lujo"


def test_update_profile_requires_names(client):
    response = client.put("/api/settings/profile", json={"salonName": "", "ownerName": "Carla"})

    assert response.status_code == 400
    assert response.get_json()["details"] == {"field": "salonName"}


def test_prices_replace_service_options(client):
    response = client.put("/api/settings/prices", json={"Gel": 30, "Pedicure": 22.5})

    assert response.get_json()["data"] == {"Gel": 30.0, "Pedicure": 22.5}
    options = client.get("/api/appointments/service-options").get_json()["data"]
    assert options == ["Gel", "Pedicure"]


@pytest.mark.parametrize("payload", [{"Gel": -1}, {"Gel": "30"}, {"Gel": True}, ["Gel"]])
def test_invalid_prices(client, payload):
    response = client.put("/api/settings/prices", json=payload)

    assert response.status_code == 400
    assert client.get("/api/settings/prices").get_json()["data"]["Semi-permanente"] == 25.0


def test_theme_defaults_to_system_and_persists_in_session(client):
    assert client.get("/api/settings/theme").get_json()["data"] == {"theme": "system"}

    client.put("/api/settings/theme", json={"theme": "dark"})

    assert client.get("/api/settings/theme").get_json()["data"] == {"theme": "dark"}


def test_invalid_theme(client):
    response = client.put("/api/settings/theme", json={"theme": "neon"})

    assert response.status_code == 400
