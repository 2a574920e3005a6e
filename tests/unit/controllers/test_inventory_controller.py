"""
Inventory controller tests.
"""

import pytest

from tests.factories.test_factories import ProductFactory

pytestmark = [pytest.mark.unit, pytest.mark.controllers]


@pytest.fixture
def product_id(client):
    response = client.post("/api/inventory", json=ProductFactory.create_data(currentStock=10))
    return response.get_json()["data"]["id"]


def test_add_product(client):
    response = client.post("/api/inventory", json=ProductFactory.create_data())

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["name"] == "Top Coat Brillante"
    assert data["currentStock"] == 4
    assert data["isLowStock"] is True


def test_add_product_rejects_negative_stock(client):
    response = client.post("/api/inventory", json=ProductFactory.create_data(currentStock=-1))

    assert response.status_code == 400
    assert response.get_json()["details"] == {"field": "currentStock"}


def test_change_stock(client, product_id):
    response = client.patch(f"/api/inventory/{product_id}/stock", json={"delta": -6})

    data = response.get_json()["data"]
    assert data["currentStock"] == 4
    assert data["isLowStock"] is True


def test_change_stock_cannot_go_negative(client, product_id):
    response = client.patch(f"/api/inventory/{product_id}/stock", json={"delta": -11})

    assert response.status_code == 400
    assert client.get(f"/api/inventory/{product_id}").get_json()["data"]["currentStock"] == 10


@pytest.mark.parametrize("payload", [{}, {"delta": "2"}, {"delta": True}, {"delta": 1.5}])
def test_change_stock_requires_integer_delta(client, product_id, payload):
    response = client.patch(f"/api/inventory/{product_id}/stock", json=payload)

    assert response.status_code == 400
    assert response.get_json()["details"] == {"field": "delta"}


def test_change_stock_unknown_product(client):
    response = client.patch("/api/inventory/99/stock", json={"delta": 1})

    assert response.status_code == 404


def test_low_stock_listing(client, product_id):
    client.post("/api/inventory", json=ProductFactory.create_data(name="Acetona", currentStock=5))

    data = client.get("/api/inventory/low-stock").get_json()["data"]

    assert [p["name"] for p in data] == ["Acetona"]


def test_update_and_delete(client, product_id):
    updated = client.put(
        f"/api/inventory/{product_id}",
        json=ProductFactory.create_data(name="Top Coat Mate", currentStock=2, minStock=1),
    )
    assert updated.get_json()["data"]["name"] == "Top Coat Mate"
    assert updated.get_json()["data"]["isLowStock"] is False

    assert client.delete(f"/api/inventory/{product_id}").get_json()["data"]["deleted"] is True
    assert client.get("/api/inventory").get_json()["data"] == []
