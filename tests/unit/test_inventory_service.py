"""
Unit tests for InventoryService over the in-memory repository.
"""

import pytest

from manicurista.core.exceptions import NotFoundError, ValidationError
from manicurista.repositories.inventory_repository import InventoryRepository
from manicurista.schemas.dtos import ProductRequest
from manicurista.services.inventory_service import InventoryService
from tests.factories.test_factories import ProductFactory


@pytest.fixture
def service() -> InventoryService:
    return InventoryService(
        InventoryRepository(
            [
                ProductFactory.create(name="Esmalte Rojo Pasión", current_stock=15, min_stock=5),
                ProductFactory.create(name="Top Coat Brillante", current_stock=4, min_stock=5),
                ProductFactory.create(name="Aceite de Cutícula", current_stock=10, min_stock=10),
            ]
        )
    )


def test_list_products_keeps_order(service):
    assert [p.id for p in service.list_products()] == [1, 2, 3]


def test_low_stock_includes_products_at_minimum(service):
    assert [p.name for p in service.low_stock()] == ["Top Coat Brillante", "Aceite de Cutícula"]


def test_add_product(service):
    created = service.add_product(
        ProductRequest.from_payload(ProductFactory.create_data(name="Removedor", currentStock=25, minStock=10))
    )

    assert created.id == 4
    assert created.is_low_stock is False


@pytest.mark.parametrize(
    "override, field",
    [
        ({"name": ""}, "name"),
        ({"currentStock": -1}, "currentStock"),
        ({"minStock": -3}, "minStock"),
    ],
)
def test_add_product_validation(service, override, field):
    with pytest.raises(ValidationError) as exc_info:
        service.add_product(ProductRequest.from_payload(ProductFactory.create_data(**override)))

    assert exc_info.value.field == field
    assert len(service.list_products()) == 3


def test_non_integer_stock_rejected():
    with pytest.raises(ValidationError):
        ProductRequest.from_payload(ProductFactory.create_data(currentStock="many"))


def test_change_stock_adds_and_removes(service):
    assert service.change_stock(1, 5).current_stock == 20
    assert service.change_stock(1, -20).current_stock == 0


def test_change_stock_cannot_go_negative(service):
    with pytest.raises(ValidationError):
        service.change_stock(2, -5)

    assert service.get_product(2).current_stock == 4


def test_change_stock_requires_integer(service):
    with pytest.raises(ValidationError):
        service.change_stock(1, "3")


def test_change_stock_unknown_product(service):
    with pytest.raises(NotFoundError):
        service.change_stock(99, 1)


def test_update_and_delete(service):
    updated = service.update_product(
        2, ProductRequest.from_payload(ProductFactory.create_data(currentStock=12))
    )

    assert updated.current_stock == 12
    assert service.delete_product(2) is True
    assert service.delete_product(2) is False
    with pytest.raises(NotFoundError):
        service.get_product(2)


@pytest.mark.parametrize("stock", [2.7, float("inf")])
def test_fractional_stock_rejected(stock):
    with pytest.raises(ValidationError) as exc_info:
        ProductRequest.from_payload(ProductFactory.create_data(currentStock=stock))

    assert exc_info.value.field == "currentStock"


def test_whole_number_float_stock_accepted():
    request = ProductRequest.from_payload(ProductFactory.create_data(currentStock=3.0))

    assert request.current_stock == 3
