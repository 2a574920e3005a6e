import logging
from typing import List

from manicurista.core.exceptions import NotFoundError, ValidationError
from manicurista.domain.entities import Product
from manicurista.domain.interfaces import IInventoryRepository
from manicurista.schemas.dtos import ProductRequest

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, repository: IInventoryRepository):
        self.repository = repository

    def add_product(self, request: ProductRequest) -> Product:
        request.validate()
        product = self.repository.create(self._to_domain(request))
        logger.info(
            "Product created",
            extra={"context": {"product_id": product.id, "stock": product.current_stock}},
        )
        return product

    def update_product(self, product_id: int, request: ProductRequest) -> Product:
        self.get_product(product_id)
        request.validate()
        return self.repository.update(self._to_domain(request, product_id))

    def delete_product(self, product_id: int) -> bool:
        return self.repository.delete(product_id)

    def get_product(self, product_id: int) -> Product:
        product = self.repository.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def list_products(self) -> List[Product]:
        return self.repository.get_all()

    def low_stock(self) -> List[Product]:
        return self.repository.get_low_stock_items()

    def change_stock(self, product_id: int, delta: int) -> Product:
        """Add (positive delta) or remove (negative delta) units of a product."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("Stock change must be an integer", field="delta")
        product = self.repository.update_stock(product_id, delta)
        if product.is_low_stock:
            logger.warning(
                "Product at or below minimum stock",
                extra={
                    "context": {
                        "product_id": product.id,
                        "current_stock": product.current_stock,
                        "min_stock": product.min_stock,
                    }
                },
            )
        return product

    def _to_domain(self, request: ProductRequest, product_id=None) -> Product:
        try:
            return request.to_domain(product_id=product_id)
        except ValueError as e:
            raise ValidationError(str(e))
