from dataclasses import replace
from typing import Iterable, List, Optional

from manicurista.core.exceptions import NotFoundError, ValidationError
from manicurista.domain.entities import Product
from manicurista.domain.interfaces import IInventoryRepository


class InventoryRepository(IInventoryRepository):
    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._items: List[Product] = []
        self._last_id = 0
        for product in products or []:
            self._store(product)

    def _store(self, product: Product) -> Product:
        if product.id is None:
            product = replace(product, id=self._last_id + 1)
        self._last_id = max(self._last_id, product.id)
        self._items.append(product)
        return product

    def _index_of(self, product_id: int) -> Optional[int]:
        return next(
            (i for i, product in enumerate(self._items) if product.id == product_id),
            None,
        )

    def create(self, product: Product) -> Product:
        return replace(self._store(replace(product, id=None)))

    def update(self, product: Product) -> Product:
        index = self._index_of(product.id)
        if index is None:
            raise NotFoundError("Product", product.id)
        self._items[index] = replace(product)
        return replace(product)

    def delete(self, product_id: int) -> bool:
        index = self._index_of(product_id)
        if index is None:
            return False
        del self._items[index]
        return True

    def get_by_id(self, product_id: int) -> Optional[Product]:
        index = self._index_of(product_id)
        return replace(self._items[index]) if index is not None else None

    def get_all(self) -> List[Product]:
        return [replace(product) for product in self._items]

    def get_low_stock_items(self) -> List[Product]:
        return [replace(p) for p in self._items if p.is_low_stock]

    def update_stock(self, product_id: int, quantity_change: int) -> Product:
        index = self._index_of(product_id)
        if index is None:
            raise NotFoundError("Product", product_id)
        current = self._items[index]
        new_stock = current.current_stock + quantity_change
        if new_stock < 0:
            raise ValidationError("Stock cannot go below zero", field="currentStock")
        self._items[index] = replace(current, current_stock=new_stock)
        return replace(self._items[index])
