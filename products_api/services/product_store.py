from __future__ import annotations

import logging
import uuid
from threading import Lock
from typing import Any

from products_api.models.schemas import Product, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    def __init__(self, product_id: str, message: str = "Product not found") -> None:
        super().__init__(message)
        self.product_id = product_id
        self.message = message


class ProductStore:
    """Thread-safe, process-local product collection (resets on restart).

    Products keep insertion order. Lookups are linear scans over the list.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._products: list[Product] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def list_products(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def create_product(self, payload: ProductCreate) -> Product:
        product = Product(
            id=str(uuid.uuid4()),
            product_name=payload.product_name,
            product_description=payload.product_description,
            product_price=payload.product_price,
        )
        with self._lock:
            self._products.append(product)

        logger.info("product.created", extra={"product_id": product.id})
        return product

    def get_product(self, product_id: str) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            return self._products[index] if index != -1 else None

    def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                raise ProductNotFoundError(product_id, "Product not found.")

            current = self._products[index]
            updated = Product(
                id=current.id,
                product_name=_coalesce(payload.product_name, current.product_name),
                product_description=_coalesce(payload.product_description, current.product_description),
                product_price=_coalesce(payload.product_price, current.product_price),
            )
            self._products[index] = updated

        logger.info("product.updated", extra={"product_id": product_id})
        return updated

    def delete_product(self, product_id: str) -> None:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                raise ProductNotFoundError(product_id)
            del self._products[index]

        logger.info("product.deleted", extra={"product_id": product_id})

    def clear(self) -> None:
        with self._lock:
            self._products.clear()


def _coalesce(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value
