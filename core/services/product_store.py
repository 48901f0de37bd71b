# =============================================================================
# core/services/product_store.py - In-Memory Product Store
# =============================================================================
# Ordered, process-local collection of Product records.
# Nothing is persisted: a new store starts from the seed set.
#
# Every operation runs under one re-entrant lock so that at most one mutation
# happens at a time even when handlers run on a worker thread pool.
# =============================================================================

import logging
import threading
from typing import Iterable

from core.models.product import Product

logger = logging.getLogger(__name__)


SEED_PRODUCTS: tuple[dict, ...] = (
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
    {
        "id": "4",
        "name": "Desk Chair",
        "description": "Ergonomic office chair",
        "price": 250,
        "category": "furniture",
        "inStock": True,
    },
    {
        "id": "5",
        "name": "Water Bottle",
        "description": "Insulated stainless steel bottle",
        "price": 25,
        "category": "kitchen",
        "inStock": True,
    },
)


class ProductStore:
    """
    In-memory product list with linear-scan lookups.

    Lookups signal absence by returning None; callers decide whether that
    is an error.
    """

    def __init__(self, products: Iterable[Product] | None = None):
        self._lock = threading.RLock()
        self._products: list[Product] = []
        for product in products or ():
            self.append(product)

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        """Create a store holding the five seed products."""
        return cls(Product.model_validate(row) for row in SEED_PRODUCTS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list_all(self) -> list[Product]:
        """Snapshot of all products in store order."""
        with self._lock:
            return list(self._products)

    def _index_of(self, product_id: str) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def find(self, product_id: str) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            return None if index is None else self._products[index]

    def append(self, product: Product) -> Product:
        """
        Add a product at the end of the store.

        Raises:
            ValueError: If a product with the same id already exists
        """
        with self._lock:
            if self._index_of(product.id) is not None:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._products.append(product)
            logger.debug(f"Stored product {product.id} ({len(self._products)} total)")
            return product

    def replace(self, product_id: str, product: Product) -> Product | None:
        """Replace the product with the given id in place; None if unknown."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            self._products[index] = product
            return product

    def remove(self, product_id: str) -> Product | None:
        """Remove and return the product with the given id; None if unknown."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products.pop(index)
