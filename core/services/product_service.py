# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Handles listing, search, statistics and CRUD on top of a ProductStore.
# Separates HTTP concerns from store/business logic: store absence is turned
# into NotFound errors here, request parsing stays in the routers.
# =============================================================================

import logging
import math
from typing import Any, Mapping
from uuid import uuid4

from app.exceptions import ProductAPIError
from core.models.product import (
    InvalidProductPayload,
    Pagination,
    Product,
    ProductInput,
    ProductPage,
    ProductStats,
    SearchResult,
)
from core.services.product_store import ProductStore

logger = logging.getLogger(__name__)


def parse_in_stock(value: str | None) -> bool | None:
    """
    Parse the inStock query parameter.

    Returns None when the filter is absent.

    Raises:
        ProductAPIError: (Validation) for anything but "true" or "false"
    """
    if value is None:
        return None

    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False

    raise ProductAPIError.validation("inStock must be either 'true' or 'false'")


class ProductService:
    """
    Service for product operations.

    Provides a clean interface between API routes and the in-memory store.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_products(
        self,
        category: str | None = None,
        in_stock: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ProductPage:
        """
        Filter and paginate products.

        Args:
            category: Case-insensitive exact category match
            in_stock: Keep only products with this stock flag
            page: 1-based page number
            limit: Page size

        Returns:
            ProductPage with the requested slice and pagination totals

        Raises:
            ProductAPIError: (Validation) if page or limit is below 1
        """
        if page < 1:
            raise ProductAPIError.validation("page must be a positive integer")
        if limit < 1:
            raise ProductAPIError.validation("limit must be a positive integer")

        products = self.store.list_all()

        if category:
            wanted = category.lower()
            products = [p for p in products if p.category.lower() == wanted]

        if in_stock is not None:
            products = [p for p in products if p.in_stock == in_stock]

        start = (page - 1) * limit
        total = len(products)

        return ProductPage(
            data=products[start:start + limit],
            pagination=Pagination(
                total=total,
                page=page,
                limit=limit,
                total_pages=math.ceil(total / limit),
            ),
        )

    def search(self, query: str | None) -> SearchResult:
        """
        Case-insensitive substring search over name and description.

        Raises:
            ProductAPIError: (Validation) if the query is missing or empty
        """
        if not query:
            raise ProductAPIError.validation('Search query parameter "q" is required')

        needle = query.lower()
        matches = [
            p for p in self.store.list_all()
            if needle in p.name.lower() or needle in p.description.lower()
        ]

        return SearchResult(query=query, count=len(matches), data=matches)

    def stats(self) -> ProductStats:
        """
        Aggregate statistics over the whole store.

        An empty store reports an average price and total value of 0.
        """
        products = self.store.list_all()

        by_category: dict[str, int] = {}
        for product in products:
            by_category[product.category] = by_category.get(product.category, 0) + 1

        total_value = sum(p.price for p in products)
        in_stock = sum(1 for p in products if p.in_stock)

        return ProductStats(
            total_products=len(products),
            in_stock=in_stock,
            out_of_stock=len(products) - in_stock,
            by_category=by_category,
            average_price=total_value / len(products) if products else 0,
            total_value=total_value,
        )

    def get_product(self, product_id: str) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductAPIError: (NotFound) if no product has this id
        """
        product = self.store.find(product_id)
        if product is None:
            raise _product_not_found(product_id)
        return product

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_product(self, payload: Mapping[str, Any]) -> Product:
        """
        Validate a payload and store it under a new server-generated id.

        Raises:
            ProductAPIError: (Validation) listing every field error
        """
        data = _validated_input(payload)
        product = self.store.append(Product.from_input(str(uuid4()), data))

        logger.info(f"Created product: {product.id} ({product.name})")
        return product

    def update_product(self, product_id: str, payload: Mapping[str, Any]) -> Product:
        """
        Fully replace a product's fields, keeping its id.

        Validation runs before the lookup, so an invalid payload for an
        unknown id reports the field errors.

        Raises:
            ProductAPIError: (Validation) for field errors, (NotFound) for an unknown id
        """
        data = _validated_input(payload)
        product = self.store.replace(product_id, Product.from_input(product_id, data))
        if product is None:
            raise _product_not_found(product_id)

        logger.info(f"Updated product: {product_id}")
        return product

    def delete_product(self, product_id: str) -> Product:
        """
        Remove a product.

        Raises:
            ProductAPIError: (NotFound) if no product has this id
        """
        product = self.store.remove(product_id)
        if product is None:
            raise _product_not_found(product_id)

        logger.info(f"Deleted product: {product_id}")
        return product


def _validated_input(payload: Mapping[str, Any]) -> ProductInput:
    try:
        return ProductInput.from_payload(payload)
    except InvalidProductPayload as e:
        raise ProductAPIError.validation(str(e)) from e


def _product_not_found(product_id: str) -> ProductAPIError:
    return ProductAPIError.not_found(f"Product with id {product_id} not found")
