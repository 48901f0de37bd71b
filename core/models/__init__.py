# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - product.py: Product record, request normalization, response schemas
# =============================================================================

from .product import (
    InvalidProductPayload,
    Pagination,
    Product,
    ProductInput,
    ProductMutationResponse,
    ProductPage,
    ProductStats,
    SearchResult,
    validate_product_payload,
)

__all__ = [
    "InvalidProductPayload",
    "Pagination",
    "Product",
    "ProductInput",
    "ProductMutationResponse",
    "ProductPage",
    "ProductStats",
    "SearchResult",
    "validate_product_payload",
]
