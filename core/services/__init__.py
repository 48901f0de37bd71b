# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_store import ProductStore, SEED_PRODUCTS
from .product_service import ProductService, parse_in_stock

__all__ = [
    "ProductStore",
    "SEED_PRODUCTS",
    "ProductService",
    "parse_in_stock",
]
