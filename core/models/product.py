# =============================================================================
# core/models/product.py - Product Schemas and Payload Validation
# =============================================================================
# These models define the API contract for product operations:
# - Product: A stored product record (camelCase on the wire)
# - ProductInput: Normalized fields taken from a create/update payload
# - validate_product_payload: Field rules, reporting every violation at once
#
# Payloads are validated by hand rather than by pydantic so that all five
# field errors are reported together with stable, human-readable messages.
# =============================================================================

import math
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing snake_case attributes as camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Validation
# =============================================================================

NAME_ERROR = "Name is required and must be a non-empty string"
DESCRIPTION_ERROR = "Description is required and must be a non-empty string"
PRICE_ERROR = "Price is required and must be a non-negative number"
CATEGORY_ERROR = "Category is required and must be a non-empty string"
IN_STOCK_ERROR = "inStock is required and must be a boolean"


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def _is_non_negative_number(value: Any) -> bool:
    # bool is a subclass of int; JSON true/false are not prices
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # int too large to convert to float
        return False
    return finite and value >= 0


def validate_product_payload(payload: Mapping[str, Any]) -> list[str]:
    """
    Check a candidate product payload against the field rules.

    Every field is checked independently; the result lists all violations
    in field order and is empty when the payload is valid.

    Args:
        payload: Decoded JSON object from the request body

    Returns:
        List of human-readable error messages

    Example:
        >>> validate_product_payload({"name": "Lamp", "price": -1})
        ['Description is required ...', 'Price is required ...', ...]
    """
    errors = []

    if not _is_non_empty_string(payload.get("name")):
        errors.append(NAME_ERROR)

    if not _is_non_empty_string(payload.get("description")):
        errors.append(DESCRIPTION_ERROR)

    if not _is_non_negative_number(payload.get("price")):
        errors.append(PRICE_ERROR)

    if not _is_non_empty_string(payload.get("category")):
        errors.append(CATEGORY_ERROR)

    if not isinstance(payload.get("inStock"), bool):
        errors.append(IN_STOCK_ERROR)

    return errors


class InvalidProductPayload(ValueError):
    """Raised by ProductInput.from_payload; carries every field error."""

    def __init__(self, errors: list[str]):
        super().__init__(", ".join(errors))
        self.errors = errors


# =============================================================================
# Models
# =============================================================================

class ProductInput(CamelModel):
    """
    Normalized product fields from a create or update request.

    Strings are trimmed and the category is lower-cased. Any `id` in the
    request body is ignored.
    """

    name: str
    description: str
    price: int | float
    category: str
    in_stock: bool

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProductInput":
        """
        Validate and normalize a raw payload.

        Raises:
            InvalidProductPayload: If any field rule is violated
        """
        errors = validate_product_payload(payload)
        if errors:
            raise InvalidProductPayload(errors)

        return cls(
            name=payload["name"].strip(),
            description=payload["description"].strip(),
            price=payload["price"],
            category=payload["category"].strip().lower(),
            in_stock=payload["inStock"],
        )


class Product(CamelModel):
    """
    A stored product record.

    Example:
        {
            "id": "1",
            "name": "Laptop",
            "description": "High-performance laptop with 16GB RAM",
            "price": 1200,
            "category": "electronics",
            "inStock": true
        }
    """

    id: str = Field(..., min_length=1, description="Server-assigned identifier")
    name: str
    description: str
    price: int | float
    category: str
    in_stock: bool

    @classmethod
    def from_input(cls, product_id: str, data: ProductInput) -> "Product":
        """Attach an id to validated input."""
        return cls(id=product_id, **data.model_dump())


# =============================================================================
# Response Models
# =============================================================================

class Pagination(CamelModel):
    """Pagination block of a product listing."""
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class ProductPage(CamelModel):
    """Response of GET /api/products."""
    data: list[Product] = Field(default_factory=list)
    pagination: Pagination


class SearchResult(CamelModel):
    """Response of GET /api/products/search."""
    query: str
    count: int = Field(..., ge=0)
    data: list[Product] = Field(default_factory=list)


class ProductStats(CamelModel):
    """Response of GET /api/products/stats."""
    total_products: int = Field(..., ge=0)
    in_stock: int = Field(..., ge=0)
    out_of_stock: int = Field(..., ge=0)
    by_category: dict[str, int] = Field(default_factory=dict)
    average_price: int | float = 0
    total_value: int | float = 0


class ProductMutationResponse(CamelModel):
    """Response of POST, PUT and DELETE on products."""
    message: str
    data: Product
