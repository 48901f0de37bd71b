# =============================================================================
# app/routers/products.py - Product CRUD Endpoints
# =============================================================================
# Read endpoints are public. Create, update and delete require the x-api-key
# header; the key is checked before the body is parsed or validated.
#
# Static paths (/search, /stats) are declared before /{product_id} so they
# are not captured as ids.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query

from app.auth import require_api_key
from app.dependencies import ProductServiceDep, SettingsDep, read_json_object
from core.models.product import (
    Product,
    ProductMutationResponse,
    ProductPage,
    ProductStats,
    SearchResult,
)
from core.services.product_service import parse_in_stock

router = APIRouter()

ProductId = Annotated[str, Path(description="Product id")]
JsonBody = Annotated[dict[str, Any], Depends(read_json_object)]


# =============================================================================
# Read Endpoints
# =============================================================================

@router.get("", response_model=ProductPage)
async def list_products(
    service: ProductServiceDep,
    app_settings: SettingsDep,
    category: Annotated[str | None, Query(description="Case-insensitive category")] = None,
    in_stock: Annotated[str | None, Query(alias="inStock", description="'true' or 'false'")] = None,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    limit: Annotated[int | None, Query(ge=1, description="Items per page")] = None,
):
    """
    List products with optional filtering and pagination.

    Filters apply in order (category, then stock); the filtered list is
    then sliced to the requested page. Pages past the end return no data.
    """
    return service.list_products(
        category=category,
        in_stock=parse_in_stock(in_stock),
        page=page,
        limit=limit or app_settings.DEFAULT_PAGE_LIMIT,
    )


@router.get("/search", response_model=SearchResult)
async def search_products(
    service: ProductServiceDep,
    q: Annotated[str | None, Query(description="Text to find in name or description")] = None,
):
    """Search products by name or description."""
    return service.search(q)


@router.get("/stats", response_model=ProductStats)
async def product_stats(service: ProductServiceDep):
    """Aggregate counts and price totals over all products."""
    return service.stats()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: ProductId, service: ProductServiceDep):
    """Get a specific product by ID."""
    return service.get_product(product_id)


# =============================================================================
# Mutating Endpoints
# =============================================================================

@router.post(
    "",
    response_model=ProductMutationResponse,
    status_code=201,
    dependencies=[Depends(require_api_key)],
)
async def create_product(service: ProductServiceDep, payload: JsonBody):
    """
    Create a new product.

    The id is generated by the server; strings are trimmed and the category
    is lower-cased.
    """
    product = service.create_product(payload)
    return ProductMutationResponse(message="Product created successfully", data=product)


@router.put(
    "/{product_id}",
    response_model=ProductMutationResponse,
    dependencies=[Depends(require_api_key)],
)
async def update_product(product_id: ProductId, service: ProductServiceDep, payload: JsonBody):
    """
    Replace every field of an existing product.

    The path id is kept; an `id` in the body is ignored.
    """
    product = service.update_product(product_id, payload)
    return ProductMutationResponse(message="Product updated successfully", data=product)


@router.delete(
    "/{product_id}",
    response_model=ProductMutationResponse,
    dependencies=[Depends(require_api_key)],
)
async def delete_product(product_id: ProductId, service: ProductServiceDep):
    """Delete a product."""
    product = service.delete_product(product_id)
    return ProductMutationResponse(message="Product deleted successfully", data=product)
