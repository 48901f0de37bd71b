# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Product Catalog API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings
from app.exceptions import (
    ProductAPIError,
    http_exception_handler,
    product_api_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from app.routers import health, products
from app.routers.health import API_VERSION
from core.services.product_store import ProductStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    store: ProductStore | None = None,
) -> FastAPI:
    """
    Build a Product Catalog API application.

    Each application owns its settings and store (on app.state), so tests
    can build isolated apps.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        store: Product store to serve (defaults to a fresh seeded store)

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Product Catalog API",
        description="In-memory product catalog with filtering, search, statistics "
                    "and API-key protected mutations.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "Products",
                "description": "List, search, inspect and modify products",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    app.state.settings = app_settings
    app.state.store = store if store is not None else ProductStore.with_seed_data()

    if app_settings.uses_default_api_key:
        logger.warning(
            "API_KEY is not set; using the built-in default key. "
            "Set API_KEY before exposing this service."
        )

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Log every request on entry and its status on completion.

        Unexpected errors are translated here so the completion line is
        logged for 500s as well.
        """
        started = time.perf_counter()
        logger.info(f"{request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as exc:
            response = await unhandled_exception_handler(request, exc)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ProductAPIError, product_api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    app.include_router(
        products.router,
        prefix="/api/products",
        tags=["Products"]
    )

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns a welcome message and the endpoint map.
        """
        return {
            "message": "Welcome to the Product API!",
            "endpoints": {
                "products": "/api/products",
                "productById": "/api/products/:id",
                "search": "/api/products/search?q=query",
                "stats": "/api/products/stats",
                "health": "/api/health",
                "docs": "/docs",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Starting Product Catalog API in {settings.ENVIRONMENT} mode on port {settings.PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT)
