# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The store and settings live on app.state (see app.main.create_app), so each
# application instance owns its own data.
# =============================================================================

import json
import logging
from typing import Annotated, Any

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import ProductAPIError
from core.services.product_service import ProductService

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings of the application serving this request."""
    return request.app.state.settings


def get_product_service(request: Request) -> ProductService:
    """
    Get a ProductService bound to the application's store.
    """
    return ProductService(request.app.state.store)


async def read_json_object(request: Request) -> dict[str, Any]:
    """
    Decode the request body as a JSON object.

    An empty body decodes to {} so that field validation reports every
    missing field.

    Raises:
        ProductAPIError: (Validation) if the body is not a JSON object
    """
    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError, or an integer past the digit limit
        logger.debug(f"Malformed JSON body: {e}")
        raise ProductAPIError.validation("Request body must be a JSON object") from e

    if not isinstance(payload, dict):
        raise ProductAPIError.validation("Request body must be a JSON object")

    return payload


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
