# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Compares the x-api-key header against the configured API_KEY.
# There are no sessions, tokens or per-key scopes: one static shared secret.
#
# Usage:
#   @router.delete("/{product_id}", dependencies=[Depends(require_api_key)])
# =============================================================================

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header

from app.config import Settings
from app.dependencies import get_app_settings
from app.exceptions import ProductAPIError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


def check_api_key(supplied: str | None, expected: str) -> ProductAPIError | None:
    """
    Check a supplied API key against the configured secret.

    Args:
        supplied: Value of the x-api-key header, None if absent
        expected: The configured API_KEY

    Returns:
        None if the key matches, otherwise the AuthenticationError to raise
    """
    if not supplied:
        return ProductAPIError.authentication("API key is required")

    if not secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        return ProductAPIError.authentication("Invalid API key")

    return None


async def require_api_key(
    app_settings: Annotated[Settings, Depends(get_app_settings)],
    x_api_key: Annotated[str | None, Header(alias=API_KEY_HEADER)] = None,
) -> None:
    """
    Reject the request unless it carries the configured API key.

    Raises:
        ProductAPIError: (Authentication) if the key is missing or wrong
    """
    error = check_api_key(x_api_key, app_settings.API_KEY)
    if error is not None:
        logger.warning(f"Rejected API key: {error.message}")
        raise error
