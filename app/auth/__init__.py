# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides shared-secret API key authentication for mutating endpoints.
#
# Usage:
#   from app.auth import require_api_key
#
#   @router.post("", dependencies=[Depends(require_api_key)])
#   async def create(...):
#       ...
# =============================================================================

from app.auth.dependencies import API_KEY_HEADER, check_api_key, require_api_key

__all__ = [
    "API_KEY_HEADER",
    "check_api_key",
    "require_api_key",
]
