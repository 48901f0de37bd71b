# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the product catalog logic:
# - models/: Pydantic schemas and payload validation
# - services/: In-memory store and the product service on top of it
#
# Nothing here touches the request or response objects; routers in app/
# translate between HTTP and these calls.
# =============================================================================
