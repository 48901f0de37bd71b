# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging middleware, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: Error kinds and the error envelope
# - auth/: API key check for mutating endpoints
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
