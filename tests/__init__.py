# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Product Catalog API:
# - test_models.py: Payload validation and model serialization
# - test_product_store.py: In-memory store operations
# - test_product_service.py: Filtering, pagination, search and statistics
# - test_auth.py: API key checks
# - test_api.py: Endpoint behavior through the HTTP layer
# - test_errors.py: Error envelope and translation
# - test_config.py: Settings loading
#
# Run tests with: pytest
# =============================================================================
