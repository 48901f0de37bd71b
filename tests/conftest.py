# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh app with its own seeded store for every test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

TEST_API_KEY = "test-api-key"

os.environ["API_KEY"] = TEST_API_KEY
os.environ["ENVIRONMENT"] = "development"
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services.product_store import ProductStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with a known API key in development mode."""
    return Settings(API_KEY=TEST_API_KEY, ENVIRONMENT="development")


@pytest.fixture
def store():
    """A store holding the five seed products."""
    return ProductStore.with_seed_data()


@pytest.fixture
def app(test_settings, store):
    """Application serving the test store."""
    return create_app(app_settings=test_settings, store=store)


@pytest.fixture
def client(app):
    """HTTP client for the test application."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Headers carrying the valid API key."""
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def valid_payload():
    """A payload that passes every field rule."""
    return {
        "name": "  Standing Desk ",
        "description": "Height adjustable desk",
        "price": 399.5,
        "category": " Furniture ",
        "inStock": True,
    }
