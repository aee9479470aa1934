"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from django.db import connection


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/health/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


def _bearer_client(user):
    from rest_framework.test import APIClient
    from rest_framework_simplejwt.tokens import RefreshToken

    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
    return client


@pytest.fixture
def authenticated_client(cashier_user):
    """
    Provide an API client authenticated as a cashier with a bearer JWT.

    Usage:
        def test_protected_endpoint(authenticated_client):
            response = authenticated_client.get('/api/orders/')
            assert response.status_code == 200
    """
    return _bearer_client(cashier_user)


@pytest.fixture
def admin_api_client(admin_staff_user):
    """Provide an API client authenticated as an admin (is_staff) user."""
    return _bearer_client(admin_staff_user)


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "business_logic: mark test as business logic test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (API + DB)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow (>5 seconds)"
    )


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def requires_row_locking():
    """
    Skip marker for tests that need real row locks. SQLite serialises
    writers and ignores SELECT ... FOR UPDATE.
    """
    return pytest.mark.skipif(
        connection.vendor == "sqlite",
        reason="SQLite does not support concurrent writers / row locking",
    )


# ============================================================================
# IMPORT ALL FIXTURES FROM core_backend/tests/fixtures.py
# ============================================================================
from core_backend.tests.fixtures import *
