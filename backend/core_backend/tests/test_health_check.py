"""
Health check and database handle tests.
"""
import pytest
from unittest.mock import patch

from django.db.utils import OperationalError

from core_backend.apps import get_database_handle
from core_backend.exceptions import ConfigurationError, PersistenceError
from core_backend.infrastructure.database import DatabaseHandle


@pytest.mark.django_db
class TestHealthCheck:
    def test_health_ok_without_auth(self, api_client):
        response = api_client.get("/api/health/")
        assert response.status_code == 200
        assert response.data == {"status": "pass", "checks": {"database": "pass"}}

    def test_health_reports_database_failure(self, api_client):
        with patch.object(DatabaseHandle, "ensure_ready", side_effect=PersistenceError("down")):
            response = api_client.get("/api/health/")
        assert response.status_code == 503
        assert response.data["checks"]["database"] == "fail"


@pytest.mark.django_db
class TestDatabaseHandle:
    def test_app_builds_one_handle(self):
        assert get_database_handle() is get_database_handle()
        assert get_database_handle().alias == "default"

    def test_ensure_ready(self):
        handle = DatabaseHandle()
        handle.ensure_ready()
        assert handle.is_ready() is True

    def test_missing_configuration(self):
        handle = DatabaseHandle()
        with patch.dict(handle.connection.settings_dict, {"NAME": ""}):
            with pytest.raises(ConfigurationError):
                handle.check_configuration()

    def test_reconnects_once(self):
        """A single dropped connection is re-established transparently"""
        handle = DatabaseHandle()
        connection = handle.connection
        calls = {"count": 0}
        original = connection.ensure_connection

        def flaky():
            calls["count"] += 1
            if calls["count"] == 1:
                raise OperationalError("connection reset")
            return original()

        with patch.object(connection, "ensure_connection", side_effect=flaky), \
                patch.object(connection, "close"):
            handle.ensure_ready()
        assert calls["count"] == 2

    def test_second_failure_is_persistence_error(self):
        handle = DatabaseHandle()
        connection = handle.connection
        with patch.object(connection, "ensure_connection", side_effect=OperationalError("down")), \
                patch.object(connection, "close"):
            with pytest.raises(PersistenceError):
                handle.ensure_ready()
            assert handle.is_ready() is False
