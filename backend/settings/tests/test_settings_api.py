"""
Global Settings API Tests
"""
import pytest
from decimal import Decimal

from settings.models import GlobalSettings


@pytest.mark.django_db
class TestGlobalSettingsAPI:
    def test_get_creates_defaults(self, authenticated_client):
        response = authenticated_client.get("/api/settings/")
        assert response.status_code == 200
        assert response.data["taxPercentage"] == Decimal("16.00")
        assert response.data["currency"] == "PKR"
        assert GlobalSettings.objects.count() == 1

    def test_admin_updates_tax_rate(self, admin_api_client, global_settings):
        response = admin_api_client.patch("/api/settings/", {"taxPercentage": "17.50"}, format="json")
        assert response.status_code == 200
        global_settings.refresh_from_db()
        assert global_settings.tax_percentage == Decimal("17.50")

    def test_new_tax_rate_applies_to_new_orders(self, admin_api_client, make_order):
        """
        CRITICAL: the computed tax follows the configured rate

        Business Impact: a rate change must reach the very next receipt
        """
        admin_api_client.patch("/api/settings/", {"taxPercentage": "10"}, format="json")
        order = make_order()
        assert order.tax_amount == Decimal("20.00")
        assert order.total == Decimal("270.00")

    def test_cashier_cannot_update(self, authenticated_client):
        response = authenticated_client.patch("/api/settings/", {"cafeName": "Mine"}, format="json")
        assert response.status_code == 403

    @pytest.mark.parametrize("payload", [{"taxPercentage": "101"}, {"taxPercentage": "-1"}, {"currency": "RUPEES"}])
    def test_invalid_values_rejected(self, admin_api_client, payload):
        response = admin_api_client.patch("/api/settings/", payload, format="json")
        assert response.status_code == 400

    def test_currency_is_uppercased(self, admin_api_client):
        response = admin_api_client.patch("/api/settings/", {"currency": "usd"}, format="json")
        assert response.status_code == 200
        assert response.data["currency"] == "USD"

    def test_singleton(self, db):
        assert GlobalSettings.load().pk == GlobalSettings.load().pk == GlobalSettings.SINGLETON_PK
