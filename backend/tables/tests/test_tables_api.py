"""
Tables API Tests

CRUD on the floor plan and the occupancy fields the order lifecycle owns.
"""
import pytest

from tables.models import Table


@pytest.mark.django_db
class TestTableAPI:
    """/api/tables/"""

    def test_list_tables_ordered_by_number(self, authenticated_client, table, second_table):
        response = authenticated_client.get("/api/tables/")
        assert response.status_code == 200
        assert [row["number"] for row in response.data] == [1, 2]
        assert response.data[0]["status"] == "available"
        assert response.data[0]["currentOrderId"] is None

    def test_filter_by_status(self, authenticated_client, dine_in_order, table, second_table):
        response = authenticated_client.get("/api/tables/", {"status": "occupied"})
        assert [row["id"] for row in response.data] == [table.id]
        assert response.data[0]["currentOrderId"] == str(dine_in_order.id)

    def test_admin_creates_table_with_position(self, admin_api_client):
        response = admin_api_client.post(
            "/api/tables/",
            {"number": 7, "name": "Patio 7", "capacity": 6, "position": {"x": 120, "y": 40}},
            format="json",
        )
        assert response.status_code == 201, response.data
        table = Table.objects.get(number=7)
        assert (table.position_x, table.position_y) == (120, 40)
        assert response.data["position"] == {"x": 120, "y": 40}

    def test_bad_position_is_400(self, admin_api_client):
        response = admin_api_client.post(
            "/api/tables/",
            {"number": 8, "name": "Bar", "position": {"x": "left", "y": 0}},
            format="json",
        )
        assert response.status_code == 400

    def test_duplicate_number_is_400(self, admin_api_client, table):
        response = admin_api_client.post("/api/tables/", {"number": 1, "name": "Again"}, format="json")
        assert response.status_code == 400

    def test_cashier_cannot_edit_tables(self, authenticated_client, table):
        """
        CRITICAL: floor plan changes are admin only

        Business Impact: a cashier must not rename or remove tables mid-service
        """
        response = authenticated_client.patch(f"/api/tables/{table.id}/", {"name": "Mine"}, format="json")
        assert response.status_code == 403

    def test_occupied_table_cannot_be_deleted(self, admin_api_client, dine_in_order, table):
        response = admin_api_client.delete(f"/api/tables/{table.id}/")
        assert response.status_code == 400
        assert Table.objects.filter(pk=table.id).exists()

    def test_free_table_can_be_deleted(self, admin_api_client, second_table):
        response = admin_api_client.delete(f"/api/tables/{second_table.id}/")
        assert response.status_code == 204
        assert not Table.objects.filter(pk=second_table.id).exists()
