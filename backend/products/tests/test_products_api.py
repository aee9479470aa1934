"""
Catalogue API Tests

Categories and products, including variant replacement and the price
snapshot guarantee for existing orders.
"""
import pytest
from decimal import Decimal

from products.models import Product


@pytest.mark.django_db
class TestCategoryAPI:
    def test_list_categories(self, authenticated_client, category, drinks_category):
        response = authenticated_client.get("/api/categories/")
        assert response.status_code == 200
        assert [row["name"] for row in response.data] == ["Main Course", "Cold Drinks"]

    def test_cashier_cannot_create_category(self, authenticated_client):
        response = authenticated_client.post("/api/categories/", {"name": "Desserts"}, format="json")
        assert response.status_code == 403

    def test_admin_creates_category(self, admin_api_client):
        response = admin_api_client.post(
            "/api/categories/", {"name": "Desserts", "sortOrder": 5}, format="json"
        )
        assert response.status_code == 201
        assert response.data["sortOrder"] == 5


@pytest.mark.django_db
class TestProductAPI:
    def test_list_and_filter_products(self, authenticated_client, taxable_product, untaxable_product, category):
        response = authenticated_client.get("/api/products/")
        assert response.status_code == 200
        assert len(response.data) == 2

        response = authenticated_client.get("/api/products/", {"category": category.id})
        assert [row["name"] for row in response.data] == ["Chicken Karahi"]
        assert response.data[0]["categoryName"] == "Main Course"

        response = authenticated_client.get("/api/products/", {"search": "water"})
        assert [row["name"] for row in response.data] == ["Mineral Water"]

    def test_create_product_with_variants(self, admin_api_client, drinks_category):
        response = admin_api_client.post(
            "/api/products/",
            {
                "name": "Cappuccino",
                "price": "350.00",
                "categoryId": drinks_category.id,
                "variants": [{"name": "Regular", "price": "350.00"}, {"name": "Large", "price": "450.00"}],
            },
            format="json",
        )
        assert response.status_code == 201, response.data
        product = Product.objects.get(name="Cappuccino")
        assert sorted(product.variants.values_list("name", flat=True)) == ["Large", "Regular"]
        assert product.is_taxable is True

    def test_update_replaces_variants(self, admin_api_client, product_with_variants):
        response = admin_api_client.patch(
            f"/api/products/{product_with_variants.id}/",
            {"variants": [{"name": "Small", "price": "300.00"}]},
            format="json",
        )
        assert response.status_code == 200, response.data
        assert list(product_with_variants.variants.values_list("name", flat=True)) == ["Small"]

    def test_duplicate_variant_names_rejected(self, admin_api_client, drinks_category):
        response = admin_api_client.post(
            "/api/products/",
            {"name": "Tea", "price": "100", "variants": [{"name": "Cup", "price": "100"}, {"name": "Cup", "price": "120"}]},
            format="json",
        )
        assert response.status_code == 400

    def test_negative_price_rejected(self, admin_api_client):
        response = admin_api_client.post("/api/products/", {"name": "Free", "price": "-1"}, format="json")
        assert response.status_code == 400

    def test_price_change_does_not_touch_existing_orders(self, admin_api_client, make_order, taxable_product):
        """
        CRITICAL: order lines keep the price they were sold at

        Business Impact: historical receipts and reports must not change
        """
        order = make_order()
        response = admin_api_client.patch(
            f"/api/products/{taxable_product.id}/", {"price": "150.00"}, format="json"
        )
        assert response.status_code == 200

        order.refresh_from_db()
        assert order.total == Decimal("282.00")
        assert order.items.get(product=taxable_product).price_at_sale == Decimal("100.00")
