"""
Reports API Tests

Dashboard figures and the billed-order sales report.
"""
import pytest
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from orders.services import OrderService
from reports.services import DashboardStatsService, SalesReportService


@pytest.fixture
def billed_order(make_order):
    """The reference cart, split-paid with a tip, then billed"""
    order = make_order(
        payments=[
            {"method": "cash", "amount": Decimal("150")},
            {"method": "card", "amount": Decimal("132"), "tip": Decimal("10")},
        ]
    )
    return OrderService.transition_status(order.id, "billed")


@pytest.mark.django_db
class TestDashboardStats:
    def test_today_figures(self, billed_order, make_order):
        open_order = make_order()
        cancelled = make_order()
        OrderService.transition_status(cancelled.id, "cancelled")

        stats = DashboardStatsService.get_stats()

        assert stats["todaySales"] == pytest.approx(564.0)
        assert stats["todayOrders"] == 2
        assert stats["pendingOrders"] == 1
        assert stats["cancelledOrders"] == 1
        assert stats["recentOrders"][0] == cancelled
        assert open_order in stats["recentOrders"]

        methods = {row["method"]: row for row in stats["paymentBreakdown"]}
        assert methods["card"]["tips"] == pytest.approx(10.0)

    def test_dashboard_endpoint(self, authenticated_client, billed_order):
        response = authenticated_client.get("/api/dashboard/stats/")
        assert response.status_code == 200
        assert response.data["todayOrders"] == 1
        assert response.data["recentOrders"][0]["orderNumber"] == billed_order.order_number

    def test_dashboard_requires_authentication(self, api_client):
        response = api_client.get("/api/dashboard/stats/")
        assert response.status_code == 401


@pytest.mark.django_db
class TestSalesReport:
    def test_report_counts_billed_orders_only(self, billed_order, make_order):
        """
        CRITICAL: open and cancelled orders are not revenue

        Business Impact: inflated sales figures mislead end-of-day cash-up
        """
        make_order()
        cancelled = make_order()
        OrderService.transition_status(cancelled.id, "cancelled")

        today = timezone.localdate()
        report = SalesReportService.generate_sales_report(today, today)

        assert report["orderCount"] == 1
        assert report["grossSales"] == pytest.approx(282.0)
        assert report["subtotal"] == pytest.approx(250.0)
        assert report["taxCollected"] == pytest.approx(32.0)
        assert report["tips"] == pytest.approx(10.0)
        assert report["averageOrderValue"] == pytest.approx(282.0)
        assert report["cancelledOrders"] == 1
        assert report["salesTrend"] == [{"date": today.isoformat(), "sales": 282.0, "orders": 1}]

        top = {row["name"]: row for row in report["topSellingItems"]}
        assert top["Chicken Karahi"]["quantity"] == 2
        assert top["Chicken Karahi"]["revenue"] == pytest.approx(200.0)

        categories = {row["category"]: row["amount"] for row in report["categorySales"]}
        assert categories == {"Main Course": pytest.approx(200.0), "Cold Drinks": pytest.approx(50.0)}

    def test_empty_range(self, db):
        today = timezone.localdate()
        report = SalesReportService.generate_sales_report(today - timedelta(days=7), today - timedelta(days=1))
        assert report["orderCount"] == 0
        assert report["grossSales"] == 0
        assert report["averageOrderValue"] == 0
        assert report["salesTrend"] == []

    def test_report_endpoint_admin_only(self, authenticated_client, admin_api_client, billed_order):
        assert authenticated_client.get("/api/reports/").status_code == 403

        response = admin_api_client.get("/api/reports/")
        assert response.status_code == 200
        assert response.data["orderCount"] == 1

    @pytest.mark.parametrize(
        "params",
        [
            {"start_date": "2024-02-01", "end_date": "2024-01-01"},
            {"start_date": "2022-01-01", "end_date": "2024-01-01"},
            {"start_date": "not-a-date"},
        ],
    )
    def test_invalid_range_is_400(self, admin_api_client, params):
        response = admin_api_client.get("/api/reports/", params)
        assert response.status_code == 400


@pytest.mark.django_db
class TestReportBreakdowns:
    """Item and payment breakdowns aggregated across several orders"""

    def test_dashboard_endpoint_with_orders_today(self, authenticated_client, make_order, taxable_product):
        """
        CRITICAL: the dashboard renders on a day that has sales

        Business Impact: the manager's dashboard must not fail during service
        """
        make_order(payments=[{"method": "cash", "amount": Decimal("300")}])
        make_order(
            items=[{"product_id": taxable_product.id, "quantity": 3}],
            payments=[{"method": "card", "amount": Decimal("348"), "tip": Decimal("20")}],
        )

        response = authenticated_client.get("/api/dashboard/stats/")

        assert response.status_code == 200, response.data
        top = response.data["topSellingItems"]
        assert top[0] == {"name": "Chicken Karahi", "quantity": 5, "revenue": pytest.approx(500.0)}
        assert top[1]["name"] == "Mineral Water"
        assert top[1]["quantity"] == 1

        payments = {row["method"]: row for row in response.data["paymentBreakdown"]}
        assert payments["card"] == {"method": "card", "amount": pytest.approx(348.0), "tips": pytest.approx(20.0), "count": 1}
        assert payments["cash"]["amount"] == pytest.approx(300.0)
        assert [row["method"] for row in response.data["paymentBreakdown"]] == ["card", "cash"]

    def test_sales_report_endpoint_with_billed_orders(self, admin_api_client, make_order, taxable_product):
        first = make_order()
        second = make_order(items=[{"product_id": taxable_product.id, "quantity": 1}])
        for order in (first, second):
            OrderService.transition_status(order.id, "billed")

        response = admin_api_client.get("/api/reports/")

        assert response.status_code == 200, response.data
        assert response.data["orderCount"] == 2
        assert response.data["subtotal"] == pytest.approx(350.0)
        top = {row["name"]: row["quantity"] for row in response.data["topSellingItems"]}
        assert top == {"Chicken Karahi": 3, "Mineral Water": 1}
