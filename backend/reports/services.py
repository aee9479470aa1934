"""
Reporting queries over orders.

- DashboardStatsService: today's numbers for the POS dashboard.
- SalesReportService: billed-order summary over a date range (admin).

Both are read-only aggregations; nothing here mutates orders.
"""
import logging
import time
from datetime import date, datetime, time as dt_time, timedelta
from decimal import Decimal
from typing import Any, Dict, List

from django.db.models import Count, DecimalField, F, Sum, Value
from django.db.models.functions import Coalesce, TruncDate
from django.utils import timezone

from orders.models import Order, OrderItem
from payments.models import Tender

logger = logging.getLogger(__name__)

ZERO = Value(Decimal("0.00"), output_field=DecimalField(max_digits=12, decimal_places=2))


def _start_of_day(day: date) -> datetime:
    return timezone.make_aware(datetime.combine(day, dt_time.min))


class BaseReportService:
    """Shared breakdowns used by the dashboard and the sales report."""

    TOP_ITEMS_LIMIT = 10

    @staticmethod
    def _payment_breakdown(orders_queryset) -> List[Dict[str, Any]]:
        payment_methods = (
            Tender.objects.filter(order__in=orders_queryset)
            .values("method")
            .annotate(total_amount=Sum("amount"), total_tips=Sum("tip"), count=Count("id"))
            .order_by("-total_amount")
        )
        return [
            {
                "method": item["method"],
                "amount": float(item["total_amount"] or 0),
                "tips": float(item["total_tips"] or 0),
                "count": item["count"],
            }
            for item in payment_methods
        ]

    @staticmethod
    def _top_selling_items(orders_queryset, limit: int = TOP_ITEMS_LIMIT) -> List[Dict[str, Any]]:
        items = (
            OrderItem.objects.filter(order__in=orders_queryset)
            .values("product_name")
            .annotate(
                total_quantity=Sum("quantity"),
                revenue=Sum(F("quantity") * F("price_at_sale")),
            )
            .order_by("-total_quantity", "product_name")[:limit]
        )
        return [
            {
                "name": item["product_name"],
                "quantity": item["total_quantity"] or 0,
                "revenue": float(item["revenue"] or 0),
            }
            for item in items
        ]

    @staticmethod
    def _category_sales(orders_queryset) -> List[Dict[str, Any]]:
        categories = (
            OrderItem.objects.filter(order__in=orders_queryset, product__category__isnull=False)
            .values("product__category__name")
            .annotate(amount=Sum(F("quantity") * F("price_at_sale")))
            .order_by("-amount")
        )
        return [
            {"category": item["product__category__name"], "amount": float(item["amount"] or 0)}
            for item in categories
            if item["amount"]
        ]


class DashboardStatsService(BaseReportService):
    RECENT_ORDERS_LIMIT = 5

    @staticmethod
    def get_stats(today: date = None) -> Dict[str, Any]:
        """
        Today's sales and order counts (cancelled orders excluded from sales),
        pending orders across all days, payment and item breakdowns for today,
        and the most recent orders.
        """
        today = today or timezone.localdate()
        day_start = _start_of_day(today)
        day_end = day_start + timedelta(days=1)

        created_today = Order.objects.filter(created_at__gte=day_start, created_at__lt=day_end)
        today_orders = created_today.exclude(status=Order.OrderStatus.CANCELLED)

        totals = today_orders.aggregate(sales=Coalesce(Sum("total"), ZERO), count=Count("id"))

        recent_orders = (
            Order.objects.select_related("table")
            .prefetch_related("items", "payments")
            .order_by("-created_at")[: DashboardStatsService.RECENT_ORDERS_LIMIT]
        )

        return {
            "todaySales": float(totals["sales"]),
            "todayOrders": totals["count"],
            "pendingOrders": Order.objects.filter(status__in=Order.ACTIVE_STATUSES).count(),
            "cancelledOrders": created_today.filter(status=Order.OrderStatus.CANCELLED).count(),
            "paymentBreakdown": DashboardStatsService._payment_breakdown(today_orders),
            "topSellingItems": DashboardStatsService._top_selling_items(today_orders),
            "categorySales": DashboardStatsService._category_sales(today_orders),
            "recentOrders": list(recent_orders),
        }


class SalesReportService(BaseReportService):
    @staticmethod
    def generate_sales_report(start_date: date, end_date: date) -> Dict[str, Any]:
        """Billed-order summary for ``start_date`` through ``end_date`` inclusive."""
        logger.info(f"Generating sales report for {start_date} to {end_date}")
        started = time.time()

        range_start = _start_of_day(start_date)
        range_end = _start_of_day(end_date) + timedelta(days=1)
        in_range = Order.objects.filter(created_at__gte=range_start, created_at__lt=range_end)
        billed = in_range.filter(status=Order.OrderStatus.BILLED)

        order_data = billed.aggregate(
            order_count=Count("id"),
            gross_sales=Coalesce(Sum("total"), ZERO),
            subtotal_sum=Coalesce(Sum("subtotal"), ZERO),
            tax_collected=Coalesce(Sum("tax_amount"), ZERO),
        )
        tips = Tender.objects.filter(order__in=billed).aggregate(tips=Coalesce(Sum("tip"), ZERO))["tips"]

        order_count = order_data["order_count"]
        gross_sales = order_data["gross_sales"]
        average = (gross_sales / order_count) if order_count else Decimal("0")

        daily_sales = (
            billed.annotate(date=TruncDate("created_at", tzinfo=timezone.get_current_timezone()))
            .values("date")
            .annotate(sales=Sum("total"), orders=Count("id"))
            .order_by("date")
        )

        report = {
            "startDate": start_date.isoformat(),
            "endDate": end_date.isoformat(),
            "orderCount": order_count,
            "grossSales": float(gross_sales),
            "subtotal": float(order_data["subtotal_sum"]),
            "taxCollected": float(order_data["tax_collected"]),
            "tips": float(tips),
            "averageOrderValue": round(float(average), 2),
            "cancelledOrders": in_range.filter(status=Order.OrderStatus.CANCELLED).count(),
            "paymentBreakdown": SalesReportService._payment_breakdown(billed),
            "topSellingItems": SalesReportService._top_selling_items(billed),
            "categorySales": SalesReportService._category_sales(billed),
            "salesTrend": [
                {
                    "date": item["date"].strftime("%Y-%m-%d"),
                    "sales": float(item["sales"] or 0),
                    "orders": item["orders"],
                }
                for item in daily_sales
            ],
            "generatedAt": timezone.now().isoformat(),
        }

        logger.info(f"Sales report generated in {time.time() - started:.2f}s")
        return report
