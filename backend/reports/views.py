import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from orders.serializers import OrderSerializer
from .serializers import ReportParameterSerializer
from .services import DashboardStatsService, SalesReportService

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def dashboard_stats(request):
    """Today's figures for the POS dashboard."""
    stats = DashboardStatsService.get_stats()
    stats["recentOrders"] = OrderSerializer(stats["recentOrders"], many=True).data
    return Response(stats)


@api_view(["GET"])
@permission_classes([IsAdminUser])
def sales_report(request):
    """Billed-order sales summary: ``?start_date=2024-01-01&end_date=2024-01-31``."""
    serializer = ReportParameterSerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    report = SalesReportService.generate_sales_report(
        serializer.validated_data["start_date"],
        serializer.validated_data["end_date"],
    )
    return Response(report)
