import logging

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseViewSet
from orders.filters import OrderFilter
from orders.models import Order
from orders.serializers import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderUpdateSerializer,
)
from orders.services import OrderService

# Import action mixins
from .status_actions import StatusActionsMixin

logger = logging.getLogger(__name__)


class OrderViewSet(StatusActionsMixin, BaseViewSet):
    """
    ViewSet for orders.

    - GET    /orders/              newest first, capped at ORDER_LIST_LIMIT
    - GET    /orders/:id/
    - POST   /orders/              create (OrderService.create_order)
    - PATCH  /orders/:id/          generic update of an open order
    - PATCH  /orders/:id/status/   status transition (StatusActionsMixin)
    - GET    /orders/kitchen/      kitchen display feed (StatusActionsMixin)

    Orders are never deleted through the API; cancel them instead.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    ordering = ["-created_at"]
    ordering_fields = ["created_at", "order_number", "total"]
    http_method_names = ["get", "post", "patch", "head", "options"]

    def list(self, request: Request, *args, **kwargs) -> Response:
        limit = getattr(settings, "ORDER_LIST_LIMIT", 100)
        queryset = self.filter_queryset(self.get_queryset())[:limit]
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, *args, **kwargs) -> Response:
        order = OrderService.get_order(kwargs["pk"])
        return Response(self.get_serializer(order).data)

    def create(self, request: Request, *args, **kwargs) -> Response:
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.create_order(serializer.validated_data, user=request.user)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, *args, **kwargs) -> Response:
        serializer = OrderUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        order = OrderService.update_order(kwargs["pk"], serializer.validated_data)
        return Response(OrderSerializer(order).data)
