import logging

from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import OrderSerializer, UpdateOrderStatusSerializer
from orders.services import OrderService

logger = logging.getLogger(__name__)


class StatusActionsMixin:
    """
    Mixin for order status transition actions

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        """
        Move the order to a new status: ``{"status": "served"}``.

        - 400: unknown status value
        - 404: no such order
        - 409: transition not allowed from the current status
        """
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.transition_status(pk, serializer.validated_data["status"])
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=["get"], url_path="kitchen")
    def kitchen(self, request: Request) -> Response:
        """Kitchen display feed: preparing and served orders, oldest first."""
        orders = OrderService.get_kitchen_orders()
        return Response(OrderSerializer(orders, many=True).data)
