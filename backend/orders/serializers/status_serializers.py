from rest_framework import serializers

from orders.models import Order


class UpdateOrderStatusSerializer(serializers.Serializer):
    """
    Validates the body of PATCH /orders/:id/status. Whether the transition
    is allowed from the order's current status is decided by OrderService.
    """

    status = serializers.ChoiceField(choices=Order.OrderStatus.choices)
