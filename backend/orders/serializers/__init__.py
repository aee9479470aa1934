"""
Orders serializers package - modular serializer layer.
"""

# Order item serializers
from .order_item_serializers import (
    OrderItemSerializer,
    OrderItemInputSerializer,
)

# Order serializers
from .order_serializers import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderUpdateSerializer,
)

# Status serializers
from .status_serializers import UpdateOrderStatusSerializer

__all__ = [
    # Order items
    'OrderItemSerializer',
    'OrderItemInputSerializer',
    # Orders
    'OrderSerializer',
    'OrderCreateSerializer',
    'OrderUpdateSerializer',
    # Status
    'UpdateOrderStatusSerializer',
]
