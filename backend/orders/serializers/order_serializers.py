from decimal import Decimal

from rest_framework import serializers

from core_backend.base import TimestampedSerializer
from orders.models import Order
from payments.serializers import TenderInputSerializer, TenderSerializer
from .order_item_serializers import OrderItemInputSerializer, OrderItemSerializer


def _money_field(**kwargs):
    return serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), **kwargs
    )


class OrderSerializer(TimestampedSerializer):
    """
    Full read representation of an order, camelCased for the POS client.
    """

    orderNumber = serializers.IntegerField(source="order_number", read_only=True)
    type = serializers.CharField(source="order_type", read_only=True)
    tableId = serializers.IntegerField(source="table_id", read_only=True)
    tableName = serializers.CharField(source="table_name", read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    taxAmount = serializers.DecimalField(
        source="tax_amount", max_digits=10, decimal_places=2, read_only=True
    )
    payments = TenderSerializer(many=True, read_only=True)
    paidAmount = serializers.DecimalField(
        source="paid_amount", max_digits=10, decimal_places=2, read_only=True
    )
    remainingAmount = serializers.DecimalField(
        source="remaining_amount", max_digits=10, decimal_places=2, read_only=True
    )
    isPaid = serializers.BooleanField(source="is_paid", read_only=True)
    cashierId = serializers.IntegerField(source="cashier_id", read_only=True)
    cashierName = serializers.CharField(source="cashier_name", read_only=True)
    waiterId = serializers.IntegerField(source="waiter_id", read_only=True)
    waiterName = serializers.CharField(source="waiter_name", read_only=True)
    customerName = serializers.CharField(source="customer_name", read_only=True)
    customerPhone = serializers.CharField(source="customer_phone", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "orderNumber",
            "type",
            "tableId",
            "tableName",
            "items",
            "status",
            "subtotal",
            "taxAmount",
            "total",
            "payments",
            "paidAmount",
            "remainingAmount",
            "isPaid",
            "cashierId",
            "cashierName",
            "waiterId",
            "waiterName",
            "customerName",
            "customerPhone",
            "notes",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
        select_related_fields = ["table"]
        prefetch_related_fields = ["items", "payments"]


class OrderCreateSerializer(serializers.Serializer):
    """
    Validates the POST /orders body and turns it into the snake_case draft
    OrderService.create_order expects.

    ``paidAmount``, ``remainingAmount`` and ``isPaid`` may be sent by older
    clients; they are ignored and re-derived from ``payments``.
    """

    type = serializers.ChoiceField(
        source="order_type", choices=Order.OrderType.choices, default=Order.OrderType.DINE_IN
    )
    tableId = serializers.IntegerField(source="table_id", required=False, allow_null=True)
    tableName = serializers.CharField(
        source="table_name", max_length=100, required=False, allow_blank=True
    )
    items = OrderItemInputSerializer(many=True, required=False)
    subtotal = _money_field(required=False, allow_null=True)
    taxAmount = _money_field(source="tax_amount", required=False, allow_null=True)
    total = _money_field(required=False, allow_null=True)
    payments = TenderInputSerializer(many=True, required=False)
    cashierId = serializers.IntegerField(source="cashier_id", required=False, allow_null=True)
    cashierName = serializers.CharField(
        source="cashier_name", max_length=150, required=False, allow_blank=True
    )
    waiterId = serializers.IntegerField(source="waiter_id", required=False, allow_null=True)
    waiterName = serializers.CharField(
        source="waiter_name", max_length=150, required=False, allow_blank=True
    )
    customerName = serializers.CharField(
        source="customer_name", max_length=150, required=False, allow_blank=True
    )
    customerPhone = serializers.CharField(
        source="customer_phone", max_length=20, required=False, allow_blank=True
    )
    notes = serializers.CharField(required=False, allow_blank=True)


class OrderUpdateSerializer(serializers.Serializer):
    """Validates the PATCH /orders/:id body. Only keys present are applied."""

    notes = serializers.CharField(required=False, allow_blank=True)
    customerName = serializers.CharField(
        source="customer_name", max_length=150, required=False, allow_blank=True
    )
    customerPhone = serializers.CharField(
        source="customer_phone", max_length=20, required=False, allow_blank=True
    )
    waiterId = serializers.IntegerField(source="waiter_id", required=False, allow_null=True)
    waiterName = serializers.CharField(
        source="waiter_name", max_length=150, required=False, allow_blank=True
    )
    items = OrderItemInputSerializer(many=True, required=False)
    payments = TenderInputSerializer(many=True, required=False)
    status = serializers.ChoiceField(choices=Order.OrderStatus.choices, required=False)
