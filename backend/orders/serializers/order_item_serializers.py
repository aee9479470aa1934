from decimal import Decimal

from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from orders.models import OrderItem


class OrderItemSerializer(BaseModelSerializer):
    """Read representation of an order line (the snapshot taken at sale time)."""

    productId = serializers.IntegerField(source="product_id", read_only=True)
    productName = serializers.CharField(source="product_name", read_only=True)
    price = serializers.DecimalField(
        source="price_at_sale", max_digits=10, decimal_places=2, read_only=True
    )
    isTaxable = serializers.BooleanField(source="is_taxable", read_only=True)
    lineTotal = serializers.DecimalField(
        source="line_total", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = OrderItem
        fields = [
            "productId",
            "productName",
            "variant",
            "quantity",
            "price",
            "notes",
            "isTaxable",
            "lineTotal",
        ]
        read_only_fields = fields


class OrderItemInputSerializer(serializers.Serializer):
    """
    An order line as submitted by the POS. ``productName``, ``price`` and
    ``isTaxable`` are optional; missing values are copied from the product.
    """

    productId = serializers.IntegerField(source="product_id")
    productName = serializers.CharField(source="product_name", max_length=200, required=False)
    variant = serializers.CharField(max_length=100, required=False, allow_blank=True)
    quantity = serializers.IntegerField(min_value=1, default=1)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False
    )
    notes = serializers.CharField(max_length=255, required=False, allow_blank=True)
    isTaxable = serializers.BooleanField(source="is_taxable", required=False)
