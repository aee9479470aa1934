from decimal import Decimal

from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from .models import Tender


class TenderSerializer(BaseModelSerializer):
    """Read representation of a recorded tender."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Tender
        fields = ["id", "method", "amount", "tip", "reference", "createdAt"]
        read_only_fields = fields


class TenderInputSerializer(serializers.Serializer):
    """
    A tender as submitted with an order. Validated only; persisted as part of
    the order's tender list by PaymentService.record_tenders.
    """

    method = serializers.ChoiceField(choices=Tender.Method.choices, default=Tender.Method.CASH)
    amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False
    )
    tip = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, default=Decimal("0")
    )
    reference = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
