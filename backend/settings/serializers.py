from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from .models import GlobalSettings


class GlobalSettingsSerializer(BaseModelSerializer):
    cafeName = serializers.CharField(source="cafe_name", max_length=100, required=False)
    cafeAddress = serializers.CharField(source="cafe_address", max_length=255, required=False, allow_blank=True)
    cafePhone = serializers.CharField(source="cafe_phone", max_length=30, required=False, allow_blank=True)
    cafeLogo = serializers.URLField(source="cafe_logo", required=False, allow_blank=True)
    taxPercentage = serializers.DecimalField(
        source="tax_percentage", max_digits=5, decimal_places=2,
        min_value=0, max_value=100, required=False,
    )
    isTaxInclusive = serializers.BooleanField(source="is_tax_inclusive", required=False)
    currencySymbol = serializers.CharField(source="currency_symbol", max_length=10, required=False)
    receiptFooter = serializers.CharField(source="receipt_footer", required=False, allow_blank=True)
    enableSoundNotifications = serializers.BooleanField(source="enable_sound_notifications", required=False)
    autoLogoutMinutes = serializers.IntegerField(source="auto_logout_minutes", min_value=0, required=False)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = GlobalSettings
        fields = [
            "id",
            "cafeName",
            "cafeAddress",
            "cafePhone",
            "cafeLogo",
            "taxPercentage",
            "isTaxInclusive",
            "currency",
            "currencySymbol",
            "receiptFooter",
            "enableSoundNotifications",
            "autoLogoutMinutes",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def validate_currency(self, value):
        if len(value) != 3 or not value.isalpha():
            raise serializers.ValidationError("Currency must be a three-letter ISO 4217 code.")
        return value.upper()
