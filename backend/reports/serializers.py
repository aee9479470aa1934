from datetime import timedelta

from django.utils import timezone
from rest_framework import serializers


class ReportParameterSerializer(serializers.Serializer):
    """Validate report parameters (``YYYY-MM-DD``, both inclusive)"""

    MAX_DAYS = 365
    DEFAULT_DAYS = 30

    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, data):
        """Fill defaults (last 30 days) and validate the date range"""
        end_date = data.get("end_date") or timezone.localdate()
        start_date = data.get("start_date") or end_date - timedelta(days=self.DEFAULT_DAYS - 1)

        if start_date > end_date:
            raise serializers.ValidationError("Start date must not be after end date")

        # Limit date range to prevent expensive queries
        if (end_date - start_date).days > self.MAX_DAYS:
            raise serializers.ValidationError(
                f"Date range cannot exceed {self.MAX_DAYS} days"
            )

        data["start_date"] = start_date
        data["end_date"] = end_date
        return data
