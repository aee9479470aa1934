from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from .models import Table


class PositionField(serializers.Field):
    """Floor-plan position exposed as ``{"x": int, "y": int}``."""

    def __init__(self, **kwargs):
        kwargs.setdefault("source", "*")
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_representation(self, instance):
        if instance.position_x is None and instance.position_y is None:
            return None
        return {"x": instance.position_x, "y": instance.position_y}

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            raise serializers.ValidationError('Expected an object like {"x": 0, "y": 0}.')
        try:
            return {
                "position_x": int(data["x"]) if data.get("x") is not None else None,
                "position_y": int(data["y"]) if data.get("y") is not None else None,
            }
        except (TypeError, ValueError):
            raise serializers.ValidationError("Position coordinates must be integers.")


class TableSerializer(BaseModelSerializer):
    currentOrderId = serializers.UUIDField(source="current_order_id", read_only=True)
    position = PositionField()

    class Meta:
        model = Table
        fields = ["id", "number", "name", "capacity", "status", "currentOrderId", "position"]
