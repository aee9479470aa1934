from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer that provides common functionality.

    Features:
    - Query optimisation hints (select_related_fields / prefetch_related_fields)
      picked up by OptimizedQuerysetMixin
    - A single place for project-wide validation
    """

    class Meta:
        # Default optimization fields (can be overridden)
        select_related_fields = []
        prefetch_related_fields = []


class TimestampedSerializer(BaseModelSerializer):
    """Adds read-only camelCase creation/update timestamps."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
