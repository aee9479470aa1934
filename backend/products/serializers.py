from decimal import Decimal

from rest_framework import serializers

from core_backend.base import BaseModelSerializer, TimestampedSerializer
from .models import Category, Product, ProductVariant


class CategorySerializer(BaseModelSerializer):
    sortOrder = serializers.IntegerField(source="sort_order", required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)

    class Meta:
        model = Category
        fields = ["id", "name", "description", "sortOrder", "isActive"]


class ProductVariantSerializer(BaseModelSerializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))

    class Meta:
        model = ProductVariant
        fields = ["name", "price"]


class ProductSerializer(TimestampedSerializer):
    """
    Product with its variants inlined. Writing ``variants`` replaces the
    whole list (see ProductService.save_product).
    """

    categoryId = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=Category.objects.all(),
        allow_null=True,
        required=False,
    )
    categoryName = serializers.CharField(source="category.name", read_only=True, default=None)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    isAvailable = serializers.BooleanField(source="is_available", required=False)
    isTaxable = serializers.BooleanField(source="is_taxable", required=False)
    sortOrder = serializers.IntegerField(source="sort_order", required=False)
    variants = ProductVariantSerializer(many=True, required=False)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "categoryId",
            "categoryName",
            "variants",
            "isAvailable",
            "isTaxable",
            "image",
            "sortOrder",
            "createdAt",
            "updatedAt",
        ]
        select_related_fields = ["category"]
        prefetch_related_fields = ["variants"]

    def validate_variants(self, value):
        names = [variant["name"] for variant in value]
        if len(names) != len(set(names)):
            raise serializers.ValidationError("Variant names must be unique.")
        return value
