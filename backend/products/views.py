from core_backend.base import BaseViewSet, IsAdminOrReadOnly
from .filters import ProductFilter
from .models import Category, Product
from .serializers import CategorySerializer, ProductSerializer
from .services import ProductService


class CategoryViewSet(BaseViewSet):
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ["is_active"]
    ordering = ["sort_order", "name"]


class ProductViewSet(BaseViewSet):
    """
    Catalogue CRUD. Price changes here never touch existing orders: order
    lines carry their own snapshot of name, price and taxability.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [IsAdminOrReadOnly]
    filterset_class = ProductFilter
    ordering = ["sort_order", "name"]
    ordering_fields = ["name", "price", "sort_order"]

    def perform_create(self, serializer):
        variants = serializer.validated_data.pop("variants", None)
        ProductService.save_product(serializer, variants)

    def perform_update(self, serializer):
        variants = serializer.validated_data.pop("variants", None)
        ProductService.save_product(serializer, variants)
