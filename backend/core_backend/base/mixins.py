from rest_framework.viewsets import ViewSetMixin


class OptimizedQuerysetMixin(ViewSetMixin):
    """
    A ViewSet mixin that applies the ``select_related_fields`` and
    ``prefetch_related_fields`` declared on the current serializer's Meta.

    Usage:
        class OrderSerializer(BaseModelSerializer):
            class Meta:
                model = Order
                select_related_fields = ["table", "cashier"]
                prefetch_related_fields = ["items", "payments"]
    """

    def get_queryset(self):
        queryset = super().get_queryset()

        serializer_class = self.get_serializer_class()
        meta = getattr(serializer_class, "Meta", None)
        if meta is None:
            return queryset

        select_related = list(getattr(meta, "select_related_fields", []))
        prefetch_related = list(getattr(meta, "prefetch_related_fields", []))

        if select_related:
            queryset = queryset.select_related(*select_related)
        if prefetch_related:
            queryset = queryset.prefetch_related(*prefetch_related)
        return queryset
