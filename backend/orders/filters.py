import django_filters

from .models import Order


class OrderFilter(django_filters.FilterSet):
    """
    Filters for the order list: ``?status=preparing&type=dine-in&table=3&isPaid=false``.
    """

    status = django_filters.ChoiceFilter(choices=Order.OrderStatus.choices)
    type = django_filters.ChoiceFilter(field_name="order_type", choices=Order.OrderType.choices)
    table = django_filters.NumberFilter(field_name="table_id")
    isPaid = django_filters.BooleanFilter(field_name="is_paid")
    created_at__gte = django_filters.DateTimeFilter(field_name="created_at", lookup_expr="gte")
    created_at__lte = django_filters.DateTimeFilter(field_name="created_at", lookup_expr="lte")

    class Meta:
        model = Order
        fields = ["status", "type", "table", "isPaid"]
