from django.contrib import admin

from payments.models import Tender
from .models import Order, OrderItem, OrderNumberCounter


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product", "product_name", "variant", "quantity", "price_at_sale", "is_taxable", "get_line_item_total")
    fields = readonly_fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False

    @admin.display(description="Line Item Total")
    def get_line_item_total(self, obj):
        return obj.line_total


class TenderInline(admin.TabularInline):
    model = Tender
    extra = 0
    readonly_fields = ("method", "amount", "tip", "reference", "created_at")
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Order model.

    Status and table changes should go through the API so the table side
    effects run; the admin is for inspection and note edits.
    """

    list_display = (
        "order_number",
        "order_type",
        "table_name",
        "status",
        "total",
        "is_paid",
        "cashier_name",
        "created_at",
    )
    list_display_links = ("order_number",)
    search_fields = ("order_number", "customer_name", "customer_phone", "cashier_name")
    list_filter = ("status", "order_type", "is_paid", "created_at")
    inlines = [OrderItemInline, TenderInline]

    fieldsets = (
        (
            "Order Overview",
            {
                "fields": (
                    "id",
                    "order_number",
                    "order_type",
                    "status",
                    "table",
                    "table_name",
                )
            },
        ),
        (
            "Financial Summary",
            {
                "fields": (
                    "subtotal",
                    "tax_amount",
                    "total",
                    "paid_amount",
                    "remaining_amount",
                    "is_paid",
                ),
            },
        ),
        (
            "People",
            {
                "fields": (
                    "cashier",
                    "cashier_name",
                    "waiter",
                    "waiter_name",
                    "customer_name",
                    "customer_phone",
                    "notes",
                )
            },
        ),
        (
            "Timestamps",
            {
                "classes": ("collapse",),
                "fields": ("created_at", "updated_at"),
            },
        ),
    )

    readonly_fields = (
        "id",
        "order_number",
        "order_type",
        "status",
        "table",
        "table_name",
        "subtotal",
        "tax_amount",
        "total",
        "paid_amount",
        "remaining_amount",
        "is_paid",
        "cashier",
        "cashier_name",
        "created_at",
        "updated_at",
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("table", "cashier", "waiter")


@admin.register(OrderNumberCounter)
class OrderNumberCounterAdmin(admin.ModelAdmin):
    list_display = ("name", "value")
    readonly_fields = ("name", "value")
