from django.contrib import admin

from .models import Tender


@admin.register(Tender)
class TenderAdmin(admin.ModelAdmin):
    list_display = ("order", "method", "amount", "tip", "reference", "created_at")
    list_filter = ("method",)
    search_fields = ("reference", "order__order_number")
    readonly_fields = ("order", "method", "amount", "tip", "reference", "created_at")

    def has_add_permission(self, request):
        return False
