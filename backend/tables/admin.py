from django.contrib import admin

from .models import Table


@admin.register(Table)
class TableAdmin(admin.ModelAdmin):
    list_display = ("number", "name", "capacity", "status", "current_order")
    list_filter = ("status",)
    search_fields = ("name",)
    ordering = ("number",)
    raw_id_fields = ("current_order",)
