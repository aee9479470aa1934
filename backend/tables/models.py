from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Table(models.Model):
    """
    A dine-in table on the floor plan.

    ``status`` and ``current_order`` are normally changed only as a side
    effect of the order lifecycle (see ``TableService``); staff can still
    override them through the admin/CRUD endpoints.
    """

    class Status(models.TextChoices):
        AVAILABLE = "available", _("Available")
        OCCUPIED = "occupied", _("Occupied")
        BILLED = "billed", _("Billed")

    number = models.PositiveIntegerField(unique=True)
    name = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField(default=4, validators=[MinValueValidator(1)])
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.AVAILABLE,
        db_index=True,
    )
    current_order = models.OneToOneField(
        "orders.Order",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="occupied_table",
        help_text=_("The order currently holding this table."),
    )
    position_x = models.IntegerField(null=True, blank=True)
    position_y = models.IntegerField(null=True, blank=True)

    class Meta:
        verbose_name = _("Table")
        verbose_name_plural = _("Tables")
        ordering = ["number"]

    def __str__(self):
        return f"{self.name} (#{self.number})"

    @property
    def is_available(self):
        return self.status == self.Status.AVAILABLE
