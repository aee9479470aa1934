import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class OrderNumberCounter(models.Model):
    """
    Named counter holding the last issued sequence value.

    Only ``orders.services.numbering_service`` writes to it, with a locked
    atomic increment.
    """

    name = models.CharField(max_length=50, primary_key=True)
    value = models.PositiveBigIntegerField(default=0)

    class Meta:
        verbose_name = _("Order Number Counter")
        verbose_name_plural = _("Order Number Counters")

    def __str__(self):
        return f"{self.name}={self.value}"


class Order(models.Model):
    # --- Status Fields ---
    class OrderStatus(models.TextChoices):
        PREPARING = "preparing", _("Preparing")  # Initial state, in the kitchen
        SERVED = "served", _("Served")
        BILLED = "billed", _("Billed")  # Terminal
        CANCELLED = "cancelled", _("Cancelled")  # Terminal

    class OrderType(models.TextChoices):
        DINE_IN = "dine-in", _("Dine In")
        TAKEAWAY = "takeaway", _("Takeaway")
        DELIVERY = "delivery", _("Delivery")

    TERMINAL_STATUSES = (OrderStatus.BILLED, OrderStatus.CANCELLED)
    ACTIVE_STATUSES = (OrderStatus.PREPARING, OrderStatus.SERVED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.PositiveIntegerField(
        unique=True,
        editable=False,
        help_text=_("Human-facing sequential number, never reused."),
    )
    order_type = models.CharField(
        max_length=10, choices=OrderType.choices, default=OrderType.DINE_IN
    )
    status = models.CharField(
        max_length=10,
        choices=OrderStatus.choices,
        default=OrderStatus.PREPARING,
        db_index=True,
    )

    # --- Table ---
    table = models.ForeignKey(
        "tables.Table",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    table_name = models.CharField(
        max_length=100, blank=True, help_text=_("Table name at the time of the order.")
    )

    # --- Financial Fields ---
    subtotal = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    tax_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("subtotal + tax_amount. Persisted and authoritative once set."),
    )

    # --- Payment bookkeeping (derived by the tender reconciler) ---
    paid_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    remaining_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    is_paid = models.BooleanField(default=False, db_index=True)

    # --- Attribution ---
    cashier = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders_as_cashier",
    )
    cashier_name = models.CharField(max_length=150, blank=True)
    waiter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders_as_waiter",
    )
    waiter_name = models.CharField(max_length=150, blank=True)
    customer_name = models.CharField(max_length=150, blank=True)
    customer_phone = models.CharField(max_length=20, blank=True)
    notes = models.TextField(blank=True)

    # --- Timestamps ---
    created_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="order_status_created_idx"),
        ]

    def __str__(self):
        return f"Order #{self.order_number} ({self.get_status_display()})"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES


class OrderItem(models.Model):
    """
    One order line. Name, price and taxability are copied from the product
    when the line is created and are never recomputed from the catalogue.
    """

    order = models.ForeignKey(Order, related_name="items", on_delete=models.CASCADE)
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )
    product_name = models.CharField(max_length=200)
    variant = models.CharField(max_length=100, blank=True)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    price_at_sale = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Unit price at the time of sale."),
    )
    notes = models.CharField(max_length=255, blank=True)
    is_taxable = models.BooleanField(default=True)

    class Meta:
        verbose_name = _("Order Item")
        verbose_name_plural = _("Order Items")
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} of {self.product_name} in Order #{self.order.order_number}"

    @property
    def line_total(self):
        return self.price_at_sale * self.quantity
