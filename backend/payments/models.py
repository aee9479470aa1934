from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Tender(models.Model):
    """
    A single payment instrument applied toward an order's total.

    Tenders belong to exactly one order and are written as a list in one go
    at checkout (see ``PaymentService.record_tenders``); they are not edited
    individually afterwards. Payments are recorded, not processed.
    """

    class Method(models.TextChoices):
        CASH = "cash", _("Cash")
        CARD = "card", _("Card")
        BANK_TRANSFER = "bank_transfer", _("Bank Transfer")
        WALLET = "wallet", _("Wallet")

    order = models.ForeignKey(
        "orders.Order", on_delete=models.CASCADE, related_name="payments"
    )
    method = models.CharField(
        max_length=20,
        choices=Method.choices,
        default=Method.CASH,
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Amount applied toward the order total."),
    )
    tip = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Tip on top of the amount. Counts toward paid amount, not revenue."),
    )
    reference = models.CharField(
        max_length=100,
        blank=True,
        help_text=_("Card slip, transfer or wallet reference for non-cash tenders."),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Tender")
        verbose_name_plural = _("Tenders")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["method"], name="tender_method_idx"),
        ]

    def __str__(self):
        return f"{self.get_method_display()} {self.amount} (tip {self.tip})"
