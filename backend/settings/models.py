from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models


class GlobalSettings(models.Model):
    """
    Cafe-wide settings. There is exactly one row (pk=1).

    Financial rules (tax percentage, currency) are read by the order
    lifecycle when it has to compute totals itself; everything else is
    presentation for receipts and the POS client.
    """

    SINGLETON_PK = 1

    # === CAFE IDENTITY ===
    cafe_name = models.CharField(max_length=100, default="Desi Beats Café")
    cafe_address = models.CharField(max_length=255, blank=True)
    cafe_phone = models.CharField(max_length=30, blank=True)
    cafe_logo = models.URLField(blank=True, help_text="Hosted logo image URL")

    # === FINANCIAL RULES ===
    tax_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("16.00"),
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
        help_text="Tax applied to taxable order lines, as a percentage (16.00 = 16%).",
    )
    is_tax_inclusive = models.BooleanField(
        default=False,
        help_text="Display flag for receipts; totals are always computed tax-exclusive.",
    )
    currency = models.CharField(
        max_length=3,
        default="PKR",
        help_text="Three-letter currency code (ISO 4217). Drives rounding precision.",
    )
    currency_symbol = models.CharField(max_length=10, default="Rs.")

    # === RECEIPTS & CLIENT BEHAVIOUR ===
    receipt_footer = models.TextField(default="Thank you for visiting Desi Beats Café!")
    enable_sound_notifications = models.BooleanField(default=True)
    auto_logout_minutes = models.PositiveIntegerField(default=30)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Global Settings"
        verbose_name_plural = "Global Settings"

    def clean(self):
        if self.pk is not None and self.pk != self.SINGLETON_PK:
            raise ValidationError("There can only be one GlobalSettings instance.")

    def save(self, *args, **kwargs):
        if self.pk is None:
            self.pk = self.SINGLETON_PK
        self.clean()
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "GlobalSettings":
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj

    def __str__(self):
        return f"Global Settings ({self.cafe_name})"
