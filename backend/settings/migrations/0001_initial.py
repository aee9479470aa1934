from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="GlobalSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("cafe_name", models.CharField(default="Desi Beats Café", max_length=100)),
                ("cafe_address", models.CharField(blank=True, max_length=255)),
                ("cafe_phone", models.CharField(blank=True, max_length=30)),
                ("cafe_logo", models.URLField(blank=True, help_text="Hosted logo image URL")),
                (
                    "tax_percentage",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("16.00"),
                        help_text="Tax applied to taxable order lines, as a percentage (16.00 = 16%).",
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("100")),
                        ],
                    ),
                ),
                (
                    "is_tax_inclusive",
                    models.BooleanField(
                        default=False,
                        help_text="Display flag for receipts; totals are always computed tax-exclusive.",
                    ),
                ),
                (
                    "currency",
                    models.CharField(
                        default="PKR",
                        help_text="Three-letter currency code (ISO 4217). Drives rounding precision.",
                        max_length=3,
                    ),
                ),
                ("currency_symbol", models.CharField(default="Rs.", max_length=10)),
                ("receipt_footer", models.TextField(default="Thank you for visiting Desi Beats Café!")),
                ("enable_sound_notifications", models.BooleanField(default=True)),
                ("auto_logout_minutes", models.PositiveIntegerField(default=30)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Global Settings",
                "verbose_name_plural": "Global Settings",
            },
        ),
    ]
