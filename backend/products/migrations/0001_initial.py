from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="The name of the category.", max_length=100)),
                ("description", models.TextField(blank=True, help_text="A description of the category.")),
                ("sort_order", models.IntegerField(default=0, help_text="Display order on the POS category tabs.")),
                ("is_active", models.BooleanField(default=True, help_text="Inactive categories are hidden from the POS.")),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "ordering": ["sort_order", "name"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Name of the product.", max_length=200)),
                ("description", models.TextField(blank=True, help_text="Detailed description of the product.")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="The selling price of the product.",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("is_available", models.BooleanField(default=True, help_text="Unavailable products cannot be sold.")),
                (
                    "is_taxable",
                    models.BooleanField(
                        default=True, help_text="Whether the cafe's tax percentage applies to this product."
                    ),
                ),
                ("image", models.URLField(blank=True, help_text="Hosted product image URL.")),
                ("sort_order", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        help_text="Product category. Leave blank for uncategorized products.",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="products",
                        to="products.category",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "ordering": ["sort_order", "name"],
                "indexes": [models.Index(fields=["category", "is_available"], name="product_category_avail_idx")],
            },
        ),
        migrations.CreateModel(
            name="ProductVariant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variants",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product Variant",
                "verbose_name_plural": "Product Variants",
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(fields=("product", "name"), name="unique_variant_name_per_product")
                ],
            },
        ),
    ]
