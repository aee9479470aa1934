from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Category(models.Model):
    name = models.CharField(max_length=100, help_text=_("The name of the category."))
    description = models.TextField(
        blank=True, help_text=_("A description of the category.")
    )
    sort_order = models.IntegerField(
        default=0, help_text=_("Display order on the POS category tabs.")
    )
    is_active = models.BooleanField(
        default=True, help_text=_("Inactive categories are hidden from the POS.")
    )

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["sort_order", "name"]

    def __str__(self):
        return self.name


class Product(models.Model):
    name = models.CharField(max_length=200, help_text=_("Name of the product."))
    description = models.TextField(
        blank=True, help_text=_("Detailed description of the product.")
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("The selling price of the product."),
    )
    category = models.ForeignKey(
        Category,
        related_name="products",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        help_text=_("Product category. Leave blank for uncategorized products."),
    )
    is_available = models.BooleanField(
        default=True, help_text=_("Unavailable products cannot be sold.")
    )
    is_taxable = models.BooleanField(
        default=True,
        help_text=_("Whether the cafe's tax percentage applies to this product."),
    )
    image = models.URLField(blank=True, help_text=_("Hosted product image URL."))
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering = ["sort_order", "name"]
        indexes = [
            models.Index(fields=["category", "is_available"], name="product_category_avail_idx"),
        ]

    def __str__(self):
        return self.name


class ProductVariant(models.Model):
    """A priced size/flavour of a product, e.g. "Large" at a higher price."""

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="variants"
    )
    name = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        verbose_name = _("Product Variant")
        verbose_name_plural = _("Product Variants")
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["product", "name"], name="unique_variant_name_per_product"),
        ]

    def __str__(self):
        return f"{self.product.name} ({self.name})"
