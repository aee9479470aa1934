import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.db import transaction

from core_backend.exceptions import NotFoundError, ValidationError
from .models import Product, ProductVariant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductSnapshot:
    """The product values copied onto an order line at sale time."""

    product: Product
    name: str
    price: Decimal
    is_taxable: bool


class ProductService:
    @staticmethod
    def get_product(product_id) -> Product:
        try:
            return Product.objects.get(pk=product_id)
        except (Product.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Product {product_id} not found.")

    @staticmethod
    def snapshot(product_id, variant: Optional[str] = None) -> ProductSnapshot:
        """
        Current name, price and taxability of a product (or of one of its
        variants, by name) for copying onto an order line.
        """
        product = ProductService.get_product(product_id)
        price = product.price
        if variant:
            try:
                price = product.variants.get(name=variant).price
            except ProductVariant.DoesNotExist:
                raise ValidationError(f"Product '{product.name}' has no variant '{variant}'.")
        return ProductSnapshot(
            product=product,
            name=product.name,
            price=price,
            is_taxable=product.is_taxable,
        )

    @staticmethod
    @transaction.atomic
    def save_product(serializer, variants=None) -> Product:
        """
        Save a product and, when ``variants`` is given, replace its variant
        list with it.
        """
        product = serializer.save()
        if variants is not None:
            product.variants.all().delete()
            ProductVariant.objects.bulk_create(
                ProductVariant(product=product, name=v["name"], price=v["price"])
                for v in variants
            )
            logger.info(f"Product '{product.name}' saved with {len(variants)} variant(s)")
        return product
