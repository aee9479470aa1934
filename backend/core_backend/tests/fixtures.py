"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like users, settings, products, tables and orders.
"""
import pytest
from decimal import Decimal
from django.contrib.auth import get_user_model

from orders.services import OrderService
from products.models import Category, Product, ProductVariant
from settings.models import GlobalSettings
from tables.models import Table

User = get_user_model()


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def cashier_user(db):
    """Create a regular POS user (not staff)"""
    return User.objects.create_user(
        username='cashier',
        password='password123',
        first_name='Cashier',
        last_name='Staff',
    )


@pytest.fixture
def admin_staff_user(db):
    """Create an admin user (is_staff)"""
    return User.objects.create_user(
        username='admin',
        password='password123',
        first_name='Admin',
        last_name='User',
        is_staff=True,
    )


@pytest.fixture
def waiter_user(db):
    """Create a waiter"""
    return User.objects.create_user(
        username='waiter',
        password='password123',
        first_name='Ali',
        last_name='Waiter',
    )


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def global_settings(db):
    """GlobalSettings row with the default 16% tax and PKR currency"""
    settings_obj = GlobalSettings.load()
    settings_obj.tax_percentage = Decimal('16.00')
    settings_obj.currency = 'PKR'
    settings_obj.save()
    return settings_obj


# ============================================================================
# CATALOGUE FIXTURES
# ============================================================================

@pytest.fixture
def category(db):
    """Create test category"""
    return Category.objects.create(name='Main Course', sort_order=0)


@pytest.fixture
def drinks_category(db):
    return Category.objects.create(name='Cold Drinks', sort_order=1)


@pytest.fixture
def taxable_product(category):
    """Taxable product priced 100.00"""
    return Product.objects.create(
        name='Chicken Karahi',
        price=Decimal('100.00'),
        category=category,
        is_taxable=True,
    )


@pytest.fixture
def untaxable_product(drinks_category):
    """Tax-exempt product priced 50.00"""
    return Product.objects.create(
        name='Mineral Water',
        price=Decimal('50.00'),
        category=drinks_category,
        is_taxable=False,
    )


@pytest.fixture
def product_with_variants(drinks_category):
    """Latte with Regular (400) and Large (500) variants"""
    product = Product.objects.create(
        name='Latte',
        price=Decimal('400.00'),
        category=drinks_category,
    )
    ProductVariant.objects.create(product=product, name='Regular', price=Decimal('400.00'))
    ProductVariant.objects.create(product=product, name='Large', price=Decimal('500.00'))
    return product


# ============================================================================
# TABLE FIXTURES
# ============================================================================

@pytest.fixture
def table(db):
    """Create an available table"""
    return Table.objects.create(number=1, name='Table 1', capacity=4)


@pytest.fixture
def second_table(db):
    return Table.objects.create(number=2, name='Table 2', capacity=2)


# ============================================================================
# ORDER FIXTURES
# ============================================================================

@pytest.fixture
def order_lines(taxable_product, untaxable_product):
    """
    Draft lines for the reference cart:
    2 x 100.00 (taxable) + 1 x 50.00 (tax exempt) -> subtotal 250, tax 32, total 282
    """
    return [
        {'product_id': taxable_product.id, 'quantity': 2},
        {'product_id': untaxable_product.id, 'quantity': 1},
    ]


@pytest.fixture
def make_order(global_settings, order_lines, cashier_user):
    """
    Factory creating orders through OrderService.

    Usage:
        order = make_order()
        order = make_order(table_id=table.id, payments=[{'method': 'cash', 'amount': '300'}])
    """
    def _make_order(**overrides):
        draft = {'order_type': 'dine-in', 'items': order_lines}
        draft.update(overrides)
        return OrderService.create_order(draft, user=cashier_user)

    return _make_order


@pytest.fixture
def dine_in_order(make_order, table):
    """A preparing dine-in order holding ``table``"""
    return make_order(table_id=table.id)
