"""
Order Calculator Tests

Subtotal, taxable base, tax and total derivation for order lines.
"""
import pytest
from decimal import Decimal

from orders.calculators import OrderCalculator, OrderTotals, calculate_order_totals
from orders.models import OrderItem


class TestOrderCalculator:
    """Totals for dict lines and OrderItem rows"""

    def test_reference_cart(self):
        """
        CRITICAL: 2 x 100 taxable + 1 x 50 exempt at 16%

        Business Impact: the canonical receipt (250 / 32 / 282) must never drift
        """
        lines = [
            {"price": Decimal("100.00"), "quantity": 2, "is_taxable": True},
            {"price": Decimal("50.00"), "quantity": 1, "is_taxable": False},
        ]
        calculator = OrderCalculator(lines, tax_percentage=Decimal("16"))

        assert calculator.calculate_subtotal() == Decimal("250.00")
        assert calculator.calculate_taxable_base() == Decimal("200.00")
        assert calculator.calculate_tax() == Decimal("32.00")

        totals = calculator.calculate_totals()
        assert totals == OrderTotals(
            subtotal=Decimal("250.00"),
            taxable_base=Decimal("200.00"),
            tax_amount=Decimal("32.00"),
            total=Decimal("282.00"),
        )

    def test_no_taxable_lines_means_no_tax(self):
        lines = [{"price": Decimal("50.00"), "quantity": 3, "is_taxable": False}]
        totals = calculate_order_totals(lines, Decimal("16"))
        assert totals.tax_amount == Decimal("0.00")
        assert totals.total == totals.subtotal == Decimal("150.00")

    def test_empty_lines(self):
        totals = calculate_order_totals([], Decimal("16"))
        assert totals.subtotal == Decimal("0.00")
        assert totals.total == Decimal("0.00")

    def test_zero_tax_rate(self):
        lines = [{"price": Decimal("99.99"), "quantity": 1, "is_taxable": True}]
        totals = calculate_order_totals(lines, Decimal("0"))
        assert totals.tax_amount == Decimal("0.00")
        assert totals.total == Decimal("99.99")

    def test_tax_rounded_once_with_bankers_rounding(self):
        """
        CRITICAL: tax is quantized once on the taxable base, not per line

        Business Impact: per-line rounding drifts by a paisa on large carts
        """
        # 3 x 10.05 = 30.15; 30.15 * 5% = 1.5075 -> 1.51
        lines = [{"price": Decimal("10.05"), "quantity": 3, "is_taxable": True}]
        totals = calculate_order_totals(lines, Decimal("5"))
        assert totals.tax_amount == Decimal("1.51")

        # 0.25 * 10% = 0.025 -> 0.02 (half-even)
        lines = [{"price": Decimal("0.25"), "quantity": 1, "is_taxable": True}]
        assert calculate_order_totals(lines, Decimal("10")).tax_amount == Decimal("0.02")

    def test_total_is_exact_sum(self):
        lines = [
            {"price": Decimal("33.33"), "quantity": 3, "is_taxable": True},
            {"price": Decimal("0.01"), "quantity": 7, "is_taxable": False},
        ]
        totals = calculate_order_totals(lines, Decimal("16"))
        assert totals.total == totals.subtotal + totals.tax_amount

    def test_taxable_defaults_to_true(self):
        totals = calculate_order_totals([{"price": "100", "quantity": 1}], Decimal("16"))
        assert totals.tax_amount == Decimal("16.00")

    def test_accepts_order_items(self):
        items = [
            OrderItem(product_name="Karahi", price_at_sale=Decimal("100.00"), quantity=2, is_taxable=True),
            OrderItem(product_name="Water", price_at_sale=Decimal("50.00"), quantity=1, is_taxable=False),
        ]
        totals = calculate_order_totals(items, Decimal("16"))
        assert totals.total == Decimal("282.00")

    def test_zero_decimal_currency(self):
        lines = [{"price": Decimal("1000"), "quantity": 1, "is_taxable": True}]
        totals = calculate_order_totals(lines, Decimal("8.5"), currency="JPY")
        assert totals.tax_amount == Decimal("85")

    def test_as_dict(self):
        totals = calculate_order_totals([{"price": "10", "quantity": 1}], Decimal("10"))
        assert set(totals.as_dict()) == {"subtotal", "taxable_base", "tax_amount", "total"}
