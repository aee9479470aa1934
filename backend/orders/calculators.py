"""
Order financial calculator.

Turns a list of order lines into subtotal, taxable base, tax and grand
total. Used by the order lifecycle when the client did not supply totals,
and when an order's items are replaced.

Rounding rule: line amounts and sums are exact; the tax amount is the only
derived figure and is quantized once to the currency's minor unit with
banker's rounding. ``total`` is therefore always exactly
``subtotal + tax_amount``.

Usage:
    from orders.calculators import OrderCalculator
    totals = OrderCalculator(lines, tax_percentage=Decimal("16")).calculate_totals()

Lines are duck-typed: mappings with ``price``/``quantity``/``is_taxable``
keys, or objects (e.g. OrderItem) exposing ``price_at_sale``/``quantity``/
``is_taxable`` attributes.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Tuple

from payments.money import DEFAULT_CURRENCY, percentage_of, quantize, sum_amounts, to_decimal


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    total: Decimal

    def as_dict(self):
        return {
            "subtotal": self.subtotal,
            "taxable_base": self.taxable_base,
            "tax_amount": self.tax_amount,
            "total": self.total,
        }


def _line_values(line: Any) -> Tuple[Decimal, int, bool]:
    if isinstance(line, Mapping):
        price = line.get("price", line.get("price_at_sale"))
        quantity = line["quantity"]
        is_taxable = line.get("is_taxable", True)
    else:
        price = getattr(line, "price_at_sale", None)
        if price is None:
            price = getattr(line, "price")
        quantity = line.quantity
        is_taxable = getattr(line, "is_taxable", True)
    return to_decimal(price), int(quantity), bool(is_taxable)


class OrderCalculator:
    """
    Pure calculator over a fixed set of lines.

    Validation of prices, quantities and the tax percentage belongs to the
    caller (serializers / OrderService); the calculator assumes sane input.
    """

    def __init__(
        self,
        lines: Iterable[Any],
        tax_percentage: Decimal,
        currency: str = DEFAULT_CURRENCY,
    ):
        self.lines: List[Tuple[Decimal, int, bool]] = [_line_values(line) for line in lines]
        self.tax_percentage = to_decimal(tax_percentage)
        self.currency = currency

    def calculate_subtotal(self) -> Decimal:
        """Σ price × quantity over all lines."""
        return sum_amounts(price * quantity for price, quantity, _ in self.lines)

    def calculate_taxable_base(self) -> Decimal:
        """Σ price × quantity over taxable lines only."""
        return sum_amounts(
            price * quantity for price, quantity, is_taxable in self.lines if is_taxable
        )

    def calculate_tax(self) -> Decimal:
        return percentage_of(self.currency, self.calculate_taxable_base(), self.tax_percentage)

    def calculate_totals(self) -> OrderTotals:
        subtotal = quantize(self.currency, self.calculate_subtotal())
        taxable_base = quantize(self.currency, self.calculate_taxable_base())
        tax_amount = self.calculate_tax()
        return OrderTotals(
            subtotal=subtotal,
            taxable_base=taxable_base,
            tax_amount=tax_amount,
            total=subtotal + tax_amount,
        )


def calculate_order_totals(
    lines: Iterable[Any],
    tax_percentage: Decimal,
    currency: str = DEFAULT_CURRENCY,
) -> OrderTotals:
    """Shortcut for ``OrderCalculator(lines, tax_percentage, currency).calculate_totals()``."""
    return OrderCalculator(lines, tax_percentage, currency).calculate_totals()
