"""
Monetary precision helpers.

All money in the backend is ``Decimal``. Amounts are quantized to the
currency's minor unit with banker's rounding (ROUND_HALF_EVEN) at exactly
one place: when a derived amount (tax) is produced. Sums of already
quantized amounts are exact and are never re-rounded.

Key Principles:
1. NEVER use float for money
2. Quantize derived amounts once, with ROUND_HALF_EVEN
3. Compare amounts in minor units (integers) so equality checks are exact
"""

from decimal import Decimal, ROUND_HALF_EVEN, getcontext
from typing import Iterable, Union

# Set high precision for intermediate calculations
getcontext().prec = 28

Amount = Union[Decimal, str, int, float]

# Currency minor unit exponents (how many decimal places)
CURRENCY_EXPONENT = {
    # 2-decimal currencies (most common)
    "PKR": 2,  # Pakistani Rupee (paisa)
    "INR": 2,  # Indian Rupee (paise)
    "USD": 2,  # United States Dollar (cents)
    "EUR": 2,  # Euro (cents)
    "GBP": 2,  # British Pound (pence)
    "AED": 2,  # UAE Dirham (fils)

    # Zero-decimal currencies
    "JPY": 0,  # Japanese Yen (no subunit)
    "KRW": 0,  # South Korean Won (no subunit)
    "VND": 0,  # Vietnamese Dong (no subunit)

    # 3-decimal currencies
    "KWD": 3,  # Kuwaiti Dinar (fils)
    "BHD": 3,  # Bahraini Dinar (fils)
    "OMR": 3,  # Omani Rial (baisa)
}

DEFAULT_CURRENCY = "PKR"

ZERO = Decimal("0")


def currency_exponent(currency: str) -> int:
    """
    Get the number of decimal places for a currency.

    Examples:
        >>> currency_exponent("PKR")
        2
        >>> currency_exponent("JPY")
        0
    """
    return CURRENCY_EXPONENT.get(currency.upper(), 2)


def quantize_decimal(currency: str) -> Decimal:
    """
    Get the quantization decimal for a currency (e.g. 0.01 for PKR).
    """
    return Decimal(10) ** -currency_exponent(currency)


def to_decimal(amount: Amount) -> Decimal:
    """Convert any numeric input to Decimal without binary float artefacts."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # Convert float to string first to avoid precision issues
        return Decimal(str(amount))
    return Decimal(amount)


def quantize(currency: str, amount: Amount) -> Decimal:
    """
    Round to currency decimals using banker's rounding (ROUND_HALF_EVEN).

    Banker's rounding prevents systematic bias:
    - 2.5 → 2 (round to nearest even)
    - 3.5 → 4 (round to nearest even)

    Examples:
        >>> quantize("PKR", "10.127")
        Decimal('10.13')
        >>> quantize("PKR", "10.125")
        Decimal('10.12')  # Banker's rounding
        >>> quantize("JPY", "1234.56")
        Decimal('1235')
    """
    return to_decimal(amount).quantize(quantize_decimal(currency), rounding=ROUND_HALF_EVEN)


def to_minor(currency: str, amount: Amount) -> int:
    """
    Convert to minor units (e.g., paisa) after quantization.

    Examples:
        >>> to_minor("PKR", "10.127")
        1013
        >>> to_minor("JPY", "1234.56")
        1235
    """
    quantized = quantize(currency, amount)
    exponent = currency_exponent(currency)
    return int((quantized * (10 ** exponent)).to_integral_value())


def from_minor(currency: str, minor: int) -> Decimal:
    """
    Convert from minor units back to a quantized Decimal.

    Examples:
        >>> from_minor("PKR", 1013)
        Decimal('10.13')
    """
    return quantize(currency, Decimal(minor) / (10 ** currency_exponent(currency)))


def sum_amounts(amounts: Iterable[Amount]) -> Decimal:
    """Exact Decimal sum; always returns a Decimal, even for an empty iterable."""
    return sum((to_decimal(amount) for amount in amounts), ZERO)


def percentage_of(currency: str, amount: Amount, percentage: Amount) -> Decimal:
    """
    ``amount × percentage / 100``, quantized to the currency.

    Examples:
        >>> percentage_of("PKR", "200", "16")
        Decimal('32.00')
    """
    result = to_decimal(amount) * to_decimal(percentage) / Decimal("100")
    return quantize(currency, result)
