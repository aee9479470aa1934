"""
Unit tests for payments.money module.

These tests are CRITICAL for preventing penny drift in order totals.
"""

import pytest
from decimal import Decimal

from payments.money import (
    currency_exponent,
    quantize_decimal,
    quantize,
    to_decimal,
    to_minor,
    from_minor,
    sum_amounts,
    percentage_of,
)


class TestCurrencyExponent:
    """Test currency exponent lookup."""

    def test_pkr_exponent(self):
        assert currency_exponent("PKR") == 2

    def test_jpy_exponent(self):
        assert currency_exponent("JPY") == 0

    def test_kwd_exponent(self):
        assert currency_exponent("KWD") == 3

    def test_case_insensitive(self):
        assert currency_exponent("pkr") == 2

    def test_unknown_currency_defaults_to_2(self):
        assert currency_exponent("XXX") == 2

    def test_quantize_decimal(self):
        assert quantize_decimal("PKR") == Decimal("0.01")
        assert quantize_decimal("JPY") == Decimal("1")


class TestQuantize:
    """Test Decimal quantization with banker's rounding."""

    def test_quantize_normal(self):
        assert quantize("PKR", "10.127") == Decimal("10.13")

    def test_quantize_bankers_rounding_down(self):
        # 10.125 -> 10.12 (round to even)
        assert quantize("PKR", "10.125") == Decimal("10.12")

    def test_quantize_bankers_rounding_up(self):
        # 10.135 -> 10.14 (round to even)
        assert quantize("PKR", "10.135") == Decimal("10.14")

    def test_quantize_zero_decimal_currency(self):
        assert quantize("JPY", "1234.56") == Decimal("1235")

    def test_float_input_has_no_binary_artefacts(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert quantize("PKR", 0.1 + 0.2) == Decimal("0.30")


class TestMinorUnits:
    def test_to_minor(self):
        assert to_minor("PKR", "282.00") == 28200
        assert to_minor("PKR", "10.127") == 1013

    def test_from_minor(self):
        assert from_minor("PKR", 28200) == Decimal("282.00")

    def test_minor_round_trip_is_stable(self):
        for value in ("0.00", "0.01", "32.00", "999.99"):
            assert from_minor("PKR", to_minor("PKR", value)) == Decimal(value)


class TestArithmetic:
    def test_sum_amounts_is_exact(self):
        assert sum_amounts(["0.10", "0.20", Decimal("0.30")]) == Decimal("0.60")

    def test_sum_amounts_empty_is_decimal_zero(self):
        result = sum_amounts([])
        assert isinstance(result, Decimal)
        assert result == 0

    def test_percentage_of(self):
        assert percentage_of("PKR", "200", "16") == Decimal("32.00")

    def test_percentage_of_rounds_once(self):
        # 33.33 * 16% = 5.3328 -> 5.33
        assert percentage_of("PKR", "33.33", "16") == Decimal("5.33")

    @pytest.mark.parametrize("percentage", ["0", "100"])
    def test_percentage_bounds(self, percentage):
        expected = Decimal("0.00") if percentage == "0" else Decimal("250.00")
        assert percentage_of("PKR", "250", percentage) == expected
