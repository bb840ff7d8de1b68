"""
Tests for amount normalization.

Tests cover:
- Conversion to minor units (truncation, strings, floats, Decimals)
- Conversion back to major units
- Display formatting and currency minimums
"""

from decimal import Decimal

import pytest

from paystack_client.amounts import (
    currency_minimum,
    format_amount,
    meets_minimum,
    to_major_units,
    to_minor_units,
)


# =============================================================================
# to_minor_units Tests
# =============================================================================


class TestToMinorUnits:
    """Tests for major -> minor unit conversion."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (1500, 150000),
            (1500.00, 150000),
            (100.50, 10050),
            ("100.50", 10050),
            (Decimal("0.10"), 10),
            (0.29, 29),
        ],
    )
    def test_multiplies_by_100(self, amount, expected):
        """Should multiply by 100 without float drift."""
        assert to_minor_units(amount, "NGN") == expected

    def test_truncates_sub_minor_precision(self):
        """Should truncate, not round, anything below one minor unit."""
        assert to_minor_units("19.999") == 1999
        assert to_minor_units(Decimal("0.009")) == 0

    def test_zero_and_negative_pass_through(self):
        """Should not reject zero or negative amounts."""
        assert to_minor_units(0) == 0
        assert to_minor_units(-5.5) == -550

    def test_currency_without_subunit_still_multiplied(self):
        """XOF has no subunit but is still multiplied by 100."""
        assert to_minor_units(1000, "XOF") == 100000

    def test_returns_int(self):
        assert isinstance(to_minor_units("12.34"), int)


# =============================================================================
# to_major_units Tests
# =============================================================================


class TestToMajorUnits:
    """Tests for minor -> major unit conversion."""

    def test_divides_by_100(self):
        assert to_major_units(10050) == Decimal("100.50")
        assert to_major_units(150000) == Decimal("1500")

    def test_round_trips_whole_minor_amounts(self):
        """Should give back the original minor amount after conversion."""
        assert to_minor_units(to_major_units(12345)) == 12345


# =============================================================================
# Formatting Tests
# =============================================================================


class TestFormatting:
    """Tests for display helpers."""

    def test_format_known_currency_uses_symbol(self):
        assert format_amount(150000, "NGN") == "₦ 1,500.00"

    def test_format_unknown_currency_uses_code(self):
        assert format_amount(250, "EUR") == "EUR 2.50"

    def test_currency_minimum(self):
        assert currency_minimum("NGN") == Decimal("50")
        assert currency_minimum("GHS") == Decimal("0.10")
        assert currency_minimum("EUR") == Decimal("0")

    def test_meets_minimum(self):
        assert meets_minimum(50, "NGN") is True
        assert meets_minimum("49.99", "NGN") is False
        assert meets_minimum(1, "EUR") is True
