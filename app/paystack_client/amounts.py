"""
Amount normalization between major and minor currency units.

Paystack expresses every amount in minor units (kobo, pesewas, cents).
The conversion is uniform: multiply by 100 and truncate, for every
currency. XOF has no subunit but Paystack still expects the amount
multiplied by 100, so no per-currency exponent table is applied.

Usage:
    from paystack_client.amounts import to_minor_units, to_major_units

    to_minor_units(1500.00)      # 150000
    to_minor_units("100.50")     # 10050
    to_major_units(150000)       # Decimal("1500")
"""

from __future__ import annotations

from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal, str]

MINOR_UNIT_FACTOR = 100

SUPPORTED_CURRENCIES: dict[str, dict[str, object]] = {
    "NGN": {"name": "Nigerian Naira", "symbol": "₦", "minimum": Decimal("50")},
    "USD": {"name": "US Dollar", "symbol": "$", "minimum": Decimal("2")},
    "GHS": {"name": "Ghanaian Cedi", "symbol": "₵", "minimum": Decimal("0.10")},
    "ZAR": {"name": "South African Rand", "symbol": "R", "minimum": Decimal("1")},
    "KES": {"name": "Kenyan Shilling", "symbol": "Ksh.", "minimum": Decimal("3")},
    "XOF": {"name": "West African CFA Franc", "symbol": "XOF", "minimum": Decimal("1")},
}


def _as_decimal(amount: Number) -> Decimal:
    # str() first so floats convert by their shortest repr (100.5, not 100.4999...)
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def to_minor_units(amount: Number, currency: str | None = None) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Multiplies by 100 and truncates toward zero. ``currency`` is accepted
    for call-site symmetry only; every currency uses the same factor.
    Negative and zero amounts pass through unchanged.

    Args:
        amount: Amount in major units (1500.00 NGN)
        currency: ISO 4217 code (ignored)

    Returns:
        Amount in minor units (150000)
    """
    return int(_as_decimal(amount) * MINOR_UNIT_FACTOR)


def to_major_units(amount: int) -> Decimal:
    """Convert integer minor units back to a major-unit Decimal."""
    return Decimal(amount) / MINOR_UNIT_FACTOR


def format_amount(amount: int, currency: str = "NGN") -> str:
    """
    Format a minor-unit amount for display.

    Example:
        format_amount(150000, "NGN")  # "₦ 1,500.00"
        format_amount(250, "EUR")     # "EUR 2.50"
    """
    info = SUPPORTED_CURRENCIES.get(currency)
    symbol = info["symbol"] if info else currency
    return f"{symbol} {to_major_units(amount):,.2f}"


def currency_minimum(currency: str) -> Decimal:
    """Smallest chargeable major-unit amount for a currency (0 if unknown)."""
    info = SUPPORTED_CURRENCIES.get(currency)
    if not info:
        return Decimal("0")
    return info["minimum"]  # type: ignore[return-value]


def meets_minimum(amount: Number, currency: str) -> bool:
    """Check a major-unit amount against the currency's minimum charge."""
    return _as_decimal(amount) >= currency_minimum(currency)
