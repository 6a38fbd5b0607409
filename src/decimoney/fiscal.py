"""
fiscal.py — Tax and discount math.

Rates are fractions: 0.08 means 8%. Each function rounds one value once and
derives the other by subtraction or addition, so the tuple always balances:

    apply_tax:    net + tax == gross
    extract_tax:  net + tax == gross

NOTE: some jurisdictions prescribe their own tax rounding rules. Pick the
currency's rounding strategy accordingly (Currency.with_rounding).
"""

from __future__ import annotations

from decimal import Decimal

from .core import Money
from .decimals import DecimalLike, checked_add, checked_sub, to_decimal

ONE = Decimal(1)


def apply_tax(net: Money, rate: DecimalLike) -> tuple[Money, Money]:
    """
    Add tax to a net amount.

    Returns:
        (tax, gross) with net + tax == gross.

    Example:
        apply_tax(Money(USD, "100.00"), "0.08")  ->  (USD 8.00, USD 108.00)
    """
    tax = net.to_raw().mul(to_decimal(rate)).finish()
    return tax, net + tax


def extract_tax(gross: Money, rate: DecimalLike) -> tuple[Money, Money]:
    """
    Extract the tax contained in a gross amount.

    Formula: net = gross / (1 + rate), rounded once
             tax = gross - net

    Returns:
        (net, tax) with net + tax == gross.

    Raises:
        DivisionByZero: rate == -1.
    """
    divisor = checked_add(ONE, to_decimal(rate))
    net = gross.to_raw().div(divisor).finish()
    return net, gross - net


def apply_discount(price: Money, rate: DecimalLike) -> Money:
    """
    Discounted price: price x (1 - rate).

    Example:
        apply_discount(Money(USD, "80.00"), "0.25")  ->  USD 60.00
    """
    factor = checked_sub(ONE, to_decimal(rate))
    return price.to_raw().mul(factor).finish()
