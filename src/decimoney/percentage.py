"""
percentage.py — Percentage math on Money.

Percents are plain numbers: 15 means 15%. Every Money result is rounded
once, at the end, with the currency's strategy.
"""

from __future__ import annotations

from decimal import Decimal

from .core import Money
from .decimals import DecimalLike, checked_div, checked_mul, to_decimal
from .errors import CurrencyMismatch

HUNDRED = Decimal(100)


def _fraction(percent: DecimalLike) -> Decimal:
    return checked_div(to_decimal(percent), HUNDRED)


def percentage(amount: Money, percent: DecimalLike) -> Money:
    """
    percent% of amount.

    Example:
        percentage(Money(USD, "200.00"), 15)  ->  USD 30.00
    """
    return amount.to_raw().mul(_fraction(percent)).finish()


def add_percentage(amount: Money, percent: DecimalLike) -> Money:
    """amount increased by percent%: amount x (1 + percent/100)."""
    raw = amount.to_raw()
    return raw.add(raw.mul(_fraction(percent))).finish()


def subtract_percentage(amount: Money, percent: DecimalLike) -> Money:
    """
    amount decreased by percent%: amount x (1 - percent/100).

    Money is sign-unrestricted: a percent above 100 gives a negative
    result, it is not clamped at zero.
    """
    raw = amount.to_raw()
    return raw.sub(raw.mul(_fraction(percent))).finish()


def percentage_of(part: Money, whole: Money) -> Decimal:
    """
    How many percent of `whole` is `part`, as a plain Decimal.

    Raises:
        CurrencyMismatch: different currencies.
        DivisionByZero: whole is zero.
    """
    if not isinstance(part, Money) or not isinstance(whole, Money):
        raise TypeError("percentage_of expects two Money values")
    if part.currency != whole.currency:
        raise CurrencyMismatch(part.code, whole.code, "compare")
    return checked_mul(checked_div(part.amount, whole.amount), HUNDRED)
