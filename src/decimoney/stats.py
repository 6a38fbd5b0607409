"""
stats.py — Sum, average and median over same-currency Money.

Inputs are snapshotted into a tuple first, so any iterable works and a
generator is consumed once. Empty input raises InvalidArgument, mixed
currencies raise CurrencyMismatch.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .core import Money
from .decimals import checked_add, checked_div
from .errors import CurrencyMismatch, InvalidArgument


def _snapshot(items: Iterable[Money], operation: str) -> tuple[Money, ...]:
    values = tuple(items)
    if not values:
        raise InvalidArgument(f"Cannot compute {operation} of an empty sequence")
    first = values[0]
    for item in values:
        if not isinstance(item, Money):
            raise TypeError(f"{operation} expects Money values, got {type(item).__name__}")
        if item.currency != first.currency:
            raise CurrencyMismatch(first.code, item.code, operation)
    return values


def sum_money(items: Iterable[Money]) -> Money:
    """Left-fold addition."""
    values = _snapshot(items, "sum")
    total = values[0]
    for item in values[1:]:
        total = total.add(item)
    return total


def average(items: Iterable[Money]) -> Money:
    """sum / count, rounded once."""
    values = _snapshot(items, "average")
    total = values[0].amount
    for item in values[1:]:
        total = checked_add(total, item.amount)
    return Money(values[0].currency, checked_div(total, Decimal(len(values))))


def median(items: Iterable[Money]) -> Money:
    """
    Middle value by amount. For an even count, the mean of the two middle
    values, rounded once.

    Example:
        median([45000, 52000, 58000, 61000, 250000])  ->  58000
    """
    values = sorted(_snapshot(items, "median"), key=lambda m: m.amount)
    middle = len(values) // 2
    if len(values) % 2:
        return values[middle]
    low, high = values[middle - 1], values[middle]
    return Money(low.currency, checked_div(checked_add(low.amount, high.amount), Decimal(2)))
