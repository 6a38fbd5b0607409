"""
allocation.py — Splitting an amount into parts with an exact total.

================================================================================
INVARIANT
================================================================================

    sum(parts) == amount        (for every function in this module)

All work happens on integer minor units (Money.minor_amount), so no part is
ever a fraction of the currency's minimal unit and no unit is lost or
created. Shares are computed on the magnitude; every part carries the sign
of the amount.

================================================================================
ALGORITHMS
================================================================================

split / allocate_with_remainder:
    base = |units| // n, leftover = |units| % n.
    split gives one extra unit to each of the first `leftover` parts,
    allocate_with_remainder gives all of them to one chosen part.

allocate / allocate_by_percentages (Largest Remainder Method):
    1. floor share of each part: |units| * w_i // sum(w)
    2. leftover = |units| - sum(floor shares)   (always < len(weights))
    3. one unit each to the parts with the largest fractional remainder,
       ties broken by ascending index
    A zero weight has a zero remainder and never receives a unit.

================================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from .core import Money
from .decimals import DecimalLike, scale_of, to_decimal, to_minor_units
from .errors import CurrencyMismatch, InvalidArgument

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


def _check_money(amount: Money) -> None:
    if not isinstance(amount, Money):
        raise TypeError(f"$amount must be Money, but provided value is: {amount!r}")


def _check_parts(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"$n must be an int, but provided value is: {n!r}")
    if n < 1:
        raise InvalidArgument(f"$n must be >= 1, but provided value is: {n}")


def _sign(units: int) -> int:
    return -1 if units < 0 else 1


def _largest_remainder(magnitude: int, weights: tuple[int, ...]) -> list[int]:
    total_weight = sum(weights)
    shares = []
    remainders = []
    for weight in weights:
        share, remainder = divmod(magnitude * weight, total_weight)
        shares.append(share)
        remainders.append(remainder)

    leftover = magnitude - sum(shares)
    if leftover:
        order = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
        winners = order[:leftover]
        for i in winners:
            shares[i] += 1
        logger.debug(f"Largest remainder: {leftover} leftover unit(s) to parts {sorted(winners)}")
    return shares


# ==============================================================================
# PUBLIC OPERATIONS
# ==============================================================================

def split(amount: Money, n: int) -> list[Money]:
    """
    Split into n parts whose sum is EXACTLY amount.

    The first (|units| % n) parts get one extra minimal unit.

    Examples:
        split(Money(USD, "100.00"), 3)  ->  [33.34, 33.33, 33.33]
        split(Money(USD, "0.10"), 3)    ->  [0.04, 0.03, 0.03]

    Raises:
        InvalidArgument: n < 1
    """
    _check_money(amount)
    _check_parts(n)

    units = amount.minor_amount
    sign = _sign(units)
    base, leftover = divmod(abs(units), n)
    if leftover:
        logger.debug(f"split({amount}, {n}): {leftover} extra unit(s) to the first parts")

    return [
        Money.from_minor(amount.currency, sign * (base + (1 if i < leftover else 0)))
        for i in range(n)
    ]


def allocate(amount: Money, ratios: Iterable[int]) -> list[Money]:
    """
    Allocate proportionally to integer ratios (Largest Remainder Method).

    Example:
        allocate(Money(USD, "10000.00"), [60, 40])  ->  [6000.00, 4000.00]

    Raises:
        InvalidArgument: empty ratios, negative ratio, or all ratios zero.
    """
    _check_money(amount)
    ratios = tuple(ratios)
    if not ratios:
        raise InvalidArgument("$ratios cannot be empty")
    for ratio in ratios:
        if isinstance(ratio, bool) or not isinstance(ratio, int):
            raise InvalidArgument(f"ratios must be integers, but got: {ratio!r}")
        if ratio < 0:
            raise InvalidArgument(f"ratios cannot be negative, but got: {ratio}")
    if sum(ratios) == 0:
        raise InvalidArgument("At least one ratio must be positive")

    units = amount.minor_amount
    shares = _largest_remainder(abs(units), ratios)
    sign = _sign(units)
    return [Money.from_minor(amount.currency, sign * share) for share in shares]


def allocate_by_percentages(amount: Money, percents: Iterable[DecimalLike]) -> list[Money]:
    """
    Allocate by Decimal percentages that sum to exactly 100.

    Percentages are scaled to integer weights (e.g. 33.5 -> 335) and
    distributed with the same largest remainder rule as allocate().

    Raises:
        InvalidArgument: empty list, negative percentage, or a sum != 100
            (99.9 and 100.1 both fail).
    """
    _check_money(amount)
    values = tuple(to_decimal(p) for p in percents)
    if not values:
        raise InvalidArgument("$percents cannot be empty")
    if any(value < 0 for value in values):
        raise InvalidArgument(f"percentages cannot be negative, but got: {[str(v) for v in values]}")
    # value x 10^places as exact integers
    places = max(scale_of(value) for value in values)
    weights = tuple(to_minor_units(value, places) for value in values)
    if sum(weights) != to_minor_units(HUNDRED, places):
        raise InvalidArgument(f"percentages must sum to exactly 100, but got: {[str(v) for v in values]}")

    units = amount.minor_amount
    shares = _largest_remainder(abs(units), weights)
    sign = _sign(units)
    return [Money.from_minor(amount.currency, sign * share) for share in shares]


def allocate_with_remainder(amount: Money, n: int, remainder_index: int) -> list[Money]:
    """
    Split into n equal parts and give ALL leftover units to one part.

    Example:
        allocate_with_remainder(Money(USD, "10.00"), 3, 2)  ->  [3.33, 3.33, 3.34]

    Raises:
        InvalidArgument: n < 1, or remainder_index outside [0, n).
    """
    _check_money(amount)
    _check_parts(n)
    if isinstance(remainder_index, bool) or not isinstance(remainder_index, int):
        raise TypeError(f"$remainder_index must be an int, but provided value is: {remainder_index!r}")
    if not 0 <= remainder_index < n:
        raise InvalidArgument(f"$remainder_index must be in [0, {n}), but provided value is: {remainder_index}")

    units = amount.minor_amount
    sign = _sign(units)
    base, leftover = divmod(abs(units), n)
    shares = [base] * n
    shares[remainder_index] += leftover
    return [Money.from_minor(amount.currency, sign * share) for share in shares]


# ==============================================================================
# ALLOCATION BUILDER (fixed parts + remainder)
# ==============================================================================

class Allocation:
    """
    Builder for allocations made of fixed parts.

    Claim fixed amounts one by one, then finalize(): whatever is left
    (positive or negative) is folded into the last part.

        parts = (
            Allocation(Money(EUR, "1000.00"))
            .fixed(Money(EUR, "300.00"))
            .fixed(Money(EUR, "250.00"))
            .finalize()
        )   # [300.00, 700.00]

    INVARIANT: sum(finalize()) == total (always)
    """

    def __init__(self, total: Money):
        _check_money(total)
        self._total = total
        self._allocated = Money.zero(total.currency)
        self._parts: list[Money] = []

    def fixed(self, amount: Money) -> Allocation:
        """Claim a fixed part."""
        _check_money(amount)
        if amount.currency != self._total.currency:
            raise CurrencyMismatch(self._total.code, amount.code, "allocate")
        self._parts.append(amount)
        self._allocated = self._allocated + amount
        return self

    def remainder(self) -> Money:
        """What is not allocated yet."""
        return self._total - self._allocated

    def finalize(self) -> list[Money]:
        remainder = self.remainder()
        parts = list(self._parts)
        if not remainder.is_zero():
            if parts:
                parts[-1] = parts[-1] + remainder
            else:
                parts.append(remainder)
        return parts
