"""
interest.py — Interest, time value of money and loan amortization.

Rates are per-period fractions (0.05 = 5% per period). Growth factors
(1 + rate)^n are computed with checked_pow, i.e. repeated Decimal
multiplication, never a float power. Only the final Money is rounded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from .core import Money
from .decimals import (
    DecimalLike,
    checked_add,
    checked_div,
    checked_mul,
    checked_pow,
    checked_sub,
    to_decimal,
)
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

ONE = Decimal(1)


def _check_periods(periods: int, minimum: int = 0) -> int:
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise InvalidArgument(f"$periods must be an int, but provided value is: {periods!r}")
    if periods < minimum:
        raise InvalidArgument(f"$periods must be >= {minimum}, but provided value is: {periods}")
    return periods


def _growth(rate: Decimal, periods: int) -> Decimal:
    return checked_pow(checked_add(ONE, rate), periods)


def simple_interest(principal: Money, rate: DecimalLike, periods: int | Decimal) -> Money:
    """
    Interest only: principal x rate x periods.

    periods may be fractional here (e.g. Decimal("0.5") for half a year).
    """
    if isinstance(periods, Decimal):
        if periods < 0:
            raise InvalidArgument(f"$periods must be >= 0, but provided value is: {periods}")
    else:
        _check_periods(periods)
    return principal.to_raw().mul(to_decimal(rate)).mul(periods).finish()


def compound_interest(principal: Money, rate: DecimalLike, periods: int) -> Money:
    """Interest only: principal x ((1 + rate)^periods - 1)."""
    _check_periods(periods)
    factor = checked_sub(_growth(to_decimal(rate), periods), ONE)
    return principal.to_raw().mul(factor).finish()


def future_value(present: Money, rate: DecimalLike, periods: int) -> Money:
    """present x (1 + rate)^periods."""
    _check_periods(periods)
    return present.to_raw().mul(_growth(to_decimal(rate), periods)).finish()


def present_value(future: Money, rate: DecimalLike, periods: int) -> Money:
    """
    future / (1 + rate)^periods.

    Raises:
        DivisionByZero: rate == -1 with periods >= 1.
    """
    _check_periods(periods)
    return future.to_raw().div(_growth(to_decimal(rate), periods)).finish()


def loan_payment(principal: Money, rate_per_period: DecimalLike, periods: int) -> Money:
    """
    Fixed installment of an amortizing loan (annuity formula):

        principal x rate x (1 + rate)^n / ((1 + rate)^n - 1)

    With a zero rate the formula divides by zero; the payment is then
    simply principal / periods.

    Raises:
        InvalidArgument: periods < 1.
    """
    _check_periods(periods, minimum=1)
    rate = to_decimal(rate_per_period)
    raw = principal.to_raw()

    if rate.is_zero():
        logger.debug(f"loan_payment: zero rate, payment = {principal} / {periods}")
        return raw.div(periods).finish()

    growth = _growth(rate, periods)
    factor = checked_div(checked_mul(rate, growth), checked_sub(growth, ONE))
    return raw.mul(factor).finish()


# ==============================================================================
# AMORTIZATION SCHEDULE
# ==============================================================================

@dataclass(frozen=True, slots=True)
class AmortizationRow:
    """One installment: payment == interest + principal."""
    period: int
    payment: Money
    interest: Money
    principal: Money
    balance: Money


def amortization_schedule(principal: Money, rate_per_period: DecimalLike, periods: int) -> list[AmortizationRow]:
    """
    Installment-by-installment breakdown of a loan_payment() loan.

    Each period's interest is rounded to the minor unit. The last row pays
    off whatever balance is left, so:

        sum(row.principal for row in schedule) == principal
        schedule[-1].balance.is_zero()
    """
    payment = loan_payment(principal, rate_per_period, periods)
    rate = to_decimal(rate_per_period)

    rows = []
    balance = principal
    for period in range(1, periods + 1):
        interest = balance.to_raw().mul(rate).finish()
        if period == periods:
            repaid = balance
            installment = repaid + interest
        else:
            repaid = payment - interest
            installment = payment
        balance = balance - repaid
        rows.append(AmortizationRow(period, installment, interest, repaid, balance))

    if rows[-1].payment != payment:
        logger.debug(f"amortization_schedule: last payment adjusted from {payment} to {rows[-1].payment}")
    return rows
