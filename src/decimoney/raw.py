"""
raw.py — Unrounded money for multi-step calculations.

Money rounds after every operation. A chain like principal * rate * years
would round three times. RawMoney keeps the full (bounded) Decimal through
the chain and rounds exactly once, in finish().

    gross = net.to_raw() * (1 + rate)
    gross.finish()                      # the only rounding step
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .core import Money
from .currency import Currency
from .decimals import (
    RoundingStrategy,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    round_dp,
    to_decimal,
)
from .errors import CurrencyMismatch

Operand = Union["RawMoney", Money, Decimal, int, str]


@dataclass(frozen=True)
class RawMoney:
    """
    Currency plus an unrounded Decimal amount.

    INVARIANT: amount is in decimal bounds but NOT quantized to minor_unit.
    """
    currency: Currency
    amount: Decimal

    def __post_init__(self):
        if not isinstance(self.currency, Currency):
            raise TypeError(
                f"$currency must be a Currency instance, but provided value is: {self.currency!r}"
            )
        object.__setattr__(self, "amount", to_decimal(self.amount))

    @classmethod
    def from_money(cls, money: Money) -> RawMoney:
        return cls(money.currency, money.amount)

    def _operand(self, other: Operand, operation: str) -> Decimal:
        if isinstance(other, (RawMoney, Money)):
            if other.currency != self.currency:
                raise CurrencyMismatch(self.currency.code, other.currency.code, operation)
            return other.amount
        return to_decimal(other)

    def add(self, other: Operand) -> RawMoney:
        return RawMoney(self.currency, checked_add(self.amount, self._operand(other, "add")))

    def sub(self, other: Operand) -> RawMoney:
        return RawMoney(self.currency, checked_sub(self.amount, self._operand(other, "subtract")))

    def mul(self, other: Operand) -> RawMoney:
        return RawMoney(self.currency, checked_mul(self.amount, self._operand(other, "multiply")))

    def div(self, other: Operand) -> RawMoney:
        return RawMoney(self.currency, checked_div(self.amount, self._operand(other, "divide")))

    def __add__(self, other):
        if isinstance(other, float):
            raise TypeError("Operation not allowed: RawMoney + float")
        return self.add(other)

    def __sub__(self, other):
        if isinstance(other, float):
            raise TypeError("Operation not allowed: RawMoney - float")
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, float):
            raise TypeError("Operation not allowed: RawMoney * float")
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, float):
            raise TypeError("Operation not allowed: RawMoney / float")
        return self.div(other)

    def __neg__(self) -> RawMoney:
        return RawMoney(self.currency, self.amount.copy_negate())

    def finish(self, strategy: RoundingStrategy | None = None) -> Money:
        """
        Round once and return a Money.

        With no strategy the currency's own rounding strategy is used.
        """
        if strategy is None:
            return Money(self.currency, self.amount)
        return Money(self.currency, round_dp(self.amount, self.currency.minor_unit, strategy))

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount}"
