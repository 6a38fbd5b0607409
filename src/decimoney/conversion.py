"""
conversion.py — Currency conversion at a given rate.

A rate is "units of target per one unit of source": converting USD 100.00
to EUR at 0.92 gives EUR 92.00. The product is rounded once, to the
target currency's minor unit and strategy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from .core import Money
from .currency import Currency
from .decimals import DecimalLike, checked_div, checked_mul, to_decimal
from .errors import CurrencyMismatch, InvalidArgument, InvalidCurrency

logger = logging.getLogger(__name__)


def _positive_rate(rate: DecimalLike) -> Decimal:
    value = to_decimal(rate)
    if value <= 0:
        raise InvalidArgument(f"$rate must be positive, but provided value is: {value}")
    return value


def convert_to(money: Money, target: Currency, rate: DecimalLike) -> Money:
    """
    Convert money into target currency: Money(target, money.amount x rate).

    Raises:
        InvalidArgument: rate <= 0.
    """
    if not isinstance(money, Money):
        raise TypeError(f"$money must be Money, but provided value is: {money!r}")
    if not isinstance(target, Currency):
        raise TypeError(f"$target must be a Currency, but provided value is: {target!r}")

    value = _positive_rate(rate)
    converted = Money(target, checked_mul(money.amount, value))
    logger.debug(f"Converted {money} -> {converted} at rate {value}")
    return converted


def convert_from(target: Currency, money: Money, rate: DecimalLike) -> Money:
    """Same as convert_to(), target currency first."""
    return convert_to(money, target, rate)


@dataclass(frozen=True)
class ExchangeRate:
    """
    A quoted rate between two different currencies.

        eur_usd = ExchangeRate(EUR, USD, Decimal("1.0850"))
        eur_usd.convert(Money(EUR, "100.00"))   # USD 108.50
    """
    base: Currency
    quote: Currency
    rate: Decimal

    def __post_init__(self):
        if not isinstance(self.base, Currency) or not isinstance(self.quote, Currency):
            raise TypeError("base and quote must be Currency instances")
        if self.base == self.quote:
            raise InvalidCurrency(f"base and quote must be different, got {self.base.code} twice")
        object.__setattr__(self, "rate", _positive_rate(self.rate))

    def convert(self, money: Money) -> Money:
        """Convert an amount in the base currency into the quote currency."""
        if money.currency != self.base:
            raise CurrencyMismatch(self.base.code, money.code, "convert")
        return convert_to(money, self.quote, self.rate)

    def inverse(self) -> ExchangeRate:
        """quote -> base rate (1 / rate, bounded to 28 decimal places)."""
        return ExchangeRate(self.quote, self.base, checked_div(Decimal(1), self.rate))

    def __str__(self) -> str:
        return f"{self.base.code}/{self.quote.code} {self.rate}"
