"""
core.py — Money value type

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A bounded decimal.Decimal amount (see decimals.py) plus a Currency.
   Never floating point.

2. NORMALIZATION
   The amount is quantized to exactly currency.minor_unit places, with the
   currency's rounding strategy, at every construction. Since every
   operation builds a new Money, every result is normalized too.

3. TYPE SAFETY
   Operations between different currencies raise CurrencyMismatch
   (a TypeError). Operations with float raise TypeError.

4. IMMUTABILITY
   Frozen dataclass. Each operation returns a new instance.
   No side effects, safe to share between threads.

5. CHECKED AND OPERATOR FORMS
   add/sub/mul/div are the checked API: they raise a specific MoneyError
   (CurrencyMismatch, ArithmeticOverflow, DivisionByZero).
   The operators + - * / are the convenience form and delegate to them.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency
from .decimals import (
    DecimalLike,
    RoundingStrategy,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    from_minor_units,
    round_dp,
    to_decimal,
    to_minor_units,
)
from .errors import CurrencyMismatch, InvalidArgument
from .parsing import split_money_text


def _is_scalar(value: object) -> bool:
    return isinstance(value, (Decimal, int)) and not isinstance(value, bool)


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Monetary amount in a given currency.

    INVARIANTS:
    1. _amount is a Decimal with exactly _currency.minor_unit decimal places
    2. _amount fits the decimal bounds (96-bit significand, scale <= 28)
    3. Operations between different currencies raise CurrencyMismatch

    USAGE:
        price = Money(USD, "19.99")
        total = price * 3                  # USD 59.97
        parts = split(Money(USD, 100), 3)  # [33.34, 33.33, 33.33]
    """
    _currency: Currency
    _amount: Decimal

    def __post_init__(self):
        if not isinstance(self._currency, Currency):
            raise TypeError(
                f"$currency must be a Currency instance, but provided value is: {self._currency!r}"
            )
        if isinstance(self._amount, Money):
            raise TypeError("Money cannot wrap another Money; use .amount")
        amount = round_dp(
            to_decimal(self._amount),
            self._currency.minor_unit,
            self._currency.rounding_strategy,
        )
        object.__setattr__(self, "_amount", amount)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, currency: Currency, amount: DecimalLike) -> Money:
        """Money from a currency and an amount in major units."""
        return cls(currency, amount)

    @classmethod
    def of(cls, amount: DecimalLike, currency: Currency) -> Money:
        """Same as new(), amount first: Money.of("12.50", EUR)."""
        return cls(currency, amount)

    @classmethod
    def from_minor(cls, currency: Currency, minor_units: int) -> Money:
        """
        Money from an integer count of minor units (cents, pence, ...).
        No rounding involved, maximum precision.
        """
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise TypeError(
                f"$minor_units must be an int, but provided value is: {minor_units!r}"
            )
        return cls(currency, from_minor_units(minor_units, currency.minor_unit))

    @classmethod
    def from_float(
        cls,
        value: float,
        currency: Currency,
        rounding: RoundingStrategy | None = None,
    ) -> Money:
        """
        Money from a float.

        WARNING: the float goes through its shortest repr (str), then is
        rounded HERE, once. From this point on everything is decimal.

        Exists for legacy systems and user input. Prefer new() with a str.
        """
        if not isinstance(value, (float, int)) or isinstance(value, bool):
            raise TypeError(f"$value must be a float, but provided value is: {value!r}")
        amount = to_decimal(str(value))
        if rounding is not None:
            amount = round_dp(amount, currency.minor_unit, rounding)
        return cls(currency, amount)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Zero in a given currency. Handy as a start value for sum()."""
        return cls(currency, 0)

    @classmethod
    def parse(cls, text: str) -> Money:
        """
        Parse "<CODE> <AMOUNT>", e.g. "USD 1,234.56" or "EUR -1.234,56".

        Raises:
            ParseError: malformed text.
            UnknownCurrency: code neither ISO 4217 nor registered.
        """
        code, amount = split_money_text(text)
        return cls(Currency.lookup(code), amount)

    def to_raw(self):
        """Unrounded view of this amount, for multi-step calculations."""
        from .raw import RawMoney

        return RawMoney(self._currency, self._amount)

    # -------------------------------------------------------------------------
    # Checked arithmetic
    # -------------------------------------------------------------------------

    def _operand(self, other: Money | DecimalLike, operation: str) -> Decimal:
        if isinstance(other, Money):
            self._check_same_currency(other, operation)
            return other._amount
        return to_decimal(other)

    def add(self, other: Money | DecimalLike) -> Money:
        """
        Checked addition. A bare scalar is added as major units.

        Raises:
            CurrencyMismatch, ArithmeticOverflow
        """
        return Money(self._currency, checked_add(self._amount, self._operand(other, "add")))

    def sub(self, other: Money | DecimalLike) -> Money:
        """Checked subtraction. Raises CurrencyMismatch, ArithmeticOverflow."""
        return Money(self._currency, checked_sub(self._amount, self._operand(other, "subtract")))

    def mul(self, other: Money | DecimalLike) -> Money:
        """
        Checked multiplication.

        Example: unit_price.mul(quantity), amount.mul(Decimal("1.08")).
        The product is rounded once, to the currency's minor unit.
        """
        return Money(self._currency, checked_mul(self._amount, self._operand(other, "multiply")))

    def div(self, other: Money | DecimalLike) -> Money:
        """Checked division. Raises CurrencyMismatch, DivisionByZero, ArithmeticOverflow."""
        return Money(self._currency, checked_div(self._amount, self._operand(other, "divide")))

    # -------------------------------------------------------------------------
    # Operators (convenience form)
    # -------------------------------------------------------------------------

    def _reject_float(self, other: object, op: str) -> None:
        if isinstance(other, float):
            raise TypeError(
                f"Operation not allowed: Money {op} float. "
                f"Use Decimal or str, or Money.from_float() for legacy input."
            )

    def __add__(self, other):
        self._reject_float(other, "+")
        if isinstance(other, Money) or _is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        # Lets builtin sum() start from 0.
        self._reject_float(other, "+")
        if _is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        self._reject_float(other, "-")
        if isinstance(other, Money) or _is_scalar(other):
            return self.sub(other)
        return NotImplemented

    def __rsub__(self, other):
        self._reject_float(other, "-")
        if _is_scalar(other):
            return Money(self._currency, checked_sub(to_decimal(other), self._amount))
        return NotImplemented

    def __mul__(self, other):
        self._reject_float(other, "*")
        if isinstance(other, Money) or _is_scalar(other):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other):
        self._reject_float(other, "*")
        if _is_scalar(other):
            return self.mul(other)
        return NotImplemented

    def __truediv__(self, other):
        self._reject_float(other, "/")
        if isinstance(other, Money) or _is_scalar(other):
            return self.div(other)
        return NotImplemented

    def __rtruediv__(self, other):
        # scalar / Money keeps the currency: Decimal(100) / Money(USD, 8) -> USD 12.50
        self._reject_float(other, "/")
        if _is_scalar(other):
            return Money(self._currency, checked_div(to_decimal(other), self._amount))
        return NotImplemented

    def __neg__(self) -> Money:
        return Money(self._currency, self._amount.copy_negate())

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return Money(self._currency, self._amount.copy_abs())

    # -------------------------------------------------------------------------
    # Rounding and bounds
    # -------------------------------------------------------------------------

    def round(self) -> Money:
        """Re-normalize to the currency's minor unit. A no-op on any Money."""
        return Money(self._currency, self._amount)

    def round_with(self, places: int, strategy: RoundingStrategy) -> Money:
        """
        Round to `places` decimals with `strategy`.

        Places beyond the currency's minor unit change nothing, since the
        result is still a normalized Money.
        """
        return Money(self._currency, round_dp(self._amount, places, strategy))

    def min(self, other: Money) -> Money:
        self._check_same_currency(other, "compare")
        return self if self._amount <= other._amount else other

    def max(self, other: Money) -> Money:
        self._check_same_currency(other, "compare")
        return self if self._amount >= other._amount else other

    def clamp(
        self,
        lower: Money | DecimalLike | None = None,
        upper: Money | DecimalLike | None = None,
    ) -> Money:
        """
        Return a new Money with the amount clamped into [lower, upper].

        Raises:
            InvalidArgument: if both bounds are given and lower > upper.
        """
        lower_value = self._operand(lower, "clamp") if lower is not None else None
        upper_value = self._operand(upper, "clamp") if upper is not None else None
        if lower_value is not None and upper_value is not None and lower_value > upper_value:
            raise InvalidArgument(f"Cannot clamp because $lower ({lower_value}) > $upper ({upper_value})")

        value = self._amount
        if lower_value is not None:
            value = max(value, lower_value)
        if upper_value is not None:
            value = min(value, upper_value)
        return Money(self._currency, value)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._currency == other._currency and self._amount == other._amount
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount < other._amount

    def __le__(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount <= other._amount

    def __gt__(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount > other._amount

    def __ge__(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount >= other._amount

    def _check_same_currency(self, other: Money, operation: str = "combine") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot {operation} Money with {type(other).__name__}")
        if self._currency != other._currency:
            raise CurrencyMismatch(self._currency.code, other._currency.code, operation)

    def __hash__(self) -> int:
        return hash((self._amount, self._currency))

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """The amount in major units, with exactly minor_unit decimal places."""
        return self._amount

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def code(self) -> str:
        return self._currency.code

    @property
    def symbol(self) -> str:
        return self._currency.symbol

    @property
    def name(self) -> str:
        return self._currency.name

    @property
    def minor_unit(self) -> int:
        return self._currency.minor_unit

    @property
    def minor_amount(self) -> int:
        """Amount in minor units (cents, ...). For persistence and integer math."""
        return to_minor_units(self._amount, self._currency.minor_unit)

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def __str__(self) -> str:
        return f"{self._currency.code} {self._amount}"

    def __repr__(self) -> str:
        return f"Money('{self._currency.code}', '{self._amount}')"
