"""
decimals.py — Bounded decimal number model

================================================================================
DESIGN PRINCIPLES
================================================================================

1. ONE NUMBER TYPE
   All amounts are stdlib decimal.Decimal. Never binary floating point.

2. EXPLICIT BOUNDS
   A valid value is significand x 10^-scale with |significand| < 2^96 and
   0 <= scale <= 28. fit() enforces the bounds after every operation:
   - excess scale is rounded away (banker's rounding),
   - a too-large significand gives up decimal places while it can,
   - an integer part that does not fit raises ArithmeticOverflow.

3. DETERMINISTIC CONTEXT
   Arithmetic runs inside a private, wide decimal context (see
   decimal_context). The host application's global context never changes
   results or traps.

4. CHECKED OPERATIONS
   checked_add/sub/mul/div/pow either return an in-bounds Decimal or raise
   ArithmeticOverflow / DivisionByZero. Nothing wraps, nothing truncates
   silently.

================================================================================
"""

from __future__ import annotations

import functools
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    Overflow,
    DivisionByZero as DecimalDivisionByZero,
    ROUND_DOWN,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    localcontext,
)
from enum import Enum
from typing import Any, Callable, TypeVar, Union, cast

from .errors import ArithmeticOverflow, DivisionByZero, InvalidArgument, ParseError


# ==============================================================================
# BOUNDS AND CONTEXT
# ==============================================================================

MAX_SCALE: int = 28
MAX_SIGNIFICAND: int = 2 ** 96 - 1

# Wide enough that +, - and * of two in-bounds values are exact.
WORKING_PRECISION: int = 80

_WORKING_CONTEXT = Context(
    prec=WORKING_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=999_999,
    Emin=-999_999,
    traps=[InvalidOperation, Overflow, DecimalDivisionByZero],
)

DecimalLike = Union[Decimal, int, str]

F = TypeVar("F", bound=Callable[..., Any])


def decimal_context(fn: F) -> F:
    """Run the decorated function inside the package's working decimal context."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with localcontext(_WORKING_CONTEXT):
            return fn(*args, **kwargs)

    return cast(F, wrapper)


# ==============================================================================
# ROUNDING STRATEGIES
# ==============================================================================

class RoundingStrategy(Enum):
    """
    Rounding strategies for quantizing to a number of decimal places.

    - BANKERS: round half to even. Default, minimizes cumulative bias.
    - HALF_UP: halves go away from zero (2.5 -> 3, -2.5 -> -3).
    - HALF_DOWN: halves go toward zero (2.5 -> 2, -2.5 -> -2).
    - CEILING: always away from zero (2.1 -> 3, -2.1 -> -3).
    - FLOOR: always toward zero, i.e. truncation (2.9 -> 2, -2.9 -> -2).

    CEILING and FLOOR work on the magnitude, not on the number line.
    """
    BANKERS = "bankers"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    CEILING = "ceiling"
    FLOOR = "floor"

    @property
    def decimal_rounding(self) -> str:
        """The decimal module rounding constant for this strategy."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingStrategy.BANKERS: ROUND_HALF_EVEN,
    RoundingStrategy.HALF_UP: ROUND_HALF_UP,
    RoundingStrategy.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingStrategy.CEILING: ROUND_UP,
    RoundingStrategy.FLOOR: ROUND_DOWN,
}


# ==============================================================================
# CONSTRUCTION
# ==============================================================================

def to_decimal(value: DecimalLike) -> Decimal:
    """
    Convert an int, str or Decimal into an in-bounds Decimal.

    float and bool are refused: a float has already lost the decimal value
    the caller meant. Use Money.from_float() for legacy float input.
    """
    if isinstance(value, (bool, float)):
        raise TypeError(
            f"Cannot build a Decimal from {type(value).__name__} ({value!r}). "
            f"Pass a str, int or Decimal."
        )
    if isinstance(value, str):
        return parse_decimal(value)
    if isinstance(value, int):
        return fit(Decimal(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"Non-finite Decimal is not a valid amount: {value}")
        return fit(value)
    raise TypeError(f"Cannot build a Decimal from {type(value).__name__}")


def parse_decimal(text: str) -> Decimal:
    """Parse plain decimal text ("-12.345", "1e3") into an in-bounds Decimal."""
    if not isinstance(text, str):
        raise TypeError(f"parse_decimal expects str, got {type(text).__name__}")
    stripped = text.strip()
    if not stripped:
        raise ParseError("Cannot parse an empty string as a decimal")
    try:
        value = Decimal(stripped)
    except InvalidOperation as exc:
        raise ParseError(f"Invalid decimal literal: '{text}'") from exc
    if not value.is_finite():
        raise ParseError(f"Non-finite decimal literal: '{text}'")
    return fit(value)


# ==============================================================================
# BOUNDS ENFORCEMENT
# ==============================================================================

def _components(value: Decimal) -> tuple[int, int, int]:
    """Return (sign, significand magnitude, scale) with scale >= 0."""
    sign, digits, exponent = value.as_tuple()
    significand = int("".join(map(str, digits))) if digits else 0
    if exponent >= 0:
        return sign, significand * 10 ** exponent, 0
    return sign, significand, -exponent


def _quantum(places: int) -> Decimal:
    return Decimal(1).scaleb(-places)


def scale_of(value: Decimal) -> int:
    """Number of digits after the decimal point (never negative)."""
    exponent = value.as_tuple().exponent
    return -exponent if exponent < 0 else 0


@decimal_context
def fit(value: Decimal) -> Decimal:
    """Bring value into the significand/scale bounds, or raise ArithmeticOverflow."""
    if not value.is_finite():
        raise ArithmeticOverflow(f"Non-finite result: {value}")
    if value.is_zero():
        value = value.copy_abs()
    # 2^96 - 1 has 29 digits; anything with a larger integer part cannot fit.
    if not value.is_zero() and value.adjusted() > 28:
        raise ArithmeticOverflow(f"Value out of range: {value}")

    try:
        if scale_of(value) > MAX_SCALE:
            value = value.quantize(_quantum(MAX_SCALE), rounding=ROUND_HALF_EVEN)

        _, significand, scale = _components(value)
        while significand > MAX_SIGNIFICAND and scale > 0:
            scale -= 1
            value = value.quantize(_quantum(scale), rounding=ROUND_HALF_EVEN)
            _, significand, scale = _components(value)
    except InvalidOperation as exc:
        raise ArithmeticOverflow(f"Value out of range: {value}") from exc

    if significand > MAX_SIGNIFICAND:
        raise ArithmeticOverflow(f"Value out of range: {value}")
    return value


# ==============================================================================
# CHECKED ARITHMETIC
# ==============================================================================

@decimal_context
def checked_add(a: Decimal, b: Decimal) -> Decimal:
    return fit(a + b)


@decimal_context
def checked_sub(a: Decimal, b: Decimal) -> Decimal:
    return fit(a - b)


@decimal_context
def checked_mul(a: Decimal, b: Decimal) -> Decimal:
    return fit(a * b)


@decimal_context
def checked_div(a: Decimal, b: Decimal) -> Decimal:
    """a / b rounded to at most MAX_SCALE places; b == 0 raises DivisionByZero."""
    if b.is_zero():
        raise DivisionByZero(f"Cannot divide {a} by zero")
    return fit(a / b)


def checked_pow(base: Decimal, exponent: int) -> Decimal:
    """
    base ** exponent for a non-negative integer exponent.

    Computed by repeated multiplication so the result stays in decimal
    arithmetic end to end. Each intermediate product is fitted, so an
    overflow is reported at the step where it happens.
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise InvalidArgument(f"exponent must be an int, got {type(exponent).__name__}")
    if exponent < 0:
        raise InvalidArgument(f"exponent must be >= 0, got {exponent}")

    result = Decimal(1)
    for _ in range(exponent):
        result = checked_mul(result, base)
    return result


# ==============================================================================
# ROUNDING AND MINOR UNITS
# ==============================================================================

@decimal_context
def round_dp(
    value: Decimal,
    places: int,
    strategy: RoundingStrategy = RoundingStrategy.BANKERS,
) -> Decimal:
    """Quantize value to exactly `places` decimal places using `strategy`."""
    if not 0 <= places <= MAX_SCALE:
        raise InvalidArgument(f"places must be between 0 and {MAX_SCALE}, got {places}")
    try:
        rounded = value.quantize(_quantum(places), rounding=strategy.decimal_rounding)
    except InvalidOperation as exc:
        raise ArithmeticOverflow(f"Cannot round {value} to {places} places") from exc
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    if _components(rounded)[1] > MAX_SIGNIFICAND:
        raise ArithmeticOverflow(f"Cannot represent {value} with {places} places")
    return rounded


@decimal_context
def to_minor_units(value: Decimal, places: int) -> int:
    """Integer count of 10^-places units in value (value must be aligned)."""
    return int(value.scaleb(places))


@decimal_context
def from_minor_units(units: int, places: int) -> Decimal:
    """Decimal value of `units` minimal units of 10^-places."""
    return fit(Decimal(units).scaleb(-places))
