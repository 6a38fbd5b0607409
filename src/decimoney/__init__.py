"""
decimoney — Decimal money engine

Currency-aware monetary values that are always numerically valid: bounded
decimals, no float, no silent overflow, no fractional minimal units. On top
of the value type: percentages, exact splits and allocations, tax and
discount, interest and amortization, conversion and statistics.

================================================================================
QUICK START
================================================================================

    from decimoney import Money, split, apply_tax, extract_tax
    from decimoney.currencies import USD

    price = Money(USD, "19.99")
    total = price * 3                          # USD 59.97

    # Split (sum ALWAYS equals original)
    parts = split(Money(USD, "100.00"), 3)     # [33.34, 33.33, 33.33]
    assert sum(parts) == Money(USD, "100.00")

    # Tax
    tax, gross = apply_tax(Money(USD, "100.00"), "0.08")
    net, tax = extract_tax(gross, "0.08")
    # Invariant: net + tax == gross (always true)

    # Parsing
    Money.parse("EUR 1.234,56")                # EUR 1234.56

================================================================================
"""

import logging

from .errors import (
    MoneyError,
    CurrencyMismatch,
    ArithmeticOverflow,
    DivisionByZero,
    InvalidArgument,
    UnknownCurrency,
    InvalidCurrency,
    ParseError,
)
from .decimals import RoundingStrategy, parse_decimal, to_decimal
from .currency import Currency
from .core import Money
from .raw import RawMoney
from .parsing import parse_money
from .percentage import percentage, add_percentage, subtract_percentage, percentage_of
from .allocation import (
    Allocation,
    split,
    allocate,
    allocate_by_percentages,
    allocate_with_remainder,
)
from .fiscal import apply_tax, extract_tax, apply_discount
from .interest import (
    AmortizationRow,
    simple_interest,
    compound_interest,
    loan_payment,
    present_value,
    future_value,
    amortization_schedule,
)
from .conversion import ExchangeRate, convert_to, convert_from
from .stats import sum_money, average, median

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Errors
    "MoneyError",
    "CurrencyMismatch",
    "ArithmeticOverflow",
    "DivisionByZero",
    "InvalidArgument",
    "UnknownCurrency",
    "InvalidCurrency",
    "ParseError",
    # Core
    "RoundingStrategy",
    "parse_decimal",
    "to_decimal",
    "Currency",
    "Money",
    "RawMoney",
    "parse_money",
    # Percentages
    "percentage",
    "add_percentage",
    "subtract_percentage",
    "percentage_of",
    # Allocation
    "Allocation",
    "split",
    "allocate",
    "allocate_by_percentages",
    "allocate_with_remainder",
    # Fiscal
    "apply_tax",
    "extract_tax",
    "apply_discount",
    # Interest
    "AmortizationRow",
    "simple_interest",
    "compound_interest",
    "loan_payment",
    "present_value",
    "future_value",
    "amortization_schedule",
    # Conversion and statistics
    "ExchangeRate",
    "convert_to",
    "convert_from",
    "sum_money",
    "average",
    "median",
]
