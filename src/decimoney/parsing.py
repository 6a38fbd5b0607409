"""
parsing.py — "<CODE> <AMOUNT>" text to (code, Decimal).

Two amount layouts are accepted, tried in this order:

    comma thousands, dot decimal:  1,234,567.89   1234567.89
    dot thousands, comma decimal:  1.234.567,89   1234567,89

The first thousands group has 1-3 digits, every later group exactly 3.
A leading "-" makes the amount negative. Because the comma layout is tried
first, "1.234" reads as one point two three four.
"""

from __future__ import annotations

import re
from decimal import Decimal

from .decimals import parse_decimal
from .errors import ParseError

_CODE = re.compile(r"[A-Za-z]{3}")

_COMMA_THOUSANDS = re.compile(r"(-?)([0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)(?:\.([0-9]+))?")
_DOT_THOUSANDS = re.compile(r"(-?)([0-9]{1,3}(?:\.[0-9]{3})+|[0-9]+)(?:,([0-9]+))?")


def _normalize_amount(text: str) -> str | None:
    for pattern, separator in ((_COMMA_THOUSANDS, ","), (_DOT_THOUSANDS, ".")):
        match = pattern.fullmatch(text)
        if match is None:
            continue
        sign, integer, fraction = match.groups()
        digits = integer.replace(separator, "")
        return f"{sign}{digits}.{fraction}" if fraction else f"{sign}{digits}"
    return None


def split_money_text(text: str) -> tuple[str, Decimal]:
    """
    Split "<CODE> <AMOUNT>" into an upper-case code and a Decimal amount.

    Raises:
        ParseError: wrong number of fields, malformed code or amount.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    parts = text.split()
    if len(parts) != 2:
        raise ParseError(f"Expected '<CODE> <AMOUNT>', got: '{text}'")
    code, amount_text = parts

    if not _CODE.fullmatch(code):
        raise ParseError(f"Currency code must be 3 letters, got: '{code}'")

    normalized = _normalize_amount(amount_text)
    if normalized is None:
        raise ParseError(f"Malformed amount: '{amount_text}'")
    return code.upper(), parse_decimal(normalized)


def parse_money(text: str):
    """
    Parse "<CODE> <AMOUNT>" into a Money.

    The code is resolved with Currency.lookup(), so registered custom
    currencies parse too. Unknown codes raise UnknownCurrency.
    """
    from .core import Money

    return Money.parse(text)
