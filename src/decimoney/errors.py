"""
errors.py — Error taxonomy for decimoney.

Every failure raised by the package derives from MoneyError, and also from
the closest builtin exception so that generic handlers keep working
(a currency mismatch is still a TypeError, a bad ratio list is still a
ValueError, and so on).

These classes are dependency-free and may be imported by every module.
"""

__all__ = [
    "MoneyError",
    "CurrencyMismatch",
    "ArithmeticOverflow",
    "DivisionByZero",
    "InvalidArgument",
    "UnknownCurrency",
    "InvalidCurrency",
    "ParseError",
]


class MoneyError(Exception):
    """Base class for all decimoney errors."""
    pass


class CurrencyMismatch(MoneyError, TypeError):
    """Raised when a binary operation combines two different currencies.

    Attributes
    ----------
    left : str
        Currency code of the left operand.
    right : str
        Currency code of the right operand.
    """

    def __init__(self, left: str, right: str, operation: str = "combine"):
        super().__init__(
            f"Cannot {operation} different currencies: {left} and {right}. "
            f"Convert explicitly first."
        )
        self.left = left
        self.right = right


class ArithmeticOverflow(MoneyError, ArithmeticError):
    """Raised when a result does not fit the 96-bit significand / 28-scale bounds."""
    pass


class DivisionByZero(MoneyError, ZeroDivisionError):
    """Raised when an operation would divide by zero."""
    pass


class InvalidArgument(MoneyError, ValueError):
    """Raised when inputs violate an operation's preconditions."""
    pass


class UnknownCurrency(InvalidArgument):
    """Raised when a currency code is neither ISO-4217 nor registered."""

    def __init__(self, code: str):
        super().__init__(f"Unknown currency code: '{code}'")
        self.code = code


class InvalidCurrency(InvalidArgument):
    """Raised when a custom currency definition is malformed or clashes."""
    pass


class ParseError(MoneyError, ValueError):
    """Raised when textual decimal or money input is malformed."""
    pass
