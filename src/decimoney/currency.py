"""
currency.py — Currency metadata and the custom-currency registry.

A Currency is immutable metadata: code, symbol, name, minor unit (number of
decimal places of the smallest denomination) and the rounding strategy used
to normalize Money amounts in that currency.

Two currencies are equal, and hash identically, iff their codes match.

Custom currencies (anything not in ISO 4217) can be registered once in a
process-wide registry. The registry is append-only: an entry, once written,
never changes, so readers need no lock.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from decimal import Decimal

from . import iso
from .decimals import RoundingStrategy
from .errors import InvalidCurrency, UnknownCurrency

logger = logging.getLogger(__name__)

MAX_MINOR_UNIT: int = 18

_registry: dict[str, "Currency"] = {}
_registry_lock = threading.Lock()


@dataclass(frozen=True, eq=False)
class Currency:
    """
    Currency metadata.

    Attributes:
        code: 3-letter alphabetic code, upper-cased at construction.
        symbol: Display symbol (e.g. "$").
        name: Display name (e.g. "United States dollar").
        minor_unit: Decimal places of the smallest denomination (0-18).
        rounding_strategy: Strategy used to normalize amounts.
        numeric_code: ISO 4217 numeric code, 0 for custom currencies.
    """
    code: str
    symbol: str
    name: str
    minor_unit: int
    rounding_strategy: RoundingStrategy = RoundingStrategy.BANKERS
    numeric_code: int = 0

    def __post_init__(self):
        if not isinstance(self.code, str):
            raise InvalidCurrency(f"$code must be a string, but provided value is: {self.code!r}")
        code = self.code.strip().upper()
        if len(code) != 3 or not (code.isascii() and code.isalpha()):
            raise InvalidCurrency(f"$code must be 3 ASCII letters, but provided value is: '{self.code}'")

        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise InvalidCurrency(f"$symbol must be a non-empty string, but provided value is: '{self.symbol}'")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidCurrency(f"$name must be a non-empty string, but provided value is: '{self.name}'")

        if (
            isinstance(self.minor_unit, bool)
            or not isinstance(self.minor_unit, int)
            or not 0 <= self.minor_unit <= MAX_MINOR_UNIT
        ):
            raise InvalidCurrency(
                f"$minor_unit must be an integer between 0 and {MAX_MINOR_UNIT}, "
                f"but provided value is: {self.minor_unit!r}"
            )
        if not isinstance(self.rounding_strategy, RoundingStrategy):
            raise InvalidCurrency(
                f"$rounding_strategy must be a RoundingStrategy, but provided value is: {self.rounding_strategy!r}"
            )

        object.__setattr__(self, "code", code)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_iso(
        cls,
        code: str,
        rounding_strategy: RoundingStrategy = RoundingStrategy.BANKERS,
    ) -> Currency:
        """Build an ISO 4217 currency from its code (case-insensitive)."""
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")
        entry = iso.lookup(code.strip().upper())
        if entry is None:
            raise UnknownCurrency(code)
        return cls(
            code=code,
            symbol=entry.symbol,
            name=entry.name,
            minor_unit=entry.minor_unit,
            rounding_strategy=rounding_strategy,
            numeric_code=entry.numeric_code,
        )

    @classmethod
    def new(
        cls,
        code: str,
        symbol: str,
        name: str,
        minor_unit: int,
        rounding_strategy: RoundingStrategy = RoundingStrategy.BANKERS,
    ) -> Currency:
        """
        Build a custom (non-ISO) currency.

        Raises:
            InvalidCurrency: malformed fields, or the code belongs to ISO 4217
                (use from_iso() for those).
        """
        if isinstance(code, str) and iso.is_iso(code.strip()):
            raise InvalidCurrency(
                f"Currency '{code.strip().upper()}' already exists in ISO 4217, use Currency.from_iso()"
            )
        return cls(code, symbol, name, minor_unit, rounding_strategy)

    def with_rounding(self, strategy: RoundingStrategy) -> Currency:
        """Same currency, different normalization strategy."""
        return dataclasses.replace(self, rounding_strategy=strategy)

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    @classmethod
    def register(cls, currency: Currency) -> Currency:
        """
        Add a custom currency to the process-wide registry.

        Append-only: registering an identical definition again is a no-op,
        registering a different definition under a taken code raises.

        Raises:
            InvalidCurrency: ISO code, or conflicting definition.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")
        if iso.is_iso(currency.code):
            raise InvalidCurrency(f"Currency '{currency.code}' is ISO 4217 and cannot be registered")

        with _registry_lock:
            existing = _registry.get(currency.code)
            if existing is not None:
                if dataclasses.astuple(existing) != dataclasses.astuple(currency):
                    raise InvalidCurrency(
                        f"Currency '{currency.code}' is already registered with a different definition"
                    )
                return existing
            _registry[currency.code] = currency

        logger.info(f"Registered custom currency '{currency.code}' ({currency.name}, minor_unit={currency.minor_unit})")
        return currency

    @classmethod
    def lookup(cls, code: str) -> Currency:
        """Resolve a code: ISO 4217 first, then registered custom currencies."""
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")
        normalized = code.strip().upper()
        if iso.is_iso(normalized):
            return cls.from_iso(normalized)
        registered = _registry.get(normalized)
        if registered is None:
            raise UnknownCurrency(code)
        return registered

    @classmethod
    def registered(cls) -> tuple[Currency, ...]:
        """Snapshot of the registered custom currencies."""
        return tuple(_registry.values())

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def multiplier(self) -> int:
        """Conversion factor major -> minor units."""
        return 10 ** self.minor_unit

    @property
    def minimal_unit(self) -> Decimal:
        """Smallest representable amount, e.g. Decimal('0.01') for USD."""
        return Decimal(1).scaleb(-self.minor_unit)

    @property
    def is_iso(self) -> bool:
        return iso.is_iso(self.code)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}', minor_unit={self.minor_unit}, rounding={self.rounding_strategy.name})"
