"""
test_money.py — Test suite for the Money value type

================================================================================
TEST STRUCTURE
================================================================================

1. UNIT TESTS
   Deterministic tests for specific cases and edge cases.

2. PROPERTY-BASED TESTS (Hypothesis)
   Tests that check PROPERTIES that must hold for ANY input.
   Hypothesis generates random cases looking for counterexamples.

3. INVARIANT TESTS
   Tests that check the invariants declared in the code actually hold.

================================================================================
"""

import dataclasses

import pytest
from decimal import Decimal, localcontext
from hypothesis import given, assume, settings
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from decimoney import Currency, Money, RawMoney, RoundingStrategy
from decimoney.currencies import EUR, GBP, JPY, KWD, USD
from decimoney.parsing import parse_money, split_money_text
from decimoney.errors import (
    ArithmeticOverflow,
    CurrencyMismatch,
    DivisionByZero,
    InvalidArgument,
    ParseError,
    UnknownCurrency,
)


# ==============================================================================
# TEST HELPERS
# ==============================================================================

@st.composite
def money_strategy(draw, currency=None, min_value=-10_000_00, max_value=10_000_00):
    """Random Money for property testing."""
    if currency is None:
        currency = draw(st.sampled_from([EUR, USD, GBP, JPY, KWD]))
    minor_units = draw(st.integers(min_value=min_value, max_value=max_value))
    return Money.from_minor(currency, minor_units)


@st.composite
def money_pair_strategy(draw):
    """Two Money values in the same currency."""
    currency = draw(st.sampled_from([EUR, USD, JPY, KWD]))
    return draw(money_strategy(currency=currency)), draw(money_strategy(currency=currency))


# ==============================================================================
# UNIT TESTS: Constructors
# ==============================================================================

class TestConstructors:

    def test_new_from_str(self):
        m = Money.new(USD, "19.99")
        assert m.amount == Decimal("19.99")
        assert m.currency == USD

    def test_of_amount_first(self):
        assert Money.of("12.50", EUR) == Money(EUR, "12.50")

    def test_int_amount_is_padded(self):
        assert str(Money(USD, 100).amount) == "100.00"

    def test_from_minor(self):
        m = Money.from_minor(USD, 10000)
        assert m.amount == Decimal("100.00")
        assert m.minor_amount == 10000

    def test_from_minor_rejects_non_int(self):
        with pytest.raises(TypeError):
            Money.from_minor(USD, Decimal("1.5"))

    def test_float_amount_is_rejected(self):
        with pytest.raises(TypeError):
            Money(USD, 19.99)

    def test_from_float_default_rounding(self):
        assert Money.from_float(99.99, EUR).minor_amount == 9999

    def test_from_float_goes_through_repr(self):
        assert Money.from_float(0.1 + 0.2, USD) == Money(USD, "0.30")

    def test_from_float_with_half_up_rounding(self):
        assert Money.from_float(99.995, EUR, RoundingStrategy.HALF_UP).minor_amount == 10000

    def test_from_float_with_floor_rounding(self):
        assert Money.from_float(99.999, EUR, RoundingStrategy.FLOOR).minor_amount == 9999

    def test_zero(self):
        m = Money.zero(EUR)
        assert m.is_zero()
        assert str(m) == "EUR 0.00"

    def test_requires_currency_instance(self):
        with pytest.raises(TypeError):
            Money("USD", "1.00")


# ==============================================================================
# UNIT TESTS: Normalization
# ==============================================================================

class TestNormalization:

    def test_bankers_rounding_by_default(self):
        assert Money(USD, "0.125").amount == Decimal("0.12")
        assert Money(USD, "0.135").amount == Decimal("0.14")

    def test_currency_strategy_is_used(self):
        usd_half_up = USD.with_rounding(RoundingStrategy.HALF_UP)
        assert Money(usd_half_up, "0.125").amount == Decimal("0.13")

    def test_jpy_has_no_decimals(self):
        m = Money(JPY, "1000.5")
        assert m.minor_amount == 1000
        assert str(m) == "JPY 1000"

    def test_kwd_has_three_decimals(self):
        assert str(Money.from_minor(KWD, 1500)) == "KWD 1.500"

    def test_custom_currency_minor_unit(self):
        btc = Currency.new("BTC", "₿", "Bitcoin", 8)
        assert str(Money(btc, "0.123456789")) == "BTC 0.12345679"

    def test_negative_zero_renders_as_zero(self):
        assert str(Money(USD, "-0.001")) == "USD 0.00"

    def test_round_is_noop(self):
        m = Money(USD, "10.25")
        assert m.round() == m

    def test_round_with_fewer_places(self):
        assert Money(USD, "2.50").round_with(0, RoundingStrategy.HALF_UP) == Money(USD, "3.00")
        assert Money(USD, "2.50").round_with(0, RoundingStrategy.BANKERS) == Money(USD, "2.00")

    def test_round_with_more_places_changes_nothing(self):
        m = Money(USD, "2.57")
        assert m.round_with(5, RoundingStrategy.FLOOR) == m

    @given(money_strategy())
    def test_round_idempotent_property(self, m):
        assert m.round() == m
        assert m.round().round() == m.round()


# ==============================================================================
# UNIT TESTS: Arithmetic
# ==============================================================================

class TestArithmetic:

    def test_add_same_currency(self):
        assert Money(USD, "10.50") + Money(USD, "0.25") == Money(USD, "10.75")

    def test_checked_add(self):
        assert Money(USD, "10.50").add(Money(USD, "0.25")) == Money(USD, "10.75")

    def test_add_scalar_as_major_units(self):
        assert Money(USD, "10.00") + 5 == Money(USD, "15.00")
        assert Money(USD, "10.00").add("0.01") == Money(USD, "10.01")

    def test_add_different_currency(self):
        with pytest.raises(CurrencyMismatch):
            Money(USD, 1) + Money(EUR, 1)

    def test_currency_mismatch_is_type_error(self):
        with pytest.raises(TypeError):
            Money(USD, 1).sub(Money(EUR, 1))

    def test_mismatch_names_both_codes(self):
        with pytest.raises(CurrencyMismatch) as info:
            Money(USD, 1) - Money(EUR, 1)
        assert info.value.left == "USD"
        assert info.value.right == "EUR"

    def test_sub(self):
        assert Money(EUR, "10.00") - Money(EUR, "12.50") == Money(EUR, "-2.50")

    def test_rsub_scalar(self):
        assert 10 - Money(EUR, "2.50") == Money(EUR, "7.50")

    def test_mul_by_quantity(self):
        assert Money(USD, "19.99") * 3 == Money(USD, "59.97")
        assert 3 * Money(USD, "19.99") == Money(USD, "59.97")

    def test_mul_by_decimal_rounds_once(self):
        assert Money(USD, "19.99").mul(Decimal("1.08")) == Money(USD, "21.59")

    def test_div_by_scalar(self):
        assert Money(USD, "10.00") / 3 == Money(USD, "3.33")

    def test_div_by_money(self):
        assert Money(USD, "10.00") / Money(USD, "4.00") == Money(USD, "2.50")

    def test_div_by_zero(self):
        with pytest.raises(DivisionByZero):
            Money(USD, "10.00") / 0
        with pytest.raises(DivisionByZero):
            Money(USD, "10.00").div(Money.zero(USD))

    @pytest.mark.parametrize("op", [
        lambda m: m + 1.5,
        lambda m: 1.5 + m,
        lambda m: m - 1.5,
        lambda m: m * 1.5,
        lambda m: 1.5 * m,
        lambda m: m / 1.5,
    ])
    def test_float_operand_is_rejected(self, op):
        with pytest.raises(TypeError):
            op(Money(USD, "1.00"))

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Money(USD, "1.00") + "1.00"
        with pytest.raises(TypeError):
            Money(USD, "1.00") * None

    def test_neg_abs_pos(self):
        m = Money(USD, "-4.20")
        assert -m == Money(USD, "4.20")
        assert abs(m) == Money(USD, "4.20")
        assert +m == m

    def test_neg_abs_keep_all_digits(self):
        # 29 significant digits, one more than the default decimal context keeps
        m = Money(USD, "123456789012345678901234567.89")
        assert (-m).amount == Decimal("-123456789012345678901234567.89")
        assert abs(-m) == m
        assert -(-m) == m

    def test_scalar_divided_by_money(self):
        assert Decimal(100) / Money(USD, 8) == Money(USD, "12.50")
        assert 1 / Money(USD, 3) == Money(USD, "0.33")
        with pytest.raises(DivisionByZero):
            Decimal(1) / Money(USD, 0)
        with pytest.raises(TypeError):
            1.5 / Money(USD, 3)

    def test_ignores_caller_decimal_context(self):
        m = Money(USD, "123456789012345678901234567.89")
        with localcontext() as ctx:
            ctx.prec = 4
            assert (-m).amount == Decimal("-123456789012345678901234567.89")
            assert abs(-m) == m
            assert Money(USD, "1234.56") + Money(USD, "0.01") == Money(USD, "1234.57")
            assert Money(USD, "10.00") / 3 == Money(USD, "3.33")

    def test_builtin_sum(self):
        parts = [Money(USD, "0.10"), Money(USD, "0.20"), Money(USD, "0.30")]
        assert sum(parts) == Money(USD, "0.60")
        assert sum(parts, Money.zero(USD)) == Money(USD, "0.60")

    def test_div_rounds_to_cents(self):
        budget = Money(EUR, 2026)
        assert budget.div(12) == Money(EUR, "168.83")
        assert budget.div(12) * 12 == Money(EUR, "2025.96")

    def test_overflow_on_construction(self):
        with pytest.raises(ArithmeticOverflow):
            Money(USD, 10**27)

    def test_overflow_on_add(self):
        largest = Money(USD, "792281625142643375935439503.35")
        with pytest.raises(ArithmeticOverflow):
            largest.add(Money(USD, "0.01"))

    def test_overflow_on_mul(self):
        with pytest.raises(ArithmeticOverflow):
            Money(USD, 10**20) * 10**10

    def test_overflow_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            Money(USD, 10**20) * 10**10

    @given(money_pair_strategy())
    def test_add_commutative(self, pair):
        a, b = pair
        assert a + b == b + a

    @given(money_pair_strategy())
    def test_add_sub_inverse(self, pair):
        a, b = pair
        assert a + b - b == a

    @given(money_strategy(), st.integers(min_value=0, max_value=50))
    @settings(max_examples=100)
    def test_mul_is_repeated_add(self, m, n):
        total = Money.zero(m.currency)
        for _ in range(n):
            total = total + m
        assert m * n == total

    @given(money_strategy(), money_strategy())
    def test_mixed_currencies_never_combine(self, a, b):
        assume(a.currency != b.currency)
        with pytest.raises(CurrencyMismatch):
            a + b


# ==============================================================================
# UNIT TESTS: Comparison, bounds and hashing
# ==============================================================================

class TestComparison:

    def test_equality(self):
        assert Money(USD, "1.00") == Money(USD, 1)
        assert Money(USD, "1.00") != Money(USD, "1.01")

    def test_different_currency_not_equal(self):
        assert Money(USD, 1) != Money(EUR, 1)

    def test_not_equal_to_other_types(self):
        assert Money(USD, 1) != Decimal(1)
        assert Money(USD, 1) != "USD 1.00"

    def test_ordering(self):
        assert Money(USD, 1) < Money(USD, 2)
        assert Money(USD, 2) >= Money(USD, 2)
        assert sorted([Money(USD, 3), Money(USD, 1), Money(USD, 2)]) == [
            Money(USD, 1), Money(USD, 2), Money(USD, 3)
        ]

    def test_ordering_different_currency(self):
        with pytest.raises(CurrencyMismatch):
            Money(USD, 1) < Money(EUR, 2)

    def test_ordering_with_non_money(self):
        with pytest.raises(TypeError):
            Money(USD, 1) < 2

    def test_hash_consistent_with_eq(self):
        assert len({Money(USD, "1.00"), Money(USD, 1), Money(EUR, 1)}) == 2

    def test_min_max(self):
        a, b = Money(USD, 1), Money(USD, 2)
        assert a.min(b) == a
        assert a.max(b) == b
        with pytest.raises(CurrencyMismatch):
            a.max(Money(EUR, 5))

    def test_clamp(self):
        assert Money(USD, "-5.00").clamp(lower=0) == Money.zero(USD)
        assert Money(USD, "50.00").clamp(Money(USD, 0), Money(USD, 10)) == Money(USD, 10)
        assert Money(USD, "5.00").clamp(0, 10) == Money(USD, 5)

    def test_clamp_inverted_bounds(self):
        with pytest.raises(InvalidArgument):
            Money(USD, 5).clamp(10, 0)


# ==============================================================================
# UNIT TESTS: Properties, output and parsing
# ==============================================================================

class TestAccessors:

    def test_metadata(self):
        m = Money(EUR, "1.00")
        assert m.code == "EUR"
        assert m.symbol == "€"
        assert m.name == "Euro"
        assert m.minor_unit == 2

    def test_sign_predicates(self):
        assert Money(USD, 1).is_positive()
        assert Money(USD, -1).is_negative()
        assert Money(USD, 0).is_zero()
        assert not Money(USD, 0).is_positive()

    def test_str_and_repr(self):
        m = Money(USD, "-1234.5")
        assert str(m) == "USD -1234.50"
        assert repr(m) == "Money('USD', '-1234.50')"

    def test_immutable(self):
        m = Money(USD, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            m._amount = Decimal(2)

    def test_to_raw(self):
        raw = Money(USD, "10.00").to_raw()
        assert isinstance(raw, RawMoney)
        assert raw.amount == Decimal("10.00")


class TestParse:

    @pytest.mark.parametrize("text, expected", [
        ("USD 1,234.56", Money(USD, "1234.56")),
        ("USD 1234.56", Money(USD, "1234.56")),
        ("EUR 1.234,56", Money(EUR, "1234.56")),
        ("EUR 1234,56", Money(EUR, "1234.56")),
        ("USD -1,000.50", Money(USD, "-1000.50")),
        ("USD 1,234,567.89", Money(USD, "1234567.89")),
        ("usd 100", Money(USD, "100.00")),
        ("USD 1000.000", Money(USD, "1000.00")),
        ("USD 1000,000", Money(USD, "1000.00")),
        ("JPY 1,000", Money(JPY, 1000)),
        ("  GBP   42.10  ", Money(GBP, "42.10")),
    ])
    def test_valid(self, text, expected):
        assert Money.parse(text) == expected

    def test_comma_layout_wins(self):
        # One point two three four, rounded to cents.
        assert Money.parse("USD 1.234") == Money(USD, "1.23")

    @pytest.mark.parametrize("text", [
        "USD",
        "USD 100.50 extra",
        "US 100",
        "US1 100",
        "USD abc",
        "USD 1,23.45",
        "USD 1.234.5",
        "USD --5",
        "USD 5-",
        "USD .5",
        "",
    ])
    def test_malformed(self, text):
        with pytest.raises(ParseError):
            Money.parse(text)

    def test_unknown_code(self):
        with pytest.raises(UnknownCurrency):
            Money.parse("ZZZ 10.00")

    def test_registered_currency(self):
        qpa = Currency.register(Currency.new("QPA", "Q", "Parse point", 4))
        assert Money.parse("QPA 1.23456") == Money(qpa, "1.2346")

    @given(money_strategy())
    def test_str_round_trip(self, m):
        assert Money.parse(str(m)) == m


class TestSplitMoneyText:

    def test_split(self):
        assert split_money_text("eur 1.234,5") == ("EUR", Decimal("1234.5"))

    def test_parse_money_function(self):
        assert parse_money("KWD 1.2345") == Money(KWD, "1.234")

    def test_non_str(self):
        with pytest.raises(TypeError):
            split_money_text(100)
