#!/usr/bin/env python3
"""
accounting_tour.py — A walk through the decimoney operations

================================================================================
WHAT IT SHOWS
================================================================================

1. Splitting a yearly budget into months with an exact total
2. Currency safety (mismatches and floats are refused)
3. Tax, discount and percentages, each rounded once
4. A loan: installment and amortization schedule
5. Conversion and statistics

Run:  python examples/accounting_tour.py

================================================================================
"""

import logging
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from decimoney import (
    CurrencyMismatch,
    ExchangeRate,
    Money,
    allocate,
    amortization_schedule,
    apply_discount,
    apply_tax,
    extract_tax,
    loan_payment,
    median,
    percentage,
    split,
)
from decimoney.currencies import EUR, JPY, USD


def section(title: str) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)
    print()


def demonstrate_split():
    section("EXACT SPLITS")

    budget = Money(EUR, 2026)
    monthly = split(budget, 12)
    for i, m in enumerate(monthly, 1):
        print(f"  Month {i:2d}: {m}")
    print()
    print(f"Sum of parts: {sum(monthly)}")
    print(f"Equal?        {sum(monthly) == budget}")
    print()

    shares = allocate(Money(USD, "0.10"), [1, 2])
    print(f"USD 0.10 by 1:2 -> {[str(s) for s in shares]}")
    print()


def demonstrate_type_safety():
    section("CURRENCY SAFETY")

    print(">>> Money(EUR, 100) + Money(USD, 100)")
    try:
        Money(EUR, 100) + Money(USD, 100)
    except CurrencyMismatch as e:
        print(f"CurrencyMismatch: {e}")
    print()

    print(">>> Money(EUR, 100) + 50.0")
    try:
        Money(EUR, 100) + 50.0
    except TypeError as e:
        print(f"TypeError: {e}")
    print()


def demonstrate_fiscal():
    section("TAX AND DISCOUNT")

    net = Money(USD, "19.99")
    tax, gross = apply_tax(net, "0.0875")
    print(f"Net {net} + tax {tax} = gross {gross}")
    back_net, back_tax = extract_tax(gross, "0.0875")
    print(f"Extracted back: net {back_net}, tax {back_tax}")
    print(f"25% off {gross}: {apply_discount(gross, '0.25')}")
    print(f"15% tip on {gross}: {percentage(gross, 15)}")
    print()


def demonstrate_loan():
    section("LOAN")

    principal = Money(USD, "10000.00")
    print(f"Installment: {loan_payment(principal, '0.01', 12)}")
    print()
    print(f"  {'#':>2}  {'payment':>12}  {'interest':>10}  {'principal':>12}  {'balance':>12}")
    for row in amortization_schedule(principal, "0.01", 12):
        print(
            f"  {row.period:>2}  {row.payment.amount:>12}  {row.interest.amount:>10}  "
            f"{row.principal.amount:>12}  {row.balance.amount:>12}"
        )
    print()


def demonstrate_conversion_and_stats():
    section("CONVERSION AND STATISTICS")

    usd_jpy = ExchangeRate(USD, JPY, Decimal("151.237"))
    print(f"{usd_jpy}: USD 100.00 -> {usd_jpy.convert(Money(USD, '100.00'))}")
    print(f"{usd_jpy.inverse()}")

    salaries = [Money(USD, s) for s in (45000, 52000, 58000, 61000, 250000)]
    print(f"Median salary: {median(salaries)}")
    print()


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    demonstrate_split()
    demonstrate_type_safety()
    demonstrate_fiscal()
    demonstrate_loan()
    demonstrate_conversion_and_stats()


if __name__ == "__main__":
    main()
