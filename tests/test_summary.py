"""Mini README: Tests for total and period summaries.

Covers the worked example from the product notes, the empty list, and the
Monday/month-end boundaries of the weekly and monthly expense filters.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pocketledger.finance import (
    Transaction,
    TransactionType,
    calculate_period_summary,
    calculate_summary,
    is_same_month,
    is_same_week,
)


def _txn(identifier: str, kind: TransactionType, amount: str, day: date) -> Transaction:
    return Transaction(
        id=identifier,
        type=kind,
        amount=Decimal(amount),
        description=f"entry {identifier}",
        date=day,
    )


def test_worked_example_totals_and_periods() -> None:
    """Totals and period sums match the documented example."""

    transactions = [
        _txn("1", TransactionType.EXPENSE, "100", date(2024, 1, 1)),
        _txn("2", TransactionType.INCOME, "500", date(2024, 1, 2)),
        _txn("3", TransactionType.EXPENSE, "50", date(2024, 2, 1)),
    ]

    summary = calculate_summary(transactions)
    assert summary.income == Decimal("500")
    assert summary.expense == Decimal("150")
    assert summary.balance == Decimal("350")

    periods = calculate_period_summary(transactions, date(2024, 1, 15))
    assert periods.monthly_expenses == Decimal("100")
    assert periods.weekly_expenses == Decimal("0")


def test_empty_list_yields_zero_balance() -> None:
    summary = calculate_summary([])
    assert summary.income == summary.expense == summary.balance == Decimal("0")
    periods = calculate_period_summary([], date(2024, 1, 15))
    assert periods.weekly_expenses == periods.monthly_expenses == Decimal("0")


def test_balance_is_income_minus_expense_with_fractions() -> None:
    transactions = [
        _txn("1", TransactionType.INCOME, "0.10", date(2024, 3, 1)),
        _txn("2", TransactionType.INCOME, "0.20", date(2024, 3, 2)),
        _txn("3", TransactionType.EXPENSE, "0.30", date(2024, 3, 3)),
    ]
    summary = calculate_summary(transactions)
    assert summary.balance == Decimal("0.00")
    assert summary.balance == summary.income - summary.expense


def test_monday_belongs_to_week_of_following_days() -> None:
    """Weeks start on Monday: 2024-01-15 is a Monday, 2024-01-14 a Sunday."""

    now = datetime(2024, 1, 17, 18, 30)
    assert is_same_week(date(2024, 1, 15), now)
    assert is_same_week(date(2024, 1, 21), now)
    assert not is_same_week(date(2024, 1, 14), now)
    assert not is_same_week(date(2024, 1, 22), now)


def test_last_day_of_month_counts_in_month() -> None:
    now = date(2024, 2, 10)
    assert is_same_month(date(2024, 2, 29), now)
    assert not is_same_month(date(2024, 3, 1), now)
    assert not is_same_month(date(2023, 2, 10), now)


def test_period_filters_are_independent() -> None:
    """A same-week, same-month expense counts in both sums."""

    now = date(2024, 1, 31)
    transactions = [
        _txn("1", TransactionType.EXPENSE, "40", date(2024, 1, 29)),
        _txn("2", TransactionType.EXPENSE, "60", date(2024, 1, 31)),
        _txn("3", TransactionType.EXPENSE, "25", date(2024, 1, 3)),
        _txn("4", TransactionType.INCOME, "999", date(2024, 1, 30)),
    ]
    periods = calculate_period_summary(transactions, now)
    assert periods.weekly_expenses == Decimal("100")
    assert periods.monthly_expenses == Decimal("125")


def test_week_spanning_months_uses_calendar_week() -> None:
    """Week of Thursday 2024-02-01 starts Monday 2024-01-29."""

    now = date(2024, 2, 1)
    transactions = [
        _txn("1", TransactionType.EXPENSE, "70", date(2024, 1, 29)),
        _txn("2", TransactionType.EXPENSE, "30", date(2024, 2, 1)),
    ]
    periods = calculate_period_summary(transactions, now)
    assert periods.weekly_expenses == Decimal("100")
    assert periods.monthly_expenses == Decimal("30")


def test_period_sums_grow_with_in_period_expenses_only() -> None:
    now = date(2024, 5, 15)
    transactions = [_txn("1", TransactionType.EXPENSE, "10", date(2024, 5, 14))]
    before = calculate_period_summary(transactions, now)

    transactions.append(_txn("2", TransactionType.INCOME, "500", date(2024, 5, 15)))
    transactions.append(_txn("3", TransactionType.EXPENSE, "80", date(2024, 4, 30)))
    unchanged = calculate_period_summary(transactions, now)
    assert unchanged == before

    transactions.append(_txn("4", TransactionType.EXPENSE, "5", date(2024, 5, 13)))
    after = calculate_period_summary(transactions, now)
    assert after.weekly_expenses == before.weekly_expenses + Decimal("5")
    assert after.monthly_expenses == before.monthly_expenses + Decimal("5")
