"""Mini README: Summary figures derived from a list of transactions.

Structure:
    * TotalSummary - income, expense and balance across every record.
    * PeriodSummary - expense totals for the current week and month.
    * calculate_summary / calculate_period_summary - pure aggregation helpers.
    * is_same_week / is_same_month - calendar predicates (Monday-start weeks).

The weekly and monthly filters are independent: an expense dated inside the
current week of the current month counts towards both totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, Union

from .models import Transaction, TransactionType

DayLike = Union[date, datetime]


@dataclass(frozen=True, slots=True)
class TotalSummary:
    """Running totals across every transaction."""

    income: Decimal
    expense: Decimal
    balance: Decimal


@dataclass(frozen=True, slots=True)
class PeriodSummary:
    """Expense totals scoped to the week and month containing ``now``."""

    weekly_expenses: Decimal
    monthly_expenses: Decimal


def _as_day(value: DayLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def week_start(day: DayLike) -> date:
    """Return the Monday opening the week that contains ``day``."""

    day = _as_day(day)
    return day - timedelta(days=day.weekday())


def is_same_week(day: DayLike, now: DayLike) -> bool:
    return week_start(day) == week_start(now)


def is_same_month(day: DayLike, now: DayLike) -> bool:
    day, now = _as_day(day), _as_day(now)
    return (day.year, day.month) == (now.year, now.month)


def _total(transactions: Iterable[Transaction], kind: TransactionType) -> Decimal:
    return sum(
        (transaction.amount for transaction in transactions if transaction.type is kind),
        Decimal("0"),
    )


def calculate_summary(transactions: Iterable[Transaction]) -> TotalSummary:
    """Sum income and expense and derive the balance."""

    transactions = list(transactions)
    income = _total(transactions, TransactionType.INCOME)
    expense = _total(transactions, TransactionType.EXPENSE)
    return TotalSummary(income=income, expense=expense, balance=income - expense)


def calculate_period_summary(
    transactions: Iterable[Transaction], now: DayLike
) -> PeriodSummary:
    """Sum the expenses falling in the week and in the month of ``now``."""

    expenses = [
        transaction
        for transaction in transactions
        if transaction.type is TransactionType.EXPENSE
    ]
    weekly = _total(
        (transaction for transaction in expenses if is_same_week(transaction.date, now)),
        TransactionType.EXPENSE,
    )
    monthly = _total(
        (transaction for transaction in expenses if is_same_month(transaction.date, now)),
        TransactionType.EXPENSE,
    )
    return PeriodSummary(weekly_expenses=weekly, monthly_expenses=monthly)
