"""Mini README: Transaction records and the figures derived from them.

This package holds the parsed ``Transaction`` model, the aggregation
helpers used by the dashboard (totals, weekly and monthly expenses) and the
currency formatting applied when those figures are rendered.
"""

from .formatting import (
    COLOMBIAN_PESO,
    CurrencyStyle,
    format_currency,
    format_day_label,
    format_signed_amount,
)
from .models import (
    MAX_AMOUNT,
    NewTransaction,
    Transaction,
    TransactionType,
    json_number,
    parse_amount,
    parse_day,
)
from .summary import (
    PeriodSummary,
    TotalSummary,
    calculate_period_summary,
    calculate_summary,
    is_same_month,
    is_same_week,
)

__all__ = [
    "COLOMBIAN_PESO",
    "MAX_AMOUNT",
    "CurrencyStyle",
    "NewTransaction",
    "PeriodSummary",
    "TotalSummary",
    "Transaction",
    "TransactionType",
    "calculate_period_summary",
    "calculate_summary",
    "format_currency",
    "format_day_label",
    "format_signed_amount",
    "is_same_month",
    "is_same_week",
    "json_number",
    "parse_amount",
    "parse_day",
]
