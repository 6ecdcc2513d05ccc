"""Mini README: Currency and date labels for the dashboard.

Structure:
    * CurrencyStyle - separators, symbol and precision for one locale.
    * COLOMBIAN_PESO - default style (``$ 1.234.567``, no decimals).
    * format_currency - render a numeric value with a style.
    * format_signed_amount - prefix ``+``/``-`` from the transaction type.
    * format_day_label - ``"15 de enero"`` style labels for the history list.

The sign of a listed transaction comes from its type, so the stored amount is
always rendered as an unsigned magnitude there.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

from .models import Transaction, parse_amount

Number = Union[int, float, Decimal]

MONTH_NAMES_ES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


@dataclass(frozen=True, slots=True)
class CurrencyStyle:
    """Locale conventions used when rendering money."""

    symbol: str = "$"
    thousands_separator: str = "."
    decimal_separator: str = ","
    fraction_digits: int = 0
    symbol_spacing: str = " "


COLOMBIAN_PESO = CurrencyStyle()


def _group_thousands(digits: str, separator: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def format_currency(amount: Number, style: CurrencyStyle = COLOMBIAN_PESO) -> str:
    """Render ``amount`` as a currency string, e.g. ``$ 12.500``."""

    value = parse_amount(amount, limit=None)
    quantum = Decimal(1).scaleb(-style.fraction_digits)
    # quantize fails once the result exceeds the context precision.
    with localcontext() as context:
        context.prec = max(context.prec, value.adjusted() + style.fraction_digits + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    integral, _, fraction = f"{rounded.copy_abs():f}".partition(".")
    body = _group_thousands(integral, style.thousands_separator)
    if style.fraction_digits:
        body = f"{body}{style.decimal_separator}{fraction}"
    return f"{sign}{style.symbol}{style.symbol_spacing}{body}"


def format_signed_amount(
    transaction: Transaction, style: CurrencyStyle = COLOMBIAN_PESO
) -> str:
    """Render a transaction amount with its type-derived sign."""

    prefix = "+" if transaction.is_income else "-"
    return f"{prefix}{format_currency(abs(transaction.amount), style)}"


def format_day_label(day: date) -> str:
    return f"{day.day} de {MONTH_NAMES_ES[day.month - 1]}"
