"""Mini README: Transaction records and the create payload.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - parsed record with a guaranteed numeric amount.
    * NewTransaction - validated payload accepted by the gateway.
    * parse_amount / parse_day - boundary coercion helpers.

Records travel as JSON dictionaries between the store, the gateway and the
dashboard. They are parsed into ``Transaction`` exactly once, when the
dashboard receives them, so aggregation never sees a non-numeric amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# Fifteen integer digits; wider values would not survive a JSON float.
MAX_AMOUNT = Decimal("1e15")


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Return the type a stored record names; casing and padding are ignored."""

        label = value.strip().lower()
        for member in cls:
            if member.value == label:
                return member
        raise ValueError(f"transaction type must be 'income' or 'expense', got {value!r}")


def parse_amount(value: object, *, limit: Optional[Decimal] = MAX_AMOUNT) -> Decimal:
    """Parse a numeric amount from user or wire input.

    Booleans, NaN and infinities are rejected so that sums stay finite, and
    magnitudes at or above ``limit`` are rejected so that they render. Pass
    ``limit=None`` for derived figures such as totals.
    """

    if isinstance(value, bool):
        raise ValueError(f"Amount must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as error:
            raise ValueError(f"Amount must be numeric, got {value!r}") from error
    else:
        raise ValueError(f"Amount must be numeric, got {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    if limit is not None and abs(amount) >= limit:
        raise ValueError(f"Amount must be below {limit:,f}, got {value!r}")
    return amount


def parse_day(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        # Timestamps from the store carry a time part; only the day matters.
        return date.fromisoformat(value.strip()[:10])
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def json_number(amount: Decimal) -> Any:
    """Return ``amount`` as an int when integral, otherwise as a float."""

    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


@dataclass(slots=True)
class Transaction:
    """A single income or expense record."""

    id: str
    type: TransactionType
    amount: Decimal
    description: str
    date: date

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a store or API record."""

        try:
            identifier = record["id"]
            return cls(
                id=str(identifier),
                type=TransactionType.from_str(str(record["type"])),
                amount=parse_amount(record["amount"]),
                description=str(record["description"]),
                date=parse_day(record["date"]),
            )
        except KeyError as error:
            raise ValueError(f"Transaction record is missing field {error}") from error

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    def as_dict(self) -> Dict[str, Any]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "type": self.type.value,
            "amount": json_number(self.amount),
            "description": self.description,
            "date": self.date.isoformat(),
        }


@dataclass(slots=True)
class NewTransaction:
    """Fields accepted on create; ``type`` and ``date`` pass through as given."""

    type: Any
    amount: Decimal
    description: Any
    date: Any

    def as_record(self) -> Dict[str, Any]:
        """Return the row inserted into the store."""

        return {
            "type": self.type,
            "amount": json_number(self.amount),
            "description": self.description,
            "date": self.date,
        }
