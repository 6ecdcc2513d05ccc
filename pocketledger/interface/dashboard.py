"""Mini README: Terminal dashboard for browsing and editing transactions.

Structure:
    * SessionState - interaction states (idle, fetching, loaded, ...).
    * FormState - pending values of the "new transaction" form.
    * TrackerSession - holds the fetched list and drives load/submit/delete.
    * render_dashboard - text rendering of summaries and the history list.
    * cli - Typer sub-application (``show``, ``add``, ``delete``).

Every successful mutation is followed by a full refetch of the list; the
session never patches its local copy. Failures are logged, recorded in
``last_error`` and leave the previous list in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional

import typer

from ..configuration import get_settings
from ..errors import NetworkError, ValidationError
from ..finance import (
    COLOMBIAN_PESO,
    CurrencyStyle,
    Transaction,
    TransactionType,
    calculate_period_summary,
    calculate_summary,
    format_currency,
    format_day_label,
    format_signed_amount,
    json_number,
    parse_amount,
)
from ..logging_utils import get_logger
from .api_client import TrackerApiClient

LOGGER = get_logger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    LOADED = "loaded"
    FETCH_FAILED = "fetch_failed"
    SUBMITTING = "submitting"
    SUBMIT_FAILED = "submit_failed"
    DELETING = "deleting"
    DELETE_FAILED = "delete_failed"


def _today_iso() -> str:
    return date.today().isoformat()


@dataclass(slots=True)
class FormState:
    """Values typed into the create form; ``amount`` stays text until submit."""

    description: str = ""
    amount: str = ""
    date: str = field(default_factory=_today_iso)
    type: str = TransactionType.EXPENSE.value

    def to_payload(self) -> dict:
        """Parse the amount once and build the request body."""

        try:
            amount = parse_amount(self.amount)
        except ValueError as error:
            raise ValidationError(f"Invalid amount: {self.amount!r}") from error
        return {
            "description": self.description,
            "amount": json_number(amount),
            "date": self.date,
            "type": self.type,
        }


class TrackerSession:
    """Client-side state for one dashboard session."""

    def __init__(self, client: TrackerApiClient) -> None:
        self._client = client
        self.transactions: List[Transaction] = []
        self.loading = True
        self.state = SessionState.IDLE
        self.form = FormState()
        self.last_error: Optional[str] = None

    def _parse(self, records: List[Any]) -> List[Transaction]:
        parsed = []
        for record in records:
            if not isinstance(record, Mapping):
                LOGGER.warning("Skipping non-object transaction record: %r", record)
                continue
            try:
                parsed.append(Transaction.from_record(record))
            except ValueError as error:
                LOGGER.warning("Skipping malformed transaction %s: %s", record.get("id"), error)
        return parsed

    def refresh(self) -> bool:
        """Fetch the full list; on failure keep the previous one."""

        self.state = SessionState.FETCHING
        try:
            records = self._client.list_transactions()
        except NetworkError as error:
            LOGGER.error("Error fetching transactions: %s", error.message)
            self.last_error = error.message
            self.state = SessionState.FETCH_FAILED
            return False
        finally:
            self.loading = False
        self.transactions = self._parse(records)
        self.last_error = None
        self.state = SessionState.LOADED
        return True

    def submit(self) -> bool:
        """Send the pending form, reset it and refetch."""

        self.state = SessionState.SUBMITTING
        try:
            payload = self.form.to_payload()
            self._client.create_transaction(payload)
        except (NetworkError, ValidationError) as error:
            LOGGER.error("Error creating transaction: %s", error.message)
            self.last_error = error.message
            self.state = SessionState.SUBMIT_FAILED
            return False
        self.form = FormState()
        return self.refresh()

    def delete(self, transaction_id: str, confirm: Callable[[str], bool]) -> bool:
        """Delete after ``confirm`` approves; declining sends nothing."""

        if not confirm("Are you sure you want to delete this record?"):
            return False
        self.state = SessionState.DELETING
        try:
            self._client.delete_transaction(transaction_id)
        except NetworkError as error:
            LOGGER.error("Error deleting transaction: %s", error.message)
            self.last_error = error.message
            self.state = SessionState.DELETE_FAILED
            return False
        return self.refresh()


def render_dashboard(
    session: TrackerSession,
    now: Optional[datetime] = None,
    style: CurrencyStyle = COLOMBIAN_PESO,
) -> List[str]:
    """Return the dashboard as printable lines."""

    now = now or datetime.now()
    summary = calculate_summary(session.transactions)
    periods = calculate_period_summary(session.transactions, now)

    lines = [
        f"Balance: {format_currency(summary.balance, style)}",
        f"Income:  +{format_currency(summary.income, style)}",
        f"Expense: -{format_currency(summary.expense, style)}",
        f"This week: {format_currency(periods.weekly_expenses, style)}"
        f"   This month: {format_currency(periods.monthly_expenses, style)}",
    ]
    if session.last_error:
        lines.append(f"! {session.last_error}")
    lines.append("")
    lines.append("History")
    if session.loading:
        lines.append("Loading...")
    elif not session.transactions:
        lines.append("No transactions recorded.")
    else:
        for transaction in session.transactions:
            arrow = "↓" if transaction.is_income else "↑"
            lines.append(
                f"{arrow} [{transaction.id}] {transaction.description}"
                f" ({format_day_label(transaction.date)})"
                f"  {format_signed_amount(transaction, style)}"
            )
    return lines


cli = typer.Typer(help="Browse and edit transactions through the gateway API.")


def _session(api_url: Optional[str]) -> TrackerSession:
    settings = get_settings()
    client = TrackerApiClient(api_url or settings.api_url)
    return TrackerSession(client)


def _style() -> CurrencyStyle:
    return CurrencyStyle(symbol=get_settings().currency_symbol)


def _echo(session: TrackerSession) -> None:
    for line in render_dashboard(session, style=_style()):
        typer.echo(line)


@cli.command()
def show(api_url: Optional[str] = typer.Option(None, help="Gateway base URL.")) -> None:
    """Print summaries and the transaction history."""

    session = _session(api_url)
    session.refresh()
    _echo(session)


@cli.command()
def add(
    description: str = typer.Option(..., help="What the money was for."),
    amount: str = typer.Option(..., help="Amount in currency units."),
    day: Optional[str] = typer.Option(None, "--date", help="ISO date, defaults to today."),
    kind: TransactionType = typer.Option(TransactionType.EXPENSE, "--type", help="income or expense."),
    api_url: Optional[str] = typer.Option(None, help="Gateway base URL."),
) -> None:
    """Record a new transaction and print the refreshed dashboard."""

    session = _session(api_url)
    session.form = FormState(
        description=description, amount=amount, date=day or _today_iso(), type=kind.value
    )
    if not session.submit():
        typer.echo(f"Could not save transaction: {session.last_error}", err=True)
        session.refresh()
    _echo(session)


@cli.command()
def delete(
    transaction_id: str = typer.Argument(..., help="Identifier shown in brackets by 'show'."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
    api_url: Optional[str] = typer.Option(None, help="Gateway base URL."),
) -> None:
    """Delete a transaction after confirmation."""

    session = _session(api_url)
    confirm = (lambda _message: True) if yes else typer.confirm
    if session.delete(transaction_id, confirm):
        _echo(session)
    elif session.state is SessionState.DELETE_FAILED:
        typer.echo(f"Could not delete transaction: {session.last_error}", err=True)
