"""Mini README: Transaction Store Gateway operations.

Structure:
    * REQUIRED_FIELDS_MESSAGE - fixed message for incomplete create payloads.
    * validate_new_transaction - presence and amount checks before any store call.
    * HealthReport - connectivity status plus presence flags for store settings.
    * TransactionGateway - list/create/delete/health over a ``TransactionStore``.

The gateway is a stateless pass-through: it adds validation on create and
otherwise hands each call to the store, letting ``StoreError`` propagate to
the HTTP layer untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .configuration import TrackerSettings
from .errors import StoreError, ValidationError
from .finance.models import NewTransaction, parse_amount
from .logging_utils import get_logger
from .store.base import Record, TransactionStore

LOGGER = get_logger(__name__)

REQUIRED_FIELDS = ("type", "amount", "description", "date")
REQUIRED_FIELDS_MESSAGE = "all fields are required"
INVALID_AMOUNT_MESSAGE = "amount must be a number below 1,000,000,000,000,000"


def validate_new_transaction(payload: Optional[Mapping[str, Any]]) -> NewTransaction:
    """Check a create payload and return the fields to insert.

    A field counts as missing when it is absent or falsy (``None``, ``""``,
    ``0``). Only ``amount`` is parsed further; ``type`` and ``date`` are
    accepted as given.
    """

    payload = payload or {}
    if any(not payload.get(field) for field in REQUIRED_FIELDS):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    try:
        amount = parse_amount(payload["amount"])
    except ValueError as error:
        raise ValidationError(INVALID_AMOUNT_MESSAGE) from error
    return NewTransaction(
        type=payload["type"],
        amount=amount,
        description=payload["description"],
        date=payload["date"],
    )


@dataclass(slots=True)
class HealthReport:
    """Outcome of the store connectivity check."""

    store_connected: bool
    has_url: bool
    has_key: bool
    message: Optional[str] = None

    @property
    def status(self) -> str:
        return "ok" if self.store_connected else "error"

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": self.status,
            "storeConnected": self.store_connected,
            "env": {"hasUrl": self.has_url, "hasKey": self.has_key},
        }
        if self.message:
            payload["message"] = self.message
        return payload


class TransactionGateway:
    """Expose transaction CRUD on top of a store."""

    def __init__(self, store: TransactionStore, settings: TrackerSettings) -> None:
        self._store = store
        self._settings = settings
        LOGGER.debug("Gateway initialised with %s", store.metadata())

    def list_transactions(self) -> List[Record]:
        return self._store.list_transactions()

    def create_transaction(self, payload: Optional[Mapping[str, Any]]) -> Record:
        """Validate ``payload`` and insert it, returning the created row."""

        try:
            new_transaction = validate_new_transaction(payload)
        except ValidationError as error:
            LOGGER.info("Rejected transaction payload: %s", error.message)
            raise
        return self._store.insert_transaction(new_transaction.as_record())

    def delete_transaction(self, transaction_id: str) -> None:
        self._store.delete_transaction(transaction_id)

    def health_check(self) -> HealthReport:
        """Probe the store with a zero-row count query."""

        has_url = bool(self._settings.store_url)
        has_key = bool(self._settings.store_key)
        try:
            count = self._store.count_transactions()
        except StoreError as error:
            LOGGER.error("Health check failed: %s", error.message)
            return HealthReport(
                store_connected=False, has_url=has_url, has_key=has_key, message=error.message
            )
        LOGGER.debug("Health check ok (%s rows)", count)
        return HealthReport(store_connected=True, has_url=has_url, has_key=has_key)
