"""Mini README: Process-local transaction store.

Structure:
    * InMemoryTransactionStore - dictionary-backed ``TransactionStore``.

The store mirrors the behaviour of the hosted table closely enough for demos
and tests: identifiers are assigned on insert, listing is ordered by date
descending (newest identifier first on ties), and deletes are not
existence-checked. Nothing is persisted between processes.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .base import Record, TransactionStore

LOGGER = get_logger(__name__)


class InMemoryTransactionStore(TransactionStore):
    """Keep transaction rows in a dictionary keyed by identifier."""

    backend_name = "memory"

    def __init__(self, records: Optional[Iterable[Record]] = None) -> None:
        self._records: Dict[str, Record] = {}
        self._sequence = 0
        for record in records or []:
            self._register(dict(record))
        LOGGER.debug("In-memory store initialised with %s transactions", len(self._records))

    def _next_id(self) -> str:
        self._sequence += 1
        return str(self._sequence)

    def _register(self, record: Record) -> Record:
        """Store a row, assigning an identifier when it has none."""

        if record.get("id") is None:
            record["id"] = self._next_id()
        key = str(record["id"])
        if key in self._records:
            raise ValueError(f"Transaction {key} already exists.")
        self._records[key] = record
        if key.isdigit():
            self._sequence = max(self._sequence, int(key))
        return record

    def list_transactions(self) -> List[Record]:
        def sort_key(record: Record):
            identifier = str(record["id"])
            return (
                str(record.get("date") or ""),
                int(identifier) if identifier.isdigit() else -1,
                identifier,
            )

        return [deepcopy(record) for record in sorted(self._records.values(), key=sort_key, reverse=True)]

    def insert_transaction(self, record: Record) -> Record:
        row = {key: value for key, value in record.items() if key != "id"}
        stored = self._register(row)
        LOGGER.info("Inserted transaction %s", stored["id"])
        return deepcopy(stored)

    def delete_transaction(self, transaction_id: str) -> None:
        removed = self._records.pop(str(transaction_id), None)
        LOGGER.info(
            "Delete transaction %s (%s)", transaction_id, "removed" if removed else "no match"
        )

    def count_transactions(self) -> int:
        return len(self._records)
