"""Mini README: Abstract interface for transaction table backends.

Structure:
    * TransactionStore - the four table operations the gateway relies on.

Records cross this boundary as plain dictionaries shaped like table rows
(``id``, ``type``, ``amount``, ``description``, ``date``). Implementations
raise ``StoreError`` for every failure and never retry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

Record = Dict[str, Any]


class TransactionStore(ABC):
    """Base interface for table-backed transaction storage."""

    backend_name: str = "generic"

    @abstractmethod
    def list_transactions(self) -> List[Record]:
        """Return every row ordered by ``date`` descending."""

    @abstractmethod
    def insert_transaction(self, record: Record) -> Record:
        """Insert one row and return it with its assigned ``id``."""

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete rows matching ``transaction_id``; missing rows are not an error."""

    @abstractmethod
    def count_transactions(self) -> int:
        """Count rows without fetching them; used by the health check."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for logs."""

        return {"backend": self.backend_name}
