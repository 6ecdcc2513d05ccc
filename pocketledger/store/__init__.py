"""Mini README: Storage backends for transaction rows.

Exports the abstract ``TransactionStore`` together with the hosted REST
implementation and the process-local store, plus ``build_store`` which
picks one from the configured ``store_backend``.
"""

from ..configuration import TrackerSettings
from .base import Record, TransactionStore
from .memory import InMemoryTransactionStore
from .remote import RemoteTransactionStore


def build_store(settings: TrackerSettings) -> TransactionStore:
    """Instantiate the backend named by ``settings.store_backend``."""

    if settings.store_backend == "memory":
        return InMemoryTransactionStore()
    return RemoteTransactionStore(
        settings.store_url,
        settings.store_key,
        table=settings.store_table,
        timeout=settings.store_timeout_seconds,
    )


__all__ = [
    "InMemoryTransactionStore",
    "Record",
    "RemoteTransactionStore",
    "TransactionStore",
    "build_store",
]
