"""Mini README: Core package initializer for Pocket Ledger.

Pocket Ledger is a personal finance tracker: a FastAPI gateway over a hosted
``transactions`` table and a terminal dashboard that summarises income,
expenses and the current week/month spending. Submodules are imported
explicitly by callers; only the logging helper is re-exported here.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
