"""Mini README: Exception hierarchy for Pocket Ledger.

Structure:
    * TrackerError - base class for every error raised by the package.
    * ValidationError - a create payload is incomplete or malformed (HTTP 400).
    * StoreError - the hosted table service failed or rejected a call (HTTP 500).
    * NetworkError - the dashboard could not reach the gateway.

The message of a ``StoreError`` is the store's own message and is returned
to HTTP callers verbatim.
"""

from __future__ import annotations

from typing import Optional


class TrackerError(Exception):
    """Base error for the tracker."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Raised when a new transaction is missing fields or has a bad amount."""


class StoreError(TrackerError):
    """Raised when the remote store is unreachable or rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(TrackerError):
    """Raised by the API client when a gateway call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
