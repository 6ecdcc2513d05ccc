"""Mini README: Hosted table store reached over its REST interface.

Structure:
    * RemoteTransactionStore - ``TransactionStore`` backed by a PostgREST
      table endpoint (``{store_url}/rest/v1/{table}``), as exposed by
      Supabase projects.

Every call is a single HTTP request issued through ``requests``. Failures
(unreachable host, non-2xx status, undecodable body) become ``StoreError``
with the store's own message. Nothing is retried and no local state is kept.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from ..errors import StoreError
from ..logging_utils import get_logger
from .base import Record, TransactionStore

LOGGER = get_logger(__name__)

REST_PREFIX = "/rest/v1"


def table_endpoint(store_url: str, table: str) -> str:
    """Build the REST endpoint URL for ``table``."""

    base = store_url.strip().rstrip("/")
    if not base.endswith(REST_PREFIX):
        base = f"{base}{REST_PREFIX}"
    return f"{base}/{table}"


def _error_message(response: requests.Response) -> str:
    """Extract the store's message from an error response."""

    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error_description", "error", "msg"):
            if body.get(key):
                return str(body[key])
    text = (response.text or "").strip()
    return text or f"Store request failed with status {response.status_code}"


class RemoteTransactionStore(TransactionStore):
    """Talk to the hosted ``transactions`` table."""

    backend_name = "remote"

    def __init__(
        self,
        store_url: Optional[str],
        store_key: Optional[str],
        *,
        table: str = "transactions",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._store_url = store_url
        self._store_key = store_key
        self._table = table
        self._timeout = timeout
        self._session = session or requests.Session()
        LOGGER.debug("Remote store targeting table '%s'", table)

    @property
    def endpoint(self) -> str:
        if not self._store_url:
            raise StoreError("Store URL is not configured")
        return table_endpoint(self._store_url, self._table)

    def _headers(self, **extra: str) -> Dict[str, str]:
        key = self._store_key or ""
        headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }
        headers.update(extra)
        return headers

    def _request(self, method: str, **kwargs: Any) -> requests.Response:
        """Issue one request, translating every failure into ``StoreError``."""

        url = self.endpoint
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.exceptions.RequestException as error:
            LOGGER.error("Store %s request failed: %s", method, error)
            raise StoreError(str(error)) from error
        if not response.ok:
            message = _error_message(response)
            LOGGER.error("Store %s returned %s: %s", method, response.status_code, message)
            raise StoreError(message, status_code=response.status_code)
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as error:
            raise StoreError("Store returned a malformed response") from error

    def list_transactions(self) -> List[Record]:
        response = self._request(
            "GET",
            params={"select": "*", "order": "date.desc"},
            headers=self._headers(),
        )
        rows = self._json(response)
        if not isinstance(rows, list):
            raise StoreError("Store returned a malformed response")
        LOGGER.debug("Fetched %s transactions", len(rows))
        return rows

    def insert_transaction(self, record: Record) -> Record:
        response = self._request(
            "POST",
            json=[record],
            headers=self._headers(
                **{"Content-Type": "application/json", "Prefer": "return=representation"}
            ),
        )
        rows = self._json(response)
        if not isinstance(rows, list) or not rows:
            raise StoreError("Store did not return the created transaction")
        LOGGER.info("Inserted transaction %s", rows[0].get("id"))
        return rows[0]

    def delete_transaction(self, transaction_id: str) -> None:
        self._request(
            "DELETE",
            params={"id": f"eq.{transaction_id}"},
            headers=self._headers(),
        )
        LOGGER.info("Deleted transaction %s", transaction_id)

    def count_transactions(self) -> int:
        response = self._request(
            "HEAD",
            params={"select": "*"},
            headers=self._headers(Prefer="count=exact"),
        )
        # Content-Range looks like "0-24/25" or "*/0".
        content_range = response.headers.get("Content-Range", "")
        _, _, total = content_range.partition("/")
        return int(total) if total.isdigit() else 0

    def metadata(self) -> Dict[str, str]:
        return {
            "backend": self.backend_name,
            "table": self._table,
            "configured": "yes" if self._store_url and self._store_key else "no",
        }
