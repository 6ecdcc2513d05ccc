"""Mini README: HTTP client used by the dashboard to reach the gateway.

Structure:
    * normalise_api_url - tidy a configured base URL so it ends in ``/api``.
    * TrackerApiClient - list/create/delete calls returning raw JSON records.

Any transport failure or non-2xx response is raised as ``NetworkError``. The
client never retries; timeouts come from the ``requests`` transport.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from ..configuration import DEFAULT_API_URL
from ..errors import NetworkError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def normalise_api_url(url: Optional[str]) -> str:
    """Return ``url`` without trailing slashes/commas and ending in ``/api``."""

    url = (url or DEFAULT_API_URL).strip().rstrip("/,")
    if not url.endswith("/api"):
        url = f"{url}/api"
    return url


class TrackerApiClient:
    """Thin wrapper around the gateway's transaction endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = normalise_api_url(base_url)
        self._timeout = timeout
        self._session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.HTTPError as error:
            status_code = error.response.status_code if error.response is not None else None
            message = _server_message(error.response) or str(error)
            raise NetworkError(f"{method} {path} failed: {message}", status_code) from error
        except requests.exceptions.RequestException as error:
            raise NetworkError(f"{method} {path} failed: {error}") from error
        return response

    def list_transactions(self) -> List[Dict[str, Any]]:
        response = self._request("GET", "/transactions")
        try:
            data = response.json()
        except ValueError as error:
            raise NetworkError("GET /transactions returned invalid JSON") from error
        if not isinstance(data, list):
            raise NetworkError("GET /transactions did not return a list")
        return data

    def create_transaction(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self._request("POST", "/transactions", json=payload)
        try:
            return response.json()
        except ValueError as error:
            raise NetworkError("POST /transactions returned invalid JSON") from error

    def delete_transaction(self, transaction_id: str) -> None:
        self._request("DELETE", f"/transactions/{transaction_id}")


def _server_message(response: Optional[requests.Response]) -> Optional[str]:
    """Return the ``error`` field of a gateway error body when present."""

    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None
