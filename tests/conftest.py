"""Mini README: Shared fixtures for the Pocket Ledger test-suite.

Structure:
    * make_response - builds real ``requests.Response`` objects with a body.
    * fake_session - records requests and replays queued responses or errors.
    * settings - ``TrackerSettings`` pointing at a dummy store.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from pocketledger.configuration import TrackerSettings


def _build_response(
    status_code: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    url: str = "http://test.invalid/",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.headers.update(headers or {})
    if body is not None:
        response.headers.setdefault("Content-Type", "application/json")
    return response


class FakeSession:
    """Stand-in for ``requests.Session`` used by the store and the client."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._outcomes: List[Any] = []

    def queue(self, outcome: Any) -> None:
        """Queue a ``requests.Response`` to return or an exception to raise."""

        self._outcomes.append(outcome)

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return _build_response


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def settings() -> TrackerSettings:
    return TrackerSettings(
        store_url="https://example.supabase.co",
        store_key="secret-key",
        store_backend="memory",
        _env_file=None,
    )
