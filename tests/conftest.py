"""Shared test fixtures for bookshare tests."""

from __future__ import annotations

import json
import os
from typing import Any
from unittest.mock import MagicMock

import pytest

from bookshare.client import BookshareClient
from bookshare.config import Settings
from bookshare.endpoints import default_registry
from bookshare.registry import EndpointRegistry

BASE_URL = "https://api.example.org"


def make_response(
    status: int = 200,
    body: Any = None,
    *,
    headers: dict[str, str] | None = None,
    reason: str = "OK",
    url: str = "",
) -> MagicMock:
    """A stand-in for ``requests.Response``; dict and list bodies are JSON-encoded."""
    if isinstance(body, (dict, list, int)) and not isinstance(body, bool):
        text = json.dumps(body)
        default_headers = {"Content-Type": "application/json"}
    else:
        text = body or ""
        default_headers = {}
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    resp.content = text.encode()
    resp.headers = headers if headers is not None else default_headers
    resp.reason = reason
    resp.url = url
    return resp


def make_session(*responses: Any) -> MagicMock:
    """A mock session whose ``request`` returns (or raises) *responses* in turn."""
    session = MagicMock()
    session.headers = {}
    if len(responses) == 1:
        if isinstance(responses[0], BaseException):
            session.request.side_effect = responses[0]
        else:
            session.request.return_value = responses[0]
    elif responses:
        session.request.side_effect = list(responses)
    return session


def make_client(session: MagicMock, **settings: Any) -> BookshareClient:
    values = {"base_url": BASE_URL, "token": "tok", "max_retries": 0}
    values.update(settings)
    return BookshareClient(Settings(**values), session=session)


@pytest.fixture
def registry() -> EndpointRegistry:
    return default_registry()


@pytest.fixture
def session() -> MagicMock:
    return make_session(make_response(200, {}))


@pytest.fixture
def client(session: MagicMock) -> BookshareClient:
    return make_client(session)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BOOKSHARE_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("BOOKSHARE_"):
            monkeypatch.delenv(key, raising=False)
