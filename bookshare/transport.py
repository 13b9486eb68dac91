"""Issue one HTTP request per call and capture what came back.

The invoker never raises for network problems: a failure to obtain an HTTP
response is returned as a :class:`~bookshare.errors.TransportError` value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from pathlib import Path
import time
from typing import Any
from urllib.parse import quote

import requests

from bookshare.errors import ConnectError, RequestTimeout, TransportError
from bookshare.formats.descriptor import EndpointDescriptor
from bookshare.helpers.debug import save_transcript
from bookshare.normalize import NormalizedParameters

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.bookshare.org"
API_VERSION = "v2"

DEFAULT_TIMEOUT = 30.0  # seconds, read
DEFAULT_OPEN_TIMEOUT = 10.0  # seconds, connect
MAX_RETRIES = 2
MAX_REDIRECTS = 2
FALLBACK_BACKOFF = 0.5  # seconds, doubled each retry

_RETRYABLE = (ConnectError, RequestTimeout)


@dataclass
class RawOutcome:
    """An HTTP response reduced to what the response mapper needs."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    reason: str = ""
    url: str = ""
    content: bytes = b""  # undecoded body

    @classmethod
    def from_response(cls, response: requests.Response) -> RawOutcome:
        return cls(
            status=response.status_code,
            headers=response.headers,
            body=response.text or "",
            reason=response.reason or "",
            url=response.url or "",
            content=response.content or b"",
        )


class RequestInvoker:
    """Turns a descriptor plus normalized parameters into an HTTP exchange."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        open_timeout: float = DEFAULT_OPEN_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        max_redirects: int = MAX_REDIRECTS,
        backoff: float = FALLBACK_BACKOFF,
        debug_dir: Path | None = None,
        session: requests.Session | None = None,
    ):
        self._session = session if session is not None else requests.Session()
        self._session.max_redirects = max_redirects
        self._base_url = base_url.rstrip("/")
        self.token = token
        self._api_key = api_key
        self._timeout = (open_timeout, timeout)
        self._max_retries = max(0, max_retries)
        self._backoff = backoff
        self._debug_dir = debug_dir

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, descriptor: EndpointDescriptor, path_values: Mapping[str, str]) -> str:
        """Base URL + version prefix + template with URL-encoded placeholders."""
        path = descriptor.path
        for name, value in path_values.items():
            path = path.replace("{" + name + "}", quote(str(value), safe=""))
        return f"{self._base_url}/{API_VERSION}{path}"

    def invoke(
        self, descriptor: EndpointDescriptor, normalized: NormalizedParameters
    ) -> RawOutcome | TransportError:
        if descriptor.requires_auth and not self.token:
            logger.warning(
                "%s requires an authenticated user but no token is configured", descriptor.name
            )
        url = self.build_url(descriptor, normalized.path)
        if normalized.body:
            return self._send(
                descriptor.name, descriptor.method, url,
                params=normalized.query, json_body=normalized.params,
            )
        return self._send(descriptor.name, descriptor.method, url, params=normalized.params)

    def fetch(self, url: str, *, call_name: str = "get_retrieval") -> RawOutcome | TransportError:
        """GET a fully formed URL (for example a download link from a previous response)."""
        if not url.startswith(("http://", "https://")):
            url = f"{self._base_url}/{url.lstrip('/')}"
        return self._send(call_name, "GET", url, params={})

    # -- Internals --------------------------------------------------------

    def _send(
        self,
        call_name: str,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> RawOutcome | TransportError:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        query = dict(params or {})
        if self._api_key and self._is_own_url(url):
            query["api_key"] = self._api_key

        request_kwargs: dict[str, Any] = {
            "params": query or None,
            "headers": headers,
            "timeout": self._timeout,
        }
        if json_body is not None:
            headers["Content-Type"] = "application/json"
            request_kwargs["json"] = json_body

        attempts = self._max_retries + 1 if method == "GET" else 1
        delay = self._backoff
        for attempt in range(attempts):
            outcome = self._attempt(method, url, request_kwargs)
            if not isinstance(outcome, _RETRYABLE) or attempt + 1 >= attempts:
                break
            logger.info(
                "%s %s failed (%s), retrying in %.1fs (%d/%d)",
                method, url, outcome, delay, attempt + 1, self._max_retries,
            )
            time.sleep(delay)
            delay *= 2

        if isinstance(outcome, TransportError):
            logger.debug("%s %s -> %s: %s", method, url, type(outcome).__name__, outcome)
            save_transcript(
                self._debug_dir, call_name, method, url,
                params=params, body=json_body, error=outcome,
            )
        else:
            logger.debug("%s %s -> %d", method, url, outcome.status)
            save_transcript(
                self._debug_dir, call_name, method, url,
                params=params, body=json_body,
                status=outcome.status, response_text=outcome.body,
            )
        return outcome

    def _is_own_url(self, url: str) -> bool:
        return url == self._base_url or url.startswith(self._base_url + "/")

    def _attempt(
        self, method: str, url: str, request_kwargs: dict[str, Any]
    ) -> RawOutcome | TransportError:
        try:
            response = self._session.request(method, url, **request_kwargs)
        except requests.exceptions.Timeout as exc:
            return RequestTimeout(f"{method} {url} timed out", cause=exc)
        except requests.exceptions.TooManyRedirects as exc:
            if exc.response is not None:
                return RawOutcome.from_response(exc.response)
            return TransportError(f"{method} {url}: too many redirects", cause=exc)
        except requests.exceptions.ConnectionError as exc:
            return ConnectError(f"{method} {url}: could not connect ({exc})", cause=exc)
        except requests.exceptions.RequestException as exc:
            return TransportError(f"{method} {url}: {exc}", cause=exc)
        return RawOutcome.from_response(response)
