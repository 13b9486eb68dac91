"""Map raw HTTP outcomes onto typed results.

A :class:`Result` holds exactly one of a decoded ``value`` or a ``failure``
diagnostic.  Mapping never raises: every upstream or transport problem is
classified into an error from :mod:`bookshare.errors` and carried inside.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from bookshare.errors import (
    AuthError,
    BookshareError,
    EmptyResultError,
    HtmlResultError,
    ParseError,
    RedirectionError,
    RequestError,
    ResponseError,
    TransportError,
    UpstreamError,
)
from bookshare.formats.messages import Message
from bookshare.helpers.http import get_header, looks_like_html
from bookshare.transport import RawOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Message)

AUTH_STATUSES = frozenset({401, 403, 407})
NO_CONTENT_STATUSES = frozenset({202, 204})


@dataclass(frozen=True)
class Diagnostic:
    """Why a call failed: HTTP status (None for transport failures), message and error."""

    status: int | None
    message: str
    error: BookshareError


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    failure: Diagnostic | None = None
    http_status: int | None = None

    def __post_init__(self):
        if (self.value is None) == (self.failure is None):
            raise ValueError("a Result holds exactly one of value or failure")

    @classmethod
    def ok(cls, value: T, status: int | None = None) -> Result[T]:
        return cls(value=value, http_status=status)

    @classmethod
    def fail(cls, error: BookshareError, status: int | None = None) -> Result[T]:
        if status is None and isinstance(error, UpstreamError):
            status = error.status
        return cls(failure=Diagnostic(status=status, message=str(error), error=error), http_status=status)

    @property
    def is_error(self) -> bool:
        return self.failure is not None

    @property
    def exception(self) -> BookshareError | None:
        return self.failure.error if self.failure else None

    @property
    def error_message(self) -> str:
        return self.failure.message if self.failure else ""

    @property
    def status(self) -> int | None:
        return self.http_status

    def unwrap(self) -> T:
        """The decoded value, or raise the captured error."""
        if self.failure is not None:
            raise self.failure.error
        return self.value

    def __getattr__(self, name: str) -> Any:
        # Only reached for names the Result itself does not define.
        if name.startswith("_"):
            raise AttributeError(name)
        value = self.__dict__.get("value")
        if value is None:
            raise AttributeError(
                f"failed result has no field '{name}' ({self.__dict__.get('failure')})"
            )
        return getattr(value, name)


def map_response(schema: type[T], outcome: RawOutcome | TransportError) -> Result[T]:
    """Classify *outcome* and decode a successful body into *schema*."""
    if isinstance(outcome, TransportError):
        return Result.fail(outcome)

    status = outcome.status
    if 200 <= status < 300:
        return _map_success(schema, outcome)

    message = error_message(outcome)
    if 300 <= status < 400:
        location = get_header(outcome.headers, "location")
        if location:
            message = f"{message} (redirected to {location})"
        error: UpstreamError = RedirectionError(message, status, outcome.body)
    elif status in AUTH_STATUSES:
        error = AuthError(message, status, outcome.body)
    elif 400 <= status < 500:
        error = RequestError(message, status, outcome.body)
    else:
        error = ResponseError(message, status, outcome.body)
    logger.debug("HTTP %d from %s: %s", status, outcome.url, message)
    return Result.fail(error)


def _map_success(schema: type[T], outcome: RawOutcome) -> Result[T]:
    status = outcome.status
    body = (outcome.body or "").strip()
    if not body:
        if status in NO_CONTENT_STATUSES:
            return Result.ok(schema(), status)
        return Result.fail(EmptyResultError(f"HTTP {status} with an empty body", status, ""))

    if looks_like_html(body):
        return Result.fail(
            HtmlResultError(f"HTTP {status} returned an HTML page instead of JSON", status, body)
        )

    try:
        data = json.loads(body)
    except ValueError as exc:
        return Result.fail(ParseError(f"invalid JSON: {exc}", status, body))
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        return Result.fail(
            ParseError(f"response does not match {schema.__name__}: {exc}", status, body)
        )
    return Result.ok(value, status)


def error_message(outcome: RawOutcome) -> str:
    """Best human-readable explanation of a failed exchange."""
    try:
        data = json.loads(outcome.body) if outcome.body else None
    except ValueError:
        data = None
    if isinstance(data, dict):
        for key in ("error_description", "messages", "message", "error"):
            value = data.get(key)
            if isinstance(value, list):
                value = "; ".join(str(v) for v in value if v)
            if value:
                return str(value)

    authenticate = get_header(outcome.headers, "www-authenticate")
    if authenticate:
        return authenticate
    return outcome.reason or f"HTTP {outcome.status}"
