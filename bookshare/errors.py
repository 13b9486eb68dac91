"""Exception taxonomy for the Bookshare request layer.

Registry and parameter errors are raised to the caller.  Transport and
upstream errors are captured into a :class:`bookshare.responses.Result`
instead of escaping the call.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class BookshareError(Exception):
    """Base class for every error raised or captured by this package."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details: dict[str, Any] = details or {}

    @property
    def message(self) -> str:
        return str(self)


# -- Registry ---------------------------------------------------------------


class RegistryError(BookshareError):
    """Problem with the endpoint registry itself (programmer error)."""


class UnknownEndpoint(RegistryError, AttributeError):
    """No endpoint is registered under the name; also an AttributeError for ``client.<name>``."""

    def __init__(self, method_name: str, available: Sequence[str] = ()):
        super().__init__(f"Unknown endpoint '{method_name}'")
        self.method_name = method_name
        self.available = list(available)


class DuplicateEndpoint(RegistryError):
    def __init__(self, method_name: str):
        super().__init__(
            f"Endpoint '{method_name}' is already registered "
            "(pass override=True to replace it)"
        )
        self.method_name = method_name


class RegistryFrozen(RegistryError):
    def __init__(self, method_name: str):
        super().__init__(f"Cannot register '{method_name}': registry is frozen")
        self.method_name = method_name


class DescriptorError(RegistryError):
    """An endpoint declaration violates a descriptor invariant."""


# -- Parameters -------------------------------------------------------------


class ParameterError(BookshareError):
    """Caller input rejected before any network call."""

    def __init__(self, message: str, name: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.name = name


class MissingRequiredParameter(ParameterError):
    def __init__(self, name: str, missing: Sequence[str] | None = None):
        missing = list(missing or [name])
        label = "parameter" if len(missing) == 1 else "parameters"
        super().__init__(f"missing API {label} {', '.join(missing)}", name)
        self.missing = missing


class UnknownParameter(ParameterError):
    def __init__(self, name: str, extra: Sequence[str] | None = None):
        extra = list(extra or [name])
        label = "parameter" if len(extra) == 1 else "parameters"
        super().__init__(f"invalid API {label} {', '.join(extra)}", name)
        self.extra = extra


class InvalidEnumValue(ParameterError):
    def __init__(self, name: str, value: Any, allowed: Sequence[str]):
        super().__init__(
            f"{name}: {value!r} not in {list(allowed)}",
            name,
        )
        self.value = value
        self.allowed = list(allowed)


class InvalidParameterValue(ParameterError):
    def __init__(self, name: str, value: Any, reason: str):
        super().__init__(f"{name}: {value!r}: {reason}", name)
        self.value = value
        self.reason = reason


# -- Transport --------------------------------------------------------------


class TransportError(BookshareError):
    """Network-level failure: the request never produced an HTTP response."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ConnectError(TransportError):
    """Connection refused, DNS failure or TLS handshake failure."""


class RequestTimeout(TransportError):
    """Connect or read timeout."""


# -- Upstream ---------------------------------------------------------------


class UpstreamError(BookshareError):
    """The API answered, but not with a usable success payload."""

    def __init__(self, message: str, status: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status = status
        self.body = body


class AuthError(UpstreamError):
    """HTTP 401, 403 or 407."""


class RequestError(UpstreamError):
    """Other 4xx statuses."""


class ResponseError(UpstreamError):
    """5xx statuses and anything not otherwise classified."""


class RedirectionError(UpstreamError):
    """A 3xx status remained after redirect handling."""


class EmptyResultError(UpstreamError):
    """A 2xx status that should have carried a body did not."""


class HtmlResultError(UpstreamError):
    """An HTML page came back where JSON was expected."""


class ParseError(UpstreamError):
    """The body was not JSON or did not match the expected schema."""
