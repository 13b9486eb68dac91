"""Scalar value kinds and their coercion rules.

A parameter's declared ``type`` is either one of the scalar kinds below or the
name of an enumeration from :mod:`bookshare.formats.enumerations`.  Coercion
turns an arbitrary caller value into a typed Python value (``str``, ``int`` or
``bool``) or raises a :class:`~bookshare.errors.ParameterError`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta
import re
from typing import Any

import pycountry

from bookshare.errors import InvalidEnumValue, InvalidParameterValue
from bookshare.formats.enumerations import ENUMERATIONS

Scalar = str | int | bool

STRING = "string"
INTEGER = "integer"
BOOLEAN = "boolean"
DATE = "date"
DAY = "day"
DURATION = "duration"
LANGUAGE = "language"

SCALAR_KINDS = frozenset({STRING, INTEGER, BOOLEAN, DATE, DAY, DURATION, LANGUAGE})

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})

_INTEGER_RE = re.compile(r"^[+-]?\d+$")

_YEAR_RE = re.compile(r"^\d{4}$")
_DAY_RE = re.compile(r"^\d{4}-\d\d-\d\d$")
_DATETIME_RE = re.compile(
    r"^\d{4}-\d\d-\d\dT\d\d:\d\d(:\d\d([.,]\d+)?)?(Z|[+-]\d\d(:?\d\d)?)?$"
)

# The lowest-order component of a duration may be fractional.
_DURATION_PATTERNS = [
    re.compile(p)
    for p in (
        r"^P(\d+Y)?(\d+M)?(\d+D)?(T(\d+H)?(\d+M)?(\d+([.,]\d+)?S)?)?$",
        r"^P\d+([.,]\d+)?W$",
        r"^P(\d+Y)?(\d+M)?(\d+D)?T(\d+H)?\d+([.,]\d+)?M$",
        r"^P(\d+Y)?(\d+M)?(\d+D)?T\d+([.,]\d+)?H$",
        r"^P(\d+Y)?(\d+M)?\d+([.,]\d+)?D$",
        r"^P(\d+Y)?\d+([.,]\d+)?M$",
        r"^P\d+([.,]\d+)?Y$",
    )
]


def is_known_type(type_name: str) -> bool:
    return type_name in SCALAR_KINDS or type_name in ENUMERATIONS


def is_blank(value: Any) -> bool:
    """True for ``None``, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def coerce(type_name: str, name: str, value: Any) -> Scalar:
    """Coerce a single scalar *value* for parameter *name* of *type_name*."""
    if isinstance(value, dict):
        raise InvalidParameterValue(name, value, "expected a scalar value")
    handler = _COERCERS.get(type_name)
    if handler is not None:
        return handler(name, value)
    enumeration = ENUMERATIONS.get(type_name)
    if enumeration is None:
        raise InvalidParameterValue(name, value, f"unknown type {type_name!r}")
    text = str(value).strip()
    if text not in enumeration:
        raise InvalidEnumValue(name, value, enumeration.values)
    return text


# ---------------------------------------------------------------------------
# Per-kind coercion
# ---------------------------------------------------------------------------


def _to_string(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def _to_integer(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidParameterValue(name, value, "expected an integer, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    text = str(value).strip()
    if _INTEGER_RE.match(text):
        return int(text)
    raise InvalidParameterValue(name, value, "expected an integer")


def _to_boolean(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise InvalidParameterValue(name, value, "expected true or false")


def _to_date(name: str, value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    text = str(value).strip()
    if _YEAR_RE.match(text) or _DAY_RE.match(text) or _DATETIME_RE.match(text):
        return text
    raise InvalidParameterValue(name, value, "expected an ISO 8601 date")


def _to_day(name: str, value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    if _DAY_RE.match(text):
        return text
    raise InvalidParameterValue(name, value, "expected an ISO 8601 day (YYYY-MM-DD)")


def _to_duration(name: str, value: Any) -> str:
    if isinstance(value, timedelta):
        return format_duration(value)
    text = str(value).strip().upper()
    if any(p.match(text) for p in _DURATION_PATTERNS) and text not in ("P", "PT"):
        return text
    raise InvalidParameterValue(name, value, "expected an ISO 8601 duration")


def _to_language(name: str, value: Any) -> str:
    text = str(value).strip()
    try:
        language = pycountry.languages.lookup(text)
    except LookupError:
        raise InvalidParameterValue(name, value, "not an ISO 639 language") from None
    return language.alpha_3


def format_duration(delta: timedelta) -> str:
    """Render a timedelta as an ISO 8601 duration (``P1DT2H3M4.5S``)."""
    if delta < timedelta(0):
        raise ValueError("negative durations have no ISO 8601 form")
    days = delta.days
    hours, rem = divmod(delta.seconds, 3600)
    minutes, seconds = divmod(rem, 60)
    parts = ["P"]
    if days:
        parts.append(f"{days}D")
    if hours or minutes or seconds or delta.microseconds:
        parts.append("T")
        if hours:
            parts.append(f"{hours}H")
        if minutes:
            parts.append(f"{minutes}M")
        if seconds or delta.microseconds:
            if delta.microseconds:
                fraction = f"{delta.microseconds:06d}".rstrip("0")
                parts.append(f"{seconds}.{fraction}S")
            else:
                parts.append(f"{seconds}S")
    if len(parts) == 1:
        parts.append("0D")
    return "".join(parts)


_COERCERS: dict[str, Callable[[str, Any], Scalar]] = {
    STRING: _to_string,
    INTEGER: _to_integer,
    BOOLEAN: _to_boolean,
    DATE: _to_date,
    DAY: _to_day,
    DURATION: _to_duration,
    LANGUAGE: _to_language,
}
