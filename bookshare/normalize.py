"""Validate caller arguments against an endpoint descriptor and turn them into wire values.

Steps, in order: alias resolution, unknown-name check, declared defaults,
per-parameter coercion (blank optionals dropped), required check, and the
split of path placeholders from the remaining parameters.  Every failure is
a :class:`~bookshare.errors.ParameterError` raised before any network call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from typing import Any

from bookshare.errors import (
    InvalidParameterValue,
    MissingRequiredParameter,
    UnknownParameter,
)
from bookshare.formats.descriptor import EndpointDescriptor, ParamSpec
from bookshare.formats.types import STRING, Scalar, coerce, is_blank

logger = logging.getLogger(__name__)

MAX_LIMIT = 100

COMMA = "comma"
REPEAT = "repeat"
MULTI_STYLES = (COMMA, REPEAT)

_SEQUENCES = (list, tuple, set, frozenset)


@dataclass
class NormalizedParameters:
    """Canonical names mapped to wire values for one call."""

    path: dict[str, str] = field(default_factory=dict)  # template order
    params: dict[str, Any] = field(default_factory=dict)  # caller order
    body: bool = False  # params travel as a JSON body rather than a query string
    query: dict[str, Any] = field(default_factory=dict)  # undeclared names, always query text


def normalize(
    descriptor: EndpointDescriptor,
    args: Mapping[str, Any],
    *,
    strict: bool = True,
    multi_style: str = COMMA,
) -> NormalizedParameters:
    if multi_style not in MULTI_STYLES:
        raise ValueError(f"multi_style must be one of {MULTI_STYLES}, got {multi_style!r}")

    resolved = _resolve_aliases(descriptor, args)
    declared = set(descriptor.parameter_names)

    extra = [name for name in resolved if name not in declared]
    if extra and strict:
        raise UnknownParameter(extra[0], extra)

    for name, value in descriptor.defaults.items():
        if name not in resolved:
            resolved[name] = value

    body = descriptor.sends_body
    required = {p.name for p in descriptor.required}
    values: dict[str, Any] = {}
    passthrough: dict[str, Any] = {}
    for name, value in resolved.items():
        spec = descriptor.param(name)
        if spec is None:
            text = _passthrough_text(value, multi_style)
            if text is not None:
                (passthrough if body else values)[name] = text
            continue
        wire = _normalize_value(spec, value, body=body, multi_style=multi_style)
        if wire is None:
            if name not in required:
                logger.debug("%s: dropping blank optional parameter %s", descriptor.name, name)
            continue
        values[name] = wire

    missing = [p.name for p in descriptor.required if p.name not in values]
    if missing:
        raise MissingRequiredParameter(missing[0], missing)

    path_names = descriptor.path_params
    path = {name: _path_text(values.pop(name)) for name in path_names}
    return NormalizedParameters(path=path, params=values, body=body, query=passthrough)


def _resolve_aliases(descriptor: EndpointDescriptor, args: Mapping[str, Any]) -> dict[str, Any]:
    """Rename alias keys to their canonical names, keeping the caller's order.

    A canonical key given alongside its alias wins.
    """
    aliases = descriptor.aliases
    resolved: dict[str, Any] = {}
    for key, value in args.items():
        canonical = aliases.get(key)
        if canonical is None:
            resolved[key] = value
        elif canonical not in args:
            resolved[canonical] = value
        else:
            logger.debug(
                "%s: ignoring alias %s in favor of %s", descriptor.name, key, canonical
            )
    return resolved


def _normalize_value(spec: ParamSpec, value: Any, *, body: bool, multi_style: str) -> Any:
    """Wire value for one declared parameter, or None if the value is blank."""
    if spec.multi:
        items = list(value) if isinstance(value, _SEQUENCES) else [value]
        scalars = [_coerce(spec, item) for item in items if not is_blank(item)]
        if not scalars:
            return None
        if body:
            return scalars
        texts = [_query_text(s) for s in scalars]
        return texts if multi_style == REPEAT else ",".join(texts)

    if isinstance(value, _SEQUENCES):
        items = [item for item in value if not is_blank(item)]
        if not items:
            return None
        if len(items) == 1:
            value = items[0]
        elif spec.type == STRING:
            value = " ".join(str(item).strip() for item in items)
        else:
            raise InvalidParameterValue(spec.name, value, "expected a single value")

    if is_blank(value):
        return None
    scalar = _coerce(spec, value)
    return scalar if body else _query_text(scalar)


def _coerce(spec: ParamSpec, value: Any) -> Scalar:
    if spec.name == "limit" and isinstance(value, str) and value.strip().lower() == "max":
        return MAX_LIMIT
    return coerce(spec.type, spec.name, value)


def _query_text(value: Scalar) -> Scalar:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _passthrough_text(value: Any, multi_style: str) -> str | list[str] | None:
    """Query text for an undeclared parameter, or None if the value is blank."""
    if isinstance(value, _SEQUENCES):
        texts = [str(_query_text(item)) for item in value if not is_blank(item)]
        if not texts:
            return None
        return texts if multi_style == REPEAT else ",".join(texts)
    if is_blank(value):
        return None
    return str(_query_text(value))


def _path_text(value: Any) -> str:
    if isinstance(value, list):
        value = ",".join(str(v) for v in value)
    return str(_query_text(value))
