"""Pydantic models for endpoint descriptors (the calling contract of one API operation)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bookshare.errors import DescriptorError
from bookshare.formats.types import is_known_type

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

ANONYMOUS = "anonymous"
AUTHENTICATED = "authenticated"

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


class ParamSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = "string"  # scalar kind or enumeration name
    multi: bool = False


class EndpointDescriptor(BaseModel):
    """Static metadata describing one API operation's shape and validation rules."""

    model_config = ConfigDict(frozen=True)

    name: str
    method: str = "GET"
    path: str  # relative to the version prefix, e.g. /titles/{bookshareId}
    required: tuple[ParamSpec, ...] = ()
    optional: tuple[ParamSpec, ...] = ()
    aliases: dict[str, str] = Field(default_factory=dict)  # alternate -> canonical
    defaults: dict[str, Any] = Field(default_factory=dict)
    role: str = AUTHENTICATED
    reference_id: str | None = None  # anchor on the API documentation page
    topic: str = ""
    response: str = "StatusModel"
    synthetic: bool = False
    summary: str = ""

    @model_validator(mode="after")
    def _check_invariants(self) -> EndpointDescriptor:
        where = f"endpoint '{self.name}'"
        if self.method not in HTTP_METHODS:
            raise DescriptorError(f"{where}: unsupported HTTP method {self.method!r}")
        if self.role not in (ANONYMOUS, AUTHENTICATED):
            raise DescriptorError(f"{where}: unknown role {self.role!r}")

        required = [p.name for p in self.required]
        optional = [p.name for p in self.optional]
        names = required + optional
        if len(names) != len(set(names)):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise DescriptorError(f"{where}: parameters declared twice: {', '.join(dupes)}")

        for p in (*self.required, *self.optional):
            if not is_known_type(p.type):
                raise DescriptorError(f"{where}: parameter '{p.name}' has unknown type {p.type!r}")

        for alias, target in self.aliases.items():
            if target not in names:
                raise DescriptorError(f"{where}: alias '{alias}' targets undeclared '{target}'")
            if alias in names:
                raise DescriptorError(f"{where}: alias '{alias}' shadows a declared parameter")

        for placeholder in self.path_params:
            if placeholder not in required:
                raise DescriptorError(
                    f"{where}: path placeholder '{placeholder}' is not a required parameter"
                )

        for key in self.defaults:
            if key not in names:
                raise DescriptorError(f"{where}: default given for undeclared '{key}'")
        return self

    @property
    def path_params(self) -> list[str]:
        """Placeholder names in template order."""
        return _PLACEHOLDER_RE.findall(self.path)

    @property
    def sends_body(self) -> bool:
        return self.method in BODY_METHODS

    @property
    def requires_auth(self) -> bool:
        return self.role != ANONYMOUS

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in (*self.required, *self.optional)]

    def param(self, name: str) -> ParamSpec | None:
        for p in (*self.required, *self.optional):
            if p.name == name:
                return p
        return None


def endpoint(
    name: str,
    method: str,
    path: str,
    *,
    required: Mapping[str, str] | None = None,
    optional: Mapping[str, str] | None = None,
    multi: Iterable[str] = (),
    aliases: Mapping[str, str] | None = None,
    defaults: Mapping[str, Any] | None = None,
    role: str = AUTHENTICATED,
    reference_id: str | None = None,
    response: str = "StatusModel",
    synthetic: bool = False,
    summary: str = "",
    topic: str = "",
) -> EndpointDescriptor:
    """Build a descriptor from a compact declaration.

    *required* and *optional* map parameter names to type names in
    declaration order; names listed in *multi* accept one or more values.
    """
    multi = set(multi)
    declared = set(required or {}) | set(optional or {})
    if unknown := multi - declared:
        raise DescriptorError(
            f"endpoint '{name}': multi names undeclared parameters: {', '.join(sorted(unknown))}"
        )

    def specs(table: Mapping[str, str] | None) -> tuple[ParamSpec, ...]:
        return tuple(
            ParamSpec(name=n, type=t, multi=n in multi) for n, t in (table or {}).items()
        )

    return EndpointDescriptor(
        name=name,
        method=method.upper(),
        path=path,
        required=specs(required),
        optional=specs(optional),
        aliases=dict(aliases or {}),
        defaults=dict(defaults or {}),
        role=role,
        reference_id=reference_id,
        topic=topic,
        response=response,
        synthetic=synthetic,
        summary=summary,
    )
