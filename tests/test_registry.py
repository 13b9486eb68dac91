"""Tests for endpoint descriptors, the registry and the static catalog."""

from __future__ import annotations

import pytest

from bookshare.endpoints import TOPIC_MODULES, default_registry
from bookshare.errors import (
    DescriptorError,
    DuplicateEndpoint,
    RegistryFrozen,
    UnknownEndpoint,
)
from bookshare.formats.descriptor import ANONYMOUS, endpoint
from bookshare.formats.messages import SCHEMAS
from bookshare.registry import EndpointRegistry


def _sample(name: str = "get_thing", **kwargs):
    kwargs.setdefault("required", {"thingId": "string"})
    return endpoint(name, "GET", "/things/{thingId}", **kwargs)


# ── descriptor invariants ─────────────────────────────────────────


class TestDescriptor:
    def test_builder(self) -> None:
        d = _sample(optional={"limit": "integer"}, aliases={"id": "thingId"})
        assert d.method == "GET"
        assert d.path_params == ["thingId"]
        assert d.parameter_names == ["thingId", "limit"]
        assert d.param("limit").type == "integer"
        assert d.param("missing") is None
        assert d.requires_auth
        assert not d.sends_body

    def test_method_is_upper_cased(self) -> None:
        assert endpoint("x", "post", "/x").sends_body

    def test_anonymous_role(self) -> None:
        assert not _sample(role=ANONYMOUS).requires_auth

    def test_unsupported_method(self) -> None:
        with pytest.raises(DescriptorError, match="method"):
            endpoint("x", "HEAD", "/x")

    def test_name_in_required_and_optional(self) -> None:
        with pytest.raises(DescriptorError, match="twice"):
            _sample(optional={"thingId": "string"})

    def test_alias_targets_undeclared(self) -> None:
        with pytest.raises(DescriptorError, match="alias"):
            _sample(aliases={"id": "nope"})

    def test_alias_shadows_canonical(self) -> None:
        with pytest.raises(DescriptorError, match="shadows"):
            _sample(optional={"limit": "integer"}, aliases={"limit": "thingId"})

    def test_placeholder_must_be_required(self) -> None:
        with pytest.raises(DescriptorError, match="placeholder"):
            endpoint("x", "GET", "/things/{thingId}", optional={"thingId": "string"})

    def test_unknown_type(self) -> None:
        with pytest.raises(DescriptorError, match="unknown type"):
            _sample(optional={"size": "Widget"})

    def test_multi_names_undeclared(self) -> None:
        with pytest.raises(DescriptorError, match="multi"):
            _sample(multi=["author"])

    def test_default_for_undeclared(self) -> None:
        with pytest.raises(DescriptorError, match="default"):
            _sample(defaults={"enabled": True})


# ── registry ──────────────────────────────────────────────────────


class TestRegistry:
    def test_lookup_returns_what_was_registered(self) -> None:
        d = _sample()
        registry = EndpointRegistry([d])
        assert registry.lookup("get_thing") == d
        assert "get_thing" in registry
        assert len(registry) == 1

    def test_unknown_endpoint(self) -> None:
        registry = EndpointRegistry([_sample()])
        with pytest.raises(UnknownEndpoint) as exc_info:
            registry.lookup("get_nothing")
        assert exc_info.value.method_name == "get_nothing"
        assert exc_info.value.available == ["get_thing"]

    def test_duplicate_fails(self) -> None:
        registry = EndpointRegistry([_sample()])
        with pytest.raises(DuplicateEndpoint):
            registry.register(_sample(summary="again"))

    def test_override_replaces(self) -> None:
        registry = EndpointRegistry([_sample()])
        registry.register(_sample(summary="again"), override=True)
        assert registry.lookup("get_thing").summary == "again"

    def test_frozen_rejects_registration(self) -> None:
        registry = EndpointRegistry([_sample()]).freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozen):
            registry.register(_sample("get_other"))

    def test_listing_filters(self) -> None:
        registry = EndpointRegistry(
            [
                _sample("a", topic="One"),
                _sample("b", topic="Two"),
                _sample("c", topic="One", synthetic=True),
            ]
        )
        assert [d.name for d in registry.endpoints()] == ["a", "b"]
        assert [d.name for d in registry.endpoints(synthetic=True)] == ["a", "b", "c"]
        assert [d.name for d in registry.endpoints(synthetic="only")] == ["c"]
        assert [d.name for d in registry.endpoints(topic="One")] == ["a"]
        assert registry.topics() == ["One", "Two"]


# ── catalog ───────────────────────────────────────────────────────


class TestCatalog:
    def test_default_registry_is_frozen_and_fresh(self) -> None:
        first = default_registry()
        second = default_registry()
        assert first.frozen
        assert first is not second
        assert list(first) == list(second)

    def test_every_declaration_is_registered(self, registry: EndpointRegistry) -> None:
        declared = sum(len(m.ENDPOINTS) for m in TOPIC_MODULES)
        assert len(registry) == declared

    def test_every_response_schema_exists(self, registry: EndpointRegistry) -> None:
        for name in registry:
            assert registry.lookup(name).response in SCHEMAS, name

    def test_topics(self, registry: EndpointRegistry) -> None:
        assert registry.topics() == [
            "Titles",
            "Periodicals",
            "ReadingLists",
            "ActiveTitles",
            "AssignedTitles",
            "UserAccount",
            "MembershipUserAccounts",
            "MembershipActiveTitles",
            "MembershipOrganizations",
        ]

    def test_synthetic_operations(self, registry: EndpointRegistry) -> None:
        names = {d.name for d in registry.endpoints(synthetic="only")}
        assert names == {
            "get_artifact_metadata",
            "get_periodical_edition",
            "get_reading_list",
            "unsubscribe_my_reading_list",
            "get_retrieval",
        }

    def test_reading_list_subscription_defaults(self, registry: EndpointRegistry) -> None:
        assert registry.lookup("subscribe_my_reading_list").defaults == {"enabled": True}
        assert registry.lookup("unsubscribe_my_reading_list").defaults == {"enabled": False}

    def test_membership_calls_accept_user_alias(self, registry: EndpointRegistry) -> None:
        for d in registry.endpoints(topic="MembershipUserAccounts"):
            if d.param("userIdentifier") is not None:
                assert d.aliases.get("user") == "userIdentifier", d.name

    def test_get_titles_multi_parameters(self, registry: EndpointRegistry) -> None:
        d = registry.lookup("get_titles")
        multi = {p.name for p in d.optional if p.multi}
        assert {"author", "narrator", "categories"} <= multi
        assert d.role == ANONYMOUS
