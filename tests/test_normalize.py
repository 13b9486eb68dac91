"""Tests for argument normalization against endpoint descriptors."""

from __future__ import annotations

import pytest

from bookshare.errors import (
    InvalidEnumValue,
    InvalidParameterValue,
    MissingRequiredParameter,
    UnknownParameter,
)
from bookshare.formats.descriptor import endpoint
from bookshare.normalize import MAX_LIMIT, normalize
from bookshare.registry import EndpointRegistry


@pytest.fixture
def search():
    return endpoint(
        "search", "GET", "/things",
        optional={
            "title": "string",
            "author": "string",
            "format": "FormatType",
            "limit": "integer",
            "adult": "boolean",
            "year": "integer",
        },
        multi=["author"],
        aliases={"fmt": "format"},
    )


@pytest.fixture
def update():
    return endpoint(
        "update", "PUT", "/owners/{ownerId}/things/{thingId}",
        required={"ownerId": "string", "thingId": "string", "name": "string"},
        optional={"enabled": "boolean", "tags": "string", "limit": "integer"},
        multi=["tags"],
        defaults={"enabled": True},
    )


class TestAliases:
    def test_alias_rewritten(self, search) -> None:
        result = normalize(search, {"fmt": "EPUB3"})
        assert result.params == {"format": "EPUB3"}

    def test_canonical_wins(self, search) -> None:
        result = normalize(search, {"fmt": "EPUB3", "format": "DAISY"})
        assert result.params == {"format": "DAISY"}


class TestRequired:
    def test_first_missing_named(self, update) -> None:
        with pytest.raises(MissingRequiredParameter) as exc_info:
            normalize(update, {"ownerId": "o1"})
        assert exc_info.value.name == "thingId"
        assert exc_info.value.missing == ["thingId", "name"]

    def test_blank_required_is_missing(self, update) -> None:
        with pytest.raises(MissingRequiredParameter) as exc_info:
            normalize(update, {"ownerId": "o1", "thingId": "t1", "name": "   "})
        assert exc_info.value.name == "name"

    def test_message(self, update) -> None:
        with pytest.raises(MissingRequiredParameter, match="missing API parameter name"):
            normalize(update, {"ownerId": "o1", "thingId": "t1"})


class TestUnknown:
    def test_strict_rejects(self, search) -> None:
        with pytest.raises(UnknownParameter) as exc_info:
            normalize(search, {"title": "x", "color": "blue"})
        assert exc_info.value.name == "color"

    def test_lenient_passes_through(self, search) -> None:
        result = normalize(search, {"title": "x", "color": "blue"}, strict=False)
        assert result.params == {"title": "x", "color": "blue"}

    def test_lenient_values_become_query_text(self, search) -> None:
        result = normalize(search, {"flag": True, "page": 2, "ids": ["a", "b"], "none": None}, strict=False)
        assert result.params == {"flag": "true", "page": "2", "ids": "a,b"}
        assert result.query == {}

    def test_lenient_repeat_style(self, search) -> None:
        result = normalize(search, {"ids": ["a", False]}, strict=False, multi_style="repeat")
        assert result.params == {"ids": ["a", "false"]}

    def test_lenient_on_body_verb_goes_to_query(self, update) -> None:
        result = normalize(update, {"ownerId": "o", "thingId": "t", "name": "n", "flag": True}, strict=False)
        assert result.body is True
        assert "flag" not in result.params
        assert result.query == {"flag": "true"}


class TestDefaultsAndBlanks:
    def test_declared_default_applied(self, update) -> None:
        result = normalize(update, {"ownerId": "o", "thingId": "t", "name": "n"})
        assert result.params["enabled"] is True

    def test_caller_overrides_default(self, update) -> None:
        result = normalize(update, {"ownerId": "o", "thingId": "t", "name": "n", "enabled": "false"})
        assert result.params["enabled"] is False

    def test_blank_optionals_dropped(self, search) -> None:
        result = normalize(search, {"title": "", "author": [], "limit": None})
        assert result.params == {}


class TestCoercion:
    def test_query_boolean_is_text(self, search) -> None:
        assert normalize(search, {"adult": True}).params == {"adult": "true"}

    def test_body_boolean_is_json(self, update) -> None:
        result = normalize(update, {"ownerId": "o", "thingId": "t", "name": "n", "enabled": "TRUE"})
        assert result.body
        assert result.params["enabled"] is True

    def test_integer_from_text(self, search) -> None:
        assert normalize(search, {"year": "2001"}).params == {"year": 2001}

    def test_limit_max(self, search) -> None:
        assert normalize(search, {"limit": "max"}).params == {"limit": MAX_LIMIT}

    def test_invalid_enum(self, search) -> None:
        with pytest.raises(InvalidEnumValue):
            normalize(search, {"format": "MP3"})

    def test_invalid_integer(self, search) -> None:
        with pytest.raises(InvalidParameterValue):
            normalize(search, {"year": "last year"})


class TestSequences:
    def test_single_element_unwrapped(self, search) -> None:
        assert normalize(search, {"title": ["Dune"]}).params == {"title": "Dune"}

    def test_string_sequence_space_joined(self, search) -> None:
        assert normalize(search, {"title": ["War", "and", "Peace"]}).params == {
            "title": "War and Peace"
        }

    def test_non_string_sequence_rejected(self, search) -> None:
        with pytest.raises(InvalidParameterValue):
            normalize(search, {"year": [2001, 2002]})

    def test_multi_comma_joined(self, search) -> None:
        assert normalize(search, {"author": ["Smith", "Jones"]}).params == {
            "author": "Smith,Jones"
        }

    def test_multi_scalar_equals_single_element(self, search) -> None:
        assert normalize(search, {"author": "Smith"}) == normalize(search, {"author": ["Smith"]})

    def test_multi_repeat_style(self, search) -> None:
        result = normalize(search, {"author": ["Smith", "Jones"]}, multi_style="repeat")
        assert result.params == {"author": ["Smith", "Jones"]}

    def test_multi_in_body_is_list(self, update) -> None:
        result = normalize(
            update, {"ownerId": "o", "thingId": "t", "name": "n", "tags": ["a", "b"]}
        )
        assert result.params["tags"] == ["a", "b"]

    def test_unknown_multi_style(self, search) -> None:
        with pytest.raises(ValueError):
            normalize(search, {}, multi_style="semicolon")


class TestOrdering:
    def test_path_in_template_order(self, update) -> None:
        result = normalize(update, {"name": "n", "thingId": "t", "ownerId": "o"})
        assert list(result.path) == ["ownerId", "thingId"]
        assert result.path == {"ownerId": "o", "thingId": "t"}

    def test_params_keep_caller_order(self, search) -> None:
        result = normalize(search, {"limit": 5, "title": "x", "fmt": "BRF"})
        assert list(result.params) == ["limit", "title", "format"]

    def test_path_values_are_text(self, update) -> None:
        result = normalize(update, {"ownerId": 7, "thingId": "t", "name": "n"})
        assert result.path["ownerId"] == "7"


class TestCatalogEndpoints:
    def test_create_reading_list_bad_access(self, registry: EndpointRegistry) -> None:
        d = registry.lookup("create_reading_list")
        with pytest.raises(InvalidEnumValue):
            normalize(d, {"user": "u@example.org", "name": "Summer", "access": "invalid_value"})

    def test_get_titles_authors(self, registry: EndpointRegistry) -> None:
        d = registry.lookup("get_titles")
        result = normalize(d, {"author": ["Smith", "Jones"]})
        assert result.params == {"author": "Smith,Jones"}
        assert result.path == {}
