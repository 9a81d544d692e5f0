"""
Tests for object key validation.
"""

import pytest

from sdvalidation.core.graph import PropertyResolver
from sdvalidation.validation import (
    KeyValidator,
    normalize_key,
    normalize_types,
    validate_object_keys,
)


@pytest.fixture
def validator(graph):
    """Fixture providing a key validator over the sample graph."""
    return KeyValidator(graph)


def test_normalize_types():
    """Test normalization of type declarations."""
    assert normalize_types("Person") == ("Person",)
    assert normalize_types(["Person", "Place"]) == ("Person", "Place")
    assert normalize_types(("Person",)) == ("Person",)
    assert normalize_types({"@id": "x"}) is None
    assert normalize_types(None) is None


@pytest.mark.parametrize(
    "key, expected",
    [
        ("http://schema.org/name", "name"),
        ("query-input", "query"),
        ("https://schema.org/target-output", "target"),
        ("input", "input"),
        ("query-input-extra", "query-input-extra"),
    ],
)
def test_normalize_key(key, expected):
    """Test key cleaning and action constraint suffix removal."""
    assert normalize_key(key) == expected


def test_valid_keys(validator):
    """Test that allowed and inherited properties pass."""
    keys = ["@type", "http://schema.org/name", "http://schema.org/givenName"]

    assert validator.validate("Person", keys) == []


def test_unexpected_property(validator):
    """Test reporting of a property the type does not accept."""
    keys = ["@type", "http://schema.org/name", "http://schema.org/unknownProp"]

    assert validator.validate("Person", keys) == ['Unexpected property "unknownProp"']


def test_unexpected_properties_keep_key_order(validator):
    """Test that problems are reported in key order."""
    keys = ["http://schema.org/zeta", "http://schema.org/name", "alpha"]

    assert validator.validate("Thing", keys) == [
        'Unexpected property "zeta"',
        'Unexpected property "alpha"',
    ]


def test_keywords_are_ignored(validator):
    """Test that adding JSON-LD keywords never changes the outcome."""
    keys = ["http://schema.org/name", "http://schema.org/colour"]
    with_keywords = ["@id", "@type", *keys, "@context", "@bogus"]

    assert validator.validate("Thing", with_keywords) == validator.validate("Thing", keys)


def test_action_constraint_suffixes(validator):
    """Test that -input and -output suffixed keys match the bare property."""
    for key in ("query", "query-input", "query-output"):
        assert validator.validate("SearchAction", [f"http://schema.org/{key}"]) == []

    assert validator.validate("Person", ["http://schema.org/query-input"]) == [
        'Unexpected property "query"'
    ]


def test_multiple_types_union(validator):
    """Test that keys valid for any declared type are accepted."""
    keys = ["http://schema.org/givenName", "http://schema.org/legalName"]

    assert validator.validate(["Person", "Organization"], keys) == []
    assert validator.validate(["Person"], keys) == ['Unexpected property "legalName"']


def test_unknown_value_type(validator):
    """Test that a type declaration of the wrong shape is reported once."""
    assert validator.validate({"@id": "Person"}, ["http://schema.org/whatever"]) == [
        "Unknown value type"
    ]
    assert validator.validate(42, []) == ["Unknown value type"]


def test_unrecognized_schema_org_type(validator):
    """Test reporting of schema.org types missing from the graph."""
    assert validator.validate("https://schema.org/NotAType", ["http://schema.org/x"]) == [
        "Unrecognized schema.org type https://schema.org/NotAType"
    ]


def test_foreign_type_is_silently_skipped(validator):
    """Test that unknown types outside schema.org produce no messages."""
    keys = ["http://schema.org/anything"]

    assert validator.validate("SomeExternalVocabType", keys) == []
    assert validator.validate("http://example.com/Widget", keys) == []


def test_unknown_type_suppresses_property_checks(validator):
    """Test that property checks never run when any type is unknown."""
    keys = ["http://schema.org/unknownProp"]

    assert validator.validate(["Person", "http://schema.org/NotAType"], keys) == [
        "Unrecognized schema.org type http://schema.org/NotAType"
    ]
    assert validator.validate(["Person", "ExternalType"], keys) == []


def test_non_string_type_members(validator):
    """Test that non-string members of a type list are treated as foreign."""
    assert validator.validate(["Person", 7], ["http://schema.org/unknownProp"]) == []


def test_validate_object_keys_helper(graph):
    """Test the one-off helper with a graph and with a resolver."""
    keys = ["http://schema.org/unknownProp"]
    expected = ['Unexpected property "unknownProp"']

    assert validate_object_keys(graph, "Thing", keys) == expected
    assert validate_object_keys(PropertyResolver(graph), "Thing", keys) == expected
