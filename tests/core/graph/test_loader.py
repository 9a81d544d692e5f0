"""
Tests for schema tree loading.
"""

import logging

import pytest

from sdvalidation.core.exceptions import SchemaLoadError
from sdvalidation.core.graph import (
    load_type_graph,
    load_type_graph_from_dict,
    validate_schema_tree,
)


def test_load_from_file(schema_tree_file):
    """Test loading a graph from a schema tree file."""
    graph = load_type_graph(schema_tree_file)

    assert graph.has_type("LocalBusiness")
    assert graph.declared_properties("Place") == ("address", "geo")


def test_load_logs_summary(schema_tree, caplog):
    """Test that loading reports the graph size."""
    with caplog.at_level(logging.INFO, logger="sdvalidation"):
        load_type_graph_from_dict(schema_tree)

    assert "11 types and 12 properties" in caplog.text


def test_load_missing_file(tmp_path):
    """Test loading from a path that does not exist."""
    with pytest.raises(SchemaLoadError, match="not found"):
        load_type_graph(str(tmp_path / "missing.json"))


def test_load_invalid_json(tmp_path):
    """Test loading a file that is not JSON."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SchemaLoadError, match="Invalid JSON"):
        load_type_graph(str(path))


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"types": []},
        {"types": [{"name": "Thing"}], "properties": []},
        {"types": [{"name": "", "parent": []}], "properties": []},
        {"types": [{"name": "Thing", "parent": [1]}], "properties": []},
        {"types": [], "properties": [{"name": "name", "parent": "Thing"}]},
    ],
)
def test_validate_schema_tree_rejects_bad_structure(data):
    """Test that malformed schema trees are rejected."""
    with pytest.raises(SchemaLoadError, match="Invalid schema tree"):
        validate_schema_tree(data)


def test_validate_schema_tree_accepts_sample(schema_tree):
    """Test that the sample schema tree is valid."""
    validate_schema_tree(schema_tree)
