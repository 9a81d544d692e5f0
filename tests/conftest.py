"""Shared test fixtures."""

import json
from typing import Any, Dict

import pytest

from sdvalidation.core.graph import TypeGraph


@pytest.fixture
def schema_tree() -> Dict[str, Any]:
    """Fixture providing a small schema tree with multiple inheritance and a cycle."""
    return {
        "types": [
            {"name": "Thing", "parent": []},
            {"name": "Person", "parent": ["Thing"]},
            {"name": "Organization", "parent": ["Thing"]},
            {"name": "Place", "parent": ["Thing"]},
            {"name": "LocalBusiness", "parent": ["Organization", "Place"]},
            {"name": "Action", "parent": ["Thing"]},
            {"name": "SearchAction", "parent": ["Action"]},
            {"name": "Empty", "parent": []},
            {"name": "CycleA", "parent": ["CycleB"]},
            {"name": "CycleB", "parent": ["CycleA"]},
            {"name": "Orphan", "parent": ["MissingParent"]},
        ],
        "properties": [
            {"name": "name", "parent": ["Thing"]},
            {"name": "url", "parent": ["Thing"]},
            {"name": "givenName", "parent": ["Person"]},
            {"name": "familyName", "parent": ["Person"]},
            {"name": "legalName", "parent": ["Organization"]},
            {"name": "address", "parent": ["Person", "Organization", "Place"]},
            {"name": "geo", "parent": ["Place"]},
            {"name": "target", "parent": ["Action"]},
            {"name": "query", "parent": ["SearchAction"]},
            {"name": "cycleProp", "parent": ["CycleA"]},
            {"name": "otherCycleProp", "parent": ["CycleB"]},
            {"name": "orphanProp", "parent": ["Orphan"]},
        ],
    }


@pytest.fixture
def graph(schema_tree) -> TypeGraph:
    """Fixture providing a type graph built from the sample schema tree."""
    return TypeGraph.from_dict(schema_tree)


@pytest.fixture
def schema_tree_file(tmp_path, schema_tree) -> str:
    """Fixture writing the sample schema tree to a file."""
    path = tmp_path / "schema-tree.json"
    path.write_text(json.dumps(schema_tree), encoding="utf-8")
    return str(path)
