"""
Schema tree loading for the schema.org type graph.

The vocabulary is distributed as a JSON "schema tree" document:

    {
        "types": [{"name": "Person", "parent": ["Thing"]}, ...],
        "properties": [{"name": "givenName", "parent": ["Person"]}, ...]
    }

This module validates such documents against a JSON schema before turning
them into a TypeGraph, so structural problems surface as a single
SchemaLoadError instead of failing somewhere deep inside graph construction.
"""

import json
import logging
import os
from typing import Any, Dict

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..exceptions import SchemaLoadError
from .type_graph import TypeGraph

logger = logging.getLogger(__name__)

_ENTRY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "parent": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["name", "parent"],
}

SCHEMA_TREE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "types": {"type": "array", "items": _ENTRY_SCHEMA},
        "properties": {"type": "array", "items": _ENTRY_SCHEMA},
    },
    "required": ["types", "properties"],
}


def validate_schema_tree(data: Any) -> None:
    """
    Check that parsed schema tree data has the expected structure.

    Args:
        data: Parsed JSON content

    Raises:
        SchemaLoadError: If the data does not match SCHEMA_TREE_SCHEMA
    """
    try:
        json_validate(instance=data, schema=SCHEMA_TREE_SCHEMA)
    except JsonSchemaError as e:
        raise SchemaLoadError(f"Invalid schema tree: {e.message}") from e


def load_type_graph_from_dict(data: Any) -> TypeGraph:
    """
    Validate schema tree data and build a TypeGraph from it.

    Args:
        data: Parsed schema tree

    Returns:
        TypeGraph: The loaded graph

    Raises:
        SchemaLoadError: If the data is not a valid schema tree
    """
    validate_schema_tree(data)
    graph = TypeGraph.from_dict(data)
    logger.info(
        "Loaded schema graph with %d types and %d properties",
        len(graph.type_names),
        len(graph.property_names),
    )
    return graph


def load_type_graph(path: str) -> TypeGraph:
    """
    Load a TypeGraph from a schema tree JSON file.

    Args:
        path: Path to the schema tree file

    Returns:
        TypeGraph: The loaded graph

    Raises:
        SchemaLoadError: If the file is missing, is not valid JSON, or is not
            a valid schema tree
    """
    if not os.path.exists(path):
        raise SchemaLoadError(f"Schema tree file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in schema tree {path}: {e}") from e
    except OSError as e:
        raise SchemaLoadError(f"Unable to read schema tree {path}: {e}") from e

    logger.debug("Read schema tree from %s", path)
    return load_type_graph_from_dict(data)
