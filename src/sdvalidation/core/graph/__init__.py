"""
Schema.org type graph: lookup, property resolution, and loading.
"""

from .loader import (
    SCHEMA_TREE_SCHEMA,
    load_type_graph,
    load_type_graph_from_dict,
    validate_schema_tree,
)
from .resolver import PropertyResolver, get_props_for_type
from .type_graph import SCHEMA_ORG_URL_REGEX, TypeGraph, clean_name, is_schema_org_name

__all__ = [
    "SCHEMA_ORG_URL_REGEX",
    "SCHEMA_TREE_SCHEMA",
    "PropertyResolver",
    "TypeGraph",
    "clean_name",
    "get_props_for_type",
    "is_schema_org_name",
    "load_type_graph",
    "load_type_graph_from_dict",
    "validate_schema_tree",
]
