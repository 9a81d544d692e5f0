"""Core vocabulary graph functionality."""

from .exceptions import (
    ConfigurationError,
    ResourceNotFoundError,
    SchemaGraphError,
    SchemaLoadError,
    UnknownTypeError,
)
from .models import PropertyNode, TypeNode, ValidationError
from .graph import (
    PropertyResolver,
    TypeGraph,
    clean_name,
    get_props_for_type,
    load_type_graph,
    load_type_graph_from_dict,
)
from .walker import iter_object, walk_object

__all__ = [
    "ConfigurationError",
    "PropertyNode",
    "PropertyResolver",
    "ResourceNotFoundError",
    "SchemaGraphError",
    "SchemaLoadError",
    "TypeGraph",
    "TypeNode",
    "UnknownTypeError",
    "ValidationError",
    "clean_name",
    "get_props_for_type",
    "iter_object",
    "load_type_graph",
    "load_type_graph_from_dict",
    "walk_object",
]
