"""
Read-only schema.org type graph.

This module provides the TypeGraph class, an immutable lookup structure over
the schema.org vocabulary. It holds two collections, types and properties,
indexed by their bare names, plus a reverse index from each type to the
properties declared directly on it.

The graph is built once and never mutated afterwards, so a single instance can
be shared by any number of validators, including validators running in
different threads.
"""

import logging
import re
from collections import defaultdict
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..models import PropertyNode, TypeNode

logger = logging.getLogger(__name__)

SCHEMA_ORG_URL_REGEX = re.compile(r"https?://schema\.org/")


def clean_name(uri: str) -> str:
    """Strip the schema.org URL prefix from a type or property name.

    Names without the prefix are returned unchanged, so the function is
    idempotent.

    Example:
        >>> clean_name("http://schema.org/Person")
        'Person'
        >>> clean_name("Person")
        'Person'
    """
    return SCHEMA_ORG_URL_REGEX.sub("", uri, count=1)


def is_schema_org_name(value: Any) -> bool:
    """Check whether a value looks like a schema.org URL."""
    return isinstance(value, str) and SCHEMA_ORG_URL_REGEX.search(value) is not None


class TypeGraph:
    """
    Immutable index over schema.org types and properties.

    Attributes:
        _types (Mapping[str, TypeNode]): Types by bare name
        _properties (Mapping[str, PropertyNode]): Properties by bare name
        _declared (Mapping[str, Tuple[str, ...]]): Property names declared
            directly on each type, in property order
    """

    def __init__(self, types: Iterable[TypeNode], properties: Iterable[PropertyNode]):
        """
        Build the graph from vocabulary entries.

        When a name occurs more than once, the first entry wins and the
        duplicate is logged.

        Args:
            types: Type entries
            properties: Property entries
        """
        type_index: Dict[str, TypeNode] = {}
        for type_node in types:
            if type_node.name in type_index:
                logger.warning("Duplicate type %r in schema graph ignored", type_node.name)
                continue
            type_index[type_node.name] = type_node

        property_index: Dict[str, PropertyNode] = {}
        declared: Dict[str, List[str]] = defaultdict(list)
        for prop in properties:
            if prop.name in property_index:
                logger.warning("Duplicate property %r in schema graph ignored", prop.name)
                continue
            property_index[prop.name] = prop
            for owner in prop.parent:
                declared[owner].append(prop.name)

        self._types: Mapping[str, TypeNode] = MappingProxyType(type_index)
        self._properties: Mapping[str, PropertyNode] = MappingProxyType(property_index)
        self._declared: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {owner: tuple(names) for owner, names in declared.items()}
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypeGraph":
        """
        Build a graph from the schema tree dictionary format.

        Args:
            data: Mapping with ``types`` and ``properties`` lists, each entry
                having a ``name`` and a ``parent`` list

        Returns:
            TypeGraph: The constructed graph

        Example:
            >>> graph = TypeGraph.from_dict({
            ...     "types": [{"name": "Thing", "parent": []}],
            ...     "properties": [{"name": "name", "parent": ["Thing"]}],
            ... })
            >>> graph.declared_properties("Thing")
            ('name',)
        """
        return cls(
            types=[TypeNode.from_dict(entry) for entry in data.get("types", [])],
            properties=[PropertyNode.from_dict(entry) for entry in data.get("properties", [])],
        )

    def find_type(self, type_name: str) -> Optional[TypeNode]:
        """
        Look up a type by bare name or schema.org URL.

        Args:
            type_name: Type name, optionally prefixed with a schema.org URL

        Returns:
            Optional[TypeNode]: The type if it exists, None otherwise
        """
        if not isinstance(type_name, str):
            return None
        return self._types.get(clean_name(type_name))

    def has_type(self, type_name: str) -> bool:
        """Check whether a type exists in the graph."""
        return self.find_type(type_name) is not None

    def find_property(self, property_name: str) -> Optional[PropertyNode]:
        """Look up a property by bare name or schema.org URL."""
        if not isinstance(property_name, str):
            return None
        return self._properties.get(clean_name(property_name))

    def declared_properties(self, type_name: str) -> Tuple[str, ...]:
        """
        Get the properties declared directly on a type.

        Inherited properties are not included; see PropertyResolver for the
        transitive closure.

        Args:
            type_name: Type name, optionally prefixed with a schema.org URL

        Returns:
            Tuple[str, ...]: Property names, empty if none are declared
        """
        return self._declared.get(clean_name(type_name), ())

    @property
    def type_names(self) -> Tuple[str, ...]:
        """Names of all types in the graph."""
        return tuple(self._types)

    @property
    def property_names(self) -> Tuple[str, ...]:
        """Names of all properties in the graph."""
        return tuple(self._properties)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and self.has_type(type_name)

    def __repr__(self) -> str:
        return f"TypeGraph(types={len(self._types)}, properties={len(self._properties)})"
