"""
Property resolution over the schema.org type graph.

A type accepts its own declared properties plus every property accepted by
any of its ancestors. This module computes that transitive closure by
climbing parent chains, guarding against revisits so that diamond-shaped
hierarchies and accidental cycles terminate.
"""

import logging
from threading import RLock
from typing import Dict, FrozenSet, Optional, Set

from ..exceptions import UnknownTypeError
from .type_graph import TypeGraph, clean_name

logger = logging.getLogger(__name__)


class PropertyResolver:
    """
    Resolves the full set of allowed properties for schema.org types.

    Results are cached per resolver. The graph is immutable, so cached
    entries never go stale.

    Attributes:
        graph (TypeGraph): The vocabulary graph to resolve against
        _cache (Dict[str, FrozenSet[str]]): Resolved properties by bare type name
        _lock (RLock): Guards cache writes
    """

    def __init__(self, graph: TypeGraph):
        self.graph = graph
        self._cache: Dict[str, FrozenSet[str]] = {}
        self._lock = RLock()

    def get_props_for_type(self, type_name: str) -> FrozenSet[str]:
        """
        Get every property valid for a type, including inherited ones.

        Args:
            type_name: Type name, optionally prefixed with a schema.org URL

        Returns:
            FrozenSet[str]: Bare property names; empty for a type with no
            properties and no parents

        Raises:
            UnknownTypeError: If the type is not in the graph
        """
        clean_type = clean_name(type_name)
        cached = self._cache.get(clean_type)
        if cached is not None:
            logger.debug("Property cache hit for type %r", clean_type)
            return cached

        if self.graph.find_type(clean_type) is None:
            raise UnknownTypeError(type_name)

        props = frozenset(self._collect(clean_type, set()))
        with self._lock:
            self._cache.setdefault(clean_type, props)
        return props

    def _collect(self, type_name: str, visited: Set[str]) -> Set[str]:
        """Collect properties of a type and its ancestors, skipping visited types."""
        if type_name in visited:
            return set()
        visited.add(type_name)

        type_node = self.graph.find_type(type_name)
        if type_node is None:
            logger.warning("Schema graph references missing parent type %r", type_name)
            return set()

        props = set(self.graph.declared_properties(type_name))
        for parent in type_node.parent:
            props |= self._collect(clean_name(parent), visited)
        return props

    def clear_cache(self) -> None:
        """Drop all cached resolutions."""
        with self._lock:
            self._cache.clear()


def get_props_for_type(
    graph: TypeGraph, type_name: str, resolver: Optional[PropertyResolver] = None
) -> FrozenSet[str]:
    """
    Get every property valid for a type without keeping a resolver around.

    Args:
        graph: The vocabulary graph
        type_name: Type name, optionally prefixed with a schema.org URL
        resolver: Optional resolver to reuse its cache

    Returns:
        FrozenSet[str]: Bare property names

    Raises:
        UnknownTypeError: If the type is not in the graph
    """
    resolver = resolver or PropertyResolver(graph)
    return resolver.get_props_for_type(type_name)
