"""
Validation of object keys against the types an object declares.

Given the declared type(s) of a JSON-LD node and the keys present on it, the
key validator reports every key that is not a property of any declared type
or of their ancestors.

Two outcomes are mutually exclusive: if any declared type cannot be found in
the graph, only unrecognized-type messages are produced and properties are
not checked at all.
"""

import logging
import re
from typing import Any, Iterable, List, Optional, Set, Tuple, Union

from ..core.graph import PropertyResolver, TypeGraph, clean_name, is_schema_org_name

logger = logging.getLogger(__name__)

UNKNOWN_VALUE_TYPE = "Unknown value type"

# Schema.org action input/output constraints, http://schema.org/docs/actions.html#part-4
ACTION_CONSTRAINT_SUFFIX_REGEX = re.compile(r"-(input|output)$")

TypeDeclaration = Union[str, List[Any], Tuple[Any, ...]]


def normalize_types(type_or_types: Any) -> Optional[Tuple[Any, ...]]:
    """
    Normalize a type declaration to a tuple of types.

    Args:
        type_or_types: A single type name or a list of type names

    Returns:
        Optional[Tuple[Any, ...]]: The declared types, or None when the value
        is neither a string nor a list
    """
    if isinstance(type_or_types, str):
        return (type_or_types,)
    if isinstance(type_or_types, (list, tuple)):
        return tuple(type_or_types)
    return None


def normalize_key(key: str) -> str:
    """Strip the schema.org prefix and any action constraint suffix from a key."""
    return ACTION_CONSTRAINT_SUFFIX_REGEX.sub("", clean_name(key))


class KeyValidator:
    """
    Checks object keys against the properties allowed for declared types.

    Attributes:
        graph (TypeGraph): The vocabulary graph
        resolver (PropertyResolver): Resolver used to build allow-lists
    """

    def __init__(self, graph: TypeGraph, resolver: Optional[PropertyResolver] = None):
        self.graph = graph
        self.resolver = resolver or PropertyResolver(graph)

    def validate(self, type_or_types: TypeDeclaration, keys: Iterable[str]) -> List[str]:
        """
        Validate keys of an object based on its type(s).

        Args:
            type_or_types: Declared type name or list of type names
            keys: Keys present on the object, in order

        Returns:
            List[str]: Error messages, empty when every key is allowed

        Example:
            >>> validator.validate("Person", ["@type", "http://schema.org/name"])
            []
        """
        types = normalize_types(type_or_types)
        if types is None:
            return [UNKNOWN_VALUE_TYPE]

        unknown_types = [t for t in types if self.graph.find_type(t) is None]
        if unknown_types:
            return self._unrecognized_type_errors(unknown_types)

        safelist = self.allowed_properties(types)

        errors = []
        for key in keys:
            # JSON-LD keywords were already checked by the JSON-LD validation step
            if key.startswith("@"):
                continue
            name = normalize_key(key)
            if name not in safelist:
                errors.append(f'Unexpected property "{name}"')
        return errors

    def allowed_properties(self, types: Iterable[str]) -> Set[str]:
        """
        Build the union of allowed properties for several types.

        Raises:
            UnknownTypeError: If any type is not in the graph
        """
        safelist: Set[str] = set()
        for type_name in types:
            safelist |= self.resolver.get_props_for_type(type_name)
        return safelist

    def _unrecognized_type_errors(self, unknown_types: List[Any]) -> List[str]:
        errors = []
        for type_name in unknown_types:
            if is_schema_org_name(type_name):
                errors.append(f"Unrecognized schema.org type {type_name}")
            else:
                logger.debug("Skipping non schema.org type %r", type_name)
        return errors


def validate_object_keys(
    graph_or_resolver: Union[TypeGraph, PropertyResolver],
    type_or_types: TypeDeclaration,
    keys: Iterable[str],
) -> List[str]:
    """
    Validate keys of an object based on its type(s).

    Convenience wrapper around KeyValidator for one-off checks.

    Args:
        graph_or_resolver: Graph to check against, or a resolver whose cache
            should be reused
        type_or_types: Declared type name or list of type names
        keys: Keys present on the object

    Returns:
        List[str]: Error messages
    """
    if isinstance(graph_or_resolver, PropertyResolver):
        validator = KeyValidator(graph_or_resolver.graph, graph_or_resolver)
    else:
        validator = KeyValidator(graph_or_resolver)
    return validator.validate(type_or_types, keys)
