"""
Vocabulary models for the schema.org type graph.

This module defines the two kinds of entries that make up the graph:
types, whose parents are their direct supertypes, and properties, whose
parents are the types the property may be used on.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .base import normalize_parents, validate_name


@dataclass(frozen=True)
class TypeNode:
    """
    A schema.org type.

    Attributes:
        name (str): Bare type name, without any schema.org URL prefix
        parent (Tuple[str, ...]): Direct supertypes, in declaration order.
            Multiple inheritance is allowed.
    """

    name: str
    parent: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate the type entry after initialization."""
        validate_name("type", self.name)
        object.__setattr__(self, "parent", normalize_parents("type", self.name, self.parent))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeNode":
        """Build a type entry from its schema tree representation."""
        return cls(name=data["name"], parent=data.get("parent", ()))


@dataclass(frozen=True)
class PropertyNode:
    """
    A schema.org property.

    Unlike TypeNode, ``parent`` is not a class hierarchy: it lists every type
    the property is declared valid on.

    Attributes:
        name (str): Bare property name
        parent (Tuple[str, ...]): Types this property belongs to
    """

    name: str
    parent: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate the property entry after initialization."""
        validate_name("property", self.name)
        object.__setattr__(self, "parent", normalize_parents("property", self.name, self.parent))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyNode":
        """Build a property entry from its schema tree representation."""
        return cls(name=data["name"], parent=data.get("parent", ()))
