"""
Core domain models base module for the structured-data validation system.

This module provides validation helpers shared by the vocabulary models.
"""

from typing import Any, Iterable, Tuple


def validate_name(kind: str, name: Any) -> None:
    """Validate that a vocabulary entry name is a non-empty string."""
    if not isinstance(name, str):
        raise TypeError(f"{kind} name must be a string")
    if not name.strip():
        raise ValueError(f"{kind} name must be a non-empty string")


def normalize_parents(kind: str, name: str, parents: Iterable[Any]) -> Tuple[str, ...]:
    """Convert a parent list to a tuple, rejecting non-string entries."""
    if isinstance(parents, str):
        raise TypeError(f"parent of {kind} {name!r} must be a sequence, not a string")
    normalized = tuple(parents)
    for parent in normalized:
        if not isinstance(parent, str):
            raise TypeError(f"parent entries of {kind} {name!r} must be strings")
    return normalized
