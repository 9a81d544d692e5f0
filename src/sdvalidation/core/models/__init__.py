"""
Core domain models package for the structured-data validation system.

This package provides the vocabulary entries that make up the schema.org
type graph and the records reported by validation.
"""

from .base import normalize_parents, validate_name
from .report import ValidationError
from .vocabulary import PropertyNode, TypeNode

__all__ = [
    # Base utilities
    "normalize_parents",
    "validate_name",
    # Vocabulary models
    "TypeNode",
    "PropertyNode",
    # Report models
    "ValidationError",
]
