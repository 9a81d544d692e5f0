"""
Validation package for sdvalidation.

This package checks the keys of typed JSON-LD nodes against the schema.org
vocabulary and reports the problems it finds with their document paths.
"""

from .document import SchemaOrgValidator, validate_schema_org
from .keys import KeyValidator, normalize_key, normalize_types, validate_object_keys
from .result import ValidationResult

__all__ = [
    "KeyValidator",
    "SchemaOrgValidator",
    "ValidationResult",
    "normalize_key",
    "normalize_types",
    "validate_object_keys",
    "validate_schema_org",
]
