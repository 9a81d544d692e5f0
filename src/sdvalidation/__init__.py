"""
sdvalidation - schema.org validation for structured data

This package checks JSON-LD structured data in expanded form against the
schema.org vocabulary. It includes:

- A read-only type graph over schema.org types and properties
- Property resolution across (multiple) type inheritance
- Key validation for typed nodes
- Document validation with path-qualified reports
- A command line interface

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "sdvalidation Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("sdvalidation requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.graph import TypeGraph, load_type_graph
from .core.models import ValidationError
from .validation import SchemaOrgValidator, validate_schema_org

__all__ = [
    "SchemaOrgValidator",
    "TypeGraph",
    "ValidationError",
    "load_type_graph",
    "validate_schema_org",
]
