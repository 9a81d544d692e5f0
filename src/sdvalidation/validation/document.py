"""
Schema.org validation of expanded JSON-LD documents.

The document validator walks an expanded JSON-LD tree, finds every node that
declares a type, checks that node's keys with the key validator, and
attaches the node's location to each reported problem.

Example:
    >>> graph = load_type_graph("schema-tree.json")
    >>> validator = SchemaOrgValidator(graph)
    >>> validator.validate({
    ...     "@type": "http://schema.org/Person",
    ...     "http://schema.org/colour": [{"@value": "red"}],
    ... })
    [ValidationError(path='/', message='Unexpected property "colour"')]
"""

import logging
from typing import Any, List, Optional

from ..config import ValidatorConfig
from ..core.graph import PropertyResolver, TypeGraph, clean_name
from ..core.models import ValidationError
from ..core.walker import iter_object
from .keys import KeyValidator
from .result import ValidationResult

logger = logging.getLogger(__name__)


class SchemaOrgValidator:
    """
    Validates expanded JSON-LD documents against a schema.org type graph.

    A validator holds no per-document state, so one instance can validate
    any number of documents, concurrently if needed.

    Attributes:
        graph (TypeGraph): The vocabulary graph
        config (ValidatorConfig): Validator settings
        key_validator (KeyValidator): Checks keys of individual nodes
    """

    def __init__(self, graph: TypeGraph, config: Optional[ValidatorConfig] = None):
        self.graph = graph
        self.config = config or ValidatorConfig()
        self.key_validator = KeyValidator(graph, PropertyResolver(graph))

    def validate(self, expanded: Any) -> List[ValidationError]:
        """
        Validate an expanded JSON-LD document.

        Args:
            expanded: Valid JSON-LD in expanded form, or None

        Returns:
            List[ValidationError]: Problems in traversal order, empty when
            the document conforms
        """
        errors: List[ValidationError] = []

        if expanded is None:
            return errors

        if isinstance(expanded, list) and len(expanded) == 1:
            expanded = expanded[0]

        for key, value, path, enclosing in iter_object(expanded):
            if key != self.config.type_keyword or not isinstance(enclosing, dict):
                continue

            # The type keyword declares the node type, it is not a property
            keys = [name for name in enclosing if name != self.config.type_keyword]
            messages = self.key_validator.validate(value, keys)
            # The last segment is the type keyword itself
            node_path = "/" + "/".join(clean_name(segment) for segment in path[:-1])
            for message in messages:
                errors.append(ValidationError(path=node_path, message=message))

        logger.debug("Schema.org validation found %d problem(s)", len(errors))
        return errors

    def validate_document(self, expanded: Any, source: Optional[str] = None) -> ValidationResult:
        """
        Validate a document and summarize the outcome.

        Args:
            expanded: Valid JSON-LD in expanded form, or None
            source: Optional name of the document, recorded in the context

        Returns:
            ValidationResult: Errors plus a warning when no node declares a type
        """
        errors = self.validate(expanded)
        warnings = []
        if not any(
            key == self.config.type_keyword for key, _, _, _ in iter_object(expanded)
        ):
            warnings.append("No type declarations found")

        context = {"type_keyword": self.config.type_keyword}
        if source is not None:
            context["source"] = source

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context=context,
        )


def validate_schema_org(expanded: Any, graph: TypeGraph) -> List[ValidationError]:
    """
    Validate an expanded JSON-LD document against a type graph.

    Args:
        expanded: Valid JSON-LD in expanded form, or None
        graph: The vocabulary graph

    Returns:
        List[ValidationError]: Problems in traversal order
    """
    return SchemaOrgValidator(graph).validate(expanded)
