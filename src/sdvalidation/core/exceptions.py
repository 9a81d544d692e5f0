"""
Custom exceptions for the structured-data validation system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle error conditions in a structured and meaningful way. Document-level
problems (unexpected properties, unrecognized types) are never raised; they are
reported as validation records. The exceptions below cover the vocabulary graph,
its loading, and configuration.
"""


class SchemaGraphError(Exception):
    """
    Raised when operations on the schema.org type graph fail.

    This is the base class for errors that originate from the vocabulary graph
    itself rather than from the document being validated.

    Examples:
        * Property resolution for a type the graph does not contain
        * Malformed schema tree data
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the system.

    Examples:
        * Type not found
        * Property not found
    """


class UnknownTypeError(ResourceNotFoundError, SchemaGraphError):
    """
    Raised when property resolution is requested for a type missing from the graph.

    The key validator always checks that a type exists before resolving its
    properties, so this error only reaches callers that use the resolver
    directly with an unchecked type name.

    Attributes:
        type_name (str): The type name (as given, possibly a full URL)
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f'Unable to get props for missing type "{type_name}"')


class SchemaLoadError(SchemaGraphError):
    """
    Raised when a schema tree cannot be read or does not have the expected shape.

    Examples:
        * Schema tree file does not exist
        * File content is not valid JSON
        * JSON content fails schema tree validation
    """

    def __str__(self) -> str:
        """Format schema load error message."""
        return f"Schema Load Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    This exception is raised when configuration issues are detected,
    such as unknown settings, invalid configuration values, or an
    unreadable configuration file.

    Examples:
        * Unknown configuration keys
        * Invalid configuration values
        * Missing configuration file
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"
