"""Command Line Interface for schema.org structured-data validation.

This module provides a CLI for checking expanded JSON-LD documents against a
schema.org type graph loaded from a schema tree file.

The CLI supports the following commands:
    - validate: Validate one or more expanded JSON-LD documents
    - props: List every property allowed for a type, inherited ones included

Documents can be provided either as a direct JSON string or as a file path
prefixed with '@'. The schema tree comes from --schema-tree, the
SDVALIDATION_SCHEMA_TREE environment variable, or the configuration file.

Exit status is 0 when every document conforms, 1 when problems were found,
and 2 when the inputs or configuration could not be used.

Example Usage:
    python -m sdvalidation validate --schema-tree schema-tree.json @page.jsonld
    python -m sdvalidation validate --format json '{"@type": "http://schema.org/Person"}'
    python -m sdvalidation props --schema-tree schema-tree.json Person
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional, Tuple

from .config import ValidatorConfig
from .core.exceptions import ConfigurationError, SchemaLoadError, UnknownTypeError
from .core.graph import PropertyResolver, TypeGraph, load_type_graph
from .validation import SchemaOrgValidator, ValidationResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       working directory.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file cannot be read.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Unable to read {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def setup_logging(level: str, verbosity: int = 0) -> None:
    """Configure root logging for CLI runs.

    Each -v lowers the configured level by one step, down to DEBUG.
    """
    numeric_level = getattr(logging, level)
    numeric_level = max(logging.DEBUG, numeric_level - 10 * verbosity)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_graph(config: ValidatorConfig) -> TypeGraph:
    """Load the type graph named by the configuration.

    Raises:
        ConfigurationError: If no schema tree path is configured.
        SchemaLoadError: If the schema tree cannot be loaded.
    """
    if not config.schema_tree_path:
        raise ConfigurationError(
            "No schema tree given; use --schema-tree or set SDVALIDATION_SCHEMA_TREE"
        )
    return load_type_graph(config.schema_tree_path)


def format_text(results: List[Tuple[str, ValidationResult]]) -> str:
    """Render results as one line per problem."""
    lines = []
    for source, result in results:
        for error in result.errors:
            lines.append(f"{source}: {error.path} {error.message}")
        for warning in result.warnings:
            lines.append(f"{source}: warning: {warning}")
    return "\n".join(lines)


def format_json(results: List[Tuple[str, ValidationResult]]) -> str:
    """Render results as a JSON list with one entry per document, in argument order."""
    return json.dumps(
        [
            {"source": source, "errors": [error.to_dict() for error in result.errors]}
            for source, result in results
        ],
        indent=2,
    )


def document_source(document: str, position: int) -> str:
    """Name a document argument for reports.

    Files are named by their path, inline JSON by its 1-based argument position.
    """
    if document.startswith("@"):
        return document[1:]
    return f"<argument {position}>"


def run_validate(args: argparse.Namespace, config: ValidatorConfig) -> int:
    """Validate every document given on the command line."""
    graph = load_graph(config)
    validator = SchemaOrgValidator(graph, config)

    results: List[Tuple[str, ValidationResult]] = []
    for position, document in enumerate(args.documents, start=1):
        source = document_source(document, position)
        data = parse_json_input(document)
        results.append((source, validator.validate_document(data, source=source)))

    output = format_json(results) if args.format == "json" else format_text(results)
    if output:
        print(output)

    return EXIT_OK if all(result.is_valid for _, result in results) else EXIT_INVALID


def run_props(args: argparse.Namespace, config: ValidatorConfig) -> int:
    """Print the allowed properties of a type, one per line."""
    graph = load_graph(config)
    resolver = PropertyResolver(graph)
    try:
        props = resolver.get_props_for_type(args.type)
    except UnknownTypeError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID

    for prop in sorted(props):
        print(prop)
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Schema.org structured data validator")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--schema-tree", help="Schema tree JSON file")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase logging verbosity"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate = subparsers.add_parser("validate", help="Validate expanded JSON-LD documents")
    validate.add_argument(
        "documents", nargs="+", help="JSON string or @filename of an expanded JSON-LD document"
    )
    validate.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    props = subparsers.add_parser("props", help="List the properties allowed for a type")
    props.add_argument("type", help="Type name or schema.org URL")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        config = ValidatorConfig.load(args.config)
        if args.schema_tree:
            config.schema_tree_path = args.schema_tree
        setup_logging(config.log_level, args.verbose)

        if args.command == "validate":
            return run_validate(args, config)
        return run_props(args, config)

    except (ConfigurationError, SchemaLoadError, ValueError) as e:
        logger.debug("CLI run failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
