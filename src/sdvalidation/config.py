"""Configuration handling for sdvalidation."""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from .core.exceptions import ConfigurationError

CONFIG_PATH_ENV = "SDVALIDATION_CONFIG"
SCHEMA_TREE_ENV = "SDVALIDATION_SCHEMA_TREE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ValidatorConfig:
    """
    Validator configuration.

    Attributes:
        type_keyword (str): Key that declares a node's type in expanded JSON-LD
        schema_tree_path (Optional[str]): Schema tree file to load the graph from
        log_level (str): Logging level used by the command line interface
    """

    type_keyword: str = "@type"
    schema_tree_path: Optional[str] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration values after initialization."""
        if not isinstance(self.type_keyword, str) or not self.type_keyword:
            raise ConfigurationError("type_keyword must be a non-empty string")
        if self.schema_tree_path is not None and not isinstance(self.schema_tree_path, str):
            raise ConfigurationError("schema_tree_path must be a string")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidatorConfig":
        """Build configuration from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "ValidatorConfig":
        """Load configuration from YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Unable to read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "ValidatorConfig":
        """
        Load configuration from a file, the environment, or defaults.

        The file is ``path`` if given, else the file named by
        SDVALIDATION_CONFIG. Without either, defaults are used.
        SDVALIDATION_SCHEMA_TREE, when set, overrides ``schema_tree_path``.
        """
        config_path = path or os.environ.get(CONFIG_PATH_ENV)
        if config_path:
            if not os.path.exists(config_path):
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            config = cls.from_yaml(config_path)
        else:
            config = cls()

        schema_tree = os.environ.get(SCHEMA_TREE_ENV)
        if schema_tree:
            config.schema_tree_path = schema_tree
        return config
