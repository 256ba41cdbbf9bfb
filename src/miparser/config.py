"""Configuration management for miparser.

Supports loading configuration from:
1. Environment variables (MIPARSER_*)
2. Config file (~/.miparser/config.yaml)
3. Default values

Example config file (~/.miparser/config.yaml):
    output:
      mode: summary
      indent: 4
    input:
      encoding: "utf-8"
    logging:
      level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".miparser" / "config.yaml",
    Path.home() / ".config" / "miparser" / "config.yaml",
    Path(".miparser.yaml"),
]

OUTPUT_MODES = ("formatted", "summary", "yaml", "json")


@dataclass
class OutputConfig:
    """Output configuration."""

    mode: str = "formatted"
    indent: int = 2


@dataclass
class InputConfig:
    """Input configuration."""

    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class MiparserConfig:
    """Main configuration for miparser."""

    output: OutputConfig = field(default_factory=OutputConfig)
    input: InputConfig = field(default_factory=InputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Skipping config file %s: %s", config_path, e)
                continue
            return data if isinstance(data, dict) else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MIPARSER_ prefix."""
    return os.environ.get(f"MIPARSER_{key}", default)


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config file section, or {} when it is missing or not a mapping."""
    section = file_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        logger.warning("Ignoring config section %r: expected a mapping, got %r", name, section)
        return {}
    return section


def _parse_indent(value: Any, default: int = 2) -> int:
    """Coerce an indent setting to int, falling back to the default."""
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid output indent %r, using %d", value, default)
        return default


def load_config() -> MiparserConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MIPARSER_*)
    2. Config file (~/.miparser/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config()

    # Output config
    output_config = _section(file_config, "output")
    mode = str(_get_env("OUTPUT_MODE") or output_config.get("mode", "formatted")).lower()
    if mode not in OUTPUT_MODES:
        logger.warning("Unknown output mode %r, using 'formatted'", mode)
        mode = "formatted"
    output = OutputConfig(
        mode=mode,
        indent=_parse_indent(_get_env("OUTPUT_INDENT") or output_config.get("indent", 2)),
    )

    # Input config
    input_config = _section(file_config, "input")
    input_ = InputConfig(
        encoding=_get_env("INPUT_ENCODING") or input_config.get("encoding", "utf-8"),
    )

    # Logging config
    logging_config = _section(file_config, "logging")
    logging_ = LoggingConfig(
        level=str(_get_env("LOG_LEVEL") or logging_config.get("level", "WARNING")).upper(),
    )

    return MiparserConfig(
        output=output,
        input=input_,
        logging=logging_,
    )


# Global config instance (lazy loaded)
_config: MiparserConfig | None = None


def get_config() -> MiparserConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
