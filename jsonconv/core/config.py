# jsonconv/core/config.py
"""
Configuration errors and file loading for jsonconv.

Every configuration failure raised by the package derives from ConfigError,
so callers can catch one type. File loading lives here too: a converter
config can be read from YAML and handed to JsonConverterConfig as a flat
mapping of dotted keys.

Usage:
    from jsonconv.core.config import load_yaml, ConfigError

    props = load_yaml("converter.yaml")
    config = JsonConverterConfig(props)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from jsonconv.logging.logger import get_logger
from jsonconv.logging.tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigDefinitionError(ConfigError):
    """Raised when a schema itself is defined incorrectly (a programming error)."""

    pass


class ConfigValidationError(ConfigError):
    """
    Raised when supplied values don't satisfy the schema.

    Attributes:
        errors: Mapping of option name to error message, one per failing key.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Mapping[str, str]] = None,
        path: Optional[Path] = None,
    ):
        self.errors: Dict[str, str] = dict(errors or {})
        super().__init__(message, path=path)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


# =============================================================================
# Loading
# =============================================================================


def flatten_keys(data: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """
    Flatten nested mappings into dotted keys.

    Examples:
        >>> flatten_keys({"schemas": {"enable": False, "cache.size": 10}})
        {'schemas.enable': False, 'schemas.cache.size': 10}
    """
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_keys(value, full_key))
        else:
            flat[full_key] = value
    return flat


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML config file as a flat mapping of dotted keys.

    Args:
        path: Path to YAML file

    Returns:
        Flat dictionary of raw (unvalidated) config values

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root isn't a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    flat = flatten_keys(data)
    logger.debug(f"{CONFIG} Loaded {len(flat)} key(s) from {p}")
    return flat


__all__ = [
    "ConfigError",
    "ConfigDefinitionError",
    "ConfigValidationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "flatten_keys",
    "load_yaml",
]
