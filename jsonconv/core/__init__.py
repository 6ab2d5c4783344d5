# jsonconv/core/__init__.py
"""
Core error hierarchy and config file loading.
"""

from .config import (
    ConfigDefinitionError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    flatten_keys,
    load_yaml,
)

__all__ = [
    "ConfigError",
    "ConfigDefinitionError",
    "ConfigValidationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "flatten_keys",
    "load_yaml",
]
