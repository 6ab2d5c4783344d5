# jsonconv/config/types.py
"""
Option types and presentation hints.

Each ConfigType maps to an annotated pydantic type that coerces raw input
(booleans from "true"/"false", integers from numeric strings, lists from
comma-separated strings) and rejects everything else.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Dict, List

from pydantic import BeforeValidator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


# =============================================================================
# Enums
# =============================================================================


class ConfigType(str, Enum):
    """Declared type of a configuration option."""

    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    STRING = "string"
    LIST = "list"


class Importance(str, Enum):
    """How much a user should care about an option."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Width(str, Enum):
    """Expected width of an option's value, used by UIs to size inputs."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


# =============================================================================
# Coercion
# =============================================================================


def _type_error(expected: str, value: Any) -> ValueError:
    return ValueError(
        f"Expected value to be {expected}, but it was a {type(value).__name__}"
    )


def _parse_boolean(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueError("Expected value to be either true or false")
    raise _type_error("either true or false", value)


def _int_parser(lower: int, upper: int, label: str):
    def parse(value: Any) -> Any:
        if isinstance(value, bool):
            raise _type_error(label, value)
        if isinstance(value, str):
            text = value.strip()
            if not _INT_PATTERN.match(text):
                raise ValueError(f"Expected value to be {label}, but it was '{value}'")
            value = int(text)
        if not isinstance(value, int):
            raise _type_error(label, value)
        if not lower <= value <= upper:
            raise ValueError(f"Expected value to be {label}, but {value} is out of range")
        return value

    return parse


def _parse_double(value: Any) -> Any:
    if isinstance(value, bool):
        raise _type_error("a double", value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise ValueError(f"Expected value to be a double, but it was '{value}'") from None
    if isinstance(value, (int, float)):
        return float(value)
    raise _type_error("a double", value)


def _parse_string(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    raise _type_error("a string", value)


def _parse_list(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip()
        return [item.strip() for item in text.split(",")] if text else []
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise ValueError("Expected value to be a list of strings")
        return list(value)
    raise _type_error("a comma-separated list", value)


FIELD_TYPES: Dict[ConfigType, Any] = {
    ConfigType.BOOLEAN: Annotated[bool, BeforeValidator(_parse_boolean)],
    ConfigType.INT: Annotated[
        int, BeforeValidator(_int_parser(INT32_MIN, INT32_MAX, "a 32-bit integer"))
    ],
    ConfigType.LONG: Annotated[
        int, BeforeValidator(_int_parser(INT64_MIN, INT64_MAX, "a 64-bit integer"))
    ],
    ConfigType.DOUBLE: Annotated[float, BeforeValidator(_parse_double)],
    ConfigType.STRING: Annotated[str, BeforeValidator(_parse_string)],
    ConfigType.LIST: Annotated[List[str], BeforeValidator(_parse_list)],
}


__all__ = [
    "ConfigType",
    "Importance",
    "Width",
    "FIELD_TYPES",
]
