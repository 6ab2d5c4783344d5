# jsonconv/config/validators.py
"""
Value validators attached to option definitions.

A validator runs after type coercion. It raises ValueError with a message
naming the option and the rejected value; ConfigDef collects those messages
into a ConfigValidationError.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List


class Validator:
    """Base class for option validators."""

    def ensure_valid(self, name: str, value: Any) -> None:
        raise NotImplementedError

    def __call__(self, name: str, value: Any) -> Any:
        self.ensure_valid(name, value)
        return value


class ValidString(Validator):
    """
    Accept only strings from a fixed allowed set (case-sensitive).

    Example:
        >>> ValidString(["BINARY", "TEXT"]).ensure_valid("fmt", "text")
        Traceback (most recent call last):
        ...
        ValueError: Invalid value text for configuration fmt: String must be one of: BINARY, TEXT
    """

    def __init__(self, allowed: Iterable[str]):
        self.allowed: List[str] = list(allowed)

    def ensure_valid(self, name: str, value: Any) -> None:
        if value not in self.allowed:
            raise ValueError(
                f"Invalid value {value} for configuration {name}: "
                f"String must be one of: {', '.join(self.allowed)}"
            )

    def __repr__(self) -> str:
        return f"ValidString({self.allowed!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(self.allowed) + "]"


def in_enum_names(names: Callable[[], Iterable[str]]) -> ValidString:
    """
    Build a ValidString from an enumeration's name-listing function.

    The function is called when the validator is built, i.e. while the schema
    is being defined, so new enum members are picked up without touching the
    schema.
    """
    return ValidString(names())


__all__ = ["Validator", "ValidString", "in_enum_names"]
