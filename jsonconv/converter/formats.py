# jsonconv/converter/formats.py
"""Decimal serialization formats understood by the JSON converter."""

from __future__ import annotations

from enum import Enum
from typing import List


class UnknownFormatError(LookupError):
    """Raised when a name doesn't match any DecimalFormat member."""

    pass


class DecimalFormat(str, Enum):
    """How decimal values are written to (and read from) JSON."""

    BINARY = "BINARY"  # base64-encoded unscaled bytes
    TEXT = "TEXT"  # JSON string, e.g. "2.345"
    NUMERIC = "NUMERIC"  # JSON number, e.g. 2.345

    @classmethod
    def names(cls) -> List[str]:
        """Names of the current members, in declaration order."""
        return [member.name for member in cls]

    @classmethod
    def for_name(cls, name: str) -> DecimalFormat:
        """
        Look up a member by name (case-insensitive).

        Raises:
            UnknownFormatError: If no member has that name
        """
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise UnknownFormatError(
                f"Unknown decimal format: {name!r}. Available: {cls.names()}"
            ) from None


__all__ = ["DecimalFormat", "UnknownFormatError"]
