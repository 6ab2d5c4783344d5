# tests/unit/test_decimal_format.py
"""Tests for DecimalFormat lookup."""

import pytest

from jsonconv.converter import DecimalFormat, UnknownFormatError


def test_names_list_current_members():
    assert DecimalFormat.names() == ["BINARY", "TEXT", "NUMERIC"]


def test_for_name_ignores_case():
    assert DecimalFormat.for_name("numeric") is DecimalFormat.NUMERIC
    assert DecimalFormat.for_name("TEXT") is DecimalFormat.TEXT


def test_for_name_never_falls_back():
    """A stale or unknown name must fail rather than default to BINARY."""
    with pytest.raises(UnknownFormatError) as exc_info:
        DecimalFormat.for_name("HEX")

    assert isinstance(exc_info.value, LookupError)
    assert "HEX" in str(exc_info.value)
    assert "NUMERIC" in str(exc_info.value)
