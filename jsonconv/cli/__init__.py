# jsonconv/cli/__init__.py
"""Command-line interface for jsonconv."""

from jsonconv.cli.cli import app

__all__ = ["app"]
