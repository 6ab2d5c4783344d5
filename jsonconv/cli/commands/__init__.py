# jsonconv/cli/commands/__init__.py
"""CLI command implementations (imported lazily by jsonconv.cli.cli)."""
