"""CLI commands for MT5 Journal.

This package provides the command-line interface for importing MT5 deal
reports and reviewing the resulting journal.
"""

from mt5journal.cli.main import cli, main

__all__ = ["cli", "main"]
