"""Bindforge CLI — Typer-based command-line interface.

Provides the ``bindforge`` command with ``extract`` and
``compile-and-extract`` subcommands.

All output uses Rich for formatted terminal display.
"""
