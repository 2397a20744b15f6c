"""Main Typer application — imports and registers all CLI commands.

Entry point: ``bindforge`` (configured via pyproject.toml console_scripts).

Commands: extract, compile-and-extract.
"""

from __future__ import annotations

import typer

from bindforge.cli.commands.extract import compile_and_extract_cmd, extract_cmd

app = typer.Typer(
    name="bindforge",
    help="Bindforge: ABI extraction and TypeScript binding generation for compiled contracts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(
    name="extract",
    help="Extract the ABI and generate bindings from existing artifacts.",
)(extract_cmd)
app.command(
    name="compile-and-extract",
    help="Compile the contracts, then extract the ABI and generate bindings.",
)(compile_and_extract_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
