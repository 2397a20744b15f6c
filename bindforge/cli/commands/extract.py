"""``bindforge extract`` and ``bindforge compile-and-extract``.

Both commands drive the same Orchestrator; ``extract`` skips the compile
step.  Exit code 0 when the outputs are persisted, 1 on any failure with
the remediation message on stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from bindforge.config import BindforgeSettings
from bindforge.core.event_bus import EventBus
from bindforge.core.orchestrator import Orchestrator
from bindforge.models.run import RunResult
from bindforge.monitor.report import ReportPrinter

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _run_extraction(
    *,
    skip_compile: bool,
    contract: str | None,
    artifacts_dir: Path | None,
    output_dir: Path | None,
    embed_bytecode: bool,
    show_abi: bool,
    quiet: bool,
    verbose: bool,
) -> RunResult:
    try:
        settings = BindforgeSettings()
    except ValidationError as exc:
        err_console.print(Text("Invalid configuration:", style="bold red"))
        err_console.print(Text(str(exc)))
        raise typer.Exit(code=1) from exc

    _configure_logging("DEBUG" if verbose else settings.log_level)

    config = settings.extraction_config(
        contract_name=contract,
        artifacts_dir=artifacts_dir,
        output_dir=output_dir,
        embed_bytecode=True if embed_bytecode else None,
        skip_compile=skip_compile,
    )

    bus = EventBus()
    printer = ReportPrinter(console=console, verbose=verbose)
    if not quiet:
        bus.subscribe(printer.handle_event)

    orchestrator = Orchestrator(config=config, bus=bus)
    if not quiet:
        action = "Extracting" if skip_compile else "Compiling and extracting"
        console.print(Text(f"{action} {config.contract_name} ABI...", style="bold"))

    result = orchestrator.run()

    if show_abi and orchestrator.artifact is not None and not quiet:
        printer.print_abi(orchestrator.artifact.abi)

    if not result.succeeded:
        err_console.print(Text("ABI extraction failed:", style="bold red"))
        err_console.print(Text(result.error or "unknown error"))
    return result


_CONTRACT_OPTION = typer.Option(
    None, "--contract", "-c", help="Contract name (artifact <name>.json)."
)
_ARTIFACTS_OPTION = typer.Option(
    None, "--artifacts", "-a", help="Root of the compiled artifact tree."
)
_OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", help="Directory for the generated files."
)
_EMBED_OPTION = typer.Option(
    False,
    "--embed-bytecode",
    help="Embed the creation bytecode in the TypeScript binding.",
)
_SHOW_ABI_OPTION = typer.Option(False, "--show-abi", help="Print the full ABI JSON.")
_QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only report failures.")
_VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Show state transitions and debug logs."
)


def extract_cmd(
    contract: str = _CONTRACT_OPTION,
    artifacts_dir: Path = _ARTIFACTS_OPTION,
    output_dir: Path = _OUTPUT_OPTION,
    embed_bytecode: bool = _EMBED_OPTION,
    show_abi: bool = _SHOW_ABI_OPTION,
    quiet: bool = _QUIET_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Extract the ABI and generate bindings from existing artifacts."""
    result = _run_extraction(
        skip_compile=True,
        contract=contract,
        artifacts_dir=artifacts_dir,
        output_dir=output_dir,
        embed_bytecode=embed_bytecode,
        show_abi=show_abi,
        quiet=quiet,
        verbose=verbose,
    )
    raise typer.Exit(code=result.exit_code)


def compile_and_extract_cmd(
    contract: str = _CONTRACT_OPTION,
    artifacts_dir: Path = _ARTIFACTS_OPTION,
    output_dir: Path = _OUTPUT_OPTION,
    embed_bytecode: bool = _EMBED_OPTION,
    show_abi: bool = _SHOW_ABI_OPTION,
    quiet: bool = _QUIET_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Compile the contracts, then extract the ABI and generate bindings."""
    result = _run_extraction(
        skip_compile=False,
        contract=contract,
        artifacts_dir=artifacts_dir,
        output_dir=output_dir,
        embed_bytecode=embed_bytecode,
        show_abi=show_abi,
        quiet=quiet,
        verbose=verbose,
    )
    raise typer.Exit(code=result.exit_code)
