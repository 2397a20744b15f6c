"""Human-readable contract report and run event presentation.

``render`` is pure formatting over the classifier output.  ``ReportPrinter``
is the single presentation layer: it prints reports with Rich and renders
the structured ``RunEvent`` stream published by the pipeline.

Color scheme
------------
- cyan      : section headers
- green     : persisted / written files
- red       : failures
- dim       : state transitions
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from bindforge.models.abi import ClassifiedInterface, ParamDescriptor
from bindforge.models.artifacts import ArtifactDescriptor
from bindforge.models.events import RunEvent, RunEventKind

SECTION_FUNCTIONS = "CONTRACT FUNCTIONS:"
SECTION_EVENTS = "CONTRACT EVENTS:"
SECTION_CONSTRUCTOR = "CONSTRUCTOR:"
SECTION_DETAILS = "CONTRACT DETAILS:"


# ---------------------------------------------------------------------------
# Pure formatting
# ---------------------------------------------------------------------------


def payload_size(hex_payload: str) -> int | float:
    """Size reported for a hex payload: ``len / 2 - 1``.

    The subtraction accounts for the ``0x`` prefix.  Odd lengths keep
    their fractional half.
    """
    size = len(hex_payload) / 2 - 1
    return int(size) if size.is_integer() else size


def _params(params: list[ParamDescriptor]) -> str:
    return ", ".join(f"{p.type} {p.name}" for p in params)


def _section(title: str) -> list[str]:
    return ["", title, "=" * len(title)]


def render(classified: ClassifiedInterface, artifact: ArtifactDescriptor) -> str:
    """Render function, event, constructor and size summaries as text."""
    lines: list[str] = []

    lines.extend(_section(SECTION_FUNCTIONS))
    for index, function in enumerate(classified.functions, start=1):
        outputs = (
            ", ".join(o.type for o in function.outputs) if function.outputs else "void"
        )
        lines.append(
            f"{index}. {function.name}({_params(function.inputs)}) -> {outputs} "
            f"({function.state_mutability})"
        )

    lines.extend(_section(SECTION_EVENTS))
    for index, event in enumerate(classified.events, start=1):
        lines.append(f"{index}. {event.name}({_params(event.inputs)})")

    lines.extend(_section(SECTION_CONSTRUCTOR))
    if classified.constructor is not None:
        lines.append(f"constructor({_params(classified.constructor.inputs)})")

    lines.extend(_section(SECTION_DETAILS))
    lines.append(f"Contract Name: {artifact.contract_name}")
    lines.append(f"Source Name: {artifact.source_name}")
    lines.append(f"Compiler Version: {artifact.compiler_version}")
    lines.append(f"Bytecode size: {payload_size(artifact.bytecode)} bytes")
    lines.append(
        f"Deployed bytecode size: {payload_size(artifact.deployed_bytecode)} bytes"
    )

    return "\n".join(lines).lstrip("\n") + "\n"


def render_abi(raw_abi: list[dict[str, Any]]) -> str:
    """Pretty-printed ABI JSON, as dumped by ``--show-abi``."""
    return json.dumps(raw_abi, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Rich presentation
# ---------------------------------------------------------------------------


class ReportPrinter:
    """Prints reports and run events to a Rich console.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    verbose:
        Also print state transitions.
    """

    _SECTIONS = {SECTION_FUNCTIONS, SECTION_EVENTS, SECTION_CONSTRUCTOR, SECTION_DETAILS}

    def __init__(self, console: Console | None = None, *, verbose: bool = False) -> None:
        self.console = console or Console()
        self.verbose = verbose

    def print_report(self, report: str) -> None:
        for line in report.splitlines():
            if line in self._SECTIONS:
                self.console.print(Text(line, style="bold cyan"))
            else:
                # Solidity array types look like Rich markup; print literally.
                self.console.print(Text(line))

    def print_abi(self, raw_abi: list[dict[str, Any]]) -> None:
        self.console.print(Text("CONTRACT ABI:", style="bold cyan"))
        self.console.print(Text(render_abi(raw_abi)))

    def handle_event(self, event: RunEvent) -> None:
        """Event bus subscriber — renders each event as it happens."""
        if event.kind == RunEventKind.STATE_CHANGED:
            if self.verbose:
                self.console.print(Text(f"[{event.message}]", style="dim"))
        elif event.kind == RunEventKind.ARTIFACT_FOUND:
            self.console.print(Text(f"Found artifact at: {event.data.get('path')}"))
        elif event.kind == RunEventKind.COMPILE_FINISHED:
            self.console.print(Text("Contract compiled successfully.", style="green"))
        elif event.kind == RunEventKind.REPORT_READY:
            self.print_report(event.data.get("report", ""))
        elif event.kind == RunEventKind.FILE_WRITTEN:
            self.console.print(
                Text(f"{event.message} saved to: {event.data.get('path')}", style="green")
            )
        elif event.kind == RunEventKind.RUN_COMPLETED:
            self.console.print(
                Panel(
                    Text(event.message, style="bold green"),
                    title="bindforge",
                    border_style="green",
                )
            )
        elif event.kind == RunEventKind.RUN_FAILED:
            # Failures are written to stderr by the CLI.
            return
        elif self.verbose and event.message:
            self.console.print(Text(event.message, style="dim"))
