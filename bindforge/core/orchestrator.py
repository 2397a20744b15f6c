"""Extraction orchestrator — the central coordinator for a bindforge run.

Sequences one run through the state machine:

    idle -> [compiling] -> locating -> classifying -> generating -> persisted

``skip_compile`` drops the compiling step.  Any ``BindforgeError`` raised
by a component is caught here and turned into a single FAILED transition
carrying one operator-facing message; ``run()`` itself does not raise
for those.  Nothing is retried.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from bindforge.core.binding_generator import generate_binding, generate_js_module
from bindforge.core.classifier import classify
from bindforge.core.compiler import Compiler, SubprocessCompiler
from bindforge.core.errors import ArtifactNotFoundError, BindforgeError
from bindforge.core.event_bus import EventBus
from bindforge.core.hasher import abi_fingerprint
from bindforge.core.locator import load_artifact, locate_artifact
from bindforge.core.stage_machine import RunStateMachine
from bindforge.core.writer import BindingWriter
from bindforge.models.abi import ClassifiedInterface
from bindforge.models.artifacts import ArtifactDescriptor, WrittenFile
from bindforge.models.binding import GeneratedBinding
from bindforge.models.config import ExtractionConfig
from bindforge.models.events import RunEvent, RunEventKind
from bindforge.models.run import RunResult
from bindforge.models.stages import RunState
from bindforge.monitor.report import render

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs one extraction.

    Parameters
    ----------
    config:
        Per-run configuration.  Uses defaults if not provided.
    compiler:
        External compile collaborator.  Defaults to a
        ``SubprocessCompiler`` running ``config.compile_command``.
    bus:
        Event bus for structured run events.  A private one is created if
        not provided.
    writer:
        Output writer.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        *,
        compiler: Compiler | None = None,
        bus: EventBus | None = None,
        writer: BindingWriter | None = None,
        run_id: str | None = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.compiler = compiler or SubprocessCompiler(
            self.config.compile_command,
            cwd=self.config.project_root,
            timeout_seconds=self.config.compile_timeout_seconds,
        )
        self.bus = bus or EventBus()
        self.writer = writer or BindingWriter()
        self.state_machine = RunStateMachine(self.bus)

        ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        self.run_id = run_id or f"bf-{ts}-{uuid.uuid4().hex[:3]}"

        self._artifact: ArtifactDescriptor | None = None
        self._report = ""
        self._written: list[WrittenFile] = []

    @property
    def artifact(self) -> ArtifactDescriptor | None:
        """The located artifact, once the locating step has succeeded."""
        return self._artifact

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def run(self) -> RunResult:
        """Execute the run to a terminal state and return its outcome."""
        if self.state_machine.state != RunState.IDLE:
            raise RuntimeError(f"Run {self.run_id} has already been executed")

        logger.info(
            "Run %s: extracting %s (skip_compile=%s)",
            self.run_id,
            self.config.contract_name,
            self.config.skip_compile,
        )
        try:
            self._compile()
            artifact = self._locate()
            classified = self._classify(artifact)
            binding = self._generate(artifact, classified)
            self._persist(artifact, binding)
        except BindforgeError as exc:
            return self._failed(exc)

        self._publish(
            RunEventKind.RUN_COMPLETED,
            "ABI extraction completed successfully!",
            files=[str(f.path) for f in self._written],
        )
        return self._result()

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _compile(self) -> None:
        if self.config.skip_compile:
            self._publish(RunEventKind.COMPILE_SKIPPED, "Compilation skipped")
            return

        self.state_machine.transition(RunState.COMPILING)
        self.compiler.compile()
        self._publish(RunEventKind.COMPILE_FINISHED, "Contract compiled")

    def _locate(self) -> ArtifactDescriptor:
        self.state_machine.transition(RunState.LOCATING)
        path = locate_artifact(self.config.artifacts_dir, self.config.contract_name)
        if path is None:
            raise ArtifactNotFoundError(self.config.contract_name, self.config.artifacts_dir)

        artifact = load_artifact(path)
        self._artifact = artifact
        self._publish(
            RunEventKind.ARTIFACT_FOUND,
            f"Found artifact at: {path}",
            path=str(path),
            abi_fingerprint=abi_fingerprint(artifact.abi),
        )
        return artifact

    def _classify(self, artifact: ArtifactDescriptor) -> ClassifiedInterface:
        self.state_machine.transition(RunState.CLASSIFYING)
        classified = classify(artifact.abi)
        self._publish(
            RunEventKind.INTERFACE_CLASSIFIED,
            f"{len(classified.functions)} functions, {len(classified.events)} events",
            functions=len(classified.functions),
            events=len(classified.events),
            has_constructor=classified.constructor is not None,
        )
        return classified

    def _generate(
        self, artifact: ArtifactDescriptor, classified: ClassifiedInterface
    ) -> GeneratedBinding:
        self.state_machine.transition(RunState.GENERATING)

        self._report = render(classified, artifact)
        self._publish(RunEventKind.REPORT_READY, "Report rendered", report=self._report)

        binding = generate_binding(
            classified,
            self.config.contract_name,
            bytecode=artifact.bytecode if self.config.embed_bytecode else "",
        )
        self._publish(
            RunEventKind.BINDING_GENERATED,
            "TypeScript binding generated",
            digest=binding.digest,
        )
        return binding

    def _persist(self, artifact: ArtifactDescriptor, binding: GeneratedBinding) -> None:
        outputs = [
            ("abi_json", "ABI", self.config.abi_path, binding.abi_literal),
            ("typescript", "TypeScript interface", self.config.interface_path, binding.text),
        ]
        if self.config.emit_js_module:
            outputs.append(
                (
                    "javascript",
                    "JavaScript module",
                    self.config.module_path,
                    generate_js_module(artifact.abi, self.config.contract_name),
                )
            )

        for kind, label, path, content in outputs:
            written = self.writer.write_text(path, content, kind=kind)
            self._written.append(written)
            self._publish(
                RunEventKind.FILE_WRITTEN,
                label,
                path=str(written.path),
                kind=kind,
                sha256=written.sha256,
            )

        self.state_machine.transition(RunState.PERSISTED)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _failed(self, exc: BindforgeError) -> RunResult:
        message = exc.user_message()
        logger.error("Run %s failed in %s: %s", self.run_id, self.state_machine.state.value, exc)
        self.state_machine.fail(message)
        self._publish(
            RunEventKind.RUN_FAILED,
            message,
            error_type=type(exc).__name__,
        )
        return self._result(error=message, error_type=type(exc).__name__)

    def _publish(self, kind: RunEventKind, message: str, /, **data: object) -> None:
        self.bus.publish(
            RunEvent(
                kind=kind,
                state=self.state_machine.state,
                message=message,
                data=data,
            )
        )

    def _result(
        self, *, error: str | None = None, error_type: str | None = None
    ) -> RunResult:
        return RunResult(
            run_id=self.run_id,
            contract_name=self.config.contract_name,
            final_state=self.state_machine.state,
            artifact_path=self._artifact.path if self._artifact else None,
            written_files=list(self._written),
            report=self._report,
            error=error,
            error_type=error_type,
            history=self.state_machine.history,
        )
