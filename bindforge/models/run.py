"""Outcome of an extraction run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from bindforge.models.artifacts import WrittenFile
from bindforge.models.stages import RunState, StateTransition


class RunResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    run_id: str
    contract_name: str
    final_state: RunState
    artifact_path: Path | None = None
    written_files: list[WrittenFile] = []
    report: str = ""
    error: str | None = None
    error_type: str | None = None
    history: list[StateTransition] = []

    @property
    def succeeded(self) -> bool:
        return self.final_state == RunState.PERSISTED

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1
