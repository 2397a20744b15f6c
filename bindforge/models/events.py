"""Structured run events published by the pipeline components."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bindforge.models.stages import RunState


class RunEventKind(str, Enum):
    STATE_CHANGED = "state_changed"
    COMPILE_SKIPPED = "compile_skipped"
    COMPILE_FINISHED = "compile_finished"
    ARTIFACT_FOUND = "artifact_found"
    INTERFACE_CLASSIFIED = "interface_classified"
    REPORT_READY = "report_ready"
    BINDING_GENERATED = "binding_generated"
    FILE_WRITTEN = "file_written"
    RUN_FAILED = "run_failed"
    RUN_COMPLETED = "run_completed"


class RunEvent(BaseModel):
    """One thing that happened during a run.

    Components describe *what* happened; the presentation layer decides
    how to display it.
    """

    model_config = ConfigDict(frozen=True)

    kind: RunEventKind
    state: RunState
    message: str = ""
    data: dict[str, Any] = {}
    timestamp_utc: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
