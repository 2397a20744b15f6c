"""Extraction run state machine models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RunState(str, Enum):
    """States of a single extraction run."""

    IDLE = "idle"
    COMPILING = "compiling"
    LOCATING = "locating"
    CLASSIFYING = "classifying"
    GENERATING = "generating"
    PERSISTED = "persisted"
    FAILED = "failed"


# Terminal states (PERSISTED, FAILED) have no outgoing transitions.
# IDLE -> LOCATING is the skip-compilation path.
VALID_TRANSITIONS: dict[RunState, set[RunState]] = {
    RunState.IDLE: {RunState.COMPILING, RunState.LOCATING, RunState.FAILED},
    RunState.COMPILING: {RunState.LOCATING, RunState.FAILED},
    RunState.LOCATING: {RunState.CLASSIFYING, RunState.FAILED},
    RunState.CLASSIFYING: {RunState.GENERATING, RunState.FAILED},
    RunState.GENERATING: {RunState.PERSISTED, RunState.FAILED},
    RunState.PERSISTED: set(),
    RunState.FAILED: set(),
}

TERMINAL_STATES: frozenset[RunState] = frozenset({RunState.PERSISTED, RunState.FAILED})


class StateTransition(BaseModel):
    """Records a single state transition for the run history."""

    model_config = ConfigDict(frozen=True)

    from_state: RunState
    to_state: RunState
    reason: str | None = None  # populated when entering FAILED
    at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
