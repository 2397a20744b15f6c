"""Bindforge data models — all Pydantic v2, all frozen (immutable)."""

from bindforge.models.abi import (
    ClassifiedInterface,
    ConstructorMember,
    EventMember,
    FunctionMember,
    ParamDescriptor,
)
from bindforge.models.artifacts import ArtifactDescriptor, WrittenFile
from bindforge.models.binding import GeneratedBinding
from bindforge.models.config import ExtractionConfig
from bindforge.models.events import RunEvent, RunEventKind
from bindforge.models.run import RunResult
from bindforge.models.stages import VALID_TRANSITIONS, RunState, StateTransition

__all__ = [
    # abi
    "ParamDescriptor",
    "FunctionMember",
    "EventMember",
    "ConstructorMember",
    "ClassifiedInterface",
    # artifacts
    "ArtifactDescriptor",
    "WrittenFile",
    # binding
    "GeneratedBinding",
    # config
    "ExtractionConfig",
    # events
    "RunEvent",
    "RunEventKind",
    # run
    "RunResult",
    # stages
    "RunState",
    "StateTransition",
    "VALID_TRANSITIONS",
]
