"""Deterministic run state machine.

Enforces:
- Valid state transitions only (VALID_TRANSITIONS table)
- FAILED reachable from any non-terminal state
- Every transition recorded in the run history and published on the bus
"""

from __future__ import annotations

import logging

from bindforge.core.event_bus import EventBus
from bindforge.models.events import RunEvent, RunEventKind
from bindforge.models.stages import (
    VALID_TRANSITIONS,
    RunState,
    StateTransition,
)

logger = logging.getLogger(__name__)


class InvalidTransitionError(RuntimeError):
    """Raised when a requested state transition is not valid."""


class RunStateMachine:
    """Tracks the state of a single extraction run.

    Parameters
    ----------
    bus:
        Optional event bus; every transition is published as a
        ``STATE_CHANGED`` event.
    """

    def __init__(self, bus: EventBus | None = None) -> None:
        self._bus = bus
        self._state = RunState.IDLE
        self._history: list[StateTransition] = []

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def history(self) -> list[StateTransition]:
        return list(self._history)

    def transition(self, target: RunState, *, reason: str | None = None) -> StateTransition:
        """Move to *target*, recording and publishing the transition."""
        allowed = VALID_TRANSITIONS.get(self._state, set())
        if target not in allowed:
            raise InvalidTransitionError(
                f"Cannot transition from {self._state.value} to {target.value}. "
                f"Allowed: {sorted(s.value for s in allowed)}"
            )

        record = StateTransition(from_state=self._state, to_state=target, reason=reason)
        self._history.append(record)
        self._state = target
        logger.debug("Run state %s -> %s", record.from_state.value, target.value)

        if self._bus is not None:
            self._bus.publish(
                RunEvent(
                    kind=RunEventKind.STATE_CHANGED,
                    state=target,
                    message=f"{record.from_state.value}->{target.value}",
                    data={"reason": reason} if reason else {},
                )
            )
        return record

    def fail(self, reason: str) -> StateTransition:
        """Enter FAILED from the current (non-terminal) state."""
        return self.transition(RunState.FAILED, reason=reason)
