"""Event bus — routes structured run events to subscribers.

Components publish ``RunEvent`` models; presentation (the CLI's
``ReportPrinter``) subscribes.  Every event is also logged at DEBUG.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bindforge.models.events import RunEvent, RunEventKind

logger = logging.getLogger(__name__)

EventHandler = Callable[[RunEvent], None]


class EventBus:
    """In-process publish/subscribe for ``RunEvent``.

    Handlers registered without a kind receive every event.
    """

    def __init__(self) -> None:
        self._handlers: dict[RunEventKind | None, list[EventHandler]] = {}
        self._events: list[RunEvent] = []

    def subscribe(self, handler: EventHandler, kind: RunEventKind | None = None) -> None:
        """Register a handler for one event kind, or for all kinds."""
        self._handlers.setdefault(kind, []).append(handler)

    def publish(self, event: RunEvent) -> None:
        """Record *event* and dispatch it to matching handlers in order."""
        self._events.append(event)
        logger.debug(
            "event=%s state=%s message=%s data=%s",
            event.kind.value,
            event.state.value,
            event.message,
            event.data,
        )
        for handler in self._handlers.get(event.kind, []):
            handler(event)
        for handler in self._handlers.get(None, []):
            handler(event)

    @property
    def events(self) -> list[RunEvent]:
        return list(self._events)

    def events_of(self, kind: RunEventKind) -> list[RunEvent]:
        return [e for e in self._events if e.kind == kind]
