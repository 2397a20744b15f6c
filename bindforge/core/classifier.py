"""Interface classifier — stable partition of an ABI by member tag."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from bindforge.core.errors import MalformedInterfaceError
from bindforge.models.abi import (
    ClassifiedInterface,
    ConstructorMember,
    EventMember,
    FunctionMember,
)

logger = logging.getLogger(__name__)

_MEMBER_MODELS = {
    "function": FunctionMember,
    "event": EventMember,
    "constructor": ConstructorMember,
}


def classify(member_list: Any) -> ClassifiedInterface:
    """Partition *member_list* into functions, events and the constructor.

    Relative order within each partition matches the input.  Members with
    any other tag (``error``, ``fallback``, ``receive``) are collected in
    ``others`` verbatim.

    Raises
    ------
    MalformedInterfaceError
        If the input is not a list, a member is not an object or lacks its
        ``type`` tag, a typed member fails validation, or more than one
        constructor is present.
    """
    if not isinstance(member_list, list):
        raise MalformedInterfaceError(
            f"Interface description must be a list, got {type(member_list).__name__}"
        )

    functions: list[FunctionMember] = []
    events: list[EventMember] = []
    constructor: ConstructorMember | None = None
    others: list[dict[str, Any]] = []

    for index, member in enumerate(member_list):
        if not isinstance(member, dict):
            raise MalformedInterfaceError(
                f"Member #{index} must be an object, got {type(member).__name__}"
            )
        tag = member.get("type")
        if not isinstance(tag, str) or not tag:
            raise MalformedInterfaceError(f"Member #{index} is missing its type tag")

        model = _MEMBER_MODELS.get(tag)
        if model is None:
            others.append(member)
            continue

        try:
            parsed = model.model_validate(member)
        except ValidationError as exc:
            raise MalformedInterfaceError(
                f"Member #{index} ({tag}) is malformed: {exc}"
            ) from exc

        if isinstance(parsed, FunctionMember):
            functions.append(parsed)
        elif isinstance(parsed, EventMember):
            events.append(parsed)
        else:
            if constructor is not None:
                raise MalformedInterfaceError(
                    f"Member #{index} is a second constructor"
                )
            constructor = parsed

    logger.debug(
        "Classified %d members: %d functions, %d events, constructor=%s, %d other",
        len(member_list),
        len(functions),
        len(events),
        constructor is not None,
        len(others),
    )
    return ClassifiedInterface(
        functions=functions,
        events=events,
        constructor=constructor,
        others=others,
        raw=member_list,
    )
