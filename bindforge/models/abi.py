"""Interface description (ABI) member models.

Each ABI entry is a tagged variant keyed on ``type``.  Only functions,
events and the constructor are typed; other tags (``error``, ``fallback``,
``receive``) travel through untouched in ``ClassifiedInterface.others``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

StateMutability = Literal["pure", "view", "nonpayable", "payable"]

READ_ONLY_MUTABILITIES: frozenset[str] = frozenset({"view", "pure"})


class ParamDescriptor(BaseModel):
    """A single input or output parameter.

    ``type`` is the Solidity type tag (``uint256``, ``address[]``,
    ``bytes32``, ``tuple`` ...).  Tuples carry their fields in
    ``components``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    type: str
    internal_type: str | None = Field(default=None, alias="internalType")
    indexed: bool | None = None
    components: list[ParamDescriptor] | None = None


class FunctionMember(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["function"] = "function"
    name: str
    inputs: list[ParamDescriptor] = []
    outputs: list[ParamDescriptor] = []
    state_mutability: StateMutability = Field(
        default="nonpayable", alias="stateMutability"
    )

    @property
    def is_read_only(self) -> bool:
        """Whether calling this function returns a decoded value (view/pure)."""
        return self.state_mutability in READ_ONLY_MUTABILITIES


class EventMember(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["event"] = "event"
    name: str
    inputs: list[ParamDescriptor] = []
    anonymous: bool = False


class ConstructorMember(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["constructor"] = "constructor"
    inputs: list[ParamDescriptor] = []
    state_mutability: StateMutability = Field(
        default="nonpayable", alias="stateMutability"
    )


class ClassifiedInterface(BaseModel):
    """Stable partition of an ABI into functions, events and constructor.

    ``raw`` keeps the verbatim member list so the serialized ABI can be
    emitted without re-deriving it from the typed projection.
    """

    model_config = ConfigDict(frozen=True)

    functions: list[FunctionMember] = []
    events: list[EventMember] = []
    constructor: ConstructorMember | None = None
    others: list[dict[str, Any]] = []
    raw: list[dict[str, Any]] = []
