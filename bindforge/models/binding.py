"""Generated binding model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GeneratedBinding(BaseModel):
    """Text blocks of a generated TypeScript binding module.

    ``text`` is the concatenation written to disk; ``abi_literal`` is the
    verbatim serialized ABI embedded in ``abi_constant_block``.
    """

    model_config = ConfigDict(frozen=True)

    contract_name: str
    interface_block: str
    events_block: str | None = None
    constructor_block: str | None = None
    abi_constant_block: str
    bytecode_block: str
    deploy_block: str
    abi_literal: str
    text: str
    digest: str  # sha256 of text
