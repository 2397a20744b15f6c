"""TypeScript binding generator.

Turns a ``ClassifiedInterface`` into an ethers v6 flavoured TypeScript
module:

- ``<Type>Contract`` interface with one call signature per function.
  View/pure functions resolve to their decoded output; every other
  mutability resolves to a pending ``ethers.ContractTransactionResponse``.
- ``<Type>Events`` mapping each event name to its field record.
- ``<Type>ConstructorParams`` record when the ABI has a constructor.
- ``<CONST>_ABI`` holding the verbatim ABI JSON.
- ``<CONST>_BYTECODE`` and a ``Deploy<Type>`` factory signature.

Generation is a pure function of its inputs: the same ABI always yields
byte-identical text.
"""

from __future__ import annotations

import json
import re
from typing import Any

from bindforge.core.hasher import sha256_hex
from bindforge.core.type_mapper import map_type
from bindforge.models.abi import (
    ClassifiedInterface,
    EventMember,
    FunctionMember,
    ParamDescriptor,
)
from bindforge.models.binding import GeneratedBinding

PENDING_TRANSACTION = "ethers.ContractTransactionResponse"

# Reserved words that cannot name a TypeScript parameter.
_TS_RESERVED = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
}
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


def type_prefix(contract_name: str) -> str:
    """``gCOTI`` -> ``GCOTI``, ``my-token`` -> ``My_token``."""
    cleaned = re.sub(r"[^0-9A-Za-z_]", "_", contract_name) or "Contract"
    if cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    return cleaned[0].upper() + cleaned[1:]


def const_prefix(contract_name: str) -> str:
    """``gCOTI`` -> ``GCOTI``, ``MyToken`` -> ``MYTOKEN``."""
    cleaned = re.sub(r"[^0-9A-Za-z_]", "_", contract_name).upper() or "CONTRACT"
    if cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    return cleaned


def param_name(param: ParamDescriptor, position: int) -> str:
    """A valid TypeScript parameter name for *param*."""
    name = re.sub(r"[^0-9A-Za-z_$]", "_", param.name.strip())
    if not name:
        return f"arg{position}"
    if name[0].isdigit():
        name = f"_{name}"
    if name in _TS_RESERVED:
        name = f"{name}_"
    return name


def field_key(param: ParamDescriptor, position: int) -> str:
    """A record key for *param*; reserved words are legal property names."""
    if not param.name:
        return f"arg{position}"
    if _IDENTIFIER.match(param.name):
        return param.name
    return json.dumps(param.name)


# ---------------------------------------------------------------------------
# Signature rendering
# ---------------------------------------------------------------------------


def _parameter_list(params: list[ParamDescriptor]) -> str:
    return ", ".join(
        f"{param_name(p, i)}: {map_type(p.type)}" for i, p in enumerate(params)
    )


def output_type(function: FunctionMember) -> str:
    """Decoded return type of a read-only call."""
    if not function.outputs:
        return "void"
    if len(function.outputs) == 1:
        return map_type(function.outputs[0].type)
    return f"[{', '.join(map_type(o.type) for o in function.outputs)}]"


def function_signature(function: FunctionMember) -> str:
    if function.is_read_only:
        returns = output_type(function)
    else:
        returns = PENDING_TRANSACTION
    return f"{function.name}({_parameter_list(function.inputs)}): Promise<{returns}>;"


def event_record(event: EventMember) -> str:
    fields = ", ".join(
        f"{field_key(p, i)}: {map_type(p.type)}" for i, p in enumerate(event.inputs)
    )
    return f"{{ {fields} }}" if fields else "{}"


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


def _header(contract_name: str) -> str:
    return (
        f"// Generated TypeScript interface for {contract_name} contract\n"
        "// This file is auto-generated - do not edit manually\n"
        "import { ethers } from 'ethers';\n"
    )


def _interface_block(classified: ClassifiedInterface, prefix: str) -> str:
    lines = [f"export interface {prefix}Contract extends ethers.Contract {{"]
    lines.extend(f"  {function_signature(f)}" for f in classified.functions)
    lines.append("}")
    return "\n".join(lines) + "\n"


def _events_block(classified: ClassifiedInterface, prefix: str) -> str | None:
    if not classified.events:
        return None
    lines = [f"export interface {prefix}Events {{"]
    lines.extend(
        f"  {event.name}: {event_record(event)};" for event in classified.events
    )
    lines.append("}")
    return "\n".join(lines) + "\n"


def _constructor_block(classified: ClassifiedInterface, prefix: str) -> str | None:
    if classified.constructor is None:
        return None
    lines = [f"export type {prefix}ConstructorParams = {{"]
    lines.extend(
        f"  {field_key(p, i)}: {map_type(p.type)};"
        for i, p in enumerate(classified.constructor.inputs)
    )
    lines.append("};")
    return "\n".join(lines) + "\n"


def serialize_abi(raw_abi: list[dict[str, Any]]) -> str:
    """Verbatim, pretty-printed ABI JSON (member and key order preserved)."""
    return json.dumps(raw_abi, indent=2, ensure_ascii=False)


def _deploy_block(classified: ClassifiedInterface, prefix: str) -> str:
    params = ["signer: ethers.Signer"]
    if classified.constructor is not None:
        params.extend(
            f"{param_name(p, i)}: {map_type(p.type)}"
            for i, p in enumerate(classified.constructor.inputs)
        )
    body = ",\n".join(f"  {p}" for p in params)
    return (
        f"export type Deploy{prefix} = (\n{body}\n) => Promise<{prefix}Contract>;\n"
    )


def _bytecode_block(bytecode: str, const: str) -> str:
    if bytecode:
        return f"export const {const}_BYTECODE = {json.dumps(bytecode)};\n"
    return f'export const {const}_BYTECODE = ""; // Add bytecode here if needed\n'


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_binding(
    classified: ClassifiedInterface,
    contract_name: str,
    *,
    bytecode: str = "",
) -> GeneratedBinding:
    """Generate the TypeScript binding for *contract_name*.

    Parameters
    ----------
    classified:
        Output of ``classify``; its ``raw`` list is embedded verbatim.
    contract_name:
        Contract name used for the header and identifier prefixes.
    bytecode:
        Creation bytecode to embed in ``<CONST>_BYTECODE``.  Empty by
        default, leaving a placeholder.
    """
    prefix = type_prefix(contract_name)
    const = const_prefix(contract_name)

    abi_literal = serialize_abi(classified.raw)
    interface_block = _interface_block(classified, prefix)
    events_block = _events_block(classified, prefix)
    constructor_block = _constructor_block(classified, prefix)
    abi_constant_block = f"export const {const}_ABI = {abi_literal} as const;\n"
    bytecode_block = _bytecode_block(bytecode, const)
    deploy_block = _deploy_block(classified, prefix)

    blocks = [
        _header(contract_name),
        interface_block,
        events_block,
        constructor_block,
        abi_constant_block,
        bytecode_block,
        deploy_block,
    ]
    text = "\n".join(block for block in blocks if block is not None)

    return GeneratedBinding(
        contract_name=contract_name,
        interface_block=interface_block,
        events_block=events_block,
        constructor_block=constructor_block,
        abi_constant_block=abi_constant_block,
        bytecode_block=bytecode_block,
        deploy_block=deploy_block,
        abi_literal=abi_literal,
        text=text,
        digest=sha256_hex(text),
    )


def generate_js_module(raw_abi: list[dict[str, Any]], contract_name: str) -> str:
    """CommonJS module re-exporting the verbatim ABI."""
    return f"// {contract_name} Contract ABI\nmodule.exports = {serialize_abi(raw_abi)};\n"
