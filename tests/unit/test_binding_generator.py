"""Tests for the TypeScript binding generator."""

from __future__ import annotations

import json
from typing import Any

import pytest

from bindforge.core.binding_generator import (
    PENDING_TRANSACTION,
    const_prefix,
    generate_binding,
    generate_js_module,
    param_name,
    type_prefix,
)
from bindforge.core.classifier import classify
from bindforge.core.hasher import sha256_hex
from bindforge.models.abi import ParamDescriptor


def _fn(name: str, mutability: str, inputs=(), outputs=()) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": n, "type": t} for n, t in outputs],
        "stateMutability": mutability,
    }


class TestNaming:
    @pytest.mark.parametrize(
        "name,expected", [("gCOTI", "GCOTI"), ("MyToken", "MyToken"), ("my-token", "My_token")]
    )
    def test_type_prefix(self, name: str, expected: str):
        assert type_prefix(name) == expected

    @pytest.mark.parametrize(
        "name,expected", [("gCOTI", "GCOTI"), ("MyToken", "MYTOKEN"), ("1inch", "_1INCH")]
    )
    def test_const_prefix(self, name: str, expected: str):
        assert const_prefix(name) == expected

    def test_unnamed_param_is_positional(self):
        assert param_name(ParamDescriptor(type="uint256"), 2) == "arg2"

    def test_reserved_param_name(self):
        assert param_name(ParamDescriptor(name="delete", type="bool"), 0) == "delete_"

    def test_from_is_a_legal_parameter(self):
        assert param_name(ParamDescriptor(name="from", type="address"), 0) == "from"


class TestFunctionSignatures:
    def test_view_single_output(self):
        binding = generate_binding(classify([_fn("cap", "view", outputs=[("", "uint256")])]), "T")
        assert "  cap(): Promise<bigint>;" in binding.interface_block

    def test_pure_multiple_outputs_is_tuple(self):
        abi = [_fn("pair", "pure", outputs=[("a", "uint8"), ("b", "address[]")])]
        binding = generate_binding(classify(abi), "T")
        assert "  pair(): Promise<[bigint, string[]]>;" in binding.interface_block

    def test_view_without_outputs_is_void(self):
        binding = generate_binding(classify([_fn("ping", "view")]), "T")
        assert "  ping(): Promise<void>;" in binding.interface_block

    @pytest.mark.parametrize("mutability", ["nonpayable", "payable"])
    def test_mutating_returns_pending_transaction(self, mutability: str):
        abi = [_fn("transfer", mutability, [("to", "address"), ("amount", "uint256")], [("", "bool")])]
        binding = generate_binding(classify(abi), "T")
        assert (
            f"  transfer(to: string, amount: bigint): Promise<{PENDING_TRANSACTION}>;"
            in binding.interface_block
        )

    def test_interface_header(self):
        binding = generate_binding(classify([]), "gCOTI")
        assert binding.interface_block.startswith(
            "export interface GCOTIContract extends ethers.Contract {"
        )
        assert binding.text.startswith(
            "// Generated TypeScript interface for gCOTI contract\n"
        )
        assert "import { ethers } from 'ethers';" in binding.text


class TestOptionalBlocks:
    def test_no_events_no_block(self):
        binding = generate_binding(classify([_fn("a", "view")]), "T")
        assert binding.events_block is None
        assert "TEvents" not in binding.text

    def test_no_constructor_no_params_type(self):
        binding = generate_binding(classify([]), "T")
        assert binding.constructor_block is None
        assert "ConstructorParams" not in binding.text
        assert "export type DeployT = (\n  signer: ethers.Signer\n) => Promise<TContract>;" in binding.text

    def test_bytecode_placeholder(self):
        binding = generate_binding(classify([]), "gCOTI")
        assert binding.bytecode_block.startswith('export const GCOTI_BYTECODE = "";')

    def test_bytecode_embedded(self):
        binding = generate_binding(classify([]), "gCOTI", bytecode="0x6080")
        assert binding.bytecode_block == 'export const GCOTI_BYTECODE = "0x6080";\n'


class TestDeterminism:
    def test_idempotent(self, gcoti_abi: list[dict[str, Any]]):
        first = generate_binding(classify(gcoti_abi), "gCOTI")
        second = generate_binding(classify(gcoti_abi), "gCOTI")
        assert first.text == second.text
        assert first.digest == second.digest == sha256_hex(first.text)

    def test_abi_constant_round_trip(self, gcoti_abi: list[dict[str, Any]]):
        binding = generate_binding(classify(gcoti_abi), "gCOTI")
        prefix = "export const GCOTI_ABI = "
        suffix = " as const;\n"
        block = binding.abi_constant_block
        assert block.startswith(prefix) and block.endswith(suffix)

        parsed = json.loads(block[len(prefix):-len(suffix)])
        assert parsed == gcoti_abi
        assert [list(m) for m in parsed] == [list(m) for m in gcoti_abi]
        assert json.loads(binding.abi_literal) == gcoti_abi

    def test_members_the_projection_drops_survive(self):
        error = {"type": "error", "name": "Unauthorized", "inputs": [{"name": "who", "type": "address"}]}
        binding = generate_binding(classify([error]), "T")
        assert json.loads(binding.abi_literal) == [error]

    def test_non_ascii_preserved(self):
        abi = [_fn("naïve", "view")]
        binding = generate_binding(classify(abi), "T")
        assert "naïve" in binding.abi_literal


class TestJsModule:
    def test_module_exports_abi(self, gcoti_abi: list[dict[str, Any]]):
        module = generate_js_module(gcoti_abi, "gCOTI")
        assert module.startswith("// gCOTI Contract ABI\nmodule.exports = ")
        body = module[len("// gCOTI Contract ABI\nmodule.exports = "):].rstrip()
        assert body.endswith(";")
        assert json.loads(body[:-1]) == gcoti_abi
