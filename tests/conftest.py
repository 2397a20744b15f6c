"""Shared test fixtures for Bindforge."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from bindforge.core.event_bus import EventBus
from bindforge.core.stage_machine import RunStateMachine
from bindforge.models.config import ExtractionConfig

# The reference token contract: payable constructor, one view function,
# one nonpayable function and one event.
GCOTI_ABI: list[dict[str, Any]] = [
    {
        "inputs": [
            {"internalType": "address", "name": "initialOwner", "type": "address"},
            {"internalType": "address", "name": "recipient", "type": "address"},
            {"internalType": "uint256", "name": "totalSupply", "type": "uint256"},
        ],
        "stateMutability": "payable",
        "type": "constructor",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "from", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"},
        ],
        "name": "Transfer",
        "type": "event",
    },
    {
        "inputs": [],
        "name": "cap",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
        ],
        "name": "transfer",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

GCOTI_METADATA = json.dumps({"compiler": {"version": "0.8.19+commit.7dd6d404"}})


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def gcoti_abi() -> list[dict[str, Any]]:
    """A fresh copy of the gCOTI ABI."""
    return copy.deepcopy(GCOTI_ABI)


@pytest.fixture
def make_artifact() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build a Hardhat artifact dict with sensible defaults."""

    def _factory(
        contract_name: str = "gCOTI",
        abi: list[dict[str, Any]] | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        defaults: dict[str, Any] = {
            "_format": "hh-sol-artifact-1",
            "contractName": contract_name,
            "sourceName": f"contracts/{contract_name}.sol",
            "abi": copy.deepcopy(GCOTI_ABI) if abi is None else abi,
            "bytecode": "0x6080604052",
            "deployedBytecode": "0x608060",
            "linkReferences": {},
            "deployedLinkReferences": {},
        }
        defaults.update(overrides)
        return defaults

    return _factory


@pytest.fixture
def write_artifact(
    make_artifact: Callable[..., dict[str, Any]],
) -> Callable[..., Path]:
    """Factory fixture: write an artifact file under a root directory."""

    def _write(
        root: Path,
        relative_dir: str = "contracts/gCOTI.sol",
        contract_name: str = "gCOTI",
        **overrides: Any,
    ) -> Path:
        target_dir = root / relative_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / f"{contract_name}.json"
        artifact = make_artifact(contract_name, **overrides)
        path.write_text(json.dumps(artifact, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def artifacts_root(tmp_dir: Path, write_artifact: Callable[..., Path]) -> Path:
    """An artifact tree holding the gCOTI artifact at its Hardhat location."""
    root = tmp_dir / "artifacts"
    write_artifact(root, metadata=GCOTI_METADATA)
    return root


@pytest.fixture
def extraction_config(tmp_dir: Path, artifacts_root: Path) -> ExtractionConfig:
    """ExtractionConfig pointed at temp paths, compile step skipped."""
    return ExtractionConfig(
        contract_name="gCOTI",
        artifacts_dir=artifacts_root,
        output_dir=tmp_dir / "abi",
        skip_compile=True,
    )


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def state_machine(bus: EventBus) -> RunStateMachine:
    """Provide a RunStateMachine wired to a test event bus."""
    return RunStateMachine(bus)
