"""Compiled-contract artifact models (read-only to this package)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArtifactDescriptor(BaseModel):
    """A Hardhat-style compiled artifact.

    Produced by the external compiler; never modified here.  Identity is
    ``contract_name``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    contract_name: str = Field(alias="contractName")
    source_name: str = Field(default="", alias="sourceName")
    abi: list[dict[str, Any]]
    bytecode: str = ""
    deployed_bytecode: str = Field(default="", alias="deployedBytecode")
    metadata: str | None = None
    path: Path | None = None

    @field_validator("bytecode", "deployed_bytecode", mode="before")
    @classmethod
    def _unwrap_bytecode_object(cls, value: Any) -> Any:
        # Foundry nests the hex under {"object": "0x..."}
        if isinstance(value, dict):
            return value.get("object", "")
        return value

    @field_validator("metadata", mode="before")
    @classmethod
    def _serialize_metadata(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return json.dumps(value)
        return value

    @property
    def compiler_version(self) -> str:
        """Compiler version from the embedded metadata, or ``"Unknown"``."""
        if not self.metadata:
            return "Unknown"
        try:
            parsed = json.loads(self.metadata)
        except ValueError:
            return "Unknown"
        if not isinstance(parsed, dict):
            return "Unknown"
        compiler = parsed.get("compiler")
        if isinstance(compiler, dict) and compiler.get("version"):
            return str(compiler["version"])
        return "Unknown"


class WrittenFile(BaseModel):
    """A generated output persisted to disk."""

    model_config = ConfigDict(frozen=True)

    kind: str  # "abi_json", "typescript", "javascript"
    path: Path
    size_bytes: int
    sha256: str
