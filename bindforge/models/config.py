"""Per-run extraction configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ExtractionConfig(BaseModel):
    """Configuration for one extraction run.

    Output paths are derived from ``output_dir`` and the contract name
    unless given explicitly.
    """

    model_config = ConfigDict(frozen=True)

    contract_name: str = "gCOTI"
    project_root: Path = Path(".")
    artifacts_dir: Path = Path("artifacts")
    output_dir: Path = Path("abi")
    abi_filename: str | None = None
    interface_filename: str | None = None
    module_filename: str | None = None
    emit_js_module: bool = True
    skip_compile: bool = False
    embed_bytecode: bool = False
    compile_command: str = "npx hardhat compile"
    compile_timeout_seconds: int = 300

    @property
    def abi_path(self) -> Path:
        return self.output_dir / (self.abi_filename or f"{self.contract_name}-abi.json")

    @property
    def interface_path(self) -> Path:
        return self.output_dir / (
            self.interface_filename or f"{self.contract_name}-interface.ts"
        )

    @property
    def module_path(self) -> Path:
        return self.output_dir / (self.module_filename or f"{self.contract_name}-abi.js")
