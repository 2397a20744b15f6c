"""Environment-driven settings.

Centralized config using pydantic-settings.  Reads from a .env file and
BINDFORGE_* environment variables; CLI options override both.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bindforge.models.config import ExtractionConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BindforgeSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BINDFORGE_ARTIFACTS_DIR=build/artifacts
        export BINDFORGE_OUTPUT_DIR=generated/abi
        export BINDFORGE_LOG_LEVEL=DEBUG

    Or via .env file::

        BINDFORGE_COMPILE_COMMAND="npx hardhat compile --force"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BINDFORGE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"

    # Paths
    project_root: Path = Path(".")
    artifacts_dir: Path = Path("artifacts")
    output_dir: Path = Path("abi")

    # Default contract
    contract_name: str = "gCOTI"

    # Compile step
    compile_command: str = "npx hardhat compile"
    compile_timeout_seconds: int = 300

    # Generation
    embed_bytecode: bool = False
    emit_js_module: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def extraction_config(self, **overrides: object) -> ExtractionConfig:
        """Build a per-run ``ExtractionConfig``; ``None`` overrides are ignored.

        Relative ``artifacts_dir`` and ``output_dir`` resolve against
        ``project_root`` whether they come from settings or overrides.
        """
        for key in ("artifacts_dir", "output_dir"):
            value = overrides.get(key)
            if value is not None:
                overrides[key] = self.project_root / Path(str(value))

        values: dict[str, object] = {
            "contract_name": self.contract_name,
            "project_root": self.project_root,
            "artifacts_dir": self.project_root / self.artifacts_dir,
            "output_dir": self.project_root / self.output_dir,
            "compile_command": self.compile_command,
            "compile_timeout_seconds": self.compile_timeout_seconds,
            "embed_bytecode": self.embed_bytecode,
            "emit_js_module": self.emit_js_module,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ExtractionConfig(**values)
