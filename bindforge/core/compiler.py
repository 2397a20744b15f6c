"""External compile step.

Compilation belongs to the contract toolchain (Hardhat by default).  The
Orchestrator only needs something satisfying the ``Compiler`` protocol;
``SubprocessCompiler`` shells out to the configured command and blocks
until it exits.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from bindforge.core.errors import CompilationFailedError

logger = logging.getLogger(__name__)


@runtime_checkable
class Compiler(Protocol):
    """Anything with a ``compile()`` method that raises on failure."""

    def compile(self) -> None:
        ...


class SubprocessCompiler:
    """Runs a compile command such as ``npx hardhat compile``.

    Parameters
    ----------
    command:
        Command line, split with ``shlex``.
    cwd:
        Working directory (the contract project root).  Defaults to the
        current directory.
    timeout_seconds:
        Upper bound on the compile run.
    """

    def __init__(
        self,
        command: str = "npx hardhat compile",
        *,
        cwd: Path | None = None,
        timeout_seconds: int = 300,
    ) -> None:
        self.command = command
        self.cwd = cwd
        self.timeout_seconds = timeout_seconds

    def compile(self) -> None:
        argv = shlex.split(self.command)
        if not argv:
            raise CompilationFailedError("No compile command configured")

        logger.info("Compiling: %s", self.command)
        try:
            result = subprocess.run(
                argv,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise CompilationFailedError(
                f"Compilation timed out after {self.timeout_seconds}s: {self.command}",
                stdout=_as_text(exc.stdout),
                stderr=_as_text(exc.stderr),
            ) from exc
        except OSError as exc:
            raise CompilationFailedError(
                f"Compilation could not start ({self.command}): {exc}"
            ) from exc

        if result.returncode != 0:
            raise CompilationFailedError(
                f"Compilation failed with exit code {result.returncode}: {self.command}",
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        logger.debug("Compiler output:\n%s", result.stdout)


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value
