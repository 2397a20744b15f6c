"""Error taxonomy for extraction runs.

Every component raises a ``BindforgeError`` subclass.  The Orchestrator
catches them at its boundary and converts them into a single FAILED
transition with one operator-facing message.  Nothing is retried.
"""

from __future__ import annotations

from pathlib import Path


class BindforgeError(RuntimeError):
    """Base class for all recoverable extraction failures."""

    remediation: str = ""

    def user_message(self) -> str:
        """Return the message shown to the operator, with remediation."""
        message = str(self)
        if self.remediation:
            message = f"{message}\n{self.remediation}"
        return message


class ArtifactNotFoundError(BindforgeError):
    """Raised when no compiled artifact matches the contract name."""

    def __init__(self, contract_name: str, search_root: Path) -> None:
        self.contract_name = contract_name
        self.search_root = Path(search_root)
        self.remediation = (
            "Please compile the contract first:\n"
            "   npx hardhat compile"
        )
        super().__init__(
            f"{contract_name} artifact not found under {self.search_root}."
        )


class MalformedInterfaceError(BindforgeError):
    """Raised when an artifact's interface description is structurally invalid."""

    remediation = "Fix the compiler output (the artifact's abi) and rerun the extraction."


class CompilationFailedError(BindforgeError):
    """Raised when the external compile step fails.

    The collaborator's diagnostics are carried verbatim.
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)

    def user_message(self) -> str:
        parts = [str(self)]
        if self.stderr.strip():
            parts.append(self.stderr.rstrip())
        elif self.stdout.strip():
            parts.append(self.stdout.rstrip())
        return "\n".join(parts)


class PersistenceFailedError(BindforgeError):
    """Raised when a generated output cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write {self.path}: {reason}")
