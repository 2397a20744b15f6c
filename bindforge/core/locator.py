"""Artifact locator — find and load compiled contract artifacts.

``find_artifact`` walks the artifact tree depth-first and returns the
first file whose name matches exactly.  Directory entries are visited in
sorted order so that the first match is reproducible across filesystems.
A missing tree or no match yields ``None``; it is up to the caller to
turn that into a user-facing "recompile and retry" condition.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from bindforge.core.errors import MalformedInterfaceError
from bindforge.models.artifacts import ArtifactDescriptor

logger = logging.getLogger(__name__)


def find_artifact(root_dir: Path | str, target_file_name: str) -> Path | None:
    """Return the path of the first file named *target_file_name* under *root_dir*."""
    root = Path(root_dir)
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("No artifact tree at %s", root)
        return None
    except OSError as exc:
        logger.warning("Cannot list %s: %s", root, exc)
        return None

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            found = find_artifact(entry.path, target_file_name)
            if found is not None:
                return found
        elif entry.name == target_file_name:
            return Path(entry.path)
    return None


def conventional_paths(root_dir: Path | str, contract_name: str) -> list[Path]:
    """Hardhat's usual artifact locations for a contract, most likely first."""
    root = Path(root_dir)
    filename = f"{contract_name}.json"
    return [
        root / "contracts" / f"{contract_name}.sol" / filename,
        root / "contracts" / f"{contract_name}.SOL" / filename,
        root / "contracts" / f"{contract_name}.sol" / f"{contract_name}.sol" / filename,
    ]


def locate_artifact(root_dir: Path | str, contract_name: str) -> Path | None:
    """Probe the conventional locations, then fall back to a full search."""
    for candidate in conventional_paths(root_dir, contract_name):
        try:
            found = candidate.is_file()
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", candidate, exc)
            continue
        if found:
            logger.debug("Artifact found at conventional path %s", candidate)
            return candidate

    logger.debug("Searching %s for %s.json", root_dir, contract_name)
    return find_artifact(root_dir, f"{contract_name}.json")


def load_artifact(path: Path | str) -> ArtifactDescriptor:
    """Parse an artifact file into an ``ArtifactDescriptor``.

    Raises
    ------
    MalformedInterfaceError
        If the file is not valid JSON, is not an object, or lacks an
        ``abi`` list.
    """
    artifact_path = Path(path)
    try:
        data = json.loads(artifact_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise MalformedInterfaceError(
            f"Cannot read artifact {artifact_path}: {exc}"
        ) from exc

    if not isinstance(data, dict):
        raise MalformedInterfaceError(
            f"Artifact {artifact_path} must be a JSON object, got {type(data).__name__}"
        )
    if not isinstance(data.get("abi"), list):
        raise MalformedInterfaceError(
            f"Artifact {artifact_path} has no abi list"
        )

    # Foundry artifacts omit contractName; the file stem is the contract.
    data.setdefault("contractName", artifact_path.stem)
    data["path"] = artifact_path

    try:
        return ArtifactDescriptor.model_validate(data)
    except ValidationError as exc:
        raise MalformedInterfaceError(
            f"Artifact {artifact_path} failed validation: {exc}"
        ) from exc
