"""Binding writer — persists generated outputs to disk.

Writes overwrite wholesale and parent directories are created on demand.
Writes are not transactional; regeneration is idempotent, so rerunning
repairs a partial write.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bindforge.core.errors import PersistenceFailedError
from bindforge.core.hasher import sha256_hex
from bindforge.models.artifacts import WrittenFile

logger = logging.getLogger(__name__)


class BindingWriter:
    """Writes text outputs and reports what was written."""

    def write_text(self, path: Path, content: str, *, kind: str) -> WrittenFile:
        target = Path(path)
        data = content.encode("utf-8")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise PersistenceFailedError(target, exc.strerror or str(exc)) from exc

        logger.debug("BindingWriter: wrote %d bytes to %s", len(data), target)
        return WrittenFile(
            kind=kind,
            path=target,
            size_bytes=len(data),
            sha256=sha256_hex(data),
        )
