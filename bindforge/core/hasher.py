"""Hashing helpers for generated outputs."""

from __future__ import annotations

import hashlib
import json
from typing import Any


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes — deterministic, sorted, compact."""
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def sha256_hex(data: bytes | str) -> str:
    """Return the SHA-256 hex digest of raw bytes (str is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def abi_fingerprint(abi: list[dict[str, Any]]) -> str:
    """Content address of an ABI, insensitive to key order within members."""
    return f"sha256:{sha256_hex(canonical_json_bytes(abi))}"
