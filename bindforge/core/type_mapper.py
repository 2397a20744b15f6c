"""Solidity ABI type -> TypeScript type mapping.

``map_type`` is total: unknown tags map to ``any`` instead of raising.
"""

from __future__ import annotations

import re

WIDE_INTEGER = "bigint"
BOOLEAN = "boolean"
STRING = "string"
UNTYPED = "any"

# Trailing dimension of a dynamic (``[]``) or fixed (``[3]``) array.
_ARRAY_SUFFIX = re.compile(r"^(?P<base>.+)\[(?P<size>\d*)\]$")
_BYTES = re.compile(r"^bytes(?:[1-9]|[12][0-9]|3[0-2])?$")

_EXACT: dict[str, str] = {
    "bool": BOOLEAN,
    "address": STRING,
    "string": STRING,
}


def map_type(primitive_type: str) -> str:
    """Map a Solidity type tag onto its TypeScript representation.

    Array dimensions are peeled first so ``uint256[]`` becomes
    ``bigint[]`` and ``uint8[2][]`` becomes ``bigint[][]``.  Integers of
    any width become ``bigint``; addresses, strings and byte strings
    become ``string`` (hex for the binary ones).
    """
    if not isinstance(primitive_type, str):
        return UNTYPED

    tag = primitive_type.strip()
    match = _ARRAY_SUFFIX.match(tag)
    if match:
        return f"{map_type(match.group('base'))}[]"

    if tag in _EXACT:
        return _EXACT[tag]
    if _BYTES.match(tag):
        return STRING
    if "int" in tag:
        return WIDE_INTEGER
    return UNTYPED
