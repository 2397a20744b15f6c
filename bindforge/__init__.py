"""Bindforge: ABI-driven TypeScript binding generator.

Locates a compiled contract artifact, classifies its interface description,
prints a human-readable summary, and writes:
  - the normalized ABI JSON
  - a statically-typed TypeScript binding (ethers v6)
  - a CommonJS module re-exporting the ABI
"""

__version__ = "0.1.0"
__description__ = "ABI extraction and TypeScript binding generation for compiled contracts"

from bindforge.core.binding_generator import generate_binding
from bindforge.core.classifier import classify
from bindforge.core.locator import find_artifact
from bindforge.core.orchestrator import Orchestrator
from bindforge.core.type_mapper import map_type

__all__ = [
    "Orchestrator",
    "classify",
    "find_artifact",
    "generate_binding",
    "map_type",
    "__version__",
]
