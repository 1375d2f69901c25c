"""
High-level package exports for TNEF Extractor.
"""

from __future__ import annotations

from importlib import metadata
from typing import Final

try:
    __version__: Final[str] = metadata.version("tnef-extractor")
except metadata.PackageNotFoundError:  # pragma: no cover - local execution
    __version__ = "0.0.0"

# Convenience re-exports
from . import tnef_reader  # noqa: E402
from .core.analysis import iter_attributes, summarize_tnef  # noqa: E402
from .core.errors import TnefError  # noqa: E402
from .core.models import TnefAttribute, TnefSummary  # noqa: E402
from .tnef_reader import TnefReader  # noqa: E402

__all__ = [
    "__version__",
    "TnefAttribute",
    "TnefError",
    "TnefReader",
    "TnefSummary",
    "iter_attributes",
    "summarize_tnef",
    "tnef_reader",
]
