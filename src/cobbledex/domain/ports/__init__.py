"""Domain port definitions for adapters."""

from __future__ import annotations

from .assets import AssetSource, SpeciesDecoder
from .progress import ProgressDecoder, ProgressReader

__all__ = [
    "AssetSource",
    "ProgressDecoder",
    "ProgressReader",
    "SpeciesDecoder",
]
