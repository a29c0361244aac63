"""Domain model for the species catalog and user progress."""

from __future__ import annotations

from .catalog import Catalog, SkippedEntry
from .entry import MergedEntry
from .primitives import AspectTag, Generation, NationalNumber, SpeciesKey
from .progress import ProgressRecord
from .species import BaseStats, Evolution, SpeciesDefinition

__all__ = [
    "AspectTag",
    "BaseStats",
    "Catalog",
    "Evolution",
    "Generation",
    "MergedEntry",
    "NationalNumber",
    "ProgressRecord",
    "SkippedEntry",
    "SpeciesDefinition",
    "SpeciesKey",
]
