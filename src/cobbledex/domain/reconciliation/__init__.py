"""Catalog/progress reconciliation.

Stateless helpers turning a loaded ``Catalog`` and an optional ``ProgressRecord``
into ordered ``MergedEntry`` tuples:

1) normalize namespaced progress keys into join keys
2) join every species against the normalized map
3) order the result by national catalog number
"""

from __future__ import annotations

from .merge import filter_by_generation, reconcile, sort_entries
from .normalize import NAMESPACE_SEPARATOR, normalize_aspects_map, normalize_species_key
from .summary import ProgressSummary, summarize

__all__ = [
    "NAMESPACE_SEPARATOR",
    "ProgressSummary",
    "filter_by_generation",
    "normalize_aspects_map",
    "normalize_species_key",
    "reconcile",
    "sort_entries",
    "summarize",
]
