"""Merge the species catalog with an optional progress snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobbledex.domain.model import MergedEntry

from .normalize import normalize_aspects_map

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cobbledex.domain.model import Catalog, ProgressRecord, SpeciesDefinition


def _entry_order(entry: MergedEntry) -> tuple[int, str]:
    return (entry.species.national_number, entry.species.key)


def sort_entries(entries: Iterable[MergedEntry]) -> tuple[MergedEntry, ...]:
    return tuple(sorted(entries, key=_entry_order))


def reconcile(
    catalog: Iterable[SpeciesDefinition],
    progress: ProgressRecord | None = None,
) -> tuple[MergedEntry, ...]:
    """Return one fresh ``MergedEntry`` per species, ordered by national number.

    Pure: the same inputs always produce an equal result and neither input is
    modified.
    """

    if progress is None:
        return sort_entries(MergedEntry(species=species) for species in catalog)

    captured = normalize_aspects_map(progress.aspects_collected)
    entries: list[MergedEntry] = []
    for species in catalog:
        aspects = captured.get(species.key)
        if aspects is None:
            entries.append(MergedEntry(species=species))
        else:
            entries.append(MergedEntry(species=species, captured=True, aspects=aspects))
    return sort_entries(entries)


def filter_by_generation(
    entries: tuple[MergedEntry, ...],
    generation: int | None,
) -> tuple[MergedEntry, ...]:
    if generation is None:
        return entries
    return tuple(entry for entry in entries if entry.species.generation == generation)


__all__ = ["filter_by_generation", "reconcile", "sort_entries"]
