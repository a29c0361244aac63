"""The loaded species catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .primitives import SpeciesKey
    from .species import SpeciesDefinition


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """An asset entry dropped during a load pass."""

    path: str
    reason: str


@dataclass(frozen=True, slots=True)
class Catalog:
    """Read-only view of every species keyed by lowercased canonical name."""

    species: Mapping[SpeciesKey, SpeciesDefinition] = field(
        default_factory=lambda: MappingProxyType({})
    )
    skipped: tuple[SkippedEntry, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.species, MappingProxyType):
            object.__setattr__(self, "species", MappingProxyType(dict(self.species)))

    def __len__(self) -> int:
        return len(self.species)

    def __iter__(self) -> Iterator[SpeciesDefinition]:
        return iter(self.species.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self.species

    def get(self, name: str) -> SpeciesDefinition | None:
        return self.species.get(name.strip().lower())

    def generations(self) -> tuple[int, ...]:
        return tuple(sorted({definition.generation for definition in self.species.values()}))
