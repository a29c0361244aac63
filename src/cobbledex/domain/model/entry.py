"""Merged catalog/progress entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import AspectTag
    from .species import SpeciesDefinition


@dataclass(frozen=True, slots=True)
class MergedEntry:
    """A species paired with the current user's capture overlay."""

    species: SpeciesDefinition
    captured: bool = False
    aspects: tuple[AspectTag, ...] = ()

    @property
    def name(self) -> str:
        return self.species.name

    @property
    def national_number(self) -> int:
        return self.species.national_number

    @property
    def generation(self) -> int:
        return self.species.generation
