"""Immutable species reference records."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives import Generation, NationalNumber  # noqa: TC001


@dataclass(frozen=True, slots=True)
class BaseStats:
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int

    @property
    def total(self) -> int:
        return (
            self.hp
            + self.attack
            + self.defense
            + self.special_attack
            + self.special_defense
            + self.speed
        )


@dataclass(frozen=True, slots=True)
class Evolution:
    result: str
    level: int | None = None
    item: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SpeciesDefinition:
    """One catalog species.

    ``generation`` is assigned by the catalog loader from the partition the record
    was read from; payload values are never trusted for it.
    """

    name: str
    national_number: NationalNumber
    generation: Generation
    primary_type: str
    secondary_type: str | None = None
    abilities: tuple[str, ...] = ()
    base_stats: BaseStats
    catch_rate: int = 0
    male_ratio: float | None = None
    female_ratio: float | None = None
    evolutions: tuple[Evolution, ...] | None = None
    spawn_biomes: tuple[str, ...] | None = None

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def types(self) -> tuple[str, ...]:
        if self.secondary_type:
            return (self.primary_type, self.secondary_type)
        return (self.primary_type,)
