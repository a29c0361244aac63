"""Join-key normalization for progress data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from cobbledex.domain.model import AspectTag, SpeciesKey

NAMESPACE_SEPARATOR: Final[str] = ":"


def normalize_species_key(raw_key: str) -> SpeciesKey:
    """Drop the namespace prefix (through the first ``:``), then lowercase and trim.

    ``"cobblemon:Pikachu "`` and ``"Pikachu"`` both normalize to ``"pikachu"``.
    """

    _, separator, remainder = raw_key.partition(NAMESPACE_SEPARATOR)
    name = remainder if separator else raw_key
    return name.lower().strip()


def normalize_aspects_map(
    raw: Mapping[str, Sequence[AspectTag]],
) -> dict[SpeciesKey, tuple[AspectTag, ...]]:
    """Rekey ``raw`` by normalized species key.

    Keys colliding after normalization keep the value seen last.
    """

    normalized: dict[SpeciesKey, tuple[AspectTag, ...]] = {}
    for raw_key, tags in raw.items():
        normalized[normalize_species_key(raw_key)] = tuple(tags)
    return normalized
