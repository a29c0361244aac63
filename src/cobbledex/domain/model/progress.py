"""User progress snapshots imported from player-data files."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .primitives import AspectTag, SpeciesKey


@dataclass(frozen=True, slots=True, kw_only=True)
class ProgressRecord:
    """One imported player-data snapshot.

    ``aspects_collected`` keeps the raw, namespace-qualified keys exactly as they
    appear in the source, in source order. Joining against the catalog happens in
    the reconciler after key normalization.
    """

    uuid: str
    starter_prompted: bool
    starter_locked: bool
    starter_selected: bool
    starter_uuid: str | None = None
    total_capture_count: int = 0
    aspects_collected: Mapping[SpeciesKey, tuple[AspectTag, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.aspects_collected, MappingProxyType):
            frozen = MappingProxyType(
                {key: tuple(tags) for key, tags in self.aspects_collected.items()}
            )
            object.__setattr__(self, "aspects_collected", frozen)
