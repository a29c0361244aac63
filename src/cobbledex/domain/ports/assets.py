"""Ports for reading the partitioned catalog asset tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cobbledex.domain.model import SpeciesDefinition


@runtime_checkable
class AssetSource(Protocol):
    """Hierarchical read-only store holding the species partitions.

    Paths are ``/``-separated and relative to the source root; ``""`` is the root.
    Implementations raise ``OSError`` when a listing or read is not possible.
    """

    async def list_entries(self, path: str = "") -> list[str]:
        """Return the names of the entries directly under ``path``."""
        ...

    async def read_entry(self, path: str) -> bytes:
        """Return the full content of the leaf entry at ``path``."""
        ...


class SpeciesDecoder(Protocol):
    """Decode one catalog record; raise ``ValueError`` on malformed payloads."""

    def __call__(self, raw: bytes, *, generation: int) -> SpeciesDefinition: ...


__all__ = ["AssetSource", "SpeciesDecoder"]
