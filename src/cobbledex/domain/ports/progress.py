"""Ports for reading user progress snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cobbledex.domain.model import ProgressRecord


@runtime_checkable
class ProgressReader(Protocol):
    """Read the raw bytes behind an opaque progress locator.

    Implementations raise ``OSError`` (or a subclass) when the source is unreadable.
    """

    async def read(self, locator: str) -> bytes: ...


class ProgressDecoder(Protocol):
    """Decode a whole progress snapshot; raise ``ValueError`` on malformed payloads."""

    def __call__(self, raw: bytes) -> ProgressRecord: ...


__all__ = ["ProgressDecoder", "ProgressReader"]
