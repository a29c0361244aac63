"""Import user progress snapshots from opaque locators."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cobbledex.domain.model import ProgressRecord
    from cobbledex.domain.ports import ProgressDecoder, ProgressReader

log = getLogger(__name__)


class ProgressImportError(RuntimeError):
    """Raised when a progress source is unreadable or does not decode as a whole."""

    def __init__(self, message: str, *, locator: str) -> None:
        super().__init__(message)
        self.locator = locator


class ProgressImporter:
    """Turn a locator into a ``ProgressRecord`` without touching any other state."""

    def __init__(self, reader: ProgressReader, *, decode: ProgressDecoder) -> None:
        self._reader = reader
        self._decode = decode

    async def parse(self, locator: str) -> ProgressRecord:
        try:
            raw = await self._reader.read(locator)
        except (OSError, ValueError) as exc:
            log.exception("Failed to read progress source %s", locator)
            message = f"Cannot read progress source: {exc}"
            raise ProgressImportError(message, locator=locator) from exc

        try:
            record = self._decode(raw)
        except ValueError as exc:
            log.exception("Failed to parse progress source %s", locator)
            raise ProgressImportError(f"Malformed progress data: {exc}", locator=locator) from exc

        log.info(
            "Parsed progress for %s: %s species with aspects",
            record.uuid,
            len(record.aspects_collected),
        )
        return record
